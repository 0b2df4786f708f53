from enum import Enum, auto


class GameError(Exception):
    pass


class InvalidConfiguration(GameError, ValueError):
    pass


class RulesError(GameError):
    pass


class RepeatedPlayInvocation(RulesError):
    pass


class GameState(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    ENDED = auto()

    def __str__(self) -> str:
        return self.name.replace('_', ' ').title()


class EndReason(Enum):
    ALL_ELIMINATED = auto()
    SCORE_THRESHOLD_REACHED = auto()

    def __str__(self) -> str:
        return self.name.replace('_', ' ').lower()


# RESULT object
# {
#   reason: ALL_ELIMINATED or SCORE_THRESHOLD_REACHED
#   winner: player identity, only for SCORE_THRESHOLD_REACHED
#   score: winner's final score
# }

class Result:
    def __init__(self, reason: EndReason, winner: int | None=None, score: int | None=None):
        if reason == EndReason.SCORE_THRESHOLD_REACHED and winner is None:
            raise ValueError("A score threshold result needs a winner")
        self.reason = reason
        self.winner = winner
        self.score = score

    @property
    def all_eliminated(self) -> bool:
        return self.reason == EndReason.ALL_ELIMINATED

    def __eq__(self, other) -> bool:
        if not isinstance(other, Result):
            return False
        return (self.reason, self.winner, self.score) == (other.reason, other.winner, other.score)

    def __hash__(self) -> int:
        return hash((self.reason, self.winner, self.score))

    def __repr__(self) -> str:
        return f"Result({self.reason.name}, winner={self.winner!r}, score={self.score!r})"


class Observer:
    """
    Receives notifications about a game as it is played. Notifications are
    delivered synchronously and in order: one on_game_start, one on_turn for
    every roll made, then one on_game_end. Return values are ignored.

    The default implementations do nothing, so subclasses only need to
    override the notifications they care about.
    """

    def on_game_start(self, game: 'Game') -> None:
        pass

    def on_turn(self, game: 'Game', roll_sum: int) -> None:
        pass

    def on_game_end(self, game: 'Game') -> None:
        pass


class Rules:
    def __init__(self, game_type: type):
        self.game_type = game_type

    def as_dict(self) -> dict:
        """Return the rule parameters as a plain dict."""
        raise NotImplementedError()


class Game:
    """
    A game played with a die. Concrete games run to completion inside play()
    and report progress to the attached observer, if any.
    """

    observer: Observer | None = None

    def play(self) -> Result:
        """
        Play the game until it ends and return its outcome. A game can only
        be played once.
        """
        raise NotImplementedError()

    @property
    def die(self):
        """Return the die used by this game."""
        raise NotImplementedError()

    @property
    def players(self) -> tuple:
        """Return the players of this game in turn order."""
        raise NotImplementedError()

    @property
    def current_player(self):
        """
        Return the player whose turn is being resolved, or None if no turn is
        in progress.
        """
        return None

    @property
    def outcome(self) -> Result | None:
        """Return the outcome of the game, or None if it has not ended."""
        raise NotImplementedError()

    @property
    def running(self) -> bool:
        """Return whether the game is currently being played."""
        raise NotImplementedError()

    @property
    def rules(self) -> Rules:
        """
        Return the parameters of the current game that may differ from others
        of the same type, such as the win score.
        """
        raise NotImplementedError()

    @property
    def max_players(self) -> int:
        """Return the maximum number of players, or 0 if there is no limit."""
        return 0

    @property
    def min_players(self) -> int:
        """Return the minimum number of players that can play this game."""
        return 0

    def _notify(self, event: str, *args) -> None:
        if self.observer is not None:
            getattr(self.observer, event)(self, *args)
