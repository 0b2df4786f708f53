"""
Knock Out! is played with two six-sided dice:

1. Each player has a knockout number of 6, 7, 8, or 9. More than one player
   may have the same number.
2. Players take turns throwing both dice, once each turn, and add the total to
   their running score.
3. A player who throws their own knockout number is knocked out of the game.
4. Play ends when all players have been knocked out, or when a single player
   reaches 100 points or more.
"""

import logging
import random

from ..die import Die
from ..rng import RandomSource, RangeSource
from . import (
    EndReason,
    Game as BaseGame,
    GameState,
    InvalidConfiguration,
    RepeatedPlayInvocation,
    Result,
    Rules as BaseRules,
)

logger = logging.getLogger(__name__)

DICE_PER_TURN = 2


class Player:
    """
    A player in a game of Knock Out. Identity and knockout number are fixed at
    creation; the score only goes up and elimination is permanent.
    """

    def __init__(self, identity: int, knockout_number: int):
        self._identity = identity
        self._knockout_number = knockout_number
        self._score = 0
        self._eliminated = False

    @classmethod
    def create(cls, identity: int, source: RandomSource) -> 'Player':
        """Create a player whose knockout number is drawn from source."""
        return cls(identity, source.next())

    def __str__(self) -> str:
        return f"Player {self._identity}"

    def __repr__(self) -> str:
        return "Player(identity={:d}, knockout_number={:d}, score={:d}, eliminated={!r})".format(
            self._identity, self._knockout_number, self._score, self._eliminated)

    @property
    def identity(self) -> int:
        return self._identity

    @property
    def knockout_number(self) -> int:
        return self._knockout_number

    @property
    def score(self) -> int:
        return self._score

    @property
    def eliminated(self) -> bool:
        return self._eliminated

    def add_to_score(self, amount: int):
        if amount < 0:
            raise ValueError("Score can only be increased; got {:d}".format(amount))
        self._score += amount

    def eliminate(self):
        self._eliminated = True


class Turn:
    """One player's throw of the dice and what came of it."""

    def __init__(self, number: int, round: int, player: int, rolls: tuple[int, ...], knocked_out: bool, score: int):
        self.number = number
        self.round = round
        self.player = player
        self.rolls = rolls
        self.knocked_out = knocked_out
        self.score = score

    @property
    def total(self) -> int:
        return sum(self.rolls)

    def __str__(self) -> str:
        if self.knocked_out:
            return f"Turn {self.number}: player {self.player} rolled {self.total} and was knocked out"
        return f"Turn {self.number}: player {self.player} rolled {self.total}, score {self.score}"

    def __repr__(self) -> str:
        return f"Turn({self.number}, {self.round}, {self.player}, {self.rolls!r}, {self.knocked_out!r}, {self.score})"


class Rules(BaseRules):
    def __init__(self, face_count: int=6, knockout_min: int=6, knockout_max: int=9, win_score: int=100, source_min: int=1, source_max: int=10):
        super().__init__(Game)

        if face_count < 1:
            raise InvalidConfiguration("Die must have at least 1 face, got {:d}".format(face_count))
        if knockout_min > knockout_max:
            raise InvalidConfiguration("Knockout range is empty: {:d} is greater than {:d}".format(knockout_min, knockout_max))
        if win_score < 1:
            raise InvalidConfiguration("Win score must be at least 1, got {:d}".format(win_score))
        if source_min > source_max:
            raise InvalidConfiguration("Source range is empty: {:d} is greater than {:d}".format(source_min, source_max))

        self.face_count = face_count
        self.knockout_min = knockout_min
        self.knockout_max = knockout_max
        self.win_score = win_score
        self.source_min = source_min
        self.source_max = source_max

    @classmethod
    def from_dict(cls, d: dict) -> 'Rules':
        ko = d.get('knockout', {})
        source = d.get('source', {})
        return cls(
            face_count=d.get('face_count', 6),
            knockout_min=ko.get('min', 6),
            knockout_max=ko.get('max', 9),
            win_score=d.get('win_score', 100),
            source_min=source.get('min', 1),
            source_max=source.get('max', 10),
        )

    def as_dict(self) -> dict:
        return {
            'face_count': self.face_count,
            'dice_per_turn': DICE_PER_TURN,
            'knockout': {
                'min': self.knockout_min,
                'max': self.knockout_max,
            },
            'win_score': self.win_score,
            'source': {
                'min': self.source_min,
                'max': self.source_max,
            },
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rules):
            return False
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash((self.face_count, self.knockout_min, self.knockout_max, self.win_score, self.source_min, self.source_max))


class Game(BaseGame):
    """
    A game of Knock Out for a fixed roster of players. Calling play() runs the
    whole game. Rounds go through the roster in order, skipping knocked out
    players, and the first player to trigger an ending ends the game on the
    spot; nobody after them in that round gets to roll.
    """

    def __init__(self, number_of_players: int, rules: Rules | None=None, die: Die | None=None, knockout_source: RandomSource | None=None, seed: int | str | None=None):
        """
        Set up a game for number_of_players players with identities 1 through
        number_of_players. A seed makes the die and the knockout numbers
        reproducible; die and knockout_source replace them outright.
        """
        if number_of_players < self.min_players:
            raise InvalidConfiguration("Game needs at least {:d} player, got {:d}".format(self.min_players, number_of_players))
        if self.max_players > 0 and number_of_players > self.max_players:
            raise InvalidConfiguration("Game allows at most {:d} players, got {:d}".format(self.max_players, number_of_players))

        if rules is None:
            rules = Rules()

        # a seeded game shares one generator between its sources; nothing is
        # shared between games
        rng = random.Random(seed) if seed is not None else None

        if die is None:
            die = Die(rules.face_count, RangeSource(rules.source_min, rules.source_max, rng))
        elif die.face_count != rules.face_count:
            raise InvalidConfiguration("Die has {:d} faces but the rules call for {:d}".format(die.face_count, rules.face_count))
        if knockout_source is None:
            knockout_source = RangeSource(rules.knockout_min, rules.knockout_max, rng)

        self._rules = rules
        self._die = die
        self._players = tuple(Player.create(i, knockout_source) for i in range(1, number_of_players + 1))
        self._state = GameState.NOT_STARTED
        self._outcome: Result | None = None
        self._current: Player | None = None
        self._round_count = 0
        self.history: list[Turn] = []
        self.observer = None

    def play(self) -> Result:
        """
        Play the game to the end and return the outcome. Raises
        RepeatedPlayInvocation if the game has already been played.
        """
        if self._state != GameState.NOT_STARTED:
            raise RepeatedPlayInvocation("Game is {:s}; it can only be played once".format(str(self._state).lower()))

        self._state = GameState.IN_PROGRESS
        logger.info(f"Starting Knock Out with {len(self._players)} player(s) on a {self._die.face_count}-sided die")
        self._notify('on_game_start')

        try:
            while self._outcome is None:
                self._round_count += 1
                for p in self._players:
                    # status is checked as each player comes up, not once per round
                    if p.eliminated:
                        continue

                    self._take_turn(p)
                    if self._outcome is not None:
                        break
        finally:
            self._current = None

        self._state = GameState.ENDED
        logger.info(f"Game ended after {self.turn_count} turns in {self._round_count} rounds: {self._outcome.reason}")
        self._notify('on_game_end')

        return self._outcome

    def _take_turn(self, p: Player):
        self._current = p

        rolls = tuple(self._die.roll_n(DICE_PER_TURN))
        total = sum(rolls)
        self._notify('on_turn', total)

        if total == p.knockout_number:
            p.eliminate()
            logger.info(f"{p} is knocked out by rolling {p.knockout_number}")
            if len(self.active_players) == 0:
                logger.info("All players have been knocked out")
                self._outcome = Result(EndReason.ALL_ELIMINATED)
        else:
            p.add_to_score(total)
            if p.score >= self._rules.win_score:
                logger.info(f"{p} has won with a final score of {p.score}")
                self._outcome = Result(EndReason.SCORE_THRESHOLD_REACHED, winner=p.identity, score=p.score)

        turn = Turn(len(self.history) + 1, self._round_count, p.identity, rolls, p.eliminated, p.score)
        self.history.append(turn)
        logger.debug(f"Round {self._round_count}: {turn} {rolls}")

    def player(self, identity: int) -> Player:
        """Return the player with the given identity."""
        if identity < 1 or identity > len(self._players):
            raise ValueError("No player {:d}; identities are 1 through {:d}".format(identity, len(self._players)))
        return self._players[identity - 1]

    @property
    def die(self) -> Die:
        return self._die

    @property
    def players(self) -> tuple[Player, ...]:
        return self._players

    @property
    def active_players(self) -> tuple[Player, ...]:
        return tuple(p for p in self._players if not p.eliminated)

    @property
    def current_player(self) -> Player | None:
        """Return the player whose turn is being resolved, or None between games."""
        return self._current

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def outcome(self) -> Result | None:
        return self._outcome

    @property
    def running(self) -> bool:
        return self._state == GameState.IN_PROGRESS

    @property
    def rules(self) -> Rules:
        return self._rules

    @property
    def turn_count(self) -> int:
        return len(self.history)

    @property
    def round_count(self) -> int:
        return self._round_count

    @property
    def max_players(self) -> int:
        return 0

    @property
    def min_players(self) -> int:
        return 1
