import logging

from .games import Game, InvalidConfiguration, Observer, Result
from .games import knockout

logger = logging.getLogger(__name__)


def play_until_done(game: Game, observer: Observer | None=None) -> Result:
    if observer is not None:
        game.observer = observer

    return game.play()


class Stats:
    """Tallies the outcomes of a batch of games."""

    def __init__(self, number_of_players: int):
        self.number_of_players = number_of_players
        self.games = 0
        self.wins: dict[int, int] = {i: 0 for i in range(1, number_of_players + 1)}
        self.all_eliminated = 0
        self.total_turns = 0

    def record(self, result: Result, turns: int):
        self.games += 1
        self.total_turns += turns
        if result.all_eliminated:
            self.all_eliminated += 1
        else:
            self.wins[result.winner] += 1

    @property
    def average_turns(self) -> float:
        if self.games == 0:
            return 0.0
        return self.total_turns / self.games

    def win_rate(self, identity: int) -> float:
        if identity not in self.wins:
            raise ValueError("No player {:d}; identities are 1 through {:d}".format(identity, self.number_of_players))
        if self.games == 0:
            return 0.0
        return self.wins[identity] / self.games

    def as_dict(self) -> dict:
        return {
            'games': self.games,
            'players': self.number_of_players,
            'wins': dict(self.wins),
            'all_eliminated': self.all_eliminated,
            'total_turns': self.total_turns,
            'average_turns': self.average_turns,
        }


def simulate(games: int, number_of_players: int, rules: 'knockout.Rules | None'=None, seed: int | None=None) -> Stats:
    """
    Play games independent games of Knock Out and tally the results. Every
    game gets its own die, players, and generator. If seed is given, game i
    is seeded with seed + i so the whole batch can be reproduced.
    """
    if games < 1:
        raise InvalidConfiguration("Must simulate at least 1 game, got {:d}".format(games))

    stats = Stats(number_of_players)
    for i in range(games):
        game_seed = seed + i if seed is not None else None
        g = knockout.Game(number_of_players, rules=rules, seed=game_seed)
        result = play_until_done(g)
        logger.debug(f"Game {i + 1}/{games}: {result!r} after {g.turn_count} turns")
        stats.record(result, g.turn_count)

    logger.info(f"Simulated {stats.games} games of {number_of_players} player(s); {stats.all_eliminated} ended with everyone knocked out")
    return stats
