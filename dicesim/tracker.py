import sys
from typing import TextIO

from .games import Game, Observer
from .games.knockout import Game as KnockOut


class Tracker(Observer):
    """
    Keeps a running count of turns and writes a short human-readable account
    of the game to out as it happens. Every line written is also kept in
    lines.
    """

    def __init__(self, out: TextIO | None=None, show_turns: bool=True):
        self.out = out if out is not None else sys.stdout
        self.show_turns = show_turns
        self.number_of_turns = 0
        self.lines: list[str] = []

    def write(self, line: str):
        self.lines.append(line)
        print(line, file=self.out)

    def on_game_start(self, game: Game):
        self.number_of_turns = 0
        if isinstance(game, KnockOut):
            self.write("Started a new game of Knock Out with {:d} player{:s}".format(len(game.players), '' if len(game.players) == 1 else 's'))
        self.write(f"The game is using a {game.die.face_count}-sided die")

    def on_turn(self, game: Game, roll_sum: int):
        self.number_of_turns += 1
        if not self.show_turns:
            return

        who = game.current_player
        if who is not None:
            self.write(f"{who} rolled a {roll_sum}")
        else:
            self.write(f"Rolled a {roll_sum}")

    def on_game_end(self, game: Game):
        result = game.outcome
        if result is not None:
            if result.all_eliminated:
                self.write("All players have been knocked out")
            else:
                self.write(f"Player {result.winner} has won with a final score of {result.score}")
        self.write(f"The game lasted for {self.number_of_turns} turns")
