#!/usr/bin/env python

import dicesim.runner
import dicesim.games.knockout as knockout
from dicesim.games import GameError
from dicesim.tracker import Tracker
import sys

import argparse
import logging


def rules_from_args(args: argparse.Namespace) -> knockout.Rules:
    return knockout.Rules(
        knockout_min=args.knockout_min,
        knockout_max=args.knockout_max,
        win_score=args.win_score,
    )


def play_knockout(num_players: int=5, rules: knockout.Rules | None=None, seed: str | None=None, quiet: bool=False):
    g = knockout.Game(num_players, rules=rules, seed=seed)
    tracker = Tracker(show_turns=not quiet)

    dicesim.runner.play_until_done(g, tracker)

    for p in g.players:
        status = "knocked out" if p.eliminated else "still in"
        print(f"  {p}: knockout number {p.knockout_number}, score {p.score}, {status}")


def simulate_knockout(num_games: int, num_players: int=5, rules: knockout.Rules | None=None, seed: int | None=None):
    stats = dicesim.runner.simulate(num_games, num_players, rules=rules, seed=seed)

    print(f"Played {stats.games} games of Knock Out with {num_players} player(s)")
    for ident, wins in stats.wins.items():
        print(f"  Player {ident}: {wins} wins ({stats.win_rate(ident):.1%})")
    print(f"  All knocked out: {stats.all_eliminated} ({stats.all_eliminated / stats.games:.1%})")
    print(f"  Average game length: {stats.average_turns:.1f} turns")


def add_rules_args(p: argparse.ArgumentParser):
    p.add_argument('-p', '--players', type=int, default=5, help='Set the number of players.')
    p.add_argument('-w', '--win-score', type=int, default=100, help='Set the score a player needs to win.')
    p.add_argument('--knockout-min', type=int, default=6, help='Set the lowest knockout number a player can be given.')
    p.add_argument('--knockout-max', type=int, default=9, help='Set the highest knockout number a player can be given.')


def main():
    parser = argparse.ArgumentParser(description='Play dice game sims')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Log more about what the engine is doing. Give twice for every roll.')

    subs = parser.add_subparsers(dest='game', help='Game to play', required=True, metavar='GAME')
    subs: argparse._SubParsersAction

    ko_parser = subs.add_parser('knockout', help='Play one game of Knock Out')
    ko_parser: argparse.ArgumentParser
    add_rules_args(ko_parser)
    ko_parser.add_argument('-s', '--seed', type=str, default=None, help='Set the seed for the random number generator. This allows for reproducible games.')
    ko_parser.add_argument('-q', '--quiet', action='store_true', help='Do not print every roll.')

    sim_parser = subs.add_parser('simulate', help='Play many games of Knock Out and show the results')
    sim_parser: argparse.ArgumentParser
    add_rules_args(sim_parser)
    sim_parser.add_argument('-n', '--games', type=int, default=1000, help='Set the number of games to play.')
    sim_parser.add_argument('-s', '--seed', type=int, default=None, help='Set the seed for the first game; game i uses seed + i.')
    args = parser.parse_args()

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        rules = rules_from_args(args)
        if args.game.lower() == 'knockout':
            play_knockout(args.players, rules, args.seed, args.quiet)
        elif args.game.lower() == 'simulate':
            simulate_knockout(args.games, args.players, rules, args.seed)
        else:
            print(f"Unknown game: {args.game}")
            sys.exit(1)
    except GameError as e:
        print(f"Error: {e!s}")
        sys.exit(1)

if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
