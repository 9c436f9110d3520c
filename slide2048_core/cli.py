from __future__ import annotations

import argparse
import random
from typing import List, Optional

from .config import GameConfig
from .direction import Direction, parse_direction
from .state import GameState


def _print_board(game: GameState, highlight=()) -> None:
    print(game.grid.pretty(highlight))
    print(f"Score: {game.score}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Play 2048 in the terminal')
    parser.add_argument('--size', type=int, default=None, help='Board size (NxN), default 4')
    parser.add_argument('--target', type=int, default=None, help='Tile value that wins the game, default 2048')
    parser.add_argument('--four-prob', type=float, default=None, help='Chance that a new tile is a 4, default 0.1')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile placement')
    parser.add_argument('--moves', default=None, help='Play a scripted sequence of wasd keys and exit')
    args = parser.parse_args(argv)

    try:
        config = GameConfig.from_env(args.size, args.target, args.four_prob)
    except ValueError as e:
        parser.error(str(e))
    scripted: List[Direction] = []
    if args.moves is not None:
        try:
            scripted = [parse_direction(key) for key in args.moves if not key.isspace()]
        except ValueError as e:
            parser.error(f"--moves: {e}")

    game = GameState(config, rng=random.Random(args.seed).random)
    game.restart()
    print('Initial board:')
    _print_board(game)

    if args.moves is not None:
        for direction in scripted:
            result = game.play(direction)
            print(f"\n{direction.value}:")
            _print_board(game, [result.spawned] if result.spawned else ())
            if result.won or result.lost:
                break
        if game.user_has_won():
            print('You win!')
        elif game.user_has_lost():
            print('Game over.')
        return 0

    while True:
        try:
            text = input('Move (w/a/s/d, up/down/left/right, q to quit): ').strip()
        except EOFError:
            return 0
        if text.lower() in ('q', 'quit', 'exit'):
            return 0
        try:
            direction = parse_direction(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        result = game.play(direction)
        if not result.moved:
            print('Nothing moves that way.')
            continue
        _print_board(game, [result.spawned] if result.spawned else ())
        if result.won:
            print('You win!')
            return 0
        if result.lost:
            print('Game over.')
            return 0
