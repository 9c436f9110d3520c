from __future__ import annotations

# Facade module that re-exports slide2048 core functionality.
# Used by the Flask app and tests; single-responsibility modules live under slide2048_core/*.

from slide2048_core.config import MAX_DIMENSION, GameConfig, debug_enabled
from slide2048_core.direction import Direction, line, parse_direction, to_coordinate
from slide2048_core.grid import EMPTY, Coord, Grid
from slide2048_core.moves import MoveAction, compute_move, merge_score, split_actions
from slide2048_core.reducer import MovableTile, collapse, condense, reduce_line
from slide2048_core.state import GameState, RandomSource, TurnResult

__all__ = [
    'Coord',
    'Direction',
    'EMPTY',
    'GameConfig',
    'GameState',
    'Grid',
    'MAX_DIMENSION',
    'MovableTile',
    'MoveAction',
    'RandomSource',
    'TurnResult',
    'collapse',
    'compute_move',
    'condense',
    'debug_enabled',
    'line',
    'merge_score',
    'parse_direction',
    'reduce_line',
    'split_actions',
    'to_coordinate',
]


def main() -> None:
    # CLI driver delegated to slide2048_core.cli
    from slide2048_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
