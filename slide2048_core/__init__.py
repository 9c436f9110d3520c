"""
slide2048 core Python package.

This package contains the pure tile-sliding logic, separated from any
rendering or input handling so it can be tested on its own.
Modules:
- grid.py: Grid, Coord
- direction.py: Direction, line, to_coordinate
- reducer.py: MovableTile, condense, collapse
- moves.py: MoveAction, compute_move
- state.py: GameState, TurnResult
- config.py: GameConfig
- cli.py: terminal driver
"""
