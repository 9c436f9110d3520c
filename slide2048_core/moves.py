from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .config import debug_enabled
from .direction import Direction, line, to_coordinate
from .grid import Coord, Grid
from .reducer import reduce_line

RELOCATE = -1


@dataclass(frozen=True)
class MoveAction:
    """
    A single instruction for the presentation layer.
    A negative value relocates the tile at ``source`` to ``target`` unchanged;
    a non-negative value makes a new tile of that value appear at ``target``
    (``source`` is None for these).
    """
    source: Optional[Coord]
    target: Coord
    value: int = RELOCATE

    def is_relocation(self) -> bool:
        return self.value < 0

    def is_spawn(self) -> bool:
        return self.value >= 0


def compute_move(grid: Grid, direction: Direction) -> Tuple[Grid, List[MoveAction]]:
    """Slides every line of the grid toward ``direction`` and returns the resulting grid plus the actions."""
    n = grid.dimension
    result = Grid(n)
    actions: List[MoveAction] = []
    for index in range(n):
        values = [grid.get(coord) for coord in line(direction, n, index)]
        for tile in reduce_line(values):
            target = to_coordinate(direction, n, index, tile.target)
            result.set(target, tile.value)
            if not tile.needs_move():
                continue
            if tile.source != tile.target:
                actions.append(MoveAction(to_coordinate(direction, n, index, tile.source), target))
            if tile.second_source is not None:
                actions.append(MoveAction(to_coordinate(direction, n, index, tile.second_source), target))
                actions.append(MoveAction(None, target, tile.value))
    if debug_enabled():
        print(f"[move] {direction.value}: {len(actions)} action(s)")
        print(result.pretty())
    return result, actions


def split_actions(actions: List[MoveAction]) -> Tuple[List[MoveAction], List[MoveAction]]:
    """Separates relocations from spawns, keeping order; relocations must be rendered first."""
    relocations = [a for a in actions if a.is_relocation()]
    spawns = [a for a in actions if a.is_spawn()]
    return relocations, spawns


def merge_score(actions: List[MoveAction]) -> int:
    """Points gained by a move: the sum of all merged tile values."""
    return sum(a.value for a in actions if a.is_spawn())
