from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from .grid import EMPTY


@dataclass(frozen=True)
class MovableTile:
    """One tile's journey within a single line, in line-local offsets (0 = leading edge).

    ``second_source`` is set only when the tile is the result of a merge and
    names the offset of the tile that was absorbed.
    """
    source: int
    value: int
    target: int
    second_source: Optional[int] = None

    def is_merge(self) -> bool:
        return self.second_source is not None

    def needs_move(self) -> bool:
        return self.source != self.target or self.second_source is not None


def condense(values: Sequence[int]) -> List[MovableTile]:
    """Drops empty cells from a line, keeping order; targets are the compacted offsets."""
    tiles: List[MovableTile] = []
    for offset, value in enumerate(values):
        if value != EMPTY:
            tiles.append(MovableTile(source=offset, value=value, target=len(tiles)))
    return tiles


def collapse(tiles: Sequence[MovableTile]) -> List[MovableTile]:
    """
    Merges adjacent equal tiles pairwise in a single pass from the leading edge.
    A merged tile is never merged again in the same pass, so [2, 2, 2, 2]
    becomes [4, 4] and [2, 2, 2] becomes [4, 2].
    """
    result: List[MovableTile] = []
    pending: Optional[MovableTile] = None
    for tile in tiles:
        if pending is None:
            pending = tile
            continue
        if pending.value == tile.value:
            result.append(MovableTile(
                source=pending.source,
                value=pending.value + tile.value,
                target=len(result),
                second_source=tile.source,
            ))
            pending = None
        else:
            result.append(replace(pending, target=len(result)))
            pending = tile
    if pending is not None:
        result.append(replace(pending, target=len(result)))
    return result


def reduce_line(values: Sequence[int]) -> List[MovableTile]:
    return collapse(condense(values))
