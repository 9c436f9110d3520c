from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from .grid import Coord


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Each board slide is reduced to N independent one-dimensional problems: one
# line per column (UP/DOWN) or per row (LEFT/RIGHT), read from the edge the
# tiles travel toward. DOWN and RIGHT mirror the offset of UP and LEFT.

def _up(n: int, index: int, offset: int) -> Coord:
    return (offset, index)


def _left(n: int, index: int, offset: int) -> Coord:
    return (index, offset)


def _mirrored(base: Callable[[int, int, int], Coord]) -> Callable[[int, int, int], Coord]:
    def resolve(n: int, index: int, offset: int) -> Coord:
        return base(n, index, n - 1 - offset)
    return resolve


_RESOLVERS: Dict[Direction, Callable[[int, int, int], Coord]] = {
    Direction.UP: _up,
    Direction.DOWN: _mirrored(_up),
    Direction.LEFT: _left,
    Direction.RIGHT: _mirrored(_left),
}

_ALIASES: Dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


def _check_line(n: int, index: int) -> None:
    if not 0 <= index < n:
        raise IndexError(f"line index {index} outside [0, {n})")


def to_coordinate(direction: Direction, n: int, index: int, offset: int) -> Coord:
    """Maps a line-local offset (0 = leading edge) back to a grid coordinate."""
    _check_line(n, index)
    if not 0 <= offset < n:
        raise IndexError(f"offset {offset} outside [0, {n})")
    return _RESOLVERS[direction](n, index, offset)


def line(direction: Direction, n: int, index: int) -> List[Coord]:
    """Returns the coordinates of one row or column, ordered from the edge tiles slide toward."""
    _check_line(n, index)
    resolve = _RESOLVERS[direction]
    return [resolve(n, index, offset) for offset in range(n)]


def parse_direction(text: str) -> Direction:
    """Parses a direction name ('up', 'LEFT', ...) or a wasd key."""
    key = str(text).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return Direction(key)
    except ValueError:
        raise ValueError(f"unknown direction: {text!r}") from None
