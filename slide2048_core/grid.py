from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

Coord = Tuple[int, int]  # (row, col)

EMPTY = 0


class Grid:
    """Square board of tile values, stored row-major. A value of 0 marks an empty cell."""

    __slots__ = ("dimension", "_cells")

    def __init__(self, dimension: int, fill: int = EMPTY) -> None:
        if dimension < 1:
            raise ValueError(f"dimension must be positive, got {dimension}")
        if fill < 0:
            raise ValueError(f"tile values must be non-negative, got {fill}")
        self.dimension = dimension
        self._cells: List[int] = [fill] * (dimension * dimension)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Grid':
        """Builds a grid from a list of equally long rows; the row count must match the row length."""
        n = len(rows)
        grid = cls(n)
        for r, row in enumerate(rows):
            if len(row) != n:
                raise ValueError(f"grid must be square: row {r} has {len(row)} cells, expected {n}")
            for c, value in enumerate(row):
                grid.set((r, c), int(value))
        return grid

    def _check(self, coord: Coord) -> None:
        r, c = coord
        if not (0 <= r < self.dimension and 0 <= c < self.dimension):
            raise IndexError(f"coordinate {coord} outside {self.dimension}x{self.dimension} grid")

    def index(self, coord: Coord) -> int:
        """Calculates the row-major index for a coordinate."""
        self._check(coord)
        return coord[0] * self.dimension + coord[1]

    def coord_at(self, index: int) -> Coord:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"index {index} outside grid of {len(self._cells)} cells")
        return divmod(index, self.dimension)

    def get(self, coord: Coord) -> int:
        return self._cells[self.index(coord)]

    def set(self, coord: Coord, value: int) -> None:
        if value < 0:
            raise ValueError(f"tile values must be non-negative, got {value}")
        self._cells[self.index(coord)] = value

    __getitem__ = get
    __setitem__ = set

    def clear(self) -> None:
        self._cells = [EMPTY] * len(self._cells)

    def insert(self, coord: Coord, value: int) -> None:
        """Places a tile into an empty cell. Inserting onto an occupied cell is an error."""
        if not self.is_empty(coord):
            raise ValueError(f"cell {coord} is occupied by {self.get(coord)}")
        self.set(coord, value)

    def is_empty(self, coord: Coord) -> bool:
        return self.get(coord) == EMPTY

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates in row-major order."""
        for r in range(self.dimension):
            for c in range(self.dimension):
                yield (r, c)

    def empty_cells(self) -> List[Coord]:
        return [coord for coord in self.coords() if self.is_empty(coord)]

    def max_value(self) -> int:
        return max(self._cells)

    def total(self) -> int:
        return sum(self._cells)

    def values(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def rows(self) -> List[List[int]]:
        n = self.dimension
        return [self._cells[r * n:(r + 1) * n] for r in range(n)]

    def copy(self) -> 'Grid':
        other = Grid(self.dimension)
        other._cells = list(self._cells)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimension == other.dimension and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid.from_rows({self.rows()!r})"

    def pretty(self, highlight: Iterable[Coord] = ()) -> str:
        """Generates a human-readable board; empty cells show as '.', highlighted cells get a '*'."""
        marked = set(highlight)
        width = max(len(str(self.max_value())), 1) + 1
        lines: List[str] = []
        for r, row in enumerate(self.rows()):
            cells: List[str] = []
            for c, value in enumerate(row):
                text = str(value) if value != EMPTY else "."
                if (r, c) in marked:
                    text += "*"
                cells.append(text.rjust(width))
            lines.append(" ".join(cells))
        return "\n".join(lines)
