from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import GameConfig, debug_enabled
from .direction import Direction
from .grid import EMPTY, Coord, Grid
from .moves import MoveAction, compute_move

RandomSource = Callable[[], float]  # uniform in [0, 1)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one player turn: the slide plus the random tile that followed it."""
    actions: List[MoveAction]
    spawned: Optional[Coord] = None
    spawned_value: Optional[int] = None
    won: bool = False
    lost: bool = False
    score: int = 0

    @property
    def moved(self) -> bool:
        return bool(self.actions)


class GameState:
    """Owns the grid of one game and answers win/lose queries about it. Not thread-safe."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None,
                 grid: Optional[Grid] = None) -> None:
        self.config = config or GameConfig()
        if grid is not None and grid.dimension != self.config.dimension:
            raise ValueError(f"grid dimension {grid.dimension} does not match config {self.config.dimension}")
        self._grid = grid.copy() if grid is not None else Grid(self.config.dimension)
        self._rng: RandomSource = rng or random.Random().random

    @property
    def dimension(self) -> int:
        return self._grid.dimension

    @property
    def winning_threshold(self) -> int:
        return self.config.winning_threshold

    @property
    def grid(self) -> Grid:
        """A snapshot of the board; mutating it does not affect the game."""
        return self._grid.copy()

    @property
    def score(self) -> int:
        return self._grid.total()

    def clear(self) -> None:
        self._grid.clear()

    def insert_tile(self, coord: Coord, value: int) -> None:
        self._grid.insert(coord, value)

    def perform(self, direction: Direction) -> List[MoveAction]:
        """Slides the board and commits the result. An empty list means nothing moved."""
        new_grid, actions = compute_move(self._grid, direction)
        self._grid = new_grid
        return actions

    def value_for_new_tile(self) -> int:
        return 4 if self._rng() < self.config.four_probability else 2

    def insert_tile_at_random_position(self, value: int) -> Optional[Coord]:
        """Inserts into a uniformly chosen empty cell; returns None when the board is full."""
        if value < 1:
            raise ValueError(f"new tiles must have a positive value, got {value}")
        empty = self._grid.empty_cells()
        if not empty:
            return None
        pick = min(int(self._rng() * len(empty)), len(empty) - 1)
        coord = empty[pick]
        self._grid.insert(coord, value)
        if debug_enabled():
            print(f"[spawn] {value} at {coord}")
        return coord

    def spawn_random_tile(self) -> Optional[Coord]:
        return self.insert_tile_at_random_position(self.value_for_new_tile())

    def restart(self) -> List[Coord]:
        """Clears the board and places two starting tiles."""
        self.clear()
        placed: List[Coord] = []
        for _ in range(2):
            coord = self.spawn_random_tile()
            if coord is not None:
                placed.append(coord)
        return placed

    def play(self, direction: Direction) -> TurnResult:
        """Performs a slide and, only if something moved, adds a new random tile."""
        actions = self.perform(direction)
        spawned: Optional[Coord] = None
        spawned_value: Optional[int] = None
        if actions:
            value = self.value_for_new_tile()
            spawned = self.insert_tile_at_random_position(value)
            if spawned is not None:
                spawned_value = value
        return TurnResult(
            actions=actions,
            spawned=spawned,
            spawned_value=spawned_value,
            won=self.user_has_won(),
            lost=self.user_has_lost(),
            score=self.score,
        )

    def user_has_won(self) -> bool:
        return self._grid.max_value() >= self.config.winning_threshold

    def user_has_lost(self) -> bool:
        return not self.is_potential_move_available()

    def is_potential_move_available(self) -> bool:
        return any(self.is_tile_movable(coord) for coord in self._grid.coords())

    def is_tile_movable(self, coord: Coord) -> bool:
        value = self._grid.get(coord)
        if value == EMPTY:
            return True
        for other in self.neighbors(coord):
            neighbor_value = self._grid.get(other)
            if neighbor_value == EMPTY or neighbor_value == value:
                return True
        return False

    def neighbors(self, coord: Coord) -> List[Coord]:
        """Gets the in-bounds orthogonal neighbors of a coordinate."""
        r, c = coord
        n = self.dimension
        candidates = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
        return [(nr, nc) for nr, nc in candidates if 0 <= nr < n and 0 <= nc < n]
