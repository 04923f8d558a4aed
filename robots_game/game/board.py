"""
Occupancy board for Robots.

The board is a derived cache, rebuilt at the start of every tick from the
entity collections and then mutated progressively while robots move. It is
never the source of truth for where an entity is.

Coordinate system:
- (1, 1) is top-left
- x increases to the right, up to width
- y increases downward, up to height
"""

from enum import IntEnum
from typing import Iterable, List
import random

import numpy as np

from .entities import JunkHeap, Robot, Position


class Cell(IntEnum):
    """Occupancy marker of a single board cell."""
    EMPTY = 0
    ROBOT = 1
    JUNK = 2


class Board:
    """Fixed-size grid of occupancy markers backed by a numpy array."""

    def __init__(self, width: int = 60, height: int = 24):
        self.width = width
        self.height = height
        # Row-major: grid[y - 1, x - 1]
        self.grid = np.zeros((height, width), dtype=np.int8)

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within board bounds."""
        return 1 <= x <= self.width and 1 <= y <= self.height

    def get(self, x: int, y: int) -> Cell:
        """Get the marker at a cell."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} board")
        return Cell(int(self.grid[y - 1, x - 1]))

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the marker at a cell."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} board")
        self.grid[y - 1, x - 1] = int(cell)

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) == Cell.EMPTY

    def clear(self) -> None:
        self.grid.fill(Cell.EMPTY)

    def rebuild(self, junk_heaps: Iterable[JunkHeap], robots: Iterable[Robot] = ()) -> "Board":
        """
        Reset the board for a new tick.

        Every junk heap is marked JUNK. Scrapped robots are frozen wreckage
        and are marked JUNK as well. Live robots are not placed here; they
        mark their cells as they move.

        Args:
            junk_heaps: Junk heaps of the current level
            robots: Robot roster (only scrapped robots are marked)

        Returns:
            The board itself
        """
        self.clear()
        for heap in junk_heaps:
            self.set(heap.x, heap.y, Cell.JUNK)
        for robot in robots:
            if robot.is_scrap:
                self.set(robot.x, robot.y, Cell.JUNK)
        return self

    def count(self, cell: Cell) -> int:
        """Number of cells holding the given marker."""
        return int(np.count_nonzero(self.grid == int(cell)))

    def free_cells(self) -> int:
        return self.count(Cell.EMPTY)

    def random_cell(self, rng: random.Random) -> Position:
        """Uniformly random in-bounds cell, occupied or not."""
        return (rng.randint(1, self.width), rng.randint(1, self.height))

    def cells(self, cell: Cell) -> List[Position]:
        """Positions holding the given marker, in row-major order."""
        return [(int(x) + 1, int(y) + 1) for y, x in np.argwhere(self.grid == int(cell))]
