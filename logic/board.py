"""
Board for the Three Dot Game.
A fixed rows x cols grid of cells, each empty or holding a player id.
"""

from typing import List, Optional, Tuple

import numpy as np


# Cell value for an empty cell. Player ids start at 1.
EMPTY = 0


class Board:
    """
    The game grid, stored as a numpy array of player ids.

    Cells hold EMPTY or a player id. How a cell looks on screen is
    decided by the display package, never here.
    """

    def __init__(self, rows: int, cols: int):
        """
        Create an empty board.

        Args:
            rows: Number of rows.
            cols: Number of columns.
        """
        self.rows = rows
        self.cols = cols
        self.grid = np.full((rows, cols), EMPTY, dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if (row, col) is a cell on this board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[int]:
        """
        Look up a cell.

        Args:
            row: Row index (may be off the board).
            col: Column index (may be off the board).

        Returns:
            EMPTY or a player id, or None if there is no such cell.
        """
        if not self.in_bounds(row, col):
            return None
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """Check if an on-board cell is empty."""
        return self.get_cell(row, col) == EMPTY

    def place(self, row: int, col: int, player: int):
        """
        Put a player's dot on an empty cell.

        Raises:
            ValueError: If the cell is off the board or already occupied.
        """
        cell = self.get_cell(row, col)
        if cell is None:
            raise ValueError(f"Cell ({row}, {col}) is not on the board")
        if cell != EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied by player {cell}")
        self.grid[row, col] = player

    def has_adjacent_dot(self, row: int, col: int) -> bool:
        """
        Check if any of the up to 8 neighbours of (row, col) is occupied.

        Neighbours off the board are simply absent. The dot owner
        doesn't matter.
        """
        # Slicing clamps the 3x3 window to the board edges
        window = self.grid[max(row - 1, 0):row + 2, max(col - 1, 0):col + 2]
        occupied = int(np.count_nonzero(window != EMPTY))

        # Don't count the cell itself
        if self.get_cell(row, col) not in (None, EMPTY):
            occupied -= 1

        return occupied > 0

    def is_full(self) -> bool:
        """True if no empty cell is left."""
        return not bool(np.any(self.grid == EMPTY))

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [(int(row), int(col)) for row, col in np.argwhere(self.grid == EMPTY)]

    def cells_of(self, player: int) -> List[Tuple[int, int]]:
        """Get all cells holding the given player's dots, row-major."""
        return [(int(row), int(col)) for row, col in np.argwhere(self.grid == player)]

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.rows, self.cols)
        new_board.grid = self.grid.copy()
        return new_board

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols})"
