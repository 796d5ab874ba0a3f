"""
Win checker for the Three Dot Game.
Checks if a player has three dots in a row or if the game is a draw.
"""

from typing import List, Optional, Tuple

from .board import Board


class WinChecker:
    """
    Checks for win conditions in the Three Dot Game.

    Win condition: 3 consecutive dots of the same player
    (horizontally, vertically, or diagonally)
    """

    # Directions a line can run from its first cell, as (row step, col step).
    # Each line is found from its topmost (then leftmost) cell, so four
    # directions cover all lines.
    DIRECTIONS = [
        (1, 0),    # Down
        (0, 1),    # Right
        (1, -1),   # Anti-diagonal ( / )
        (1, 1),    # Main diagonal ( \ )
    ]

    LINE_LENGTH = 3

    def has_won(self, board: Board, player: int) -> bool:
        """
        Check if a player has three dots in a row anywhere on the board.

        Args:
            board: The game board.
            player: The player id to check.

        Returns:
            True if the player has a line of three.
        """
        return self.get_winning_line(board, player) is not None

    def get_winning_line(
        self,
        board: Board,
        player: int
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first winning line for a player, scanning row-major.

        Args:
            board: The game board.
            player: The player id to check.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for row, col in board.cells_of(player):
            for d_row, d_col in self.DIRECTIONS:
                line = self._line_from(board, player, row, col, d_row, d_col)
                if line is not None:
                    return line
        return None

    def _line_from(
        self,
        board: Board,
        player: int,
        row: int,
        col: int,
        d_row: int,
        d_col: int
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Check a single line starting at (row, col).

        Cells off the board are None and never match a player.
        """
        line = [(row + step * d_row, col + step * d_col) for step in range(self.LINE_LENGTH)]

        for line_row, line_col in line:
            if board.get_cell(line_row, line_col) != player:
                return None

        return line

    def is_draw(self, board: Board, player: int) -> bool:
        """
        Check if the game is a draw after the given player's move.

        A draw occurs when all cells are filled AND the player has not won.
        Only the player who just moved can have made a new line.
        """
        if self.has_won(board, player):
            return False
        return board.is_full()
