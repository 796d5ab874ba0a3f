"""
Move validator for the Three Dot Game.
Validates that dot placements follow the rules.
"""

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple
from dataclasses import dataclass

if TYPE_CHECKING:
    from .game_state import GameState


class PlacementResult(Enum):
    """Outcome of trying to place a dot."""
    SUCCESS = "success"
    ALREADY_FILLED = "already_filled"
    NO_ADJACENT_DOT = "no_adjacent_dot"
    OUT_OF_BOUNDS = "out_of_bounds"
    GAME_OVER = "game_over"


@dataclass
class ValidationResult:
    """Result of move validation."""
    result: PlacementResult
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.result is PlacementResult.SUCCESS


class MoveValidator:
    """
    Validates Three Dot Game moves.

    Rules:
    1. The game must not be over
    2. The first dot of the game can go on any cell
    3. After that, only empty cells can be used
    4. And the cell must touch another dot (diagonals count)
    """

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the dot (0-based).
            col: Column to place the dot (0-based).

        Returns:
            ValidationResult with the placement result and error_message.
        """
        board = game_state.board

        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                result=PlacementResult.GAME_OVER,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        if not board.in_bounds(row, col):
            return ValidationResult(
                result=PlacementResult.OUT_OF_BOUNDS,
                error_message=(
                    f"Invalid position ({row}, {col}). "
                    f"Must be within {board.rows}x{board.cols}."
                )
            )

        # The first dot can go anywhere
        if not game_state.has_first_move_happened:
            return ValidationResult(result=PlacementResult.SUCCESS)

        # Check if cell is empty
        if not board.is_empty(row, col):
            return ValidationResult(
                result=PlacementResult.ALREADY_FILLED,
                error_message=(
                    f"Cell ({row}, {col}) is already occupied by "
                    f"player {board.get_cell(row, col)}"
                )
            )

        # Check for a neighbouring dot
        if not board.has_adjacent_dot(row, col):
            return ValidationResult(
                result=PlacementResult.NO_ADJACENT_DOT,
                error_message=f"Cell ({row}, {col}) has no adjacent dot"
            )

        return ValidationResult(result=PlacementResult.SUCCESS)

    def get_valid_moves(self, game_state: "GameState") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions, row-major.
        """
        if game_state.is_game_over:
            return []

        return [
            (row, col)
            for row, col in game_state.board.empty_cells()
            if self.validate_move(game_state, row, col).is_valid
        ]
