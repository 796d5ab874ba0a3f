"""
Board renderer for the Three Dot Game.
Turns the board and game events into console text.
"""

from typing import Dict, List, Optional

from logic.board import Board, EMPTY
from logic.game_state import GameState, GameStatus
from logic.move_validator import PlacementResult
from .config import DisplayConfig


# Messages for rejected placements; row/col are shown 1-based
PLACEMENT_MESSAGES: Dict[PlacementResult, str] = {
    PlacementResult.ALREADY_FILLED: "This location is already filled!",
    PlacementResult.NO_ADJACENT_DOT: "There was no adjacent dot!",
    PlacementResult.OUT_OF_BOUNDS: "This location is not on the board!",
    PlacementResult.GAME_OVER: "The game is already over!",
}


class BoardRenderer:
    """
    Builds the text shown on the console.

    Nothing is printed here; every method returns a string so the
    caller decides where it goes.
    """

    def __init__(self, rows: int, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            rows: Number of board rows. Sets the spacing between cells.
            config: Display configuration. Uses defaults if not provided.
        """
        self.config = config or DisplayConfig()

        # Wider boards get more space between cells so that multi-digit
        # headers still line up: 10 rows -> 3 spaces, 100 rows -> 4 spaces
        self.spacing = 1 + len(str(rows))

    def glyph_for(self, cell: int) -> str:
        """Get the character shown for a cell value."""
        if cell == EMPTY:
            return self.config.EMPTY_GLYPH
        return str(cell)

    def _header(self, number: int) -> str:
        """A 1-based row/column number padded to one cell width."""
        label = str(number)
        return label + " " * (self.spacing - (len(label) - 1))

    def render_board(self, board: Board) -> str:
        """
        Render the board with 1-based row and column headers.

        Example for the default 5x5 board after one move:
               1  2  3  4  5
            1  .  .  .  .  .
            2  .  1  .  .  .
        """
        lines: List[str] = []

        header = " " * (self.spacing + 1)
        header += "".join(self._header(col + 1) for col in range(board.cols))
        lines.append(header.rstrip())

        for row in range(board.rows):
            line = self._header(row + 1)
            for col in range(board.cols):
                line += self.glyph_for(board.get_cell(row, col)) + " " * self.spacing
            lines.append(line.rstrip())

        return "\n".join(lines)

    def render_welcome(self) -> str:
        """The welcome screen text."""
        return (
            ">!>!> Welcome to the 3 Dot Game <!<!<\n"
            "\nGame Description :\n"
            "The first player to place 3 consecutive dots in any direction wins!"
        )

    def render_turn(self, player: int) -> str:
        """Whose turn it is."""
        return f"\n>>Now, Player {player}'s turn."

    def render_placement_error(self, result: PlacementResult, row: int, col: int) -> str:
        """
        Describe a rejected placement.

        Args:
            result: The placement result (anything but SUCCESS).
            row: Row index (0-based).
            col: Column index (0-based).
        """
        message = PLACEMENT_MESSAGES.get(result, f"Could not place the dot ({result.value}).")
        return f"\n>>{message} Row[{row + 1}] Column[{col + 1}]"

    def render_game_end(self, game_state: GameState) -> str:
        """
        Announce the result of a finished game.

        Raises:
            ValueError: If the game isn't over yet.
        """
        if game_state.status is GameStatus.WON:
            return f"\n>!>!> Player {game_state.winner} wins! <!<!<"
        if game_state.status is GameStatus.DRAWN:
            return "\n>!>!> Draw <!<!<"
        raise ValueError(f"Game is not over yet ({game_state.status.value})")
