"""
Keyboard input for the Three Dot Game.
Asks for a row and a column until both are valid.
"""

from typing import Callable, Optional, Tuple

from logic.config import GameConfig


class InputSource:
    """
    Reads dot locations from the player.

    Players type 1-based numbers; locations are returned 0-based,
    always inside the board.
    """

    def __init__(
        self,
        config: GameConfig,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize the input source.

        Args:
            config: Game configuration (board size).
            input_func: Called with a prompt, returns the typed text. Defaults
                to the built-in input().
            output_func: Called with error messages. Defaults to print().
        """
        self.config = config
        self.input_func = input_func or input
        self.output_func = output_func or print

    def read_location(self) -> Tuple[int, int]:
        """
        Ask for a row and then a column.

        Returns:
            (row, col), 0-based and on the board.
        """
        row = self._read_index("row", self.config.rows)
        col = self._read_index("column", self.config.cols)
        return row, col

    def _read_index(self, name: str, limit: int) -> int:
        """Prompt until a number between 1 and limit is typed. Returns it 0-based."""
        while True:
            text = self.input_func(f"\n>Please enter a {name} number : ")

            # Anything that isn't a number counts as 0, which is rejected
            try:
                index = int(text.strip()) - 1
            except ValueError:
                index = -1

            if 0 <= index < limit:
                return index

            self.output_func(f"\n>!>Please enter a {name} number between 1 and {limit}.")
