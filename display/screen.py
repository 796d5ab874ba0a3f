"""
Console screen helpers for the Three Dot Game.
Clearing the screen and pausing for effect.
"""

import time
from typing import Callable, Optional

from .config import DisplayConfig


class Screen:
    """
    Simple console screen wrapper.

    The sleep and output functions can be swapped out, so tests run
    without delays or printing.
    """

    def __init__(
        self,
        config: Optional[DisplayConfig] = None,
        sleep_func: Callable[[float], None] = time.sleep,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the screen.

        Args:
            config: Display configuration. Uses defaults if not provided.
            sleep_func: Called with a duration in seconds to pause.
            output_func: Called with each line of text to show.
        """
        self.config = config or DisplayConfig()
        self.sleep_func = sleep_func
        self.output_func = output_func

    def show(self, text: str):
        """Show a block of text."""
        self.output_func(text)

    def clear(self):
        """Push old output off the screen with blank lines."""
        for _ in range(self.config.CLEAR_LINE_COUNT):
            self.output_func("")

    def pause(self, seconds: float):
        """Pause for the given number of seconds. Zero or less does nothing."""
        if seconds > 0:
            self.sleep_func(seconds)
