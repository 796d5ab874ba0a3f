"""
Display module for the Three Dot Game.
Handles drawing the board, reading moves, and console pacing.
"""

from .config import DisplayConfig
from .renderer import BoardRenderer
from .input_source import InputSource
from .screen import Screen
