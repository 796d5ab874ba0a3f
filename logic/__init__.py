"""
Logic module for the Three Dot Game.
Handles configuration, the board, rules, and game state.
"""

from .config import GameConfig
from .board import Board, EMPTY
from .move_validator import MoveValidator, PlacementResult, ValidationResult
from .win_checker import WinChecker
from .game_state import GameState, GameStatus, GameStateError, Move

__version__ = "1.0.0"
