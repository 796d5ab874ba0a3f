"""
Game state management for the Three Dot Game.
Tracks the board, current player, and where the game is in its lifecycle.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple
from dataclasses import dataclass, field

from .board import Board
from .config import GameConfig
from .move_validator import MoveValidator, PlacementResult
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Lifecycle of one game session."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class GameStateError(RuntimeError):
    """Raised when a turn operation is used outside a running game."""


@dataclass
class Move:
    """
    A successful dot placement.
    """
    player: int             # Who placed the dot
    row: int                # Row (0-based)
    col: int                # Column (0-based)
    move_number: int        # Which move of the game this is (0-based)


@dataclass
class GameState:
    """
    The complete state of a Three Dot Game session.

    Tracks:
    - The board (which player's dot is where)
    - Current player
    - Whether the free first move has been played
    - Move history
    - Game status (not started, in progress, won, drawn)

    Typical turn:
        result = game.place_dot(row, col)
        if result is PlacementResult.SUCCESS:
            game.resolve_turn()
    """

    config: GameConfig = field(default_factory=GameConfig)

    board: Board = field(init=False)
    current_player: int = field(init=False, default=GameConfig.FIRST_PLAYER)
    has_first_move_happened: bool = field(init=False, default=False)
    status: GameStatus = field(init=False, default=GameStatus.NOT_STARTED)
    winner: Optional[int] = field(init=False, default=None)
    moves: List[Move] = field(init=False, default_factory=list)

    def __post_init__(self):
        self.board = Board(self.config.rows, self.config.cols)
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    @property
    def is_game_over(self) -> bool:
        """True once the game has been won or drawn."""
        return self.status in (GameStatus.WON, GameStatus.DRAWN)

    def place_dot(self, row: int, col: int) -> PlacementResult:
        """
        Place the current player's dot at the given position.

        Args:
            row: Row index (0-based).
            col: Column index (0-based).

        Returns:
            PlacementResult.SUCCESS if the dot was placed. Any other
            result leaves the game untouched and the same player retries.
        """
        validation = self._validator.validate_move(self, row, col)

        if not validation.is_valid:
            logger.debug(
                "Player %d rejected at (%d, %d): %s",
                self.current_player, row, col, validation.error_message
            )
            return validation.result

        self.board.place(row, col, self.current_player)
        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))
        logger.debug("Player %d placed a dot at (%d, %d)", self.current_player, row, col)

        if not self.has_first_move_happened:
            self.has_first_move_happened = True
            self.status = GameStatus.IN_PROGRESS
            logger.info("Game started by player %d", self.current_player)

        return PlacementResult.SUCCESS

    def advance_turn(self):
        """
        Pass the turn to the next player, wrapping back to the first.

        Raises:
            GameStateError: If the game hasn't started or is already over.
        """
        self._require_in_progress("advance the turn")

        if self.current_player < self.config.player_count:
            self.current_player += 1
        else:
            self.current_player = GameConfig.FIRST_PLAYER

    def has_current_player_won(self) -> bool:
        """Check if the current player has three dots in a row."""
        return self._win_checker.has_won(self.board, self.current_player)

    def is_board_full(self) -> bool:
        """Check if every cell holds a dot."""
        return self.board.is_full()

    def resolve_turn(self) -> GameStatus:
        """
        Finish the turn after a successful placement.

        The current player wins, the game is drawn on a full board,
        or the turn passes to the next player.

        Returns:
            The game status after the turn.

        Raises:
            GameStateError: If the game hasn't started or is already over.
        """
        self._require_in_progress("resolve a turn")

        if self.has_current_player_won():
            self.status = GameStatus.WON
            self.winner = self.current_player
            logger.info("Player %d wins after %d moves", self.winner, len(self.moves))
        elif self.is_board_full():
            self.status = GameStatus.DRAWN
            logger.info("Draw after %d moves", len(self.moves))
        else:
            self.advance_turn()

        return self.status

    def legal_moves(self) -> List[Tuple[int, int]]:
        """Get every cell the current player may use, row-major."""
        return self._validator.get_valid_moves(self)

    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """Get the winner's line of three, if the game was won."""
        if self.winner is None:
            return None
        return self._win_checker.get_winning_line(self.board, self.winner)

    def _require_in_progress(self, action: str):
        if self.status is not GameStatus.IN_PROGRESS:
            raise GameStateError(
                f"Cannot {action} while the game is {self.status.value}"
            )


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # Player 1 takes the top row
    moves = [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)]

    for row, col in moves:
        player = game.current_player
        result = game.place_dot(row, col)
        print(f"Player {player} at ({row}, {col}): {result.value}")
        if result is PlacementResult.SUCCESS:
            game.resolve_turn()

    print(f"Status: {game.status.value}, winner: {game.winner}")
    print(f"Winning line: {game.winning_line()}")

    print("\nGameState test done!")
