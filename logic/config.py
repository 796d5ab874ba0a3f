"""
Game configuration for the Three Dot Game.
Board dimensions and player count, fixed for one game session.
"""

from dataclasses import dataclass


# Player ids must render as a single digit on the board
MAX_PLAYERS = 9


@dataclass(frozen=True)
class GameConfig:
    """
    Rules configuration for one game.

    The defaults give the classic game: a 5x5 board and two players.
    Pass a different config to GameState to play on other sizes.
    """

    rows: int = 5           # Number of rows (>= 1)
    cols: int = 5           # Number of columns (>= 1)
    player_count: int = 2   # Number of players (1-9)

    # Turns start from this player and cycle up to player_count
    FIRST_PLAYER = 1

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Board must be at least 1x1, got {self.rows}x{self.cols}"
            )
        if not 1 <= self.player_count <= MAX_PLAYERS:
            raise ValueError(
                f"Player count must be between 1 and {MAX_PLAYERS}, "
                f"got {self.player_count}"
            )

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols
