"""
Main orchestration script for the Three Dot Game.

This script ties together:
- Logic (configuration, board, game state, rules)
- Display (board rendering, keyboard input, screen pacing)

Run this script to play the Three Dot Game in a terminal!
"""

import logging
import sys
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import PlacementResult

# Display imports
from display.config import DisplayConfig
from display.renderer import BoardRenderer
from display.input_source import InputSource
from display.screen import Screen

logger = logging.getLogger(__name__)


class DotGameConsole:
    """
    Main controller for a console game.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a row and column from the current player
    3. Place the dot, or explain why it can't go there
    4. Repeat until someone has three in a row or the board is full
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None,
        screen: Optional[Screen] = None,
        input_source: Optional[InputSource] = None
    ):
        """
        Initialize the console game.

        Args:
            game_config: Rules configuration. Uses defaults if not provided.
            display_config: Display configuration. Uses defaults if not provided.
            screen: Screen to draw on. A real console screen if not provided.
            input_source: Where moves come from. The keyboard if not provided.
        """
        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()
        self.screen = screen or Screen(self.display_config)
        self.input_source = input_source or InputSource(self.game_config)
        self.renderer = BoardRenderer(self.game_config.rows, self.display_config)
        self.game_state = GameState(self.game_config)

    def run(self) -> GameState:
        """
        Play one game from the welcome screen to the result.

        Returns:
            The finished game state.
        """
        self.screen.show(self.renderer.render_welcome())
        self.screen.pause(self.display_config.WELCOME_PAUSE_SECONDS)
        self.screen.clear()

        while not self.game_state.is_game_over:
            self._play_turn()

        logger.info("Game over: %s", self.game_state.status.value)
        return self.game_state

    def _play_turn(self):
        """Show the board, read one move, and apply it."""
        self.screen.show(self.renderer.render_board(self.game_state.board))
        self.screen.show(self.renderer.render_turn(self.game_state.current_player))

        row, col = self.input_source.read_location()
        result = self.game_state.place_dot(row, col)

        if result is PlacementResult.SUCCESS:
            self.game_state.resolve_turn()
            if self.game_state.is_game_over:
                self._show_game_result()
                return
        else:
            self.screen.show(self.renderer.render_placement_error(result, row, col))
            self.screen.pause(self.display_config.ERROR_PAUSE_SECONDS)

        self.screen.clear()

    def _show_game_result(self):
        """Show the final board and who won."""
        self.screen.clear()
        self.screen.show(self.renderer.render_board(self.game_state.board))
        self.screen.show(self.renderer.render_game_end(self.game_state))


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Three Dot Game")
    parser.add_argument(
        "--rows",
        type=int,
        default=GameConfig.rows,
        help="Number of board rows (default: %(default)s)"
    )
    parser.add_argument(
        "--cols",
        type=int,
        default=GameConfig.cols,
        help="Number of board columns (default: %(default)s)"
    )
    parser.add_argument(
        "--players",
        type=int,
        default=GameConfig.player_count,
        help="Number of players, 1-9 (default: %(default)s)"
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Skip the pauses after the welcome screen and rejected moves"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log game events for debugging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    try:
        game_config = GameConfig(rows=args.rows, cols=args.cols, player_count=args.players)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    screen = None
    if args.no_pause:
        screen = Screen(sleep_func=lambda seconds: None)

    game = DotGameConsole(game_config=game_config, screen=screen)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    except EOFError:
        print("\n\nNo more input, game ended.")
        return 1
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
