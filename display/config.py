"""
Display configuration for the Three Dot Game.
Glyphs and pacing for the console screen.
"""


class DisplayConfig:
    """
    Configuration class for console display settings.
    Change these values to taste!
    """

    # ==================== BOARD GLYPHS ====================
    # Shown for a cell with no dot. Occupied cells show the player digit.
    EMPTY_GLYPH = "."

    # ==================== SCREEN ====================
    # There's no portable way to clear a terminal, so print blank lines
    CLEAR_LINE_COUNT = 50

    # ==================== PACING (seconds) ====================
    WELCOME_PAUSE_SECONDS = 4   # After the welcome screen
    ERROR_PAUSE_SECONDS = 3     # After a rejected move, so it can be read
