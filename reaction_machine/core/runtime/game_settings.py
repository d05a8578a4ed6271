"""
game_settings.py
----------------
Centralized constants for the reaction machine.
"""


# ===========================================================
# Game Timing (ticks)
# ===========================================================

class Timing:
    """Mode durations, all in ticks."""
    MIN_REACTION_DURATION: int = 100   # Shortest random wait (1.00s)
    MAX_REACTION_DURATION: int = 250   # Longest random wait (2.50s)
    MAX_READY_DURATION: int = 1000     # Ready times out after 10s
    MAX_GAME_DURATION: int = 200       # Reaction window cap (2.00s)
    GAMEOVER_DURATION: int = 300       # Result of one game shown for 3s
    RESULT_DURATION: int = 500         # Average shown for 5s
    MAX_GAMES: int = 3                 # Games per coin

    TICKS_PER_SECOND: float = 100.0
    TICK_SECONDS: float = 1 / TICKS_PER_SECOND


# ===========================================================
# Display Messages
# ===========================================================

class Messages:
    """Text sent to the display sink."""
    INSERT_COIN: str = "Insert Coin"
    PRESS_GO: str = "Press Go!"
    WAIT: str = "Wait..."
    MAX_GAMES: str = "Max games played"
    AVERAGE_PREFIX: str = "Average: "


# ===========================================================
# Window & Performance
# ===========================================================

class Display:
    """Front end window configuration."""
    WIDTH: int = 640
    HEIGHT: int = 360
    FPS: int = 60
    CAPTION: str = "Reaction Machine"

    FONT_SIZE: int = 72
    HINT_FONT_SIZE: int = 22
    BACKGROUND: tuple = (10, 10, 40)
    FOREGROUND: tuple = (240, 240, 240)
    HINT_COLOR: tuple = (140, 140, 170)


class Physics:
    """Frame timing safety limits."""
    MAX_FRAME_TIME: float = 0.1
