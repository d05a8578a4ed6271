"""
Runtime exports.

The mode controller, its modes and settings. The pygame front end
(main_loop) is imported directly so the core stays usable without a display.
"""

from reaction_machine.core.runtime.game_settings import (
    Timing,
    Messages,
    Display,
    Physics,
)
from reaction_machine.core.runtime.controller_mode import (
    ControllerMode,
    Idle,
    Ready,
    Waiting,
    Running,
    GameOver,
    Result,
)
from reaction_machine.core.runtime.session_stats import SessionStats
from reaction_machine.core.runtime.timing_config import TimingConfig, load_timing_config
from reaction_machine.core.runtime.reaction_controller import (
    ReactionController,
    ControllerError,
    format_seconds,
)

__all__ = [
    # Settings
    'Timing',
    'Messages',
    'Display',
    'Physics',
    'TimingConfig',
    'load_timing_config',
    # Modes
    'ControllerMode',
    'Idle',
    'Ready',
    'Waiting',
    'Running',
    'GameOver',
    'Result',
    # Controller
    'SessionStats',
    'ReactionController',
    'ControllerError',
    'format_seconds',
]
