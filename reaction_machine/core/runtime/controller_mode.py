"""
controller_mode.py
------------------
The six mutually exclusive controller modes.

Each mode is an immutable value; only Waiting carries data (the wait
sampled when it was entered).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ControllerMode:
    """Base class for all modes."""

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Idle(ControllerMode):
    """Waiting for a coin."""
    pass


@dataclass(frozen=True)
class Ready(ControllerMode):
    """Coin accepted, waiting for Go."""
    pass


@dataclass(frozen=True)
class Waiting(ControllerMode):
    """Random delay before the reaction window opens."""
    wait_ticks: int


@dataclass(frozen=True)
class Running(ControllerMode):
    """Reaction window open."""
    pass


@dataclass(frozen=True)
class GameOver(ControllerMode):
    """One game's result is latched on the display."""
    pass


@dataclass(frozen=True)
class Result(ControllerMode):
    """Average of the coin cycle is displayed."""
    pass
