"""
timing_config.py
----------------
Validated set of mode durations used by the controller.

Defaults come from game_settings.Timing; a config file may override
any of them under a top-level "timing" key:

    timing:
      max_games: 5
      result_duration: 300
"""

from dataclasses import dataclass, asdict, fields

from reaction_machine.core.debug.debug_logger import DebugLogger
from reaction_machine.core.runtime.game_settings import Timing
from reaction_machine.core.services.config_manager import load_config


@dataclass(frozen=True)
class TimingConfig:
    """Durations in ticks plus the per-coin game limit."""
    min_reaction_duration: int = Timing.MIN_REACTION_DURATION
    max_reaction_duration: int = Timing.MAX_REACTION_DURATION
    max_ready_duration: int = Timing.MAX_READY_DURATION
    max_game_duration: int = Timing.MAX_GAME_DURATION
    gameover_duration: int = Timing.GAMEOVER_DURATION
    result_duration: int = Timing.RESULT_DURATION
    max_games: int = Timing.MAX_GAMES
    ticks_per_second: float = Timing.TICKS_PER_SECOND

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            # Only the tick rate may be fractional; counts and durations are whole ticks
            allowed = (int, float) if field.name == "ticks_per_second" else int
            if isinstance(value, bool) or not isinstance(value, allowed):
                kind = "a number" if allowed is not int else "an integer"
                raise ValueError(f"{field.name} must be {kind}, got {value!r}")
            if value <= 0:
                raise ValueError(f"{field.name} must be positive, got {value}")
        if self.min_reaction_duration > self.max_reaction_duration:
            raise ValueError(
                "min_reaction_duration "
                f"({self.min_reaction_duration}) exceeds max_reaction_duration "
                f"({self.max_reaction_duration})"
            )

    def to_dict(self) -> dict:
        return asdict(self)


def load_timing_config(filename=None, strict=False) -> TimingConfig:
    """
    Build a TimingConfig from defaults and an optional config file.

    Args:
        filename: Path to a .json/.yaml file, or None for defaults
        strict: Raise instead of falling back when the file is unusable

    Returns:
        TimingConfig
    """
    if filename is None:
        return TimingConfig()

    defaults = {"timing": TimingConfig().to_dict()}
    config = load_config(filename, default_dict=defaults, strict=strict)
    timing = config.get("timing", {})
    if not isinstance(timing, dict):
        raise ValueError(f"'timing' section must be a mapping, got {type(timing).__name__}")

    known = {field.name for field in fields(TimingConfig)}
    unknown = sorted(set(timing) - known)
    if unknown:
        DebugLogger.warn(f"Ignoring unknown timing keys: {unknown}", category="loading")

    return TimingConfig(**{key: value for key, value in timing.items() if key in known})
