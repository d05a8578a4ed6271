"""
reaction_controller.py
----------------------
Finite-state controller for the reaction-time arcade game.

Responsibilities
----------------
- Route the three machine events (coin, Go/Stop, tick) to the active mode.
- Run each mode's entry action exactly once when it becomes active.
- Count ticks per mode and apply timed auto-transitions.
- Accumulate games played and reaction time across a coin cycle.

Transitions are looked up in per-event tables keyed by mode type. A
handler returns the next mode's type, or None to stay put; a mode with
no entry in a table ignores that event.
"""

from typing import Callable, Dict, Optional, Type

from reaction_machine.core.debug.debug_logger import DebugLogger
from reaction_machine.core.runtime.controller_mode import (
    ControllerMode,
    Idle,
    Ready,
    Waiting,
    Running,
    GameOver,
    Result,
)
from reaction_machine.core.runtime.game_settings import Messages
from reaction_machine.core.runtime.session_stats import SessionStats
from reaction_machine.core.runtime.timing_config import TimingConfig
from reaction_machine.core.services.event_manager import (
    EventManager,
    ModeChangedEvent,
    GameFinishedEvent,
    CycleCompletedEvent,
)
from reaction_machine.core.services.interfaces import DisplaySink, RandomSource


ModeType = Type[ControllerMode]
Handler = Callable[[ControllerMode], Optional[ModeType]]


class ControllerError(RuntimeError):
    """Raised when the controller is used out of order or a collaborator misbehaves."""
    pass


def format_seconds(ticks: float, ticks_per_second: float) -> str:
    """Ticks as seconds with exactly two decimals, e.g. 164 -> '1.64'."""
    return f"{ticks / ticks_per_second:.2f}"


# ===========================================================
# Reaction Controller
# ===========================================================

class ReactionController:
    """
    Drives the display and random source from coin, Go/Stop and tick events.

    Usage:
        controller = ReactionController()
        controller.connect(display, UniformRandomSource())
        controller.init()
        controller.coin_inserted()      # "Press Go!"
        controller.go_stop_pressed()    # "Wait..."
        controller.tick()               # call every 10ms
    """

    def __init__(self, timing: TimingConfig = None, event_manager: EventManager = None):
        """
        Args:
            timing: Mode durations (defaults from game_settings.Timing)
            event_manager: Optional dispatcher notified of mode changes and results
        """
        self.timing = timing or TimingConfig()
        self.events = event_manager
        self.stats = SessionStats()

        self._display: Optional[DisplaySink] = None
        self._random: Optional[RandomSource] = None
        self._mode: Optional[ControllerMode] = None
        self._display_text: Optional[str] = None

        self._entry_actions: Dict[ModeType, Callable[[], ControllerMode]] = {
            Idle: self._enter_idle,
            Ready: self._enter_ready,
            Waiting: self._enter_waiting,
            Running: self._enter_running,
            GameOver: self._enter_game_over,
            Result: self._enter_result,
        }
        self._coin_handlers: Dict[ModeType, Handler] = {
            Idle: self._idle_coin_inserted,
            Result: self._result_finished,
        }
        self._go_stop_handlers: Dict[ModeType, Handler] = {
            Ready: self._ready_go_stop,
            Waiting: self._waiting_go_stop,
            Running: self._running_go_stop,
            GameOver: self._game_over_next,
            Result: self._result_finished,
        }
        self._tick_handlers: Dict[ModeType, Handler] = {
            Ready: self._ready_tick,
            Waiting: self._waiting_tick,
            Running: self._running_tick,
            GameOver: self._game_over_tick,
            Result: self._result_tick,
        }

    # ===========================================================
    # Setup
    # ===========================================================

    def connect(self, display: DisplaySink, random_source: RandomSource):
        """
        Wire collaborators. Must be called before init().

        Args:
            display: Receives every text update
            random_source: Samples the Waiting delay
        """
        if display is None or random_source is None:
            raise ControllerError("connect() needs both a display and a random source")

        self._display = display
        self._random = random_source
        DebugLogger.system(
            f"Connected display={type(display).__name__} "
            f"random={type(random_source).__name__}",
            category="controller"
        )

    def init(self):
        """(Re)set to Idle with all counters zeroed."""
        if self._display is None:
            raise ControllerError("init() called before connect()")

        self.stats.reset()
        self._mode = None
        self._enter(Idle)
        DebugLogger.action("Controller initialized", category="controller")

    # ===========================================================
    # Events
    # ===========================================================

    def coin_inserted(self):
        self._handle(self._coin_handlers, "coin_inserted")

    def go_stop_pressed(self):
        self._handle(self._go_stop_handlers, "go_stop_pressed")

    def tick(self):
        self._handle(self._tick_handlers, "tick")

    def _handle(self, handlers: Dict[ModeType, Handler], event_name: str):
        """Dispatch an event to the active mode and enter the mode it returns."""
        if self._mode is None:
            raise ControllerError(f"{event_name}() called before init()")

        handler = handlers.get(type(self._mode))
        if handler is None:
            return

        next_mode = handler(self._mode)
        if next_mode is not None:
            self._enter(next_mode)

    # ===========================================================
    # Transitions
    # ===========================================================

    def _enter(self, mode_type: ModeType):
        """Run the entry action of `mode_type` and make it active."""
        previous = self._mode.name if self._mode is not None else None
        self._mode = self._entry_actions[mode_type]()

        DebugLogger.state(f"[{previous or 'None'}] → [{self._mode.name}]", category="mode")
        if self.events:
            self.events.dispatch(ModeChangedEvent(previous, self._mode.name))

    def _show(self, text: str):
        self._display.set_display(text)
        self._display_text = text
        DebugLogger.trace(f"Display '{text}'", category="display")

    # ===========================================================
    # Entry Actions
    # ===========================================================

    def _enter_idle(self) -> ControllerMode:
        self.stats.reset_ticks()
        self._show(Messages.INSERT_COIN)
        return Idle()

    def _enter_ready(self) -> ControllerMode:
        self.stats.reset_ticks()
        self._show(Messages.PRESS_GO)
        return Ready()

    def _enter_waiting(self) -> ControllerMode:
        self._show(Messages.WAIT)
        self.stats.reset_ticks()

        wait_ticks = self._random.get_random(
            self.timing.min_reaction_duration,
            self.timing.max_reaction_duration
        )
        if isinstance(wait_ticks, bool) or not isinstance(wait_ticks, int) or wait_ticks < 1:
            raise ControllerError(f"Random source returned unusable wait: {wait_ticks!r}")

        DebugLogger.trace(f"Waiting {wait_ticks} ticks", category="controller")
        return Waiting(wait_ticks)

    def _enter_running(self) -> ControllerMode:
        self._show(format_seconds(0, self.timing.ticks_per_second))
        self.stats.reset_ticks()
        return Running()

    def _enter_game_over(self) -> ControllerMode:
        # Display keeps the last reaction time (or the max games notice)
        self.stats.reset_ticks()
        return GameOver()

    def _enter_result(self) -> ControllerMode:
        average_ticks = self.stats.average_reaction_ticks
        average = format_seconds(average_ticks, self.timing.ticks_per_second)
        self._show(Messages.AVERAGE_PREFIX + average)
        self.stats.reset_ticks()

        best_ticks = self.stats.best_reaction_ticks
        best = format_seconds(best_ticks, self.timing.ticks_per_second) if best_ticks is not None else "none"
        DebugLogger.action(
            f"Cycle complete: {self.stats.games_played} games, average {average}s, best {best}",
            category="controller"
        )
        if self.events:
            self.events.dispatch(
                CycleCompletedEvent(self.stats.games_played, average_ticks, best_ticks)
            )
        return Result()

    # ===========================================================
    # Idle
    # ===========================================================

    def _idle_coin_inserted(self, mode) -> ModeType:
        if self.stats.games_played < self.timing.max_games:
            return Ready
        self._show(Messages.MAX_GAMES)
        return GameOver

    # ===========================================================
    # Ready
    # ===========================================================

    def _ready_go_stop(self, mode) -> ModeType:
        return Waiting

    def _ready_tick(self, mode) -> Optional[ModeType]:
        if self.stats.advance_tick() >= self.timing.max_ready_duration:
            DebugLogger.action("Ready timed out", category="controller")
            return Idle
        return None

    # ===========================================================
    # Waiting
    # ===========================================================

    def _waiting_go_stop(self, mode) -> ModeType:
        DebugLogger.warn("Go/Stop pressed during wait - game aborted", category="controller")
        return Idle

    def _waiting_tick(self, mode: Waiting) -> Optional[ModeType]:
        if self.stats.advance_tick() >= mode.wait_ticks:
            self.stats.start_game()
            return Running
        return None

    # ===========================================================
    # Running
    # ===========================================================

    def _running_go_stop(self, mode) -> ModeType:
        self._finish_game(self.stats.tick_counter, timed_out=False)
        return GameOver

    def _running_tick(self, mode) -> Optional[ModeType]:
        ticks = self.stats.advance_tick()
        self._show(format_seconds(ticks, self.timing.ticks_per_second))

        if ticks >= self.timing.max_game_duration:
            self._finish_game(self.timing.max_game_duration, timed_out=True)
            return GameOver
        return None

    def _finish_game(self, reaction_ticks: int, timed_out: bool):
        # A timeout still ends the game but adds nothing to the average
        if not timed_out:
            self.stats.record_reaction(reaction_ticks)
        DebugLogger.action(
            f"Game {self.stats.games_played}: {reaction_ticks} ticks"
            + (" (timed out)" if timed_out else ""),
            category="controller"
        )
        if self.events:
            self.events.dispatch(
                GameFinishedEvent(self.stats.games_played, reaction_ticks, timed_out)
            )

    # ===========================================================
    # GameOver
    # ===========================================================

    def _game_over_next(self, mode) -> ModeType:
        if self.stats.games_played < self.timing.max_games:
            return Waiting
        return Result

    def _game_over_tick(self, mode) -> Optional[ModeType]:
        if self.stats.advance_tick() >= self.timing.gameover_duration:
            return self._game_over_next(mode)
        return None

    # ===========================================================
    # Result
    # ===========================================================

    def _result_finished(self, mode) -> ModeType:
        self.stats.reset()
        return Idle

    def _result_tick(self, mode) -> Optional[ModeType]:
        if self.stats.advance_tick() >= self.timing.result_duration:
            return self._result_finished(mode)
        return None

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def mode(self) -> Optional[ControllerMode]:
        return self._mode

    @property
    def mode_name(self) -> Optional[str]:
        return self._mode.name if self._mode is not None else None

    @property
    def display_text(self) -> Optional[str]:
        """Last text sent to the display sink."""
        return self._display_text

    @property
    def tick_counter(self) -> int:
        return self.stats.tick_counter

    @property
    def games_played(self) -> int:
        return self.stats.games_played

    @property
    def cumulative_reaction_ticks(self) -> int:
        return self.stats.cumulative_reaction_ticks
