"""
event_manager.py
----------------
Event-driven notifications for decoupled observers of the controller.
Lets the front end, logs and stats listeners follow the game without
the controller knowing about them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from reaction_machine.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ModeChangedEvent(BaseEvent):
    """Dispatched every time a controller mode is entered."""
    previous: Optional[str]
    current: str


@dataclass(frozen=True)
class GameFinishedEvent(BaseEvent):
    """Dispatched when the reaction window closes."""
    game_number: int
    reaction_ticks: int
    timed_out: bool = False


@dataclass(frozen=True)
class CycleCompletedEvent(BaseEvent):
    """Dispatched when every game of a coin cycle has been played."""
    games_played: int
    average_ticks: float
    best_ticks: Optional[int] = None


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []

        if callback in self._subscribers[event_type]:
            return

        self._subscribers[event_type].append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """Remove a callback from an event type. Unknown callbacks are ignored."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks, in subscription order.

        A failing callback is logged and skipped; remaining callbacks still run.

        Args:
            event: Event instance to dispatch
        """
        event_type = type(event)
        # Copy so callbacks may unsubscribe themselves mid-dispatch
        for callback in list(self._subscribers.get(event_type, ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.fail(
                    f"Handler '{callback_name}' failed on {event_type.__name__}: {e}",
                    category="event"
                )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())


# ===========================================================
# Singleton Access
# ===========================================================

_EVENTS = None


def get_events() -> EventManager:
    """Get or create the event manager singleton."""
    global _EVENTS
    if _EVENTS is None:
        _EVENTS = EventManager()
    return _EVENTS


def reset_events() -> None:
    """Reset the singleton."""
    global _EVENTS
    _EVENTS = None
