"""
Core services exports.

Provides collaborator contracts, the event system, and configuration loading.
"""

from reaction_machine.core.services.config_manager import load_config
from reaction_machine.core.services.event_manager import (
    get_events,
    EventManager,
    BaseEvent,
    ModeChangedEvent,
    GameFinishedEvent,
    CycleCompletedEvent,
)
from reaction_machine.core.services.interfaces import (
    DisplaySink,
    RandomSource,
    UniformRandomSource,
    LegacyRandomSource,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'EventManager',
    'BaseEvent',
    'ModeChangedEvent',
    'GameFinishedEvent',
    'CycleCompletedEvent',
    # Collaborators
    'DisplaySink',
    'RandomSource',
    'UniformRandomSource',
    'LegacyRandomSource',
]
