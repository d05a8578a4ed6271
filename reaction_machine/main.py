"""
main.py
-------
Entry point: builds the controller and opens the game window.

Usage:
    python -m reaction_machine.main                   # uniform random waits
    python -m reaction_machine.main --seed 42         # reproducible waits
    python -m reaction_machine.main --legacy-random   # first-generation cabinet timing
    python -m reaction_machine.main --config machine.yaml --log-level VERBOSE
"""

import sys
import argparse

from reaction_machine.core.debug.debug_logger import DebugLogger, LoggerConfig
from reaction_machine.core.runtime.main_loop import MainLoop, PygameDisplay
from reaction_machine.core.runtime.reaction_controller import ReactionController
from reaction_machine.core.runtime.timing_config import load_timing_config
from reaction_machine.core.services.event_manager import (
    get_events,
    GameFinishedEvent,
    CycleCompletedEvent,
)
from reaction_machine.core.services.interfaces import LegacyRandomSource, UniformRandomSource


def build_parser():
    parser = argparse.ArgumentParser(description="Reaction Machine arcade game")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random wait generator")
    parser.add_argument("--legacy-random", action="store_true",
                        help="Sample waits with the first-generation cabinet formula")
    parser.add_argument("--config", default=None,
                        help="JSON/YAML file overriding timing values")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=list(DebugLogger.LEVEL_VALUES),
                        help="Console log verbosity")
    return parser


def build_controller(args, display):
    """Create, connect and initialize a controller from parsed CLI args."""
    timing = load_timing_config(args.config)
    source_cls = LegacyRandomSource if args.legacy_random else UniformRandomSource

    events = get_events()
    events.subscribe(GameFinishedEvent, _log_game)
    events.subscribe(CycleCompletedEvent, _log_cycle)

    controller = ReactionController(timing=timing, event_manager=events)
    controller.connect(display, source_cls(seed=args.seed))
    controller.init()
    return controller


def _log_game(event: GameFinishedEvent):
    outcome = "timed out" if event.timed_out else f"{event.reaction_ticks} ticks"
    DebugLogger.system(f"Game {event.game_number} finished: {outcome}", category="event")


def _log_cycle(event: CycleCompletedEvent):
    best = f"{event.best_ticks} ticks" if event.best_ticks is not None else "no reaction recorded"
    DebugLogger.system(
        f"Cycle of {event.games_played} games: average {event.average_ticks:.1f} ticks, best {best}",
        category="event"
    )


def main(argv=None):
    args = build_parser().parse_args(argv)
    LoggerConfig.set_level(args.log_level)

    DebugLogger.section("Reaction Machine")
    display = PygameDisplay()
    controller = build_controller(args, display)

    MainLoop(controller, display).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
