"""
conftest.py
-----------
Shared pytest configuration and fixtures for reaction machine tests.

Contains:
- Recording display and scripted random source test doubles
- A connected, initialized controller fixture
- Helpers that drive the controller into each mode
"""

import os
import sys

import pytest

# Allow running the suite from a source checkout without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from reaction_machine.core.runtime.reaction_controller import ReactionController
from reaction_machine.core.services.event_manager import EventManager
from reaction_machine.core.services.interfaces import DisplaySink, RandomSource


WAIT_TICKS = 150


# ===========================================================
# Test Doubles
# ===========================================================

class RecordingDisplay(DisplaySink):
    """Keeps every text it was asked to show."""

    def __init__(self):
        self.history = []

    def set_display(self, text):
        self.history.append(text)

    @property
    def text(self):
        return self.history[-1] if self.history else None


class ScriptedRandom(RandomSource):
    """Returns a fixed value and remembers the bounds it was asked for."""

    def __init__(self, value=WAIT_TICKS):
        self.value = value
        self.calls = []

    def get_random(self, from_, to):
        self.calls.append((from_, to))
        return self.value


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def controller(display, rng, events):
    """Controller connected to test doubles and initialized to Idle."""
    controller = ReactionController(event_manager=events)
    controller.connect(display, rng)
    controller.init()
    return controller


# ===========================================================
# Mode Helpers
# ===========================================================

def tick(controller, count):
    for _ in range(count):
        controller.tick()


def to_ready(controller):
    controller.coin_inserted()


def to_waiting(controller):
    to_ready(controller)
    controller.go_stop_pressed()


def to_running(controller, wait_ticks=WAIT_TICKS):
    to_waiting(controller)
    tick(controller, wait_ticks)


def play_game(controller, reaction_ticks, wait_ticks=WAIT_TICKS):
    """From Waiting: sit out the wait, react after `reaction_ticks`, acknowledge."""
    tick(controller, wait_ticks)
    tick(controller, reaction_ticks)
    controller.go_stop_pressed()   # Running -> GameOver
    controller.go_stop_pressed()   # GameOver -> Waiting / Result


def play_cycle(controller, reactions=(10, 15, 20)):
    """From Idle: insert a coin and play every game, ending in Result."""
    to_waiting(controller)
    for reaction_ticks in reactions:
        play_game(controller, reaction_ticks)


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
