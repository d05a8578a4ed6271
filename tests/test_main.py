"""
test_main.py
------------
Tests for the CLI entry point, with the window loop patched out.
"""

import json

import pytest
from unittest.mock import patch

from reaction_machine import main as main_module
from reaction_machine.core.debug.debug_logger import LoggerConfig
from reaction_machine.core.runtime.main_loop import PygameDisplay
from reaction_machine.core.services.event_manager import (
    CycleCompletedEvent,
    GameFinishedEvent,
    get_events,
    reset_events,
)
from reaction_machine.core.services.interfaces import LegacyRandomSource, UniformRandomSource


@pytest.fixture(autouse=True)
def fresh_globals(monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", LoggerConfig.LOG_LEVEL)
    reset_events()
    yield
    reset_events()


def build(argv):
    args = main_module.build_parser().parse_args(argv)
    display = PygameDisplay()
    return main_module.build_controller(args, display), display


def test_defaults_build_an_idle_controller():
    controller, display = build([])

    assert display.text == "Insert Coin"
    assert isinstance(controller._random, UniformRandomSource)
    assert get_events().get_subscriber_count(GameFinishedEvent) == 1
    assert get_events().get_subscriber_count(CycleCompletedEvent) == 1


def test_legacy_random_flag():
    controller, _ = build(["--legacy-random", "--seed", "1"])
    assert isinstance(controller._random, LegacyRandomSource)


def test_config_flag_loads_timing(tmp_path):
    path = tmp_path / "machine.json"
    path.write_text(json.dumps({"timing": {"max_games": 1}}))

    controller, _ = build(["--config", str(path)])

    assert controller.timing.max_games == 1


def test_main_runs_loop_and_sets_log_level():
    with patch.object(main_module, "MainLoop") as mock_loop:
        assert main_module.main(["--log-level", "WARN"]) == 0

    mock_loop.return_value.run.assert_called_once()
    assert LoggerConfig.LOG_LEVEL == "WARN"


def test_invalid_log_level_is_rejected():
    with pytest.raises(SystemExit):
        main_module.build_parser().parse_args(["--log-level", "LOUD"])


def test_set_level_rejects_unknown_level():
    with pytest.raises(ValueError):
        LoggerConfig.set_level("chatty")


@pytest.mark.parametrize("event, expected", [
    (CycleCompletedEvent(3, 15.0, 10), "best 10 ticks"),
    (CycleCompletedEvent(3, 0.0, None), "best no reaction recorded"),
])
def test_cycle_log_reports_best_reaction(event, expected):
    with patch.object(main_module, "DebugLogger") as mock_logger:
        main_module._log_cycle(event)

    message = mock_logger.system.call_args[0][0]
    assert "Cycle of 3 games" in message
    assert expected in message
