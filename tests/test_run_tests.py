"""
test_run_tests.py
-----------------
Tests for the auto-test runner's command building and change filtering.
"""

import os
import sys
from types import SimpleNamespace
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import run_tests


def make_runner(*argv):
    return run_tests.TestRunner(run_tests.build_parser().parse_args(list(argv)))


def test_default_command():
    cmd = make_runner().build_command()
    assert cmd[1:] == ["-m", "pytest", "-v"]


def test_controller_only_with_coverage():
    cmd = make_runner("--controller-only", "--coverage").build_command()

    assert "tests/core/runtime/test_reaction_controller.py" in cmd
    assert "--cov=reaction_machine" in cmd


def test_only_python_changes_in_watched_dirs_trigger_runs():
    runner = make_runner()

    with patch.object(runner, "run_tests") as mock_run:
        runner.on_modified(SimpleNamespace(is_directory=False, src_path="docs/notes.md"))
        runner.on_modified(SimpleNamespace(is_directory=False, src_path="scratch/tool.py"))
        runner.on_modified(SimpleNamespace(is_directory=True, src_path="tests/core"))
        mock_run.assert_not_called()

        runner.on_modified(SimpleNamespace(is_directory=False, src_path="reaction_machine/main.py"))
        mock_run.assert_called_once()


def test_rapid_changes_are_debounced():
    runner = make_runner()
    event = SimpleNamespace(is_directory=False, src_path="tests/test_main.py")

    with patch.object(runner, "run_tests") as mock_run:
        runner.on_modified(event)
        runner.on_modified(event)

    assert mock_run.call_count == 1


def test_run_once_reports_pytest_status():
    with patch.object(run_tests.subprocess, "run", return_value=SimpleNamespace(returncode=1)):
        assert run_tests.main(["--run-once"]) == 1
    with patch.object(run_tests.subprocess, "run", return_value=SimpleNamespace(returncode=0)):
        assert run_tests.main(["--run-once"]) == 0
