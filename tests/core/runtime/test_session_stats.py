"""
test_session_stats.py
---------------------
Unit tests for per-cycle SessionStats.
"""

from reaction_machine.core.runtime.session_stats import SessionStats


def test_starts_empty():
    stats = SessionStats()
    assert stats.tick_counter == 0
    assert stats.games_played == 0
    assert stats.cumulative_reaction_ticks == 0
    assert stats.average_reaction_ticks == 0.0
    assert stats.best_reaction_ticks is None


def test_advance_and_reset_ticks():
    stats = SessionStats()
    assert stats.advance_tick() == 1
    assert stats.advance_tick() == 2

    stats.reset_ticks()
    assert stats.tick_counter == 0


def test_reaction_totals_and_derived_stats():
    stats = SessionStats()
    for ticks in (40, 25, 55):
        stats.start_game()
        stats.record_reaction(ticks)

    assert stats.games_played == 3
    assert stats.cumulative_reaction_ticks == 120
    assert stats.average_reaction_ticks == 40.0
    assert stats.best_reaction_ticks == 25


def test_reset_clears_cycle():
    stats = SessionStats()
    stats.start_game()
    stats.record_reaction(80)
    stats.advance_tick()

    stats.reset()

    assert stats.games_played == 0
    assert stats.cumulative_reaction_ticks == 0
    assert stats.reaction_times == []
    assert stats.tick_counter == 0
