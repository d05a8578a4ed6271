"""
session_stats.py
----------------
Tracks statistics for the current coin cycle.
Owned by the controller; cleared on init and after the Result display.
"""

from typing import List, Optional


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Counters for one coin cycle plus the per-mode tick counter."""

    def __init__(self):
        self.tick_counter = 0
        self.games_played = 0
        self.cumulative_reaction_ticks = 0
        self.reaction_times: List[int] = []

    # ===========================================================
    # Ticks
    # ===========================================================

    def advance_tick(self) -> int:
        """Count one tick in the current mode and return the new count."""
        self.tick_counter += 1
        return self.tick_counter

    def reset_ticks(self):
        self.tick_counter = 0

    # ===========================================================
    # Games
    # ===========================================================

    def start_game(self):
        """Increment games played as the reaction window opens."""
        self.games_played += 1

    def record_reaction(self, ticks: int):
        """Add one game's reaction time to the cycle totals."""
        self.cumulative_reaction_ticks += ticks
        self.reaction_times.append(ticks)

    # ===========================================================
    # Derived Stats
    # ===========================================================

    @property
    def average_reaction_ticks(self) -> float:
        """Cumulative reaction ticks divided by games played (0.0 before any game)."""
        if self.games_played == 0:
            return 0.0
        return self.cumulative_reaction_ticks / self.games_played

    @property
    def best_reaction_ticks(self) -> Optional[int]:
        return min(self.reaction_times) if self.reaction_times else None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Clear everything for a new coin cycle."""
        self.tick_counter = 0
        self.games_played = 0
        self.cumulative_reaction_ticks = 0
        self.reaction_times.clear()
