"""
interfaces.py
-------------
Collaborator contracts the controller depends on, plus the stock
random sources.

DisplaySink  - receives text to render
RandomSource - supplies the pre-reaction wait, in ticks
"""

import random
from abc import ABC, abstractmethod


# ===========================================================
# Contracts
# ===========================================================

class DisplaySink(ABC):
    """Anything that can show a line of text."""

    @abstractmethod
    def set_display(self, text: str) -> None:
        """Replace the displayed text."""
        pass


class RandomSource(ABC):
    """Supplies bounded random integers."""

    @abstractmethod
    def get_random(self, from_: int, to: int) -> int:
        """Return a tick count derived from the (from_, to) bounds."""
        pass


# ===========================================================
# Random Sources
# ===========================================================

class UniformRandomSource(RandomSource):
    """Uniform integer in the inclusive range [from_, to]."""

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def get_random(self, from_: int, to: int) -> int:
        if from_ > to:
            raise ValueError(f"Empty range: [{from_}, {to}]")
        return self._rng.randint(from_, to)


class LegacyRandomSource(RandomSource):
    """
    Reproduces the first-generation cabinet's sampling: a value in
    [0, from_) shifted by `to`, so results fall in [to, to + from_ - 1].

    Kept for machines that must time games exactly like the old firmware.
    """

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def get_random(self, from_: int, to: int) -> int:
        if from_ <= 0:
            raise ValueError(f"Lower bound must be positive, got {from_}")
        return self._rng.randrange(from_) + to
