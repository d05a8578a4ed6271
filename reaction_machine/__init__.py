"""
Reaction Machine
----------------
Coin-operated reaction-time game: a tick-driven mode controller plus a
pygame front end.
"""

__version__ = "1.0.0"
