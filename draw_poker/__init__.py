"""Draw Poker - five-card poker hands.

A small library for holding five-card poker hands, ranking them and
advising on the exchange in five-card draw.
"""

__version__ = "0.1.0"
__author__ = "Draw Poker Team"

from draw_poker.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
