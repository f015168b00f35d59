"""Poker hand engine.

This module provides:
- Hand: capacity-bounded, sorted, duplicate-free card collection
- SortOrder: ordering direction for a hand's cards
- MAX_HAND_SIZE: hand capacity
"""

from .hand import (
    Hand,
    SortOrder,
    MAX_HAND_SIZE,
)

__all__ = [
    "Hand",
    "SortOrder",
    "MAX_HAND_SIZE",
]
