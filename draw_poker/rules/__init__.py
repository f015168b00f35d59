"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Combination detection and comparison (combination.py)
- Draw detection and exchange advice (draw.py)
"""

from .ranks import (
    Rank,
    Suit,
    Card,
    CardParseError,
    HIGHEST_RANK,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    are_consecutive,
    get_rank_counts,
    create_standard_deck,
    sort_cards,
    compare_ranks,
    make_cards_from_string,
)

from .combination import (
    COMBINATION_SIZE,
    CombinationType,
    Combination,
    evaluate_cards,
    straight_top,
)

from .draw import (
    DrawType,
    Draw,
    DrawCombination,
    NO_DRAW,
    HOLD_MIN_RANK,
    advise_draw,
    classify_draw,
    count_outs,
    find_draws,
    straight_completions,
)

__all__ = [
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "CardParseError",
    "HIGHEST_RANK",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "are_consecutive",
    "get_rank_counts",
    "create_standard_deck",
    "sort_cards",
    "compare_ranks",
    "make_cards_from_string",
    # Combinations
    "COMBINATION_SIZE",
    "CombinationType",
    "Combination",
    "evaluate_cards",
    "straight_top",
    # Draws
    "DrawType",
    "Draw",
    "DrawCombination",
    "NO_DRAW",
    "HOLD_MIN_RANK",
    "advise_draw",
    "classify_draw",
    "count_outs",
    "find_draws",
    "straight_completions",
]
