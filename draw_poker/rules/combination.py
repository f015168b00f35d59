"""Poker combination detection and comparison.

Combination types supported (weakest to strongest):
- Kicker: no combination, high card only
- Pair, two pair, three of a kind
- Straight: five consecutive ranks (ace plays high or low)
- Flush: five cards of one suit
- Full house: three of a kind plus a pair
- Four of a kind
- Straight flush

Comparison rules:
- Different types: the stronger type wins
- Same type: compare the tie-break ranks in order of significance
  (grouped ranks by group size, then remaining ranks high to low;
  straights compare by their top rank only, the wheel A-2-3-4-5 tops at 5)

Hands with fewer than five cards are evaluated on the cards present: rank
groups can be made, while straights, flushes and full houses need all five.
"""

from dataclasses import dataclass, field
from enum import IntEnum, auto
from typing import Iterable, Optional, Tuple

from .ranks import (
    Card,
    Rank,
    RANK_SYMBOLS,
    are_consecutive,
    get_rank_counts,
)


# Number of cards in a complete combination
COMBINATION_SIZE = 5

# Ranks of the five-high straight, where the ace plays low
WHEEL_RANKS = frozenset([Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE])


class CombinationType(IntEnum):
    """Combination categories. The integer value is the category order."""

    KICKER = auto()
    PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Two pair'."""
        return self.name.replace("_", " ").capitalize()


@dataclass(frozen=True, order=True)
class Combination:
    """A ranked poker combination.

    Ordering compares ``type`` first, then ``ranks``; ``highest_card`` is
    informational and takes no part in equality or ordering.

    Attributes:
        type: The combination category
        ranks: Tie-break ranks in order of significance
        highest_card: Top rank of the defining cards, None for an empty hand
    """

    type: CombinationType
    ranks: Tuple[Rank, ...] = ()
    highest_card: Optional[Rank] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.highest_card is None:
            return self.type.label
        return f"{self.type.label}, {RANK_SYMBOLS[self.highest_card]} high"

    def compare(self, other: "Combination") -> int:
        """Compare two combinations.

        Returns:
            Positive if self ranks higher, negative if lower, zero if equal
        """
        if self > other:
            return 1
        if self < other:
            return -1
        return 0

    @classmethod
    def from_hand(cls, hand) -> "Combination":
        """Evaluate the cards currently held by ``hand``."""
        return evaluate_cards(hand.cards)


def straight_top(ranks: Iterable[Rank]) -> Optional[Rank]:
    """Return the top rank if the distinct ranks form a five-card straight."""
    ranks = sorted(set(ranks))
    if len(ranks) != COMBINATION_SIZE:
        return None

    if are_consecutive(ranks):
        return ranks[-1]
    if frozenset(ranks) == WHEEL_RANKS:
        return Rank.FIVE
    return None


def evaluate_cards(cards: Iterable[Card]) -> Combination:
    """Evaluate up to five cards into a Combination.

    Args:
        cards: Iterable of distinct Card objects

    Returns:
        The best Combination the cards make
    """
    cards = list(cards)
    if not cards:
        return Combination(type=CombinationType.KICKER)

    rank_counts = get_rank_counts(cards)

    # Bigger groups first, higher rank first within equal group sizes
    groups = sorted(rank_counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    ranks = tuple(rank for rank, _ in groups)
    counts = [count for _, count in groups]

    is_complete = len(cards) == COMBINATION_SIZE
    is_flush = is_complete and len({card.suit for card in cards}) == 1
    top = straight_top(rank_counts) if is_complete else None

    if top is not None and is_flush:
        return Combination(CombinationType.STRAIGHT_FLUSH, (top,), top)
    if counts[0] == 4:
        return Combination(CombinationType.FOUR_OF_A_KIND, ranks, ranks[0])
    if counts[:2] == [3, 2]:
        return Combination(CombinationType.FULL_HOUSE, ranks, ranks[0])
    if is_flush:
        return Combination(CombinationType.FLUSH, ranks, ranks[0])
    if top is not None:
        return Combination(CombinationType.STRAIGHT, (top,), top)
    if counts[0] == 3:
        return Combination(CombinationType.THREE_OF_A_KIND, ranks, ranks[0])
    if counts[:2] == [2, 2]:
        return Combination(CombinationType.TWO_PAIR, ranks, ranks[0])
    if counts[0] == 2:
        return Combination(CombinationType.PAIR, ranks, ranks[0])
    return Combination(CombinationType.KICKER, ranks, ranks[0])
