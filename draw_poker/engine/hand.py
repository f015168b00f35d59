"""Five-card hand management.

This module provides:
- Hand: ordered, duplicate-free collection of at most five cards
- SortOrder: ascending/descending ordering for the stored cards
- MAX_HAND_SIZE: hand capacity

Hand invariants:
1. Never more than MAX_HAND_SIZE cards; surplus construction input is
   dropped silently
2. No two cards share both suit and rank
3. Cards are sorted ascending after construction and after every
   successful insertion
4. The memoised combination and draw advice are discarded on every
   successful mutation, so reads always reflect the current cards

Insertion failures (full hand, repeated card) are reported through the
boolean return value, never raised.
"""

import functools
import logging
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from draw_poker.rules import (
    Card,
    Rank,
    Suit,
    HIGHEST_RANK,
    COMBINATION_SIZE,
    Combination,
    CombinationType,
    DrawCombination,
    make_cards_from_string,
)

logger = logging.getLogger(__name__)


# Maximum number of cards in a hand
MAX_HAND_SIZE = COMBINATION_SIZE

# Marks an omitted ``start`` argument to Hand.reduce
_MISSING = object()


class SortOrder(str, Enum):
    """Direction for ordering the cards in a hand."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, order: Union["SortOrder", str]) -> "SortOrder":
        """Resolve a sort order, matching strings case-insensitively.

        Raises:
            ValueError: If ``order`` is neither 'asc' nor 'desc'
        """
        if isinstance(order, cls):
            return order
        if isinstance(order, str):
            try:
                return cls(order.lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid sort order: {order!r} (expected 'asc' or 'desc')")


def _check_card(card: Any) -> Card:
    if not isinstance(card, Card):
        raise TypeError(f"Expected a Card, got {type(card).__name__}")
    return card


def _as_card_sequence(args: Tuple[Any, ...]) -> Iterable[Card]:
    """Accept either variadic cards or a single iterable of cards."""
    if len(args) == 1 and not isinstance(args[0], Card):
        return args[0] if args[0] is not None else ()
    return args


class Hand:
    """A poker hand of up to five distinct cards, kept in sorted order.

    Accepts cards either as separate arguments or as one iterable:

        >>> Hand(Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES))
        >>> Hand([Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.SPADES)])

    Only the first MAX_HAND_SIZE cards are taken; the caller's sequence is
    left untouched.
    """

    MAX_HAND_SIZE = MAX_HAND_SIZE

    def __init__(self, *cards: Union[Card, Iterable[Card]]):
        self._cards: List[Card] = []
        self._combination: Optional[Combination] = None
        self._draw_combination: Optional[DrawCombination] = None

        snapshot = tuple(_as_card_sequence(cards))
        if len(snapshot) > MAX_HAND_SIZE:
            logger.debug(
                "Truncating %d cards to the first %d", len(snapshot), MAX_HAND_SIZE
            )

        for card in snapshot[:MAX_HAND_SIZE]:
            _check_card(card)
            if self.has(card):
                logger.debug("Dropping repeated card %s", card)
                continue
            self._cards.append(card)

        self.sort()

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> "Hand":
        """Create a hand from an iterable of cards."""
        return cls(list(cards))

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Create a hand from a string like "AS KS QS JS 10S".

        Raises:
            CardParseError: If any token cannot be parsed
        """
        return cls(make_cards_from_string(s))

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    @property
    def combination(self) -> Combination:
        """Combination made by the current cards (memoised)."""
        if self._combination is None:
            self._combination = Combination.from_hand(self)
        return self._combination

    @property
    def draw_combination(self) -> DrawCombination:
        """Draw advice for the current cards (memoised)."""
        if self._draw_combination is None:
            self._draw_combination = DrawCombination.from_hand(self)
        return self._draw_combination

    def _invalidate(self) -> None:
        if self._combination is not None or self._draw_combination is not None:
            logger.debug("Discarding cached ranking for %r", self)
        self._combination = None
        self._draw_combination = None

    def compare(self, other: "Hand") -> int:
        """Compare combinations of this hand and ``other``.

        Returns:
            Positive if this hand ranks higher, negative if lower, zero if equal
        """
        return self.combination.compare(other.combination)

    def _is_type(self, combination_type: CombinationType) -> bool:
        return self.combination.type is combination_type

    def is_kicker(self) -> bool:
        """True if the hand has nothing but a high card."""
        return self._is_type(CombinationType.KICKER)

    def is_pair(self) -> bool:
        return self._is_type(CombinationType.PAIR)

    def is_two_pairs(self) -> bool:
        return self._is_type(CombinationType.TWO_PAIR)

    def is_three_of_kind(self) -> bool:
        return self._is_type(CombinationType.THREE_OF_A_KIND)

    def is_straight(self) -> bool:
        return self._is_type(CombinationType.STRAIGHT)

    def is_flush(self) -> bool:
        return self._is_type(CombinationType.FLUSH)

    def is_full_house(self) -> bool:
        return self._is_type(CombinationType.FULL_HOUSE)

    def is_four_of_kind(self) -> bool:
        return self._is_type(CombinationType.FOUR_OF_A_KIND)

    def is_straight_flush(self) -> bool:
        return self._is_type(CombinationType.STRAIGHT_FLUSH)

    def is_royal_flush(self) -> bool:
        """True for an ace-high straight flush."""
        return self.is_straight_flush() and self.combination.highest_card == HIGHEST_RANK

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_card(self, card: Card) -> bool:
        """Add a single card.

        Returns:
            True if the card was added; False if the hand is full or
            already holds the card (the hand is left unchanged)
        """
        _check_card(card)
        if self.is_full():
            logger.debug("Rejected %s: hand is full", card)
            return False
        if self.has(card):
            logger.debug("Rejected %s: already in hand", card)
            return False

        self._cards.append(card)
        self.sort()
        return True

    def add_cards(self, *cards: Union[Card, Iterable[Card]]) -> bool:
        """Add cards one at a time, in the given order.

        Every card is attempted even after a failure, and cards added
        before a failure stay in the hand.

        Returns:
            True only if every card was added
        """
        results = [self.add_card(card) for card in _as_card_sequence(cards)]
        return all(results)

    def sort(self, order: Union[SortOrder, str] = SortOrder.ASC) -> None:
        """Sort cards in place using the card comparator (stable).

        Args:
            order: 'asc' or 'desc', case-insensitive

        Raises:
            ValueError: If ``order`` is not a recognised direction
        """
        order = SortOrder.parse(order)
        self._cards.sort(
            key=functools.cmp_to_key(Card.compare),
            reverse=order is SortOrder.DESC,
        )
        self._invalidate()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has(self, card_or_suit: Union[Card, Suit], rank: Optional[Rank] = None) -> bool:
        """Check whether a card is in the hand.

        Call either as ``has(card)`` or as ``has(suit, rank)``.
        """
        if rank is None:
            card = _check_card(card_or_suit)
            suit, rank = card.suit, card.rank
        else:
            suit, rank = Suit(card_or_suit), Rank(rank)
        return any(c.suit == suit and c.rank == rank for c in self._cards)

    def is_full(self) -> bool:
        """True if the hand has reached MAX_HAND_SIZE."""
        return len(self._cards) >= MAX_HAND_SIZE

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Snapshot of the cards in stored order."""
        return tuple(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    @property
    def first_card(self) -> Optional[Card]:
        return self._cards[0] if self._cards else None

    @property
    def last_card(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def reduce(self, aggregate: Callable[[Any, Card], Any], start: Any = _MISSING) -> Any:
        """Fold the cards with ``aggregate``, like functools.reduce."""
        if start is _MISSING:
            return functools.reduce(aggregate, self._cards)
        return functools.reduce(aggregate, self._cards, start)

    def every(self, predicate: Callable[[Card], bool]) -> bool:
        """True if ``predicate`` holds for every card (and for an empty hand)."""
        return all(predicate(card) for card in self._cards)

    def for_each(self, func: Callable[[Card], Any]) -> None:
        """Call ``func`` on each card in stored order."""
        for card in tuple(self._cards):
            func(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and self.has(card)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({self})"
