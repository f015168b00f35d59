"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

This module provides:
- Rank and suit enumerations
- Card representation with a total order
- Parsing helpers
- Comparison utilities
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank).

    Values match the pip count, with face cards continuing the sequence.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


class Suit(IntEnum):
    """Card suits. Order only breaks ties between cards of equal rank."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Top rank, used to tell a royal flush from other straight flushes
HIGHEST_RANK = Rank.ACE

# Rank symbols for display
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit symbols for display
SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}
SYMBOL_TO_RANK["T"] = Rank.TEN

# Symbol to suit mapping (for parsing); letters are matched case-insensitively
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}
SYMBOL_TO_SUIT.update({"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES})


class CardParseError(ValueError):
    """Raised when a string cannot be parsed into a card."""

    pass


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first, then by suit, which gives a total
    order over the 52 distinct cards. Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @property
    def value(self) -> Rank:
        """Alias of ``rank``."""
        return self.rank

    def compare(self, other: "Card") -> int:
        """Compare with another card.

        Returns:
            Positive if self > other, negative if self < other, zero if equal
        """
        return compare_ranks(self.rank, other.rank) or int(self.suit) - int(other.suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from string like 'AS', '10h', 'T♠'.

        Args:
            s: Card string in format "RANK+SUIT"

        Returns:
            Card object

        Raises:
            CardParseError: If string cannot be parsed
        """
        s = s.strip()
        if len(s) < 2:
            raise CardParseError(f"Invalid card string: {s!r}")

        suit_char = s[-1].upper()
        rank_str = s[:-1].upper()

        if suit_char not in SYMBOL_TO_SUIT:
            raise CardParseError(f"Invalid suit character: {s[-1]}")
        if rank_str not in SYMBOL_TO_RANK:
            raise CardParseError(f"Invalid rank: {s[:-1]}")

        return cls(rank=SYMBOL_TO_RANK[rank_str], suit=SYMBOL_TO_SUIT[suit_char])


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if int(ranks[i]) - int(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(cards: Iterable[Card]) -> Dict[Rank, int]:
    """Count occurrences of each rank in a list of cards.

    Args:
        cards: Iterable of Card objects

    Returns:
        Dict mapping Rank to count
    """
    counts = {}
    for card in cards:
        counts[card.rank] = counts.get(card.rank, 0) + 1
    return counts


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks × 4 suits), in ascending order
    """
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(rank=rank, suit=suit))
    return deck


def sort_cards(cards: Iterable[Card], reverse: bool = False) -> List[Card]:
    """Sort cards by rank, then by suit.

    Args:
        cards: Iterable of Card objects
        reverse: Sort descending instead of ascending

    Returns:
        New sorted list of cards
    """
    return sorted(cards, reverse=reverse)


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Args:
        rank1: First rank
        rank2: Second rank

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return int(rank1) - int(rank2)


def make_cards_from_string(s: str) -> List[Card]:
    """Parse cards from a string like "AS KS QS JS 10S".

    Args:
        s: Space-separated card strings

    Returns:
        List of Card objects

    Raises:
        CardParseError: If any token cannot be parsed
    """
    return [Card.from_string(cs) for cs in s.split()]
