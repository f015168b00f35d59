"""Draw-phase analysis for five-card draw.

This module provides:
- Detection of four-card draws (flush, straight, straight flush)
- Exact out counting against the cards not held
- Hold/discard advice for the exchange

Hold rules, first match wins:
1. Made five-card hand (straight or better, quads): hold everything
2. Three of a kind or two pair: hold the grouped cards
3. Straight flush draw: hold the four
4. Pair: hold the pair
5. Flush draw or open-ended straight draw: hold the four
6. Otherwise hold up to two high cards (jack or better)
"""

import itertools
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Iterable, List, Tuple

import numpy as np

from .ranks import Card, Rank, create_standard_deck, sort_cards
from .combination import (
    Combination,
    CombinationType,
    evaluate_cards,
    straight_top,
)


# Cards in a draw (one short of a complete combination)
DRAW_SIZE = 4

# Lowest rank worth holding on its own
HOLD_MIN_RANK = Rank.JACK

# Most high cards held when there is nothing better
MAX_HIGH_CARDS_HELD = 2

# Made hands that are never broken up
STAND_PAT_TYPES = frozenset(
    [
        CombinationType.STRAIGHT,
        CombinationType.FLUSH,
        CombinationType.FULL_HOUSE,
        CombinationType.FOUR_OF_A_KIND,
        CombinationType.STRAIGHT_FLUSH,
    ]
)


class DrawType(IntEnum):
    """Four-card draws, weakest to strongest."""

    NONE = auto()
    GUTSHOT_STRAIGHT_DRAW = auto()  # one rank completes the straight
    OPEN_ENDED_STRAIGHT_DRAW = auto()  # two ranks complete the straight
    FLUSH_DRAW = auto()  # four cards of one suit
    STRAIGHT_FLUSH_DRAW = auto()  # four suited cards that can make a straight

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Flush draw'."""
        return self.name.replace("_", " ").capitalize()


# Weakest combination that completes each draw
DRAW_TARGETS = {
    DrawType.GUTSHOT_STRAIGHT_DRAW: CombinationType.STRAIGHT,
    DrawType.OPEN_ENDED_STRAIGHT_DRAW: CombinationType.STRAIGHT,
    DrawType.FLUSH_DRAW: CombinationType.FLUSH,
    DrawType.STRAIGHT_FLUSH_DRAW: CombinationType.STRAIGHT,
}


@dataclass(frozen=True)
class Draw:
    """A four-card draw found in a hand.

    Attributes:
        draw_type: The kind of draw
        held: The cards making up the draw, ascending
        outs: Number of unseen cards that complete the draw
    """

    draw_type: DrawType
    held: Tuple[Card, ...] = ()
    outs: int = 0


NO_DRAW = Draw(draw_type=DrawType.NONE)


def straight_completions(ranks: Iterable[Rank]) -> List[Rank]:
    """Ranks that turn four distinct ranks into a straight.

    Args:
        ranks: Ranks of the held cards

    Returns:
        Ascending list of completing ranks (empty unless there are
        exactly four distinct ranks)
    """
    held = set(ranks)
    if len(held) != DRAW_SIZE:
        return []
    return [rank for rank in Rank if rank not in held and straight_top(held | {rank}) is not None]


def classify_draw(cards: Iterable[Card]) -> DrawType:
    """Classify exactly four cards as a draw."""
    cards = list(cards)
    if len(cards) != DRAW_SIZE:
        return DrawType.NONE

    suited = len({card.suit for card in cards}) == 1
    completions = straight_completions(card.rank for card in cards)

    if suited and completions:
        return DrawType.STRAIGHT_FLUSH_DRAW
    if suited:
        return DrawType.FLUSH_DRAW
    if len(completions) >= 2:
        return DrawType.OPEN_ENDED_STRAIGHT_DRAW
    if completions:
        return DrawType.GUTSHOT_STRAIGHT_DRAW
    return DrawType.NONE


def count_outs(
    held: Iterable[Card],
    target: CombinationType,
    seen: Iterable[Card] = (),
) -> int:
    """Count unseen cards that bring the held cards up to ``target``.

    Args:
        held: Cards kept for the draw
        target: Weakest combination that counts as a hit
        seen: Other cards known not to be in the deck (e.g. discards)

    Returns:
        Number of completing cards among those not held or seen
    """
    held = list(held)
    excluded = set(held) | set(seen)
    unseen = [card for card in create_standard_deck() if card not in excluded]

    hits = np.fromiter(
        (evaluate_cards(held + [card]).type >= target for card in unseen),
        dtype=bool,
        count=len(unseen),
    )
    return int(hits.sum())


def find_draws(cards: Iterable[Card]) -> Draw:
    """Find the strongest four-card draw among the given cards.

    Ties between draws of the same type go to the draw with more outs,
    then to the one holding the higher cards.

    Args:
        cards: Up to five distinct cards

    Returns:
        The best Draw, or NO_DRAW when no four cards form a draw
    """
    cards = sort_cards(cards)
    best = NO_DRAW
    best_key = (DrawType.NONE, 0, ())

    for subset in itertools.combinations(cards, DRAW_SIZE):
        draw_type = classify_draw(subset)
        if draw_type == DrawType.NONE:
            continue

        outs = count_outs(subset, DRAW_TARGETS[draw_type], seen=cards)
        key = (draw_type, outs, tuple(sort_cards(subset, reverse=True)))
        if key > best_key:
            best = Draw(draw_type=draw_type, held=subset, outs=outs)
            best_key = key

    return best


def _grouped_cards(cards: List[Card]) -> List[Card]:
    """Cards whose rank appears more than once."""
    rank_counts = np.bincount([int(card.rank) for card in cards], minlength=int(Rank.ACE) + 1)
    return [card for card in cards if rank_counts[card.rank] >= 2]


@dataclass(frozen=True)
class DrawCombination:
    """Exchange advice for a hand before the draw.

    Attributes:
        made: The combination the hand already makes
        draw_type: Best draw held (NONE when standing pat)
        outs: Unseen cards completing that draw
        hold: Cards to keep, ascending
        discard: Cards to exchange, ascending
    """

    made: Combination
    draw_type: DrawType = DrawType.NONE
    outs: int = 0
    hold: Tuple[Card, ...] = ()
    discard: Tuple[Card, ...] = ()

    @property
    def stands_pat(self) -> bool:
        """True when no card should be exchanged."""
        return not self.discard

    @classmethod
    def from_hand(cls, hand) -> "DrawCombination":
        """Advise on the cards currently held by ``hand``."""
        return advise_draw(hand.cards)


def advise_draw(cards: Iterable[Card]) -> DrawCombination:
    """Work out which cards to hold and which to exchange.

    Args:
        cards: Up to five distinct cards

    Returns:
        DrawCombination with the hold/discard split
    """
    cards = sort_cards(cards)
    made = evaluate_cards(cards)

    if made.type in STAND_PAT_TYPES:
        return DrawCombination(made=made, hold=tuple(cards))

    draw = find_draws(cards)

    if made.type in (CombinationType.THREE_OF_A_KIND, CombinationType.TWO_PAIR):
        hold = _grouped_cards(cards)
    elif draw.draw_type == DrawType.STRAIGHT_FLUSH_DRAW:
        hold = list(draw.held)
    elif made.type == CombinationType.PAIR:
        hold = _grouped_cards(cards)
    elif draw.draw_type in (DrawType.FLUSH_DRAW, DrawType.OPEN_ENDED_STRAIGHT_DRAW):
        hold = list(draw.held)
    else:
        high_cards = [card for card in reversed(cards) if card.rank >= HOLD_MIN_RANK]
        hold = sort_cards(high_cards[:MAX_HIGH_CARDS_HELD])

    held = set(hold)
    return DrawCombination(
        made=made,
        draw_type=draw.draw_type,
        outs=draw.outs,
        hold=tuple(hold),
        discard=tuple(card for card in cards if card not in held),
    )
