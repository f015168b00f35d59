#!/usr/bin/env python3
"""Inspect a five-card poker hand from the command line.

Shows the stored card order, the combination, which category predicates
hold, and hold/discard advice for the draw. With --against, also compares
the hand with a second one.

Usage:
    python -m draw_poker.scripts.inspect_hand "AS KS QS JS 10S"
    python -m draw_poker.scripts.inspect_hand "2C 2D 7H 9S KC" --against "3C 3D 4H 5S 6C"
    python -m draw_poker.scripts.inspect_hand "8C 7C 6C 5C 4C" --order desc --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from draw_poker.engine import Hand, SortOrder
from draw_poker.rules import Card, Suit

console = Console()
logger = logging.getLogger(__name__)

# Hand predicates in category order
PREDICATES = [
    ("kicker", Hand.is_kicker),
    ("pair", Hand.is_pair),
    ("two pairs", Hand.is_two_pairs),
    ("three of kind", Hand.is_three_of_kind),
    ("straight", Hand.is_straight),
    ("flush", Hand.is_flush),
    ("full house", Hand.is_full_house),
    ("four of kind", Hand.is_four_of_kind),
    ("straight flush", Hand.is_straight_flush),
    ("royal flush", Hand.is_royal_flush),
]

COLOR_RED = "red1"
COLOR_BLACK = "cyan1"


@dataclass
class InspectConfig:
    """Inspection options."""

    cards: str
    against: Optional[str] = None
    order: str = SortOrder.ASC.value
    verbose: bool = False


def card_text(card: Card) -> Text:
    """Rich text for a card, coloured by suit."""
    red = card.suit in (Suit.HEARTS, Suit.DIAMONDS)
    return Text(str(card), style=f"bold {COLOR_RED if red else COLOR_BLACK}")


def cards_text(cards) -> Text:
    text = Text()
    for i, card in enumerate(cards):
        if i:
            text.append(" ")
        text.append_text(card_text(card))
    return text


def run_inspection(config: InspectConfig) -> Dict[str, Any]:
    """Evaluate the configured hand(s).

    Args:
        config: Inspection options

    Returns:
        Dict with the hand, its combination, predicates that hold, draw
        advice and, when comparing, the comparison outcome

    Raises:
        CardParseError: If a hand string cannot be parsed (a ValueError)
        ValueError: If the sort order is not recognised
    """
    hand = Hand.from_string(config.cards)
    logger.debug("Parsed hand %r from %r", hand, config.cards)

    advice = hand.draw_combination
    result: Dict[str, Any] = {
        "hand": hand,
        "combination": hand.combination,
        "predicates": [name for name, predicate in PREDICATES if predicate(hand)],
        "draw": advice,
        "comparison": None,
    }

    if config.against:
        other = Hand.from_string(config.against)
        logger.debug("Parsed opponent hand %r from %r", other, config.against)
        result["other"] = other
        result["comparison"] = hand.compare(other)

    # Ordering only affects display; ranking was read above
    hand.sort(config.order)
    result["cards"] = list(hand.cards)
    return result


def render(result: Dict[str, Any]) -> None:
    """Print an inspection result to the console."""
    hand: Hand = result["hand"]
    advice = result["draw"]

    table = Table(title="Hand", box=box.ROUNDED, show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")

    table.add_row("cards", cards_text(result["cards"]))
    table.add_row("size", f"{hand.size}/{Hand.MAX_HAND_SIZE}")
    table.add_row("combination", str(result["combination"]))
    table.add_row("predicates", ", ".join(result["predicates"]))
    table.add_row("draw", f"{advice.draw_type.label} ({advice.outs} outs)")
    table.add_row("hold", cards_text(advice.hold))
    table.add_row("discard", cards_text(advice.discard) if advice.discard else Text("-"))

    if result["comparison"] is not None:
        comparison = result["comparison"]
        other: Hand = result["other"]
        if comparison > 0:
            outcome = Text("wins", style="bold green")
        elif comparison < 0:
            outcome = Text("loses", style="bold red")
        else:
            outcome = Text("ties", style="bold yellow")
        table.add_row("against", cards_text(other.cards))
        table.add_row("", Text(f"{other.combination} -> ").append_text(outcome))

    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect a five-card poker hand")
    parser.add_argument(
        "cards",
        help='Space-separated cards, e.g. "AS KS QS JS 10S"',
    )
    parser.add_argument(
        "--against",
        default=None,
        help="Second hand to compare with",
    )
    parser.add_argument(
        "--order",
        default=SortOrder.ASC.value,
        help="Display order: asc or desc (default: asc)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = InspectConfig(
        cards=args.cards,
        against=args.against,
        order=args.order,
        verbose=args.verbose,
    )

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_inspection(config)
    except ValueError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        return 2

    render(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
