"""Tests for draw detection and exchange advice.

Test coverage:
- Straight completion ranks, including ace-high and wheel draws
- Draw classification: gutshot, open-ended, flush, straight flush
- Exact out counting against unseen cards
- Hold/discard priority between made hands and draws
"""

import pytest

from draw_poker.rules import (
    Rank,
    CombinationType,
    DrawType,
    NO_DRAW,
    advise_draw,
    classify_draw,
    count_outs,
    find_draws,
    make_cards_from_string,
    straight_completions,
)


def cards(s: str):
    return make_cards_from_string(s)


class TestStraightCompletions:
    def test_open_ended(self):
        ranks = [Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT]
        assert straight_completions(ranks) == [Rank.FOUR, Rank.NINE]

    def test_inside(self):
        ranks = [Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.NINE]
        assert straight_completions(ranks) == [Rank.EIGHT]

    def test_ace_high_is_one_ended(self):
        ranks = [Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE]
        assert straight_completions(ranks) == [Rank.TEN]

    def test_wheel_draw(self):
        ranks = [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR]
        assert straight_completions(ranks) == [Rank.FIVE]

    def test_paired_ranks_cannot_complete(self):
        assert straight_completions([Rank.FIVE, Rank.FIVE, Rank.SIX, Rank.SEVEN]) == []


class TestClassifyDraw:
    @pytest.mark.parametrize(
        "held,expected",
        [
            ("5C 6D 7H 9S", DrawType.GUTSHOT_STRAIGHT_DRAW),
            ("5C 6D 7H 8S", DrawType.OPEN_ENDED_STRAIGHT_DRAW),
            ("2H 5H 9H JH", DrawType.FLUSH_DRAW),
            ("5H 6H 7H 8H", DrawType.STRAIGHT_FLUSH_DRAW),
            ("2C 5D 9H KS", DrawType.NONE),
        ],
    )
    def test_classify(self, held, expected):
        assert classify_draw(cards(held)) is expected

    def test_requires_four_cards(self):
        assert classify_draw(cards("5C 6D 7H")) is DrawType.NONE


class TestCountOuts:
    def test_open_ended_has_eight_outs(self):
        assert count_outs(cards("5C 6D 7H 8S"), CombinationType.STRAIGHT) == 8

    def test_gutshot_has_four_outs(self):
        assert count_outs(cards("5C 6D 7H 9S"), CombinationType.STRAIGHT) == 4

    def test_flush_draw_has_nine_outs(self):
        assert count_outs(cards("2H 5H 9H JH"), CombinationType.FLUSH) == 9

    def test_straight_flush_draw_has_fifteen_outs(self):
        assert count_outs(cards("5H 6H 7H 8H"), CombinationType.STRAIGHT) == 15

    def test_seen_cards_are_excluded(self):
        seen = cards("4C 4D")
        assert count_outs(cards("5C 6D 7H 8S"), CombinationType.STRAIGHT, seen=seen) == 6


class TestFindDraws:
    def test_no_draw_below_four_cards(self):
        assert find_draws(cards("5H 6H 7H")) == NO_DRAW

    def test_flush_draw_in_five_cards(self):
        draw = find_draws(cards("2H 5H 9H JH KC"))
        assert draw.draw_type is DrawType.FLUSH_DRAW
        assert draw.held == tuple(cards("2H 5H 9H JH"))
        assert draw.outs == 9

    def test_prefers_stronger_draw(self):
        draw = find_draws(cards("5H 6H 7H 8H 9C"))
        assert draw.draw_type is DrawType.STRAIGHT_FLUSH_DRAW


class TestAdviseDraw:
    """Hold rules: made hands, then draws, then high cards."""

    def test_made_straight_stands_pat(self):
        advice = advise_draw(cards("5C 6D 7H 8S 9C"))
        assert advice.made.type is CombinationType.STRAIGHT
        assert advice.stands_pat
        assert advice.draw_type is DrawType.NONE
        assert advice.outs == 0
        assert len(advice.hold) == 5

    def test_trips_hold_the_group(self):
        advice = advise_draw(cards("2C 2D 2H JS KC"))
        assert advice.hold == tuple(cards("2C 2D 2H"))
        assert advice.discard == tuple(cards("JS KC"))

    def test_two_pair_holds_both_pairs(self):
        advice = advise_draw(cards("2C 2D 9H 9S KC"))
        assert advice.hold == tuple(cards("2C 2D 9H 9S"))
        assert advice.discard == tuple(cards("KC"))

    def test_straight_flush_draw_beats_pair(self):
        advice = advise_draw(cards("5H 6H 7H 8H 8C"))
        assert advice.made.type is CombinationType.PAIR
        assert advice.draw_type is DrawType.STRAIGHT_FLUSH_DRAW
        assert advice.hold == tuple(cards("5H 6H 7H 8H"))
        assert advice.discard == tuple(cards("8C"))

    def test_pair_beats_flush_draw(self):
        advice = advise_draw(cards("2H 5H 9H JH 2C"))
        assert advice.draw_type is DrawType.FLUSH_DRAW
        assert advice.hold == tuple(cards("2C 2H"))
        assert advice.discard == tuple(cards("5H 9H JH"))

    def test_flush_draw_holds_four(self):
        advice = advise_draw(cards("2H 5H 9H JH KC"))
        assert advice.hold == tuple(cards("2H 5H 9H JH"))
        assert advice.discard == tuple(cards("KC"))
        assert advice.outs == 9

    def test_open_ended_holds_four(self):
        advice = advise_draw(cards("5C 6D 7H 8S KC"))
        assert advice.draw_type is DrawType.OPEN_ENDED_STRAIGHT_DRAW
        assert advice.hold == tuple(cards("5C 6D 7H 8S"))
        assert advice.outs == 8

    def test_gutshot_falls_back_to_high_cards(self):
        advice = advise_draw(cards("5C 6D 7H 9S KC"))
        assert advice.draw_type is DrawType.GUTSHOT_STRAIGHT_DRAW
        assert advice.outs == 4
        assert advice.hold == tuple(cards("KC"))

    def test_nothing_holds_two_high_cards(self):
        advice = advise_draw(cards("2C 5D 9H JS KC"))
        assert advice.draw_type is DrawType.NONE
        assert advice.hold == tuple(cards("JS KC"))
        assert advice.discard == tuple(cards("2C 5D 9H"))

    def test_at_most_two_high_cards(self):
        advice = advise_draw(cards("2C JD QH KS AC"))
        assert advice.hold == tuple(cards("KS AC"))

    def test_low_cards_discard_everything(self):
        advice = advise_draw(cards("2C 4D 7H 9S 10C"))
        assert advice.hold == ()
        assert len(advice.discard) == 5

    def test_hold_and_discard_partition_the_hand(self):
        hand = cards("2H 5H 9H JH 2C")
        advice = advise_draw(hand)
        assert sorted(advice.hold + advice.discard) == sorted(hand)
