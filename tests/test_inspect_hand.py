"""Tests for the hand inspector script."""

import pytest

from draw_poker.engine import Hand
from draw_poker.rules import CombinationType, DrawType, make_cards_from_string
from draw_poker.scripts.inspect_hand import (
    InspectConfig,
    build_parser,
    main,
    run_inspection,
)


class TestRunInspection:
    def test_royal_flush(self):
        result = run_inspection(InspectConfig(cards="AS KS QS JS 10S"))
        assert result["combination"].type is CombinationType.STRAIGHT_FLUSH
        assert result["predicates"] == ["straight flush", "royal flush"]
        assert result["draw"].stands_pat
        assert result["comparison"] is None

    def test_cards_in_requested_order(self):
        result = run_inspection(InspectConfig(cards="4C 5C 6C 7C 8C", order="desc"))
        assert result["cards"] == make_cards_from_string("8C 7C 6C 5C 4C")

    def test_against(self):
        result = run_inspection(InspectConfig(cards="2C 2D 7H 9S KC", against="3C 3D 4H 5S 6C"))
        assert isinstance(result["other"], Hand)
        assert result["comparison"] < 0

    def test_draw_advice(self):
        result = run_inspection(InspectConfig(cards="2H 5H 9H JH KC"))
        assert result["draw"].draw_type is DrawType.FLUSH_DRAW
        assert result["draw"].outs == 9

    def test_parse_error_propagates(self):
        with pytest.raises(ValueError):
            run_inspection(InspectConfig(cards="AS ZZ"))


class TestMain:
    def test_parser_defaults(self):
        args = build_parser().parse_args(["AS KS"])
        assert args.order == "asc"
        assert args.against is None
        assert not args.verbose

    def test_main_success(self, capsys):
        assert main(["AS KS QS JS 10S", "--against", "2C 2D 7H 9S KC"]) == 0
        out = capsys.readouterr().out
        assert "Straight flush" in out

    def test_main_bad_cards(self, capsys):
        assert main(["AS ZZ"]) == 2
        assert "Error" in capsys.readouterr().out

    def test_main_bad_order(self):
        assert main(["AS KS", "--order", "sideways"]) == 2
