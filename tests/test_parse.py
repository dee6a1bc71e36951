"""Tests for hand parsing.

Covers the card token grammar, the hand-level checks (count, duplicates,
Joker count) and the ordering of the parsed ranks.
"""

import pytest

from jokerhand.poker.cards import JOKER, PlainHand, Rank, WildcardHand, hand_str
from jokerhand.poker.parse import FormatError, parse_hand, parse_rank


class TestParseRank:

    @pytest.mark.parametrize(
        "tok, number, suit",
        [
            ("S-2", 2, "S"),
            ("H-10", 10, "H"),
            ("D-J", 11, "D"),
            ("C-Q", 12, "C"),
            ("S-K", 13, "S"),
            ("H-A", 14, "H"),
        ],
    )
    def test_valid(self, tok, number, suit):
        assert parse_rank(tok) == Rank(number=number, suit=suit)

    @pytest.mark.parametrize(
        "tok",
        ["X-2", "s-2", "S-1", "S-11", "S-15", "S-0", "S-B", "S-", "S2", "S-2-3", "S-+5", "S- 5", "Joker", ""],
    )
    def test_invalid(self, tok):
        with pytest.raises(FormatError):
            parse_rank(tok)

    def test_range_is_configurable(self):
        assert parse_rank("S-9", min_number=2, max_number=9).number == 9
        with pytest.raises(FormatError):
            parse_rank("S-10", min_number=2, max_number=9)
        with pytest.raises(FormatError):
            parse_rank("S-2", min_number=3, max_number=10)

    def test_faces_ignore_range(self):
        assert parse_rank("S-A", min_number=2, max_number=5).number == 14

    def test_renders_number(self):
        assert str(parse_rank("S-A")) == "S-14"


class TestParseHand:

    def test_plain_hand(self):
        hand = parse_hand("S-2 H-3 S-4 D-5 C-6")
        assert isinstance(hand, PlainHand)
        assert [str(r) for r in hand.ranks] == ["S-2", "H-3", "S-4", "D-5", "C-6"]

    def test_wildcard_hand(self):
        hand = parse_hand("S-2 H-3 S-4 D-5 Joker")
        assert isinstance(hand, WildcardHand)
        assert len(hand.ranks) == 4
        assert list(hand.cards)[-1] == JOKER

    def test_joker_position_does_not_matter(self):
        assert parse_hand("Joker S-3 H-4 S-5 D-6") == parse_hand("S-3 H-4 Joker S-5 D-6")

    def test_sorted_by_number_then_suit(self):
        hand = parse_hand("C-A C-2 D-2 H-2 S-2")
        assert [str(r) for r in hand.ranks] == ["S-2", "H-2", "D-2", "C-2", "C-14"]

    @pytest.mark.parametrize(
        "raw",
        [
            "S-K S-2 H-9 D-A C-10",
            "Joker C-J H-J D-5 S-3",
            "H-10 H-J H-Q H-K H-A",
        ],
    )
    def test_ranks_strictly_ascending(self, raw):
        ranks = parse_hand(raw).ranks
        assert all(a < b for a, b in zip(ranks, ranks[1:]))
        assert len(set(ranks)) == len(ranks)

    def test_surrounding_whitespace_is_stripped(self):
        assert parse_hand("  S-2 H-3 S-4 D-5 C-6\n") == parse_hand("S-2 H-3 S-4 D-5 C-6")

    def test_hand_str(self):
        assert hand_str(parse_hand("S-A H-3 Joker D-5 C-6")) == "H-3 D-5 C-6 S-14 Joker"

    @pytest.mark.parametrize(
        "raw",
        [
            "S-2 H-3 S-4 D-5",  # 4 tokens
            "S-2 H-3 S-4 D-5 C-6 D-7",  # 6 tokens
            "S-2 H-3 S-4 D-5 S-2",  # duplicate token
            "S-2 H-3 S-4 Joker Joker",  # two wildcards
            "S-2 H-3 S-4 D-5 X-6",  # bad suit
            "S-2 H-3 S-4 D-5 C-1",  # rank out of range
            "S-2 H-3 S-4 D-5 C-Z",  # rank out of grammar
            "S-2  H-3 S-4 D-5",  # doubled separator
            "S-2 H-3 S-4 D-5 joker",  # wildcard is case-sensitive
            "S-10 S-010 H-3 D-4 C-5",  # same card, different spelling
            "",
        ],
    )
    def test_rejects(self, raw):
        with pytest.raises(FormatError):
            parse_hand(raw)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hand("S-2")
