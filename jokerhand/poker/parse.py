from __future__ import annotations

from typing import List

from .cards import FACES, JOKER_TOKEN, SUITS, Hand, PlainHand, Rank, WildcardHand

HAND_SIZE = 5


class FormatError(ValueError):
    """Raised when a hand description cannot be parsed."""


def parse_rank(tok: str, min_number: int = 2, max_number: int = 10) -> Rank:
    """
    Token format like: S-A, H-10, D-J, C-2
    Suits: S,H,D,C
    Ranks: min_number..max_number (2-10 by default), J,Q,K,A
    """
    parts = tok.split("-")
    if len(parts) != 2:
        raise FormatError(f"Bad card {tok!r}")
    suit, r = parts

    if suit not in SUITS:
        raise FormatError(f"Bad suit in {tok}")

    if r in FACES:
        return Rank(number=FACES[r], suit=suit)

    # int() would also take "+5", " 5" and non-ASCII digits
    if not (r.isascii() and r.isdigit()):
        raise FormatError(f"Bad rank in {tok}")
    number = int(r)
    if number < min_number or number > max_number:
        raise FormatError(f"Bad rank in {tok}")
    return Rank(number=number, suit=suit)


def parse_hand(s: str, min_number: int = 2, max_number: int = 10) -> Hand:
    parts = s.strip().split(" ")
    if len(parts) != HAND_SIZE:
        raise FormatError(f"Hand must have exactly {HAND_SIZE} cards")
    if len(set(parts)) != HAND_SIZE:
        raise FormatError("Hand has duplicates")

    jokers = sum(1 for p in parts if p == JOKER_TOKEN)
    if jokers > 1:
        raise FormatError(f"Hand has more than one {JOKER_TOKEN}")

    ranks: List[Rank] = sorted(
        parse_rank(p, min_number=min_number, max_number=max_number)
        for p in parts
        if p != JOKER_TOKEN
    )
    # "S-10" and "S-010" are distinct tokens but the same card
    if len(set(ranks)) != len(ranks):
        raise FormatError("Hand has duplicates")

    if jokers == 1:
        if len(ranks) != HAND_SIZE - 1:
            raise FormatError(f"Expected {HAND_SIZE - 1} cards beside the {JOKER_TOKEN}")
        return WildcardHand(ranks=tuple(ranks))

    if len(ranks) != HAND_SIZE:
        raise FormatError(f"Expected {HAND_SIZE} cards")
    return PlainHand(ranks=tuple(ranks))
