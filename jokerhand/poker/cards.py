from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

SUITS = ("S", "H", "D", "C")  # Spades, Hearts, Diamonds, Clubs
FACES = {"J": 11, "Q": 12, "K": 13, "A": 14}

JOKER_TOKEN = "Joker"


@dataclass(frozen=True, slots=True)
class Rank:
    number: int  # 2..14
    suit: str  # one of SUITS

    def sort_key(self) -> Tuple[int, int]:
        return (self.number, SUITS.index(self.suit))

    def __lt__(self, other: "Rank") -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.suit}-{self.number}"


@dataclass(frozen=True, slots=True)
class Wildcard:
    def __str__(self) -> str:
        return JOKER_TOKEN


JOKER = Wildcard()

Card = Union[Rank, Wildcard]


@dataclass(frozen=True, slots=True)
class WildcardHand:
    ranks: Tuple[Rank, ...]  # 4 cards, ascending

    @property
    def cards(self) -> Iterator[Card]:
        yield from self.ranks
        yield JOKER


@dataclass(frozen=True, slots=True)
class PlainHand:
    ranks: Tuple[Rank, ...]  # 5 cards, ascending

    @property
    def cards(self) -> Iterator[Card]:
        yield from self.ranks


Hand = Union[WildcardHand, PlainHand]


def hand_str(hand: Hand) -> str:
    return " ".join(str(c) for c in hand.cards)
