from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .cards import JOKER, Card, Hand, PlainHand, Rank, WildcardHand

ROYAL_STRAIGHT_FLUSH = "RoyalStraightFlush"
STRAIGHT_FLUSH = "StraightFlush"
FOUR_OF_A_KIND = "FourOfAKind"
FULL_HOUSE = "FullHouse"
FLUSH = "Flush"
STRAIGHT = "Straight"
THREE_OF_A_KIND = "ThreeOfAKind"
TWO_PAIR = "TwoPair"
ONE_PAIR = "OnePair"
HIGH_CARDS = "HighCards"

# Highest first
CATEGORIES = (
    ROYAL_STRAIGHT_FLUSH,
    STRAIGHT_FLUSH,
    FOUR_OF_A_KIND,
    FULL_HOUSE,
    FLUSH,
    STRAIGHT,
    THREE_OF_A_KIND,
    TWO_PAIR,
    ONE_PAIR,
    HIGH_CARDS,
)

RUN = (0, 1, 2, 3, 4)
# Offsets from the lowest known card; the wildcard fills the missing slot.
GAP_RUNS: List[Tuple[int, ...]] = [
    (0, 1, 2, 3),  # wildcard below or above
    (0, 2, 3, 4),
    (0, 1, 3, 4),
    (0, 1, 2, 4),
]
ROYAL_LOW = 10


@dataclass(frozen=True)
class Judgment:
    category: str
    card: Card

    def __str__(self) -> str:
        return f"{self.category} ( strongest: {self.card} )"


Predicate = Callable[[Hand], Optional[Judgment]]


# ----------------------------
# Detection helpers
# ----------------------------

def _groups(ranks: Sequence[Rank]) -> Dict[int, List[Rank]]:
    """number -> cards, each list in ascending order"""
    out: Dict[int, List[Rank]] = defaultdict(list)
    for r in ranks:
        out[r.number].append(r)
    return out


def n_of_a_kind(ranks: Sequence[Rank], n: int, m: int) -> Optional[Rank]:
    """
    If exactly m numbers are held by exactly n cards each, return the first
    card of the highest such group. Otherwise None.
    """
    matched = [cards for number, cards in _groups(ranks).items() if len(cards) == n]
    if len(matched) != m:
        return None
    return max(matched, key=lambda cards: cards[0].number)[0]


def sequential(ranks: Sequence[Rank], offsets: Sequence[int]) -> Optional[Rank]:
    """Highest card if the numbers are exactly head + offsets."""
    head = ranks[0].number
    if [r.number for r in ranks] == [head + o for o in offsets]:
        return ranks[-1]
    return None


def same_suits(ranks: Sequence[Rank]) -> Optional[Rank]:
    s = ranks[0].suit
    if all(r.suit == s for r in ranks):
        return ranks[-1]
    return None


def _unknown_hand(hand: object) -> TypeError:
    return TypeError(f"not a hand: {hand!r}")


# ----------------------------
# Category predicates
# ----------------------------

def high_cards(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        return Judgment(HIGH_CARDS, JOKER)
    if isinstance(hand, PlainHand):
        return Judgment(HIGH_CARDS, hand.ranks[-1])
    raise _unknown_hand(hand)


def one_pair(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        hit = n_of_a_kind(hand.ranks, 1, 4)
        return Judgment(ONE_PAIR, JOKER) if hit else None
    if isinstance(hand, PlainHand):
        hit = n_of_a_kind(hand.ranks, 2, 1)
        return Judgment(ONE_PAIR, hit) if hit else None
    raise _unknown_hand(hand)


def two_pair(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        hit = n_of_a_kind(hand.ranks, 2, 1)
        return Judgment(TWO_PAIR, JOKER) if hit else None
    if isinstance(hand, PlainHand):
        hit = n_of_a_kind(hand.ranks, 2, 2)
        return Judgment(TWO_PAIR, hit) if hit else None
    raise _unknown_hand(hand)


def three_of_a_kind(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        hit = n_of_a_kind(hand.ranks, 2, 1)
        return Judgment(THREE_OF_A_KIND, JOKER) if hit else None
    if isinstance(hand, PlainHand):
        hit = n_of_a_kind(hand.ranks, 3, 1)
        if hit and not n_of_a_kind(hand.ranks, 2, 1):
            return Judgment(THREE_OF_A_KIND, hit)
        return None
    raise _unknown_hand(hand)


def straight(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        if any(sequential(hand.ranks, offsets) for offsets in GAP_RUNS):
            return Judgment(STRAIGHT, JOKER)
        return None
    if isinstance(hand, PlainHand):
        hit = sequential(hand.ranks, RUN)
        return Judgment(STRAIGHT, hit) if hit else None
    raise _unknown_hand(hand)


def flush(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        return Judgment(FLUSH, JOKER) if same_suits(hand.ranks) else None
    if isinstance(hand, PlainHand):
        hit = same_suits(hand.ranks)
        return Judgment(FLUSH, hit) if hit else None
    raise _unknown_hand(hand)


def full_house(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        hit = n_of_a_kind(hand.ranks, 2, 2)
        return Judgment(FULL_HOUSE, JOKER) if hit else None
    if isinstance(hand, PlainHand):
        high = n_of_a_kind(hand.ranks, 3, 1)
        low = n_of_a_kind(hand.ranks, 2, 1)
        if high and low:
            return Judgment(FULL_HOUSE, high)
        return None
    raise _unknown_hand(hand)


def four_of_a_kind(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        # four known cards of one number still count
        hit = n_of_a_kind(hand.ranks, 3, 1) or n_of_a_kind(hand.ranks, 4, 1)
        return Judgment(FOUR_OF_A_KIND, JOKER) if hit else None
    if isinstance(hand, PlainHand):
        hit = n_of_a_kind(hand.ranks, 4, 1)
        return Judgment(FOUR_OF_A_KIND, hit) if hit else None
    raise _unknown_hand(hand)


def _straight_flush_card(hand: Hand) -> Optional[Card]:
    if straight(hand) is None:
        return None
    res = flush(hand)
    return res.card if res else None


def straight_flush(hand: Hand) -> Optional[Judgment]:
    card = _straight_flush_card(hand)
    return Judgment(STRAIGHT_FLUSH, card) if card else None


def royal_straight_flush(hand: Hand) -> Optional[Judgment]:
    if isinstance(hand, WildcardHand):
        # wildcard is either the Ten or one of J..A
        lows = (ROYAL_LOW, ROYAL_LOW + 1)
    elif isinstance(hand, PlainHand):
        lows = (ROYAL_LOW,)
    else:
        raise _unknown_hand(hand)

    if hand.ranks[0].number not in lows:
        return None
    card = _straight_flush_card(hand)
    return Judgment(ROYAL_STRAIGHT_FLUSH, card) if card else None


PREDICATES: List[Predicate] = [
    royal_straight_flush,
    straight_flush,
    four_of_a_kind,
    full_house,
    flush,
    straight,
    three_of_a_kind,
    two_pair,
    one_pair,
    high_cards,
]


def matching(hand: Hand) -> List[Judgment]:
    """Every category the hand satisfies, highest first."""
    out: List[Judgment] = []
    for pred in PREDICATES:
        res = pred(hand)
        if res is not None:
            out.append(res)
    return out


def judge(hand: Hand) -> Judgment:
    for pred in PREDICATES:
        res = pred(hand)
        if res is not None:
            return res
    # high_cards matches every hand
    raise _unknown_hand(hand)
