# handview/common/cards.py

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Union

from .constants import (
    FACE_GLYPHS,
    MAX_NUMBER,
    MIN_NUMBER,
    RED_SUITS,
    SUIT_GLYPHS,
    TEN_GLYPH,
)


class Face(Enum):
    KING = "King"
    QUEEN = "Queen"
    JACK = "Jack"


class Suit(Enum):
    DIAMONDS = "Diamonds"
    CLUBS = "Clubs"
    HEARTS = "Hearts"
    SPADES = "Spades"

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS[self.value]


# A rank is either a number 1..10 (1 = Ace) or a face card.
Rank = Union[int, Face]

NUMBERS: List[int] = list(range(MIN_NUMBER, MAX_NUMBER + 1))
FACES: List[Face] = [Face.KING, Face.QUEEN, Face.JACK]
SUITS: List[Suit] = list(Suit)


def rank_name(rank: Rank) -> str:
    if isinstance(rank, Face):
        return rank.value
    if rank == 1:
        return "Ace"
    return str(rank)


@dataclass(frozen=True)
class Card:
    """
    One playing card.

    Numeric ranks must be in 1..10; that is the caller's job, nothing here
    checks it.
    """

    rank: Rank
    suit: Suit

    @property
    def suit_glyph(self) -> str:
        return self.suit.glyph

    @property
    def rank_glyph(self) -> str:
        """
        Single character for the card corner.
        10 comes back as TEN_GLYPH ("1"); the renderer turns it into "10".
        """
        if isinstance(self.rank, Face):
            return FACE_GLYPHS[self.rank.value]
        if self.rank == 10:
            return TEN_GLYPH
        if self.rank == 1:
            return "A"
        return str(self.rank)

    @property
    def is_red(self) -> bool:
        return self.suit.value in RED_SUITS

    @property
    def display_name(self) -> str:
        return f"{rank_name(self.rank)} of {self.suit.value}"

    def __str__(self) -> str:
        return self.display_name


class Hand:
    """
    Ordered pile of cards. Used for the full deck as well as dealt hands.

    Cards only ever move between hands (draw removes, draw_from appends), so
    a deck and everything dealt from it always add up to the same cards.
    """

    def __init__(self, cards: Optional[List[Card]] = None, *, rng: Optional[random.Random] = None):
        self.cards: List[Card] = list(cards) if cards else []
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def full_deck(cls, *, rng: Optional[random.Random] = None) -> "Hand":
        """All 52 cards: per suit, Ace..10 then King, Queen, Jack."""
        cards: List[Card] = []
        for suit in SUITS:
            cards.extend(Card(n, suit) for n in NUMBERS)
            cards.extend(Card(f, suit) for f in FACES)
        return cls(cards, rng=rng)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self.cards == other.cards

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"

    def draw(self) -> Optional[Card]:
        """Remove and return a uniformly random card, or None when empty."""
        n = len(self.cards)
        if n == 0:
            return None
        return self.cards.pop(self._rng.randrange(n))

    def draw_from(self, source: "Hand", count: int) -> int:
        """
        Move up to `count` cards from `source` into this hand, one draw at a
        time. Stops quietly when `source` runs out. Returns how many moved.
        """
        moved = 0
        for _ in range(count):
            card = source.draw()
            if card is None:
                break
            self.cards.append(card)
            moved += 1
        return moved

    def draw_hand(self, count: int) -> "Hand":
        hand = Hand(rng=self._rng)
        hand.draw_from(self, count)
        return hand


# Function-style aliases
def full_deck(*, rng: Optional[random.Random] = None) -> Hand:
    return Hand.full_deck(rng=rng)


def draw_one(hand: Hand) -> Optional[Card]:
    return hand.draw()


def transfer(count: int, source: Hand, dest: Hand) -> int:
    return dest.draw_from(source, count)


def deal(source: Hand, count: int) -> Hand:
    return source.draw_hand(count)
