"""
Bridge deck: 52 cards, 4 suits x 13 ranks.
A card is identified by index = suit * 13 + rank (rank 0 = deuce .. 12 = ace).
High-card points: A=4, K=3, Q=2, J=1 (40 per deck).
"""
from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Optional


class Suit(IntEnum):
    """Suits in ascending bridge rank."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


CARDS_IN_SUIT = 13
CARDS_IN_DECK = 52

SUIT_CHARS = "CDHS"
RANK_CHARS = "23456789TJQKA"

RANK_TEN = 8
RANK_JACK = 9
RANK_ACE = 12

# Any index >= CARDS_IN_DECK is not a card.
INVALID_CARD_INDEX = CARDS_IN_DECK


def suit_char(s: Suit) -> str:
    return SUIT_CHARS[s]


def char_to_suit(c: str) -> Optional[Suit]:
    pos = SUIT_CHARS.find(c)
    if len(c) != 1 or pos < 0:
        return None
    return Suit(pos)


def _rank_from_token(token: str) -> Optional[int]:
    if token == "10":
        return RANK_TEN
    if len(token) != 1:
        return None
    pos = RANK_CHARS.find(token)
    return pos if pos >= 0 else None


@total_ordering
class Card:
    """
    A single card. The identity (index) never changes; the played flag is
    mutable and is ignored by ==, < and hash, so a played 7H still equals 7H.
    """

    __slots__ = ("_index", "_played")

    def __init__(self, index: int, played: bool = False) -> None:
        assert index >= 0
        self._index = index
        self._played = played

    @classmethod
    def from_suit_rank(cls, suit: Suit, rank: int) -> "Card":
        assert 0 <= rank < CARDS_IN_SUIT
        return cls(int(suit) * CARDS_IN_SUIT + rank)

    @classmethod
    def from_text(cls, text: str) -> Optional["Card"]:
        """
        Parse "7H", "TS", "10S", "AC". Returns None when the rank or suit
        token is not recognised.
        """
        if len(text) < 2:
            return None
        rank = _rank_from_token(text[:-1])
        suit = char_to_suit(text[-1])
        if rank is None or suit is None:
            return None
        return cls.from_suit_rank(suit, rank)

    @property
    def index(self) -> int:
        return self._index

    def is_valid(self) -> bool:
        return self._index < CARDS_IN_DECK

    @property
    def suit(self) -> Suit:
        assert self.is_valid()
        return Suit(self._index // CARDS_IN_SUIT)

    @property
    def rank(self) -> int:
        assert self.is_valid()
        return self._index % CARDS_IN_SUIT

    def point_count(self) -> int:
        """High-card points: A=4, K=3, Q=2, J=1, others 0."""
        return max(self.rank - (RANK_JACK - 1), 0)

    def has_played(self) -> bool:
        return self._played

    def mark_played(self, played: bool = True) -> None:
        self._played = played

    def rank_text(self, use10: bool = True) -> str:
        if use10 and self.rank == RANK_TEN:
            return "10"
        return RANK_CHARS[self.rank]

    def to_text(self, use10: bool = True) -> str:
        """Rank then suit, e.g. "10H" (or "TH" with use10=False)."""
        return self.rank_text(use10) + suit_char(self.suit)

    def to_link(self) -> str:
        """Suit then rank as used in LIN links, e.g. "HT"."""
        return suit_char(self.suit) + self.rank_text(use10=False)

    def copy(self) -> "Card":
        return Card(self._index, self._played)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._index == other._index

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._index < other._index

    def __hash__(self) -> int:
        return hash(self._index)

    def __str__(self) -> str:
        if not self.is_valid():
            return "??"
        return self.to_text()

    def __repr__(self) -> str:
        if self._played:
            return f"{self}*"
        return str(self)


def make_card(text: str) -> Card:
    """Like Card.from_text but raises ValueError on bad input."""
    card = Card.from_text(text)
    if card is None:
        raise ValueError(f"Not a card: {text!r}")
    return card


def make_deck_52() -> list[Card]:
    """Full deck in index order (2C .. AS)."""
    return [Card(i) for i in range(CARDS_IN_DECK)]


def cards_point_total(cards: list[Card]) -> int:
    """Total high-card points in a set of cards (40 for a full deck)."""
    return sum(c.point_count() for c in cards)
