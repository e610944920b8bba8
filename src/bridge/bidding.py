"""
Calls of the auction: pass, double, redouble, or a level/strain bid.
Encoded as one integer so that P < X < XX < 1C < 1D < 1H < 1S < 1NT < 2C ... < 7NT.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from .deck import Suit, SUIT_CHARS, char_to_suit
from .seats import Position


class Strain(IntEnum):
    """Trump regime of a bid: one of the suits, or notrump above them."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3
    NOTRUMP = 4

    @classmethod
    def from_suit(cls, suit: Suit) -> "Strain":
        return cls(int(suit))

    def suit(self) -> Optional[Suit]:
        if self == Strain.NOTRUMP:
            return None
        return Suit(int(self))

    def to_text(self) -> str:
        if self == Strain.NOTRUMP:
            return "NT"
        return SUIT_CHARS[self]


MAX_LEVEL = 7
STRAINS_PER_LEVEL = 5

PASS_CODE = 0
DOUBLE_CODE = 1
REDOUBLE_CODE = 2
FIRST_BID_CODE = 3  # 1C
INVALID_CODE = -1
MAX_CODE = (MAX_LEVEL - 1) * STRAINS_PER_LEVEL + FIRST_BID_CODE + Strain.NOTRUMP  # 7NT = 37
NUM_CALLS = MAX_CODE + 1


@dataclass(frozen=True, order=True)
class Bid:
    """
    One call plus the seat that made it. Ordering is by code, then bidder;
    equality requires both to match.
    """

    code: int = INVALID_CODE
    bidder: Position = Position.SOUTH

    # ---- construction ----

    @classmethod
    def pass_(cls) -> "Bid":
        return cls(PASS_CODE)

    @classmethod
    def double(cls) -> "Bid":
        return cls(DOUBLE_CODE)

    @classmethod
    def redouble(cls) -> "Bid":
        return cls(REDOUBLE_CODE)

    @classmethod
    def level_bid(cls, level: int, strain: Strain) -> "Bid":
        if not 1 <= level <= MAX_LEVEL:
            raise ValueError(f"Bid level must be 1..{MAX_LEVEL}, got {level}")
        return cls((level - 1) * STRAINS_PER_LEVEL + FIRST_BID_CODE + int(strain))

    @classmethod
    def from_text(cls, text: str) -> Optional["Bid"]:
        """
        Parse "P", "D", "R", "1C" .. "7S", "1NT" .. "7NT".
        Returns None for anything else.
        """
        if text == "P":
            return cls.pass_()
        if text == "D":
            return cls.double()
        if text == "R":
            return cls.redouble()
        if len(text) < 2 or text[0] not in "1234567":
            return None
        level = int(text[0])
        rest = text[1:]
        if rest == "NT":
            return cls.level_bid(level, Strain.NOTRUMP)
        suit = char_to_suit(rest)
        if suit is None:
            return None
        return cls.level_bid(level, Strain.from_suit(suit))

    def with_bidder(self, bidder: Position) -> "Bid":
        return replace(self, bidder=bidder)

    # ---- queries ----

    def is_valid(self) -> bool:
        return PASS_CODE <= self.code <= MAX_CODE

    def is_call(self) -> bool:
        """True for a level/strain bid (not pass, double or redouble)."""
        return self.code >= FIRST_BID_CODE

    def is_pass(self) -> bool:
        return self.code == PASS_CODE

    def is_double(self) -> bool:
        return self.code == DOUBLE_CODE

    def is_redouble(self) -> bool:
        return self.code == REDOUBLE_CODE

    def bid_size(self) -> Optional[int]:
        """Level 1..7, or None for pass/double/redouble/unset."""
        if not self.is_call():
            return None
        return (self.code - FIRST_BID_CODE) // STRAINS_PER_LEVEL + 1

    def bid_strain(self) -> Optional[Strain]:
        if not self.is_call():
            return None
        return Strain((self.code - FIRST_BID_CODE) % STRAINS_PER_LEVEL)

    def bid_suit(self) -> Optional[Suit]:
        """Trump suit of the bid; None for notrump and non-bids."""
        strain = self.bid_strain()
        return strain.suit() if strain is not None else None

    def is_notrump(self) -> bool:
        return self.bid_strain() == Strain.NOTRUMP

    # ---- formatting ----

    def to_text(self) -> str:
        if not self.is_valid():
            raise ValueError("Cannot format an unset bid")
        if self.is_pass():
            return "P"
        if self.is_double():
            return "D"
        if self.is_redouble():
            return "R"
        strain = self.bid_strain()
        assert strain is not None
        return f"{self.bid_size()}{strain.to_text()}"

    def to_padded(self) -> str:
        """Text left-justified to 3 columns, for auction tables."""
        return self.to_text().ljust(3)

    def __str__(self) -> str:
        return self.to_text() if self.is_valid() else "INV"


def make_bid(text: str) -> Bid:
    """Like Bid.from_text but raises ValueError on bad input."""
    bid = Bid.from_text(text)
    if bid is None:
        raise ValueError(f"Not a call: {text!r}")
    return bid


def all_calls() -> list[Bid]:
    """Every valid call in ascending order (P, D, R, 1C .. 7NT)."""
    return [Bid(code) for code in range(NUM_CALLS)]
