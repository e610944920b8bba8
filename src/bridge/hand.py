"""
A player's 13 cards. Cards stay in their slot once played (flag set), so the
hand always has 13 slots; suit lengths count only the unplayed cards.
"""
from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator

from .deck import Card, Suit, make_card

CARDS_IN_HAND = 13


class Hand:
    """Sorted 13-card hand with per-suit remaining lengths."""

    __slots__ = ("_cards", "_suit_lengths")

    def __init__(self, cards: Iterable[Card]) -> None:
        # Own copies: the played flag is per-hand state.
        self._cards: list[Card] = sorted(c.copy() for c in cards)
        if len(self._cards) != CARDS_IN_HAND:
            raise ValueError(f"A hand needs {CARDS_IN_HAND} cards, got {len(self._cards)}")
        if len(set(self._cards)) != CARDS_IN_HAND:
            raise ValueError("Duplicate card in hand")
        if not all(c.is_valid() for c in self._cards):
            raise ValueError("Invalid card in hand")
        self._suit_lengths = [0, 0, 0, 0]
        self._set_suits()

    def _set_suits(self) -> None:
        for c in self._cards:
            c.mark_played(False)
            self._suit_lengths[c.suit] += 1

    @classmethod
    def from_text(cls, text: str) -> "Hand":
        """Build from whitespace-separated cards, e.g. "AS KS 2C ..."."""
        return cls(make_card(t) for t in text.split())

    def _find(self, card: Card) -> int:
        i = bisect_left(self._cards, card)
        if i < len(self._cards) and self._cards[i] == card:
            return i
        return -1

    def holds(self, card: Card) -> bool:
        """True if the card is in this hand and not yet played."""
        i = self._find(card)
        return i >= 0 and not self._cards[i].has_played()

    def play_card(self, card: Card) -> bool:
        """
        Mark card as played. Returns False (and changes nothing) when the
        card is not in the hand or was already played.
        """
        i = self._find(card)
        if i < 0 or self._cards[i].has_played():
            return False
        slot = self._cards[i]
        slot.mark_played()
        self._suit_lengths[slot.suit] -= 1
        return True

    def remaining_length(self, suit: Suit) -> int:
        return self._suit_lengths[suit]

    def suit_lengths(self) -> tuple[int, int, int, int]:
        """Remaining lengths as (clubs, diamonds, hearts, spades)."""
        s = self._suit_lengths
        return (s[0], s[1], s[2], s[3])

    def unplayed(self) -> list[Card]:
        return [c for c in self._cards if not c.has_played()]

    def cards_in_suit(self, suit: Suit) -> list[Card]:
        """All 13-slot cards of one suit, played or not, ascending."""
        return [c for c in self._cards if c.suit == suit]

    def point_count(self) -> int:
        """High-card points of the dealt hand (played cards included)."""
        return sum(c.point_count() for c in self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._suit_lengths == other._suit_lengths and self._cards == other._cards

    def __repr__(self) -> str:
        return "Hand(" + " ".join(repr(c) for c in self._cards) + ")"
