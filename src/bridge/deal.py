"""
One dealt board: four hands, the auction and the tricks played so far.
Hands are indexed by Position (0=South, 1=West, 2=North, 3=East).
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Sequence

from .auction import Auction
from .deck import CARDS_IN_DECK, Card, make_deck_52
from .hand import CARDS_IN_HAND, Hand
from .play import Trick, legal_plays
from .seats import NUM_PLAYERS, Position, is_opponent


class Vulnerability(Enum):
    NEITHER = "neither"
    EASTWEST = "eastwest"
    NORTHSOUTH = "northsouth"
    BOTH = "both"

    def link_code(self) -> str:
        """Code for the "sv" field of a LIN link."""
        return {
            Vulnerability.NEITHER: "",
            Vulnerability.EASTWEST: "e",
            Vulnerability.NORTHSOUTH: "n",
            Vulnerability.BOTH: "b",
        }[self]


def deal_hands(rng: random.Random | None = None) -> tuple[list[Card], list[Card], list[Card], list[Card]]:
    """
    Shuffle the 52 cards and split them 13/13/13/13 in seat order
    (South, West, North, East).
    """
    if rng is None:
        rng = random.Random()
    deck = make_deck_52()
    rng.shuffle(deck)
    hands = [deck[i * CARDS_IN_HAND:(i + 1) * CARDS_IN_HAND] for i in range(NUM_PLAYERS)]
    return (hands[0], hands[1], hands[2], hands[3])


class Deal:
    """Aggregate for one board. Adds no rules of its own beyond sequencing."""

    def __init__(
        self,
        hands: Sequence[Sequence[Card] | Hand],
        dealer: Position = Position.SOUTH,
        vulnerability: Vulnerability = Vulnerability.NEITHER,
    ) -> None:
        if len(hands) != NUM_PLAYERS:
            raise ValueError(f"A deal needs {NUM_PLAYERS} hands")
        self.hands: list[Hand] = [Hand(h) for h in hands]
        if len({c for h in self.hands for c in h}) != CARDS_IN_DECK:
            raise ValueError("Hands must hold 52 distinct cards")
        self.auction = Auction(dealer)
        self.vulnerability = vulnerability
        self.tricks: list[Trick] = []
        self.current_trick: Optional[Trick] = None

    @classmethod
    def random(
        cls,
        dealer: Position = Position.SOUTH,
        rng: random.Random | None = None,
        vulnerability: Vulnerability = Vulnerability.NEITHER,
    ) -> "Deal":
        return cls(deal_hands(rng), dealer=dealer, vulnerability=vulnerability)

    @property
    def dealer(self) -> Position:
        return self.auction.dealer

    def hand(self, position: Position) -> Hand:
        return self.hands[position]

    def point_counts(self) -> tuple[int, int, int, int]:
        s, w, n, e = (h.point_count() for h in self.hands)
        return (s, w, n, e)

    # ---- play ----

    def start_play(self) -> Trick:
        """Open the first trick once the auction has produced a contract."""
        if not self.auction.is_settled():
            raise RuntimeError("Auction is not finished")
        if self.auction.is_passed_out():
            raise RuntimeError("Deal was passed out; there is nothing to play")
        if self.current_trick is not None or self.tricks:
            raise RuntimeError("Play has already started")
        self.current_trick = Trick.from_auction(self.auction)
        return self.current_trick

    def next_to_play(self) -> Position:
        if self.current_trick is None:
            raise RuntimeError("No trick in progress")
        return self.current_trick.next_to_play()

    def legal_cards(self, position: Position) -> list[Card]:
        if self.current_trick is None or self.current_trick.next_to_play() != position:
            return []
        return legal_plays(self.hands[position], self.current_trick)

    def play_card(self, card: Card) -> bool:
        """
        Play `card` for the seat whose turn it is. Returns False and changes
        nothing when that seat may not play it.
        """
        trick = self.current_trick
        if trick is None:
            raise RuntimeError("No trick in progress")
        player = trick.next_to_play()
        if card not in legal_plays(self.hands[player], trick):
            return False
        self.hands[player].play_card(card)
        trick.play(card)
        if trick.is_closed():
            self.tricks.append(trick)
            if len(self.tricks) < CARDS_IN_HAND:
                self.current_trick = Trick(trick.trumps, trick.winner())
            else:
                self.current_trick = None
        return True

    def add_trick(self, trick: Trick) -> None:
        """
        Record a trick played outside this object: every seat's card is
        marked played in its hand.
        """
        if not trick.is_closed():
            raise ValueError("Only a completed trick can be added")
        if len(self.tricks) >= CARDS_IN_HAND:
            raise ValueError("All 13 tricks have been played")
        for p in Position:
            if not self.hands[p].holds(trick.card_played_by(p)):
                raise ValueError(f"{p} does not hold {trick.card_played_by(p)}")
        for p in Position:
            self.hands[p].play_card(trick.card_played_by(p))
        self.tricks.append(trick)

    def tricks_played(self) -> int:
        return len(self.tricks)

    def is_complete(self) -> bool:
        return len(self.tricks) == CARDS_IN_HAND

    def tricks_won_by(self, position: Position) -> int:
        """Tricks won by the side `position` sits on."""
        return sum(1 for t in self.tricks if not is_opponent(t.winner(), position))

    def declarer_tricks(self) -> Optional[int]:
        if self.auction.declarer is None:
            return None
        return self.tricks_won_by(self.auction.declarer)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deal):
            return NotImplemented
        return self.hands == other.hands and len(self.tricks) == len(other.tricks)
