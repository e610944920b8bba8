"""
Trick play: winner resolution under a trump regime, and follow-suit legality.
A trick is open until its fourth card; the first card fixes the led suit.
Highest card of the led suit wins unless a trump is played, in which case the
highest trump wins.
"""
from __future__ import annotations

from typing import Optional

from .auction import Auction
from .bidding import Strain
from .deck import Card, Suit
from .hand import Hand
from .seats import NUM_PLAYERS, Position, lefty, offset_position, position_diff


class Trick:
    """One round of up to four cards, tracking who is currently winning."""

    def __init__(self, trumps: Strain, leader: Position) -> None:
        self.trumps = trumps
        self.leader = leader
        self._cards: list[Card] = []
        self._won_by: Position = leader

    @classmethod
    def from_auction(cls, auction: Auction, leader: Optional[Position] = None) -> "Trick":
        """
        First trick of the play: trumps from the final contract, opening lead
        from declarer's left unless `leader` is given.
        """
        contract = auction.final_contract
        if contract is None or not contract.is_call() or auction.declarer is None:
            raise ValueError("Auction has no contract to play")
        strain = contract.bid_strain()
        assert strain is not None
        return cls(strain, leader if leader is not None else lefty(auction.declarer))

    # ---- state ----

    def cards_played(self) -> int:
        return len(self._cards)

    def players_to_go(self) -> int:
        return NUM_PLAYERS - len(self._cards)

    def is_closed(self) -> bool:
        return len(self._cards) == NUM_PLAYERS

    def led_suit(self) -> Optional[Suit]:
        if not self._cards:
            return None
        return self._cards[0].suit

    def next_to_play(self) -> Position:
        if self.is_closed():
            raise RuntimeError("Trick is complete")
        return Position((self.leader + len(self._cards)) % NUM_PLAYERS)

    def card_at(self, i: int) -> Card:
        """i-th card in play order (0 = the lead)."""
        return self._cards[i]

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def card_played_by(self, position: Position) -> Card:
        """Card the given seat contributed to this trick."""
        offset = position_diff(self.leader, position)
        if offset >= len(self._cards):
            raise ValueError(f"{position} has not played to this trick")
        return self._cards[offset]

    def winning_card(self) -> Card:
        if not self._cards:
            raise RuntimeError("No card has been played")
        return self._cards[position_diff(self.leader, self._won_by)]

    def winner(self) -> Position:
        if not self.is_closed():
            raise RuntimeError("Trick winner is not known until four cards are played")
        return self._won_by

    def current_winner(self) -> Position:
        """Seat holding the best card so far (the leader on an empty trick)."""
        return self._won_by

    # ---- resolution ----

    def _wins_without_trumps(self, card: Card, best: Card) -> bool:
        return card.suit == best.suit and card > best

    def card_will_win(self, card: Card) -> bool:
        """Whether `card` would beat the card currently winning the trick."""
        if not self._cards or self.is_closed():
            raise RuntimeError("Only a card played to an open, led trick can win it")
        best = self.winning_card()
        trump_suit = self.trumps.suit()
        if trump_suit is None or self._cards[0].suit == trump_suit:
            return self._wins_without_trumps(card, best)
        if card.suit == trump_suit:
            return best.suit != trump_suit or card > best
        if best.suit == trump_suit:
            return False
        return self._wins_without_trumps(card, best)

    # ---- transitions ----

    def lead(self, card: Card) -> None:
        if self._cards:
            raise RuntimeError("Trick has already been led")
        if not card.is_valid():
            raise ValueError("Cannot lead an invalid card")
        self._cards.append(card)
        self._won_by = self.leader

    def play(self, card: Card) -> None:
        """Add the next card (leading it if the trick is empty)."""
        if not self._cards:
            self.lead(card)
            return
        if self.is_closed():
            raise RuntimeError("Trick is complete")
        if not card.is_valid():
            raise ValueError("Cannot play an invalid card")
        if self.card_will_win(card):
            self._won_by = offset_position(self.leader, len(self._cards))
        self._cards.append(card)

    def to_link(self) -> str:
        return "".join(f"pc|{c.to_link()}|" for c in self._cards)

    def __repr__(self) -> str:
        played = " ".join(str(c) for c in self._cards)
        return f"Trick(trumps={self.trumps.to_text()}, leader={self.leader}, cards=[{played}])"


def card_is_valid_from_hand(hand: Hand, trick: Trick, index: int) -> bool:
    """
    Whether the card in slot `index` of `hand` may be played to `trick`:
    any unplayed card on the lead, otherwise follow suit when able.
    """
    card = hand[index]
    if card.has_played():
        return False
    if trick.is_closed():
        raise RuntimeError("Trick is complete")
    led = trick.led_suit()
    if led is None:
        return True
    return card.suit == led or hand.remaining_length(led) == 0


def legal_plays(hand: Hand, trick: Trick) -> list[Card]:
    """Cards of `hand` that may be played to `trick` right now."""
    return [hand[i] for i in range(len(hand)) if card_is_valid_from_hand(hand, trick, i)]
