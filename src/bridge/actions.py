"""
Flat action space shared by agents and harnesses.

- 0..37  : calls, by bid code (P, D, R, 1C .. 7NT)
- 38..89 : cards, by card index (2C .. AS)

Masks are plain lists of bools, one per action.
"""
from __future__ import annotations

from typing import List

from .auction import Auction
from .bidding import NUM_CALLS, Bid
from .deck import CARDS_IN_DECK, Card
from .hand import Hand
from .play import Trick, legal_plays

NUM_CALL_ACTIONS: int = NUM_CALLS
NUM_CARD_ACTIONS: int = CARDS_IN_DECK
NUM_ACTIONS: int = NUM_CALL_ACTIONS + NUM_CARD_ACTIONS  # 38 + 52 = 90


def call_action(call: Bid) -> int:
    assert call.is_valid()
    return call.code


def card_action(card: Card) -> int:
    assert card.is_valid()
    return NUM_CALL_ACTIONS + card.index


def is_call_action(action: int) -> bool:
    return 0 <= action < NUM_CALL_ACTIONS


def action_to_bid(action: int) -> Bid:
    if not is_call_action(action):
        raise ValueError(f"Action {action} is not a call")
    return Bid(action)


def action_to_card(action: int) -> Card:
    if not NUM_CALL_ACTIONS <= action < NUM_ACTIONS:
        raise ValueError(f"Action {action} is not a card")
    return Card(action - NUM_CALL_ACTIONS)


def legal_action_mask_auction(auction: Auction) -> List[bool]:
    """Only call actions can be legal; all card actions are masked out."""
    mask = [False] * NUM_ACTIONS
    for call in auction.legal_calls():
        mask[call_action(call)] = True
    return mask


def legal_action_mask_play(hand: Hand, trick: Trick) -> List[bool]:
    mask = [False] * NUM_ACTIONS
    for card in legal_plays(hand, trick):
        mask[card_action(card)] = True
    return mask
