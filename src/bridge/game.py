"""
Single deal orchestration: deal -> auction -> 13 tricks.
Callers supply the decisions; the engine only checks them.
"""
from __future__ import annotations

import random
from typing import Callable

from .auction import Auction, run_auction
from .bidding import Bid
from .deal import Deal, Vulnerability
from .deck import Card
from .seats import Position


def run_play(deal: Deal, get_play: Callable[[Deal, Position], Card]) -> Deal:
    """
    Play out all tricks of a deal whose auction is finished.
    get_play(deal, position) returns the card; an illegal card raises ValueError.
    """
    deal.start_play()
    while not deal.is_complete():
        player = deal.next_to_play()
        card = get_play(deal, player)
        if not deal.play_card(card):
            raise ValueError(f"Illegal play {card} by {player}")
    return deal


def play_one_deal(
    get_call: Callable[[Auction, Position], Bid],
    get_play: Callable[[Deal, Position], Card],
    dealer: Position = Position.SOUTH,
    rng: random.Random | None = None,
    vulnerability: Vulnerability = Vulnerability.NEITHER,
) -> Deal:
    """
    Deal random hands, run the auction, then play the hand unless it was
    passed out. Returns the finished Deal.
    """
    deal = Deal.random(dealer=dealer, rng=rng, vulnerability=vulnerability)
    deal.auction = run_auction(dealer, get_call)
    if deal.auction.is_passed_out():
        return deal
    return run_play(deal, get_play)
