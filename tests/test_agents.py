"""Tests for the flat action space and RandomAgent."""
import random

import pytest

from bridge.actions import (
    NUM_ACTIONS,
    NUM_CALL_ACTIONS,
    action_to_bid,
    action_to_card,
    card_action,
    call_action,
    legal_action_mask_auction,
    legal_action_mask_play,
)
from bridge.agents import RandomAgent
from bridge.auction import Auction
from bridge.bidding import make_bid
from bridge.deal import Deal
from bridge.deck import make_card
from bridge.play import legal_plays
from bridge.seats import Position


def test_action_space_layout():
    assert NUM_CALL_ACTIONS == 38
    assert NUM_ACTIONS == 90
    assert call_action(make_bid("7NT")) == 37
    assert card_action(make_card("2C")) == 38
    assert card_action(make_card("AS")) == 89
    assert action_to_bid(7) == make_bid("1NT")
    assert action_to_card(89) == make_card("AS")
    with pytest.raises(ValueError):
        action_to_bid(38)
    with pytest.raises(ValueError):
        action_to_card(10)


def test_auction_mask():
    mask = legal_action_mask_auction(Auction(Position.SOUTH))
    assert len(mask) == NUM_ACTIONS
    assert mask[0]
    assert not mask[1] and not mask[2]
    assert all(mask[3:NUM_CALL_ACTIONS])
    assert not any(mask[NUM_CALL_ACTIONS:])


def test_play_mask_matches_legal_plays():
    deal = Deal.random(rng=random.Random(4))
    for text in ("1NT", "P", "P", "P"):
        deal.auction.make_call(make_bid(text))
    trick = deal.start_play()
    deal.play_card(deal.legal_cards(Position.WEST)[0])
    hand = deal.hand(Position.NORTH)
    mask = legal_action_mask_play(hand, trick)
    chosen = [action_to_card(i) for i, ok in enumerate(mask) if ok]
    assert chosen == legal_plays(hand, trick)


def test_random_agent_only_picks_legal_actions():
    agent = RandomAgent(seed=0)
    mask = [False] * NUM_ACTIONS
    mask[5] = mask[40] = True
    for _ in range(20):
        assert agent.act(mask) in (5, 40)
    with pytest.raises(ValueError):
        agent.act([False] * NUM_ACTIONS)


def test_full_pass_bias_passes_out():
    agent = RandomAgent(seed=0, pass_bias=1.0)
    auction = Auction(Position.NORTH)
    while not auction.is_settled():
        assert auction.make_call(agent.choose_call(auction, auction.next_to_call()))
    assert auction.is_passed_out()
