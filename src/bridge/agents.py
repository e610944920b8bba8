"""
Baseline agent and the policy interface used by the trial harness.

The ``Policy`` protocol is the contract: ``act(legal_actions_mask) -> action``
over the flat action space of ``bridge.actions``.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Protocol

from .actions import (
    action_to_bid,
    action_to_card,
    call_action,
    legal_action_mask_auction,
    legal_action_mask_play,
)
from .auction import Auction
from .bidding import Bid
from .deal import Deal
from .deck import Card
from .seats import Position


class Policy(Protocol):
    """Decision policy working on legal-action masks."""

    def act(self, legal_actions_mask: Iterable[bool]) -> int:
        """Return an index where ``legal_actions_mask[i]`` is true."""


@dataclass
class RandomAgent:
    """
    Uniform choice among legal actions. With ``pass_bias`` > 0 the agent
    passes with that probability whenever passing is legal, so random
    auctions do not all climb to 7NT.

    Usage:
        agent = RandomAgent(seed=42, pass_bias=0.7)
        deal = play_one_deal(agent.choose_call, agent.choose_card)
    """

    seed: int | None = None
    pass_bias: float = 0.0

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def act(self, legal_actions_mask: Iterable[bool]) -> int:
        legal_indices: List[int] = [i for i, ok in enumerate(legal_actions_mask) if ok]
        if not legal_indices:
            raise ValueError("No legal actions available for RandomAgent")
        return self._rng.choice(legal_indices)

    def choose_call(self, auction: Auction, position: Position) -> Bid:
        mask = legal_action_mask_auction(auction)
        pass_idx = call_action(Bid.pass_())
        if mask[pass_idx] and self.pass_bias > 0 and self._rng.random() < self.pass_bias:
            return Bid.pass_()
        return action_to_bid(self.act(mask))

    def choose_card(self, deal: Deal, position: Position) -> Card:
        trick = deal.current_trick
        assert trick is not None
        return action_to_card(self.act(legal_action_mask_play(deal.hand(position), trick)))


__all__ = ["Policy", "RandomAgent"]
