"""
Auction state machine.
Calls are kept most-recent-first. The auction ends after three passes that
follow any fourth call: four passes throw the deal in, otherwise the last
level/strain bid is the contract and the player who made it declares.
"""
from __future__ import annotations

from collections import deque
from typing import Callable, Optional

from .bidding import Bid, all_calls
from .seats import Position, is_opponent, lefty


class Auction:
    """Call history for one deal plus the final contract once settled."""

    def __init__(self, dealer: Position = Position.SOUTH) -> None:
        self.reset(dealer)

    def reset(self, dealer: Position) -> None:
        """Clear all calls and start again with a new dealer."""
        self.dealer = dealer
        self._calls: deque[Bid] = deque()
        self.final_contract: Optional[Bid] = None
        self.declarer: Optional[Position] = None

    # ---- state ----

    @property
    def calls(self) -> tuple[Bid, ...]:
        """All calls, most recent first."""
        return tuple(self._calls)

    def history(self) -> list[Bid]:
        """All calls in the order they were made."""
        return list(reversed(self._calls))

    def __len__(self) -> int:
        return len(self._calls)

    def is_settled(self) -> bool:
        return self.final_contract is not None

    def is_passed_out(self) -> bool:
        return self.final_contract is not None and self.final_contract.is_pass()

    def has_three_passes(self) -> bool:
        # Needs more than three calls: P P P at the start is still open.
        if len(self._calls) <= 3:
            return False
        return all(self._calls[i].is_pass() for i in range(3))

    def potential_contract(self) -> Optional[Bid]:
        """Most recent level/strain bid, the one a double or redouble applies to."""
        for b in self._calls:
            if b.is_call():
                return b
        return None

    def _last_non_pass(self) -> Optional[Bid]:
        for b in self._calls:
            if not b.is_pass():
                return b
        return None

    def next_to_call(self) -> Position:
        if self.is_settled():
            raise RuntimeError("Auction is over; nobody is next to call")
        if self._calls:
            return lefty(self._calls[0].bidder)
        return self.dealer

    # ---- legality ----

    def is_legal(self, call: Bid) -> bool:
        """Whether `call` may be made now by the player next to call."""
        if not call.is_valid():
            raise ValueError("Cannot judge an unset bid")
        if self.is_settled():
            return False
        if call.is_pass():
            return True

        pc = self.potential_contract()
        if call.is_call():
            return pc is None or call.code > pc.code

        if pc is None:
            return False
        me = self.next_to_call()
        last = self._last_non_pass()
        if call.is_double():
            # Only the opponents' bid, and only if nobody doubled it since.
            if not is_opponent(pc.bidder, me):
                return False
            return last is not None and last.is_call()
        # Redouble: our bid, doubled by them, with nothing but passes after.
        if is_opponent(pc.bidder, me):
            return False
        return last is not None and last.is_double()

    def legal_calls(self) -> list[Bid]:
        if self.is_settled():
            return []
        return [c for c in all_calls() if self.is_legal(c)]

    # ---- transitions ----

    def make_call(self, call: Bid) -> bool:
        """
        Add a call for the player next to call. Returns False and leaves the
        history unchanged if the call is not legal.
        """
        if not self.is_legal(call):
            return False
        tagged = call.with_bidder(self.next_to_call())
        self._calls.appendleft(tagged)
        if tagged.is_pass() and self.has_three_passes():
            pc = self.potential_contract()
            if pc is None:
                self.final_contract = tagged
            else:
                self.final_contract = pc
                self.declarer = pc.bidder
        return True

    # ---- results ----

    def penalty(self) -> str:
        """"X" or "XX" if the final contract was doubled/redoubled, else ""."""
        if self.final_contract is None or self.is_passed_out():
            return ""
        last = self._last_non_pass()
        if last is not None and last.is_redouble():
            return "XX"
        if last is not None and last.is_double():
            return "X"
        return ""

    def contract_text(self) -> str:
        if self.final_contract is None:
            return "Auction in progress"
        if self.is_passed_out():
            return "Passed out"
        return f"{self.final_contract.to_text()}{self.penalty()} by {self.declarer}"

    def __repr__(self) -> str:
        calls = " ".join(b.to_text() for b in self.history())
        return f"Auction(dealer={self.dealer}, calls=[{calls}])"


def run_auction(
    dealer: Position,
    get_call: Callable[[Auction, Position], Bid],
) -> Auction:
    """
    Run an auction to completion. get_call(auction, position) returns the call
    for the player whose turn it is; an illegal call raises ValueError.
    """
    auction = Auction(dealer)
    while not auction.is_settled():
        player = auction.next_to_call()
        call = get_call(auction, player)
        if not auction.make_call(call):
            raise ValueError(f"Illegal call {call} by {player} after {auction.history()}")
    return auction
