"""Tests for the auction state machine."""
import pytest

from bridge.auction import Auction, run_auction
from bridge.bidding import Bid, make_bid
from bridge.seats import Position


def _calls(auction: Auction, *texts: str) -> None:
    for t in texts:
        assert auction.make_call(make_bid(t)), f"{t} should be legal after {auction.history()}"


def test_basic_sequence_with_double_and_redouble():
    a = Auction(Position.EAST)
    _calls(a, "P", "P", "1S")
    assert not a.is_legal(make_bid("1H"))
    assert not a.is_legal(make_bid("1S"))
    _calls(a, "D", "R", "1NT")
    assert a.potential_contract() == make_bid("1NT").with_bidder(Position.SOUTH)
    assert not a.is_settled()


@pytest.mark.parametrize("dealer", list(Position))
def test_four_passes_pass_out(dealer):
    a = Auction(dealer)
    _calls(a, "P", "P", "P")
    assert not a.is_settled()
    _calls(a, "P")
    assert a.is_settled()
    assert a.is_passed_out()
    assert a.declarer is None
    assert a.final_contract is not None and a.final_contract.is_pass()
    assert a.contract_text() == "Passed out"


def test_three_passes_after_bid_settle():
    a = Auction(Position.SOUTH)
    _calls(a, "P", "P", "P", "1S", "P")
    assert not a.is_settled()
    _calls(a, "P", "P")
    assert a.is_settled()
    assert a.final_contract == make_bid("1S").with_bidder(Position.EAST)
    assert a.declarer == Position.EAST
    assert a.penalty() == ""
    assert a.contract_text() == "1S by East"


def test_settled_auction_rejects_everything():
    a = Auction(Position.SOUTH)
    _calls(a, "1H", "P", "P", "P")
    for text in ("P", "D", "2S", "R"):
        assert not a.is_legal(make_bid(text))
        assert not a.make_call(make_bid(text))
    assert len(a) == 4
    assert a.legal_calls() == []
    with pytest.raises(RuntimeError):
        a.next_to_call()


def test_double_and_redouble_need_a_contract():
    a = Auction(Position.SOUTH)
    assert not a.make_call(Bid.double())
    assert not a.make_call(Bid.redouble())
    assert len(a) == 0
    _calls(a, "P")
    assert not a.is_legal(Bid.double())


def test_redoubled_contract():
    a = Auction(Position.SOUTH)
    _calls(a, "1H", "D", "R", "P", "P", "P")
    assert a.is_settled()
    assert a.final_contract == make_bid("1H").with_bidder(Position.SOUTH)
    assert a.penalty() == "XX"
    assert a.contract_text() == "1HXX by South"


def test_double_rules():
    a = Auction(Position.EAST)
    _calls(a, "P", "1H", "D")  # E, S, W
    assert not a.is_legal(Bid.double()), "North cannot double partner's bid"
    _calls(a, "P")  # N
    assert not a.is_legal(Bid.double()), "East cannot double: partner already doubled"
    _calls(a, "P", "R")  # E, S
    assert not a.is_legal(Bid.double()), "West cannot double after a redouble"
    _calls(a, "P", "P", "P")
    assert a.is_settled()
    assert not a.is_legal(make_bid("2S"))
    assert a.final_contract == make_bid("1H").with_bidder(Position.SOUTH)


def test_balancing_double():
    a = Auction(Position.EAST)
    _calls(a, "P", "1H", "P", "P", "D", "P", "P", "P")
    assert a.final_contract == make_bid("1H").with_bidder(Position.SOUTH)
    assert a.penalty() == "X"


def test_no_second_double_after_redouble_and_passes():
    a = Auction(Position.SOUTH)
    _calls(a, "1H", "D", "R", "P", "P")
    assert a.next_to_call() == Position.WEST
    assert not a.is_legal(Bid.double())
    assert not a.is_legal(Bid.redouble())


def test_redouble_rules():
    a = Auction(Position.EAST)
    _calls(a, "P", "1H", "P")  # E, S, W
    assert not a.is_legal(Bid.redouble()), "not doubled"
    _calls(a, "P", "D", "P")  # N, E, S
    assert not a.is_legal(Bid.redouble()), "West cannot redouble their own double"
    _calls(a, "P")  # W
    assert a.is_legal(Bid.redouble()), "North redoubles after double, pass, pass"
    _calls(a, "R", "P", "P", "P")
    assert not a.is_legal(make_bid("3S"))
    assert not a.make_call(make_bid("3S"))
    assert a.final_contract == make_bid("1H").with_bidder(Position.SOUTH)
    assert a.penalty() == "XX"


def test_new_bid_clears_double():
    a = Auction(Position.SOUTH)
    _calls(a, "1H", "D", "2H")
    assert a.is_legal(Bid.double())  # East doubles 2H
    assert not a.is_legal(Bid.redouble())


def test_next_to_call_and_history():
    a = Auction(Position.NORTH)
    assert a.next_to_call() == Position.NORTH
    _calls(a, "1C", "1D")
    assert a.next_to_call() == Position.SOUTH
    assert [b.to_text() for b in a.history()] == ["1C", "1D"]
    assert [b.bidder for b in a.history()] == [Position.NORTH, Position.EAST]
    assert a.calls[0] == make_bid("1D").with_bidder(Position.EAST)


def test_illegal_call_leaves_history_unchanged():
    a = Auction(Position.SOUTH)
    _calls(a, "2S")
    before = a.calls
    assert not a.make_call(make_bid("2C"))
    assert a.calls == before
    assert a.next_to_call() == Position.WEST


def test_legal_calls():
    a = Auction(Position.SOUTH)
    assert len(a.legal_calls()) == 36
    _calls(a, "7NT")
    assert a.legal_calls() == [Bid.pass_(), Bid.double()]


def test_unset_bid_is_a_caller_error():
    with pytest.raises(ValueError):
        Auction().is_legal(Bid())


def test_reset():
    a = Auction(Position.SOUTH)
    _calls(a, "1H", "P", "P", "P")
    a.reset(Position.WEST)
    assert not a.is_settled()
    assert len(a) == 0
    assert a.next_to_call() == Position.WEST


def test_run_auction():
    script = iter(["P", "1D", "1S", "P", "P", "P"])
    a = run_auction(Position.WEST, lambda auction, player: make_bid(next(script)))
    assert a.declarer == Position.EAST
    assert a.contract_text() == "1S by East"


def test_run_auction_rejects_illegal_call():
    with pytest.raises(ValueError):
        run_auction(Position.SOUTH, lambda auction, player: Bid.redouble())
