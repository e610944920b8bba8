"""
Text and link rendering of hands, auctions and deals.
Links follow the LIN format read by the BBO hand viewer.
"""
from __future__ import annotations

from .auction import Auction
from .deal import Deal
from .deck import Suit, suit_char
from .hand import Hand
from .seats import NUM_PLAYERS, Position, dealer_link_code

HANDVIEWER_URL = "https://www.bridgebase.com/tools/handviewer.html?lin="

# Suits are shown top-down, spades first.
_DISPLAY_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


def hand_to_text(hand: Hand) -> str:
    """
    Four lines, e.g.
        S A,K,10
        H Q,2
        ...
    """
    lines = []
    for s in _DISPLAY_ORDER:
        ranks = [c.rank_text() for c in reversed(hand.cards_in_suit(s))]
        lines.append(f"{suit_char(s)} {','.join(ranks)}")
    return "\n".join(lines) + "\n"


def hand_to_link(hand: Hand) -> str:
    """Compact hand for LIN, e.g. "SAKT2HQ2D...C..."."""
    out = ""
    for s in _DISPLAY_ORDER:
        letter = suit_char(s)
        out += letter + "".join(c.rank_text(use10=False) for c in reversed(hand.cards_in_suit(s)))
    return out


def auction_to_text(auction: Auction) -> str:
    """Auction table in S/W/N/E columns, starting under the dealer."""
    if len(auction) == 0:
        return "No bids yet\n"
    out = "S   W   N   E\n"
    col = int(auction.dealer)
    out += " " * (col * 4)
    line_open = False
    for b in auction.history():
        out += b.to_padded() + " "
        col += 1
        line_open = True
        if col % NUM_PLAYERS == 0:
            out += "\n"
            line_open = False
    if line_open:
        out += "\n"
    if auction.final_contract is not None:
        out += f"Contract {auction.contract_text()}\n"
    return out


def deal_to_text(deal: Deal) -> str:
    out = ""
    for p in Position:
        hand = deal.hand(p)
        out += f"{p} {hand.point_count()}\n"
        out += hand_to_text(hand)
        out += "\n"
    return out


def deal_to_link(deal: Deal) -> str:
    """BBO hand-viewer URL replaying hands, auction and completed tricks."""
    lnk = HANDVIEWER_URL
    lnk += "st||"
    lnk += "pn|~Msouth,~Mwest,~Mnorth,~Meast|"
    lnk += "md|" + dealer_link_code(deal.dealer)
    lnk += ",".join(hand_to_link(h) for h in deal.hands)
    lnk += "|"
    lnk += "sv|" + deal.vulnerability.link_code() + "|"
    lnk += "rh||"
    lnk += "ah|deal|"
    for b in deal.auction.history():
        lnk += "mb|" + b.to_text() + "|an||"
    for t in deal.tricks:
        lnk += t.to_link()
    return lnk
