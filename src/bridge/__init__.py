"""Contract bridge rules engine: cards, auction legality and trick resolution."""

__version__ = "0.1.0"

from .seats import Position, lefty, partner, is_opponent, position_diff, offset_position
from .deck import Card, Suit, make_card, make_deck_52
from .hand import Hand
from .bidding import Bid, Strain, make_bid, all_calls
from .auction import Auction, run_auction
from .play import Trick, legal_plays, card_is_valid_from_hand
from .deal import Deal, Vulnerability, deal_hands
from .render import hand_to_text, auction_to_text, deal_to_text, deal_to_link
from .game import play_one_deal, run_play
