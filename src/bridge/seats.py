"""
Seats at the table and clockwise rotation.
Order is South, West, North, East; North/South and East/West are partners.
"""
from __future__ import annotations

from enum import IntEnum

NUM_PLAYERS = 4


class Position(IntEnum):
    """Seat at the table, numbered in clockwise play order."""
    SOUTH = 0
    WEST = 1
    NORTH = 2
    EAST = 3

    def __str__(self) -> str:
        return POSITION_NAMES[self]

    def __format__(self, spec: str) -> str:
        # IntEnum would otherwise format as the bare number.
        return format(str(self), spec)


POSITION_NAMES = {
    Position.SOUTH: "South",
    Position.WEST: "West",
    Position.NORTH: "North",
    Position.EAST: "East",
}


def lefty(p: Position) -> Position:
    """Seat on p's left, i.e. the next to act after p."""
    return Position((p + 1) % NUM_PLAYERS)


def partner(p: Position) -> Position:
    return Position((p + 2) % NUM_PLAYERS)


def is_opponent(me: Position, other: Position) -> bool:
    """True if the two seats sit on different sides."""
    return (me % 2) != (other % 2)


def position_diff(lead: Position, current: Position) -> int:
    """Number of seats from lead to current going clockwise, in 0..3."""
    return (current - lead + NUM_PLAYERS) % NUM_PLAYERS


def offset_position(lead: Position, offset: int) -> Position:
    """Seat `offset` places after lead (1..4; 4 is lead itself)."""
    assert 0 < offset <= NUM_PLAYERS
    return Position((lead + offset) % NUM_PLAYERS)


def dealer_link_code(p: Position) -> str:
    """Dealer digit used by the BBO hand viewer (1=South .. 4=East)."""
    return str(int(p) + 1)
