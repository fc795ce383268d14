from __future__ import annotations
from enum import Enum, IntEnum
from typing import Dict, Tuple

Coord = Tuple[int, int]  # (row, col)


class Attribute(Enum):
    WUMPUS = "W"
    PIT = "P"
    GOLD = "G"
    STENCH = "S"
    BREEZE = "B"
    GLITTER = "*"


class Direction(IntEnum):
    """Facing in degrees; rows grow downward, so 90 points south."""
    EAST = 0
    SOUTH = 90
    WEST = 180
    NORTH = 270


DIRECTION_DELTAS: Dict[Direction, Coord] = {
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.NORTH: (-1, 0),
}


class ArrowOutcome(Enum):
    LOST = "lost"
    KILLED = "killed"
    NO_ARROWS = "no_arrows"
