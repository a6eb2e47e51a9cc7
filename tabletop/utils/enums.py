# IN THIS FILE: DIRECTIONS and COMMAND TYPES
from enum import Enum
from typing import Tuple


class Direction(int, Enum):
    """
    Robot facing direction.
    Valued by compass angle in degrees, increasing clockwise, so rotation
    is plain modulo-360 arithmetic.
    """
    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270

    def __int__(self):
        return self.value

    def rotate(self, degrees: int) -> 'Direction':
        return Direction((self.value + degrees) % 360)

    def left(self) -> 'Direction':
        """NORTH -> WEST -> SOUTH -> EAST -> NORTH"""
        return self.rotate(-90)

    def right(self) -> 'Direction':
        """NORTH -> EAST -> SOUTH -> WEST -> NORTH"""
        return self.rotate(90)

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) for one MOVE in this direction."""
        return {
            Direction.NORTH: (0, 1),
            Direction.EAST:  (1, 0),
            Direction.SOUTH: (0, -1),
            Direction.WEST:  (-1, 0),
        }[self]


class CommandType(Enum):
    """
    Recognised commands.
    Value is the keyword as typed on the input line.
    """
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"
