# IN THIS FILE: TRACKING ROBOT'S CURRENT STATE & APPLYING MOVEMENT RULES

from typing import Optional

from tabletop.entities.board import Board
from tabletop.utils.enums import Direction
from tabletop.utils.types import Position


class Robot:
    """
    State machine for the single robot on the board.

    The robot is either unplaced (position is None) or placed at a
    Position on the board. Only place() can leave the unplaced state.
    Every update goes through _commit(), so a position off the board is
    never stored.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.position: Optional[Position] = None

    def is_placed(self) -> bool:
        return self.position is not None

    def _commit(self, candidate: Position) -> bool:
        """Store candidate if it lies on the board. Returns True if stored."""
        if not self.board.is_within_bounds(candidate.x, candidate.y):
            return False
        self.position = candidate
        return True

    def place(self, x: int, y: int, direction: Direction) -> bool:
        """
        Put the robot at (x, y) facing direction.

        Out-of-range coordinates leave the state untouched, including an
        unplaced robot staying unplaced.
        """
        return self._commit(Position(x, y, direction))

    def move(self) -> bool:
        """
        Advance one cell in the current direction.
        A move that would leave the board is dropped.
        """
        if self.position is None:
            return False
        return self._commit(self.position.moved())

    def turn_left(self) -> bool:
        if self.position is None:
            return False
        self.position = self.position.turned(self.position.direction.left())
        return True

    def turn_right(self) -> bool:
        if self.position is None:
            return False
        self.position = self.position.turned(self.position.direction.right())
        return True

    def report(self) -> Optional[Position]:
        return self.position

    def reset(self) -> None:
        """Return to the unplaced state."""
        self.position = None

    def __repr__(self) -> str:
        return f"Robot(position={self.position!r}, board={self.board!r})"
