# IN THIS FILE: POSITION

from tabletop.utils.enums import Direction


class Position:
    """
    Represents the robot's position and heading on the board.
    Treated as a value: the robot replaces it rather than mutating it.
    """

    def __init__(self, x: int, y: int, direction: Direction):
        self.x = x                  # Board x-coordinate (0 = west edge)
        self.y = y                  # Board y-coordinate (0 = south edge)
        self.direction = direction  # Facing direction (NORTH/EAST/SOUTH/WEST)

    def moved(self) -> 'Position':
        """Position one step ahead in the current direction (not range checked)"""
        dx, dy = self.direction.delta
        return Position(self.x + dx, self.y + dy, self.direction)

    def turned(self, direction: Direction) -> 'Position':
        return Position(self.x, self.y, direction)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self.x,
            "y": self.y,
            "d": int(self.direction),
            "facing": self.direction.name
        }

    def __eq__(self, other: object) -> bool:
        """Check if two positions are equal"""
        if not isinstance(other, Position):
            return False
        return (self.x == other.x and
                self.y == other.y and
                self.direction == other.direction)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.direction))

    def __repr__(self) -> str:
        """String representation for debugging"""
        return f"Position(x={self.x}, y={self.y}, d={self.direction.name})"
