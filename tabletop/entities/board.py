# IN THIS FILE: BOARD BOUNDS and RANGE CHECK

from tabletop.utils.consts import MAX_X, MAX_Y


class Board:
    """
    Represents the square tabletop.
    Valid cells are (0..max_x) x (0..max_y), both ends inclusive.
    """

    def __init__(self, max_x: int = MAX_X, max_y: int = MAX_Y):
        if max_x < 0 or max_y < 0:
            raise ValueError(f"Board bounds must be non-negative, got ({max_x}, {max_y})")
        self.max_x = max_x
        self.max_y = max_y

    @property
    def size_x(self) -> int:
        return self.max_x + 1

    @property
    def size_y(self) -> int:
        return self.max_y + 1

    def is_within_bounds(self, x: int, y: int) -> bool:
        """Check if (x, y) is a cell on the board."""
        return 0 <= x <= self.max_x and 0 <= y <= self.max_y

    def __repr__(self) -> str:
        return f"Board({self.size_x}x{self.size_y})"
