# IN THIS FILE: COMMAND VALUES (PARAMETERLESS and PLACE)
from tabletop.utils.enums import CommandType, Direction


class Command:
    """A parsed, validated instruction without parameters (MOVE/LEFT/RIGHT/REPORT)."""

    def __init__(self, command_type: CommandType):
        self.command_type = command_type

    @property
    def name(self) -> str:
        return self.command_type.value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.command_type == other.command_type

    def __hash__(self) -> int:
        return hash(self.command_type)

    def __repr__(self) -> str:
        return f"Command({self.name})"


class PlaceCommand(Command):
    """PLACE X,Y,F. Coordinates are already known to be on the board."""

    def __init__(self, x: int, y: int, direction: Direction):
        super().__init__(CommandType.PLACE)
        self.x = x
        self.y = y
        self.direction = direction

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaceCommand):
            return False
        return (self.x == other.x and
                self.y == other.y and
                self.direction == other.direction)

    def __hash__(self) -> int:
        return hash((self.command_type, self.x, self.y, self.direction))

    def __repr__(self) -> str:
        return f"PlaceCommand(x={self.x}, y={self.y}, d={self.direction.name})"
