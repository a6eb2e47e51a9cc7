# IN THIS FILE: DISPATCH of PARSED COMMANDS to the ROBOT, REPORT FORMATTING
from typing import Callable, Iterable, List, Optional

from tabletop.commands.command import Command, PlaceCommand
from tabletop.commands.parser import CommandParser
from tabletop.entities.robot import Robot
from tabletop.utils.consts import REPORT_FORMAT
from tabletop.utils.enums import CommandType
from tabletop.utils.types import Position


def format_report(position: Position) -> str:
    """'Position: 2, 3, 90, EAST'"""
    return REPORT_FORMAT.format(
        x=position.x,
        y=position.y,
        angle=int(position.direction),
        facing=position.direction.name,
    )


class CommandResult:
    """Outcome of one input line."""

    def __init__(self, command: Optional[Command], applied: bool, report: Optional[str] = None):
        self.command = command    # None when the line was rejected by the parser
        self.applied = applied    # False when dropped (guard, off-board move, ...)
        self.report = report      # Formatted REPORT output, if any

    @property
    def recognised(self) -> bool:
        return self.command is not None

    def __repr__(self) -> str:
        return f"CommandResult(command={self.command!r}, applied={self.applied}, report={self.report!r})"


class CommandInterpreter:
    """
    Feeds input lines through the parser into the robot.

    Guard: until the robot has been placed, everything except PLACE is
    dropped. Nothing raises for any text input; rejected or dropped lines
    are reported through CommandResult only.
    """

    def __init__(
        self,
        robot: Optional[Robot] = None,
        output: Optional[Callable[[str], None]] = print,
    ):
        self.robot = robot if robot is not None else Robot()
        self.parser = CommandParser(self.robot.board)
        self.output = output

    def run_line(self, line: str) -> CommandResult:
        command = self.parser.parse(line)
        if command is None:
            return CommandResult(None, False)
        return self.execute(command)

    def run_lines(self, lines: Iterable[str]) -> List[CommandResult]:
        return [self.run_line(line) for line in lines]

    def execute(self, command: Command) -> CommandResult:
        if isinstance(command, PlaceCommand):
            applied = self.robot.place(command.x, command.y, command.direction)
            return CommandResult(command, applied)

        # Ignore any command except PLACE until robot has valid position
        if not self.robot.is_placed():
            return CommandResult(command, False)

        if command.command_type == CommandType.MOVE:
            return CommandResult(command, self.robot.move())
        if command.command_type == CommandType.LEFT:
            return CommandResult(command, self.robot.turn_left())
        if command.command_type == CommandType.RIGHT:
            return CommandResult(command, self.robot.turn_right())
        if command.command_type == CommandType.REPORT:
            report = format_report(self.robot.report())
            if self.output is not None:
                self.output(report)
            return CommandResult(command, True, report)

        return CommandResult(command, False)
