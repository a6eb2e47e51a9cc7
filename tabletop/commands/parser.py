# IN THIS FILE: RAW LINE -> COMMAND (GRAMMAR with BOARD BOUNDS BAKED IN)
import re
from typing import Optional

from tabletop.commands.command import Command, PlaceCommand
from tabletop.entities.board import Board
from tabletop.utils.consts import COMMAND_REGEXP, PLACE_CMD_REGEXP
from tabletop.utils.enums import CommandType, Direction


class CommandParser:
    """
    Turns a raw input line into a Command, or None if the line is not a
    recognised command.

    Board bounds are part of the PLACE grammar itself: coordinates are
    matched against the literal in-range integers, so an off-board PLACE
    is rejected exactly like malformed text.

    The pattern lists every allowed coordinate, so it grows with the board
    and takes noticeably long to compile for boards many thousands of cells
    wide.
    """

    def __init__(self, board: Optional[Board] = None):
        self.board = board if board is not None else Board()
        self.command_pattern = re.compile(COMMAND_REGEXP)
        self.place_pattern = re.compile(PLACE_CMD_REGEXP.format(
            x=self._range_alternation(self.board.max_x),
            y=self._range_alternation(self.board.max_y),
        ))

    @staticmethod
    def _range_alternation(max_value: int) -> str:
        # Longest literals first: "10|9|...|0"
        return "|".join(str(v) for v in range(max_value, -1, -1))

    def parse(self, line: str) -> Optional[Command]:
        if not isinstance(line, str):
            return None
        sanitized = line.strip()

        match = self.command_pattern.fullmatch(sanitized)
        if match:
            return Command(CommandType(match.group(1)))

        match = self.place_pattern.fullmatch(sanitized)
        if match:
            _, x, y, facing = match.groups()
            return PlaceCommand(int(x), int(y), Direction[facing])

        return None
