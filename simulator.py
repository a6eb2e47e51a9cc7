# simulator.py
import argparse
import os
import sys

from tabletop.commands.interpreter import CommandInterpreter
from tabletop.entities.board import Board
from tabletop.entities.robot import Robot
from tabletop.utils.consts import INTERACTIVE_PROMPT, MAX_X, MAX_Y


def build_interpreter(max_x: int = MAX_X, max_y: int = MAX_Y) -> CommandInterpreter:
    return CommandInterpreter(Robot(Board(max_x, max_y)))


def _run(interpreter: CommandInterpreter, line: str, verbose: bool) -> None:
    result = interpreter.run_line(line)
    if verbose and not result.applied:
        print(f"Simulator: ignored '{line.strip()}'", file=sys.stderr)


def run_file(interpreter: CommandInterpreter, filename: str, verbose: bool = False) -> bool:
    """
    Replay every line of filename through the interpreter.
    Returns False (after printing the reason) if the file can't be read.
    """
    if not os.path.isfile(filename):
        print(f"Error: Couldn't read file '{filename}'", file=sys.stderr)
        return False

    try:
        with open(filename, "r", encoding="utf-8-sig") as f:
            for line in f:
                _run(interpreter, line, verbose)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading the file: {e}", file=sys.stderr)
        return False
    return True


def run_interactive(interpreter: CommandInterpreter, verbose: bool = False) -> None:
    """Prompt for commands until EOF (Ctrl-D) or Ctrl-C."""
    while True:
        try:
            line = input(INTERACTIVE_PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        _run(interpreter, line, verbose)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Toy robot tabletop simulator')
    parser.add_argument('filename', nargs='?', help='File of commands to replay (omit for interactive mode)')
    parser.add_argument('--max-x', type=int, default=MAX_X, help='Highest x index on the board')
    parser.add_argument('--max-y', type=int, default=MAX_Y, help='Highest y index on the board')
    parser.add_argument('--verbose', action='store_true', help='Print lines that were ignored')

    args = parser.parse_args(argv)

    if args.max_x < 0 or args.max_y < 0:
        parser.error("board bounds must be non-negative")

    interpreter = build_interpreter(args.max_x, args.max_y)

    if args.filename:
        return 0 if run_file(interpreter, args.filename, args.verbose) else 1

    run_interactive(interpreter, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
