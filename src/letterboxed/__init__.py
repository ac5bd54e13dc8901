"""Letterboxed Puzzle Solver.

Finds all two-word solutions to a Letterboxed puzzle: a square with three distinct
letters on each side.  Words are drawn by moving between letters on different sides,
the second word starts with the last letter of the first, and together the two words
must use every letter of the puzzle.
"""

from sys import argv, exit

from .errors import UsageError, ValidationError
from .solver import solver


def parse_args(args: list[str]) -> str:
    """Return the puzzle specification from the command-line arguments."""
    if len(args) != 1:
        raise UsageError()
    return args[0]


def main(args: list[str] | None = None) -> None:
    """Main entry point for the Letterboxed solver."""
    # Expect a single argument: the puzzle, e.g. RKM,UIC,PHG,NAY
    try:
        puzzle_spec = parse_args(argv[1:] if args is None else args)
    except UsageError as e:
        print(e)
        exit(1)

    try:
        solver.run(puzzle_spec)
    except ValidationError as e:
        print(e.with_usage())
        exit(1)
    except FileNotFoundError as e:
        print(e)
        exit(1)
