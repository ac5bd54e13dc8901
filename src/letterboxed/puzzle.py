"""Parsing and validation of Letterboxed puzzles."""

from collections.abc import Sequence
from dataclasses import dataclass

from letterboxed.errors import ValidationError
from letterboxed.words import NormalizedWord, encode

N_SIDES = 4
SIDE_LENGTH = 3
DELIMITER = ","


def split_sides(spec: str) -> list[str]:
    """Split a puzzle specification such as `RKM,UIC,PHG,NAY` into lowercase sides."""
    return [side.strip().lower() for side in spec.split(DELIMITER)]


def check_sides(sides: Sequence[str]) -> str | None:
    """Return a description of the first rule the sides break, or None if valid.

    Rules are checked in order and checking stops at the first failure.
    """
    if len(sides) != N_SIDES:
        return f"Puzzle must have {N_SIDES} sides."
    if any(len(side) != SIDE_LENGTH for side in sides):
        return f"Each side of the puzzle must have {SIDE_LENGTH} letters."
    if any(not "a" <= ch <= "z" for side in sides for ch in side):
        return "Puzzle can consist only of letters and commas."
    if len(set("".join(sides))) != N_SIDES * SIDE_LENGTH:
        return "Puzzle can't have repeating letters."
    return None


@dataclass(frozen=True)
class Puzzle:
    """A Letterboxed puzzle: four sides of three distinct letters each."""

    sides: tuple[str, ...]
    """The four sides, lowercase, in input order."""

    full: NormalizedWord
    """Encoding of all twelve puzzle letters."""

    spec: str
    """The specification string the puzzle was parsed from."""

    @classmethod
    def parse(cls, spec: str) -> "Puzzle":
        """Parse and validate a puzzle specification.

        Raises:
            ValidationError: If the specification breaks any of the puzzle rules.  Only
                the first broken rule is reported.
        """
        sides = split_sides(spec)
        reason = check_sides(sides)
        if reason is not None:
            raise ValidationError(reason, spec)
        return cls(sides=tuple(sides), full=encode("".join(sides)), spec=spec)

    @property
    def full_mask(self) -> int:
        """Mask with a bit set for each of the twelve puzzle letters."""
        return self.full.mask

    def side_of(self, letter: str) -> int:
        """Return the index of the first side containing `letter`, or -1 if none does."""
        if len(letter) != 1:
            return -1
        letter = letter.lower()
        for idx, side in enumerate(self.sides):
            if letter in side:
                return idx
        return -1

    def __str__(self) -> str:
        return DELIMITER.join(side.upper() for side in self.sides)
