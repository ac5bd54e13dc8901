"""Exceptions raised by the Letterboxed solver."""

USAGE = """\
usage: letterboxed {puzzle}
where {puzzle} is in the format ABC,DEF,GHI,JKL
example: letterboxed RKM,UIC,PHG,NAY"""


class LetterboxedError(Exception):
    """Base class for all solver errors."""


class ValidationError(LetterboxedError, ValueError):
    """The puzzle specification is malformed.

    Attributes:
        reason: Human-readable description of the first rule that failed.
        puzzle_spec: The offending puzzle specification, as supplied.
    """

    def __init__(self, reason: str, puzzle_spec: str) -> None:
        super().__init__(f"invalid puzzle: {puzzle_spec}\n{reason}")
        self.reason = reason
        self.puzzle_spec = puzzle_spec

    def with_usage(self) -> str:
        """Return the error message followed by the usage text."""
        return f"{self}\n{USAGE}"


class UsageError(LetterboxedError):
    """The command line did not supply exactly one puzzle argument."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)
