"""Utility functions for the Letterboxed solver."""

from collections.abc import Iterable

from letterboxed.puzzle import Puzzle
from letterboxed.words import NormalizedWord

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

MIN_PLAYABLE_LENGTH = 3


def is_playable(
    word: NormalizedWord, puzzle: Puzzle, *, min_len: int = MIN_PLAYABLE_LENGTH
) -> bool:
    """Returns whether the word can be drawn on the puzzle.

    A word is playable if it has at least `min_len` letters, uses only puzzle letters,
    and never takes two consecutive letters from the same side.  Repeated letters are
    allowed.

    Args:
        word (NormalizedWord): The encoded word.
        puzzle (Puzzle): The puzzle to play on.
        min_len (int): Minimum word length.
    """
    letters = word.letters
    if len(letters) < min_len:
        return False
    if word.mask & puzzle.full_mask != word.mask:
        return False
    sides = [puzzle.side_of(ch) for ch in letters]
    # Letters outside a-z carry no mask bit, so catch them here
    if -1 in sides:
        return False
    for prev, cur in zip(sides, sides[1:]):
        if prev == cur:
            return False
    return True


def playable_words(words: Iterable[NormalizedWord], puzzle: Puzzle) -> list[NormalizedWord]:
    """Return the playable words, in their original order."""
    return [w for w in words if is_playable(w, puzzle)]
