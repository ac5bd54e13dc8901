"""Module for word normalization and word list management."""

from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import NamedTuple

from letterboxed.solver.config import config as solver_config


class NormalizedWord(NamedTuple):
    """A word reduced to its lowercase letters, plus a letter-presence bitmask."""

    letters: str
    """The word with all non-letter characters removed, in lowercase."""

    mask: int
    """26-bit mask; bit `i` is set iff `chr(ord('a') + i)` occurs in `letters`."""


def letter_mask(letters: str) -> int:
    """Return the presence mask of the ASCII letters a-z in `letters`.

    Order and multiplicity are not encoded.  Characters outside a-z are ignored.
    """
    mask = 0
    for ch in letters:
        if "a" <= ch <= "z":
            mask |= 1 << (ord(ch) - ord("a"))
    return mask


def mask_letters(mask: int) -> str:
    """Return the letters set in `mask`, in alphabetical order."""
    return "".join(chr(ord("a") + i) for i in range(26) if mask & (1 << i))


def encode(text: str) -> NormalizedWord:
    """Normalize a word and compute its letter mask.

    Every character that is not a letter is dropped, the rest are lowercased.  Never
    fails: the empty string encodes to an empty word with a zero mask.

    Args:
        text: Any string, e.g. a dictionary entry or the puzzle's letters.

    Returns:
        The normalized word record.
    """
    letters = "".join(ch for ch in text.lower() if ch.isalpha())
    return NormalizedWord(letters, letter_mask(letters))


def read_word_list(lines: Iterable[str], *, min_len: int = 3) -> list[NormalizedWord]:
    """Encode the entries of a word list, keeping their original order.

    Lines containing whitespace (other than the line terminator) are multi-word entries
    and are skipped, as are entries with fewer than `min_len` letters.

    Args:
        lines: Lines of the word list, e.g. an open text file.
        min_len: Minimum number of letters for an entry to be kept.
    """
    words: list[NormalizedWord] = []
    for line in lines:
        entry = line.rstrip("\r\n")
        if not entry or any(ch.isspace() for ch in entry):
            continue
        word = encode(entry)
        if len(word.letters) < min_len:
            continue
        words.append(word)
    return words


def find_word_list_file(name: str | PathLike) -> Path:
    """Locate the word list file.

    `name` is used as-is if it points to an existing file.  Otherwise iterate up the
    directory tree from this package looking for a file with the same name.
    """
    path = Path(name)
    if path.is_file():
        return path

    current_dir = Path(__file__).resolve().parent
    while True:
        candidate = current_dir / path.name
        if candidate.is_file():
            return candidate
        if current_dir.parent == current_dir:
            raise FileNotFoundError(f"Word list file not found: {path}")
        current_dir = current_dir.parent


def load_word_list(
    path: str | PathLike | None = None, *, min_len: int | None = None
) -> list[NormalizedWord]:
    """Load and encode the word list.

    Args:
        path: Path to a newline-delimited word list.  Defaults to the configured
            `word_list_path`.
        min_len: Minimum word length to include.  Defaults to the configured
            `min_word_length`.

    Returns:
        The encoded dictionary, in file order.
    """
    word_list_path = find_word_list_file(path or solver_config.word_list_path)
    if min_len is None:
        min_len = solver_config.min_word_length

    with word_list_path.open("r", encoding="utf-8") as f:
        return read_word_list(f, min_len=min_len)
