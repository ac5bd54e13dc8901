"""Main solver module for Letterboxed puzzles."""

import os
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO, TypeAlias

import numpy as np

from letterboxed.puzzle import Puzzle
from letterboxed.solver.config import config as solver_config
from letterboxed.solver.utils import TIMESTAMP_FMT, playable_words
from letterboxed.util import int_comma, ms_str
from letterboxed.words import NormalizedWord, load_word_list, mask_letters

WordPair: TypeAlias = tuple[str, str]


def find_pairs(playable: Sequence[NormalizedWord], full_mask: int) -> list[WordPair]:
    """Find all two-word chains that cover every puzzle letter.

    A pair `(a, b)` is a solution if `b` starts with the last letter of `a` and the two
    words together use every letter in `full_mask`.  Every word is paired with every word,
    itself included.  Pairs are returned in nested-loop order: by the position of `a` in
    `playable`, then by the position of `b`.

    Args:
        playable (Sequence[NormalizedWord]): Playable words for the puzzle.  Every word must
            have at least one letter.
        full_mask (int): Mask of all puzzle letters.

    Returns:
        A list of `(first, second)` word pairs; empty if there is no solution.
    """
    if not playable:
        return []

    n_words = len(playable)
    masks = np.fromiter((w.mask for w in playable), dtype=np.int64, count=n_words)
    firsts = np.fromiter((ord(w.letters[0]) for w in playable), dtype=np.int32, count=n_words)

    pairs: list[WordPair] = []
    for word in playable:
        # Vectorised over the second word; the outer loop keeps the emission order
        chained = firsts == ord(word.letters[-1])
        covered = ((masks | word.mask) & full_mask) == full_mask
        for idx in np.flatnonzero(chained & covered):
            pairs.append((word.letters, playable[idx].letters))
    return pairs


class Solver:
    """Two-word solver for a single puzzle.

    The playable subset of the word list is computed once, on construction.  The word list
    itself is not modified, so it can be shared between solvers.
    """

    def __init__(self, puzzle: Puzzle, words: Sequence[NormalizedWord]) -> None:
        """Initialize the solver with the given puzzle and word list.

        Args:
            puzzle (Puzzle): The puzzle to solve.
            words (Sequence[NormalizedWord]): The encoded word list.
        """
        self.puzzle = puzzle
        """The puzzle being solved."""

        self.dictionary_size = len(words)
        """Number of words in the word list before filtering."""

        self.words = playable_words(words, puzzle)
        """Playable words for this puzzle, in word list order."""

    def solve(self) -> list[WordPair]:
        """Return all two-word solutions of the puzzle."""
        return find_pairs(self.words, self.puzzle.full_mask)

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the solver state."""
        return {
            "puzzle": str(self.puzzle),
            "sides": list(self.puzzle.sides),
            "letters": mask_letters(self.puzzle.full_mask),
            "dictionary_size": self.dictionary_size,
            "playable_count": len(self.words),
        }


def get_logfile(puzzle: Puzzle) -> Path | None:
    """Return the log file path for a puzzle, or None if logging is disabled."""
    if not solver_config.log_dir:
        return None
    return Path(solver_config.log_dir) / f"{'-'.join(puzzle.sides)}.log"


def run(puzzle_spec: str, *, out: TextIO | None = None) -> list[WordPair]:
    """Run the solver on the given puzzle specification.

    Loads the word list, solves the puzzle and prints one `first second` line per
    solution, followed by timings if enabled.

    Args:
        puzzle_spec (str): The puzzle, e.g. `RKM,UIC,PHG,NAY`.
        out: Stream for results and timings.  Defaults to stdout.

    Returns:
        The solutions, in the order they were printed.

    Raises:
        ValidationError: If the puzzle specification is invalid.
        FileNotFoundError: If the word list cannot be found.
    """
    out = out or sys.stdout

    start = time()
    words = load_word_list()
    if solver_config.show_timings:
        print(f"load took: {ms_str(time() - start)}", file=out)

    start = time()
    puzzle = Puzzle.parse(puzzle_spec)

    logfile = get_logfile(puzzle)
    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile or os.devnull, "w", encoding="utf-8") as logf:
        try:
            pairs = solve_one(puzzle, words, logf=logf, out=out)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.", file=out)
            sys.exit(1)

    if solver_config.show_timings:
        print(f"calc took: {ms_str(time() - start)}", file=out)
    return pairs


def solve_one(
    puzzle: Puzzle,
    words: Sequence[NormalizedWord],
    *,
    logf: TextIO,
    out: TextIO,
) -> list[WordPair]:
    """Solve a puzzle, printing the solutions to `out` and progress to `logf`.

    Args:
        puzzle (Puzzle): The puzzle to solve.
        words (Sequence[NormalizedWord]): The encoded word list.
        logf: File object to log the solving process.
        out: Stream for the solutions.
    """
    start_time = time()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Selected puzzle: {puzzle}", file=logf, flush=True)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    solver = Solver(puzzle, words)
    print("Solver initialized with:", file=logf, flush=True)
    pprint(solver.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)

    pairs = solver.solve()
    for first, second in pairs:
        print(f"{first} {second}", file=out)

    if pairs:
        print(f"Found {int_comma(len(pairs))} solutions.", file=logf, flush=True)
    else:
        print("No solution found.", file=logf, flush=True)
    print(f"Time taken: {ms_str(time() - start_time)}", file=logf, flush=True)
    return pairs
