import itertools

import pytest

from letterboxed.errors import ValidationError
from letterboxed.puzzle import Puzzle
from letterboxed.solver.solver import Solver, find_pairs
from letterboxed.solver.utils import is_playable
from letterboxed.words import encode, read_word_list

PUZZLE = Puzzle.parse("RKM,UIC,PHG,NAY")

# Covers all twelve letters on its own, starting and ending with "g"
SELF_CHAIN = "gyrumakipnhcg"


def _make_words(words: list[str]):
    return [encode(w) for w in words]


def _reference_pairs(words, full_mask):
    return [
        (a.letters, b.letters)
        for a, b in itertools.product(words, repeat=2)
        if b.letters[0] == a.letters[-1] and (a.mask | b.mask) & full_mask == full_mask
    ]


def test_basic_solve():
    solver = Solver(PUZZLE, _make_words(["hacking", "grumpy", "rain", "pizza"]))
    assert solver.solve() == [("hacking", "grumpy")]


def test_empty_results_for_no_matches():
    words = read_word_list(["rain", "mick"])
    solver = Solver(PUZZLE, words)
    assert solver.solve() == []


def test_empty_word_list():
    assert Solver(PUZZLE, []).solve() == []
    assert find_pairs([], PUZZLE.full_mask) == []


def test_chain_rule():
    # "grumpy" ends in "y", so it never leads into "hacking"
    words = _make_words(["grumpy", "hacking"])
    assert find_pairs(words, PUZZLE.full_mask) == [("hacking", "grumpy")]


def test_coverage_rule():
    # "hacking" -> "gap" chains, but leaves r, u, m and y unused
    words = _make_words(["hacking", "gap"])
    assert find_pairs(words, PUZZLE.full_mask) == []


def test_self_pairing():
    words = _make_words([SELF_CHAIN])
    assert is_playable(words[0], PUZZLE)
    assert find_pairs(words, PUZZLE.full_mask) == [(SELF_CHAIN, SELF_CHAIN)]


def test_result_order():
    words = _make_words(["hacking", "grumpy", SELF_CHAIN])
    assert find_pairs(words, PUZZLE.full_mask) == [
        ("hacking", "grumpy"),
        ("hacking", SELF_CHAIN),
        (SELF_CHAIN, "grumpy"),
        (SELF_CHAIN, SELF_CHAIN),
    ]


def test_duplicates_not_removed():
    words = _make_words(["hacking", "grumpy", "grumpy"])
    assert find_pairs(words, PUZZLE.full_mask) == [("hacking", "grumpy"), ("hacking", "grumpy")]


def test_matches_nested_loop():
    words = [
        w
        for w in _make_words(
            ["hacking", "grumpy", "gun", "nark", "kayak", "rain", "pain", "gyp", SELF_CHAIN,
             "ymca", "aping", "gaming", "unpick", "parka"]
        )
        if is_playable(w, PUZZLE)
    ]
    pairs = find_pairs(words, PUZZLE.full_mask)
    assert pairs == _reference_pairs(words, PUZZLE.full_mask)


def test_result_invariants():
    words = [
        w
        for w in _make_words(["hacking", "grumpy", "gun", "rain", "pain", SELF_CHAIN, "nymph"])
        if is_playable(w, PUZZLE)
    ]
    masks = {w.letters: w.mask for w in words}
    full = PUZZLE.full_mask
    pairs = find_pairs(words, full)
    assert pairs
    for first, second in pairs:
        assert second[0] == first[-1]
        assert (masks[first] | masks[second]) & full == full


def test_solver_filters_once():
    words = _make_words(["hacking", "mick", "grumpy", "pizza"])
    solver = Solver(PUZZLE, words)
    assert [w.letters for w in solver.words] == ["hacking", "grumpy"]
    # Fresh result list on every call
    first = solver.solve()
    first.clear()
    assert solver.solve() == [("hacking", "grumpy")]


def test_word_list_shared_between_solvers():
    words = _make_words(["hacking", "grumpy", "abcd"])
    Solver(PUZZLE, words).solve()
    other = Solver(Puzzle.parse("ABC,DEF,GHI,JKL"), words)
    assert [w.letters for w in words] == ["hacking", "grumpy", "abcd"]
    assert other.solve() == []


def test_summary():
    solver = Solver(PUZZLE, _make_words(["hacking", "grumpy", "pizza"]))
    summary = solver.summary()
    assert summary["puzzle"] == "RKM,UIC,PHG,NAY"
    assert summary["letters"] == "acghikmnpruy"
    assert summary["dictionary_size"] == 3
    assert summary["playable_count"] == 2


def test_puzzle_letter_outside_mask_rejected():
    # A side with a non-ASCII letter would leave that letter out of the full mask
    with pytest.raises(ValidationError):
        Puzzle.parse("RKM,UIC,PHG,NAÉ")
