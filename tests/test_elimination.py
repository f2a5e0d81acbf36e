import itertools
import random

import pytest
from packages.elimination import (BruteForceScorer, IndexedScorer, LookupIndex, aggregate,
                                  create_scorer, elimination_counts, get_scorer_ids,
                                  intersection_size)
from packages.engine import PreconditionError

SMALL = ["arise", "crane", "crate", "slate", "stare"]

# includes repeated letters to exercise the present-elsewhere tables
CORPUS = sorted([
    "abbey", "arise", "crane", "crate", "eaten", "eerie", "geese", "label",
    "level", "lever", "llama", "mamma", "sassy", "slate", "speed", "stare",
    "steal", "tares", "teals", "trace",
])
EXTRA_GUESSES = ["fjord", "fuzzy", "quack", "roate"]


@pytest.fixture(scope="module")
def scorers():
    return IndexedScorer(CORPUS), BruteForceScorer(CORPUS)


def test_registry():
    assert get_scorer_ids() == ["brute_force", "indexed"]
    assert isinstance(create_scorer("indexed", SMALL), IndexedScorer)
    with pytest.raises(ValueError, match="Unknown scorer id"):
        create_scorer("nope", SMALL)


def test_strategies_agree(scorers):
    indexed, brute = scorers
    for guess, target in itertools.product(CORPUS + EXTRA_GUESSES, CORPUS):
        assert indexed.score(guess, target) == brute.score(guess, target), (guess, target)


def test_bounds_and_self_score(scorers):
    n = len(CORPUS)
    for s in scorers:
        for guess, target in itertools.product(CORPUS + EXTRA_GUESSES, CORPUS):
            assert 0 <= s.score(guess, target) <= n - 1
        for w in CORPUS:
            # all-exact pattern: only w itself survives
            assert s.score(w, w) == n - 1


def test_letter_missing_from_every_answer_eliminates_nothing():
    for sid in get_scorer_ids():
        assert create_scorer(sid, SMALL).score("fuzzy", "crane") == 0


@pytest.mark.parametrize("guess,counts,median", [
    ("crate", [4, 4, 4, 4], 4),
    ("arise", [3, 3, 4, 4], 4),
])
def test_median_on_known_set(guess, counts, median):
    for sid in get_scorer_ids():
        scorer = create_scorer(sid, SMALL)
        assert elimination_counts(guess, SMALL, scorer) == counts
        assert aggregate(guess, SMALL, scorer) == median


def test_aggregate_odd_count_takes_middle():
    scorer = BruteForceScorer(SMALL)
    # non-member guess plays all five targets
    counts = elimination_counts("roate", SMALL, scorer)
    assert len(counts) == 5
    assert aggregate("roate", SMALL, scorer) == counts[2]


def test_lookup_index_tables():
    idx = LookupIndex.build(SMALL)
    a, c, z = 0, 2, 25
    assert idx.total == 5 and idx.N == 5
    assert idx.with_letter_at[a][2] == (1, 2, 3, 4)
    assert idx.without_letter[c] == (0, 3, 4)
    assert idx.with_letter_not_at[a][2] == (0,)
    assert idx.without_letter[z] == (0, 1, 2, 3, 4)
    for rows in idx.with_letter_at + idx.with_letter_not_at:
        for row in rows:
            assert list(row) == sorted(set(row))


def test_lookup_index_dedupes_repeated_letters():
    idx = LookupIndex.build(["level", "llama"])
    # 'level' has 'l' at 0 and 4; listed once for every position
    assert all(row == (0, 1) for row in idx.with_letter_not_at[11][1:4])
    assert idx.with_letter_not_at[11][0] == (0, 1)  # llama: 'l' also at 1


def test_intersection_size():
    assert intersection_size([(1, 2, 3, 5), (2, 3, 4, 5), (0, 2, 5)]) == 2
    assert intersection_size([(1, 2), ()]) == 0
    assert intersection_size([(0, 1, 2)]) == 3
    assert intersection_size([]) == 0


@pytest.mark.parametrize("cls", [IndexedScorer, BruteForceScorer])
def test_degenerate_inputs(cls):
    with pytest.raises(PreconditionError):
        cls([])
    with pytest.raises(PreconditionError):
        cls(["crane", "toolong"])
    scorer = cls(SMALL)
    with pytest.raises(PreconditionError):
        scorer.score("cranes", "crane")
    with pytest.raises(PreconditionError):
        aggregate("crane", ["crane"], cls(["crane"]))


def _synthetic_words(count, seed):
    # small alphabet so patterns overlap heavily and lists are long
    rng = random.Random(seed)
    words = set()
    while len(words) < count:
        words.add("".join(rng.choice("aeilnorst") for _ in range(5)))
    return sorted(words)


def test_strategies_agree_on_large_synthetic_set():
    answers = _synthetic_words(250, seed=3)
    indexed, brute = IndexedScorer(answers), BruteForceScorer(answers)
    for guess in answers[::25] + ["crane", "eerie"]:
        for target in answers:
            assert indexed.score(guess, target) == brute.score(guess, target), (guess, target)


def test_intersection_size_matches_set_intersection():
    rng = random.Random(11)
    for _ in range(200):
        k = rng.randint(1, 5)
        lists = [tuple(sorted(rng.sample(range(300), rng.randint(0, 120)))) for _ in range(k)]
        expected = len(set.intersection(*(set(lst) for lst in lists)))
        assert intersection_size(lists) == expected


def test_intersection_size_with_short_list_far_ahead():
    long = tuple(range(100_000))
    assert intersection_size([long, (99_998, 99_999), long[::2]]) == 1


@pytest.mark.parametrize("cls", [IndexedScorer, BruteForceScorer])
def test_scorers_reject_words_of_other_lengths(cls):
    with pytest.raises(PreconditionError):
        cls(["planet", "palate"])


def test_lookup_index_rejects_words_of_other_lengths():
    with pytest.raises(PreconditionError):
        LookupIndex.build(["planet", "palate"])
