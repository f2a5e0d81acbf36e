"""
Median elimination score for one guess.

The guess is played against every answer-set word except itself; each
simulated game yields an elimination count. The counts are sorted and the
value at index len(counts) // 2 is the guess's score. For an even number of
counts that is the upper of the two middle values.
"""

from __future__ import annotations

from typing import List, Sequence

from packages.engine.errors import PreconditionError
from packages.engine.validation import require_word

from .scorers import BaseScorer


def elimination_counts(guess: str, answers: Sequence[str], scorer: BaseScorer) -> List[int]:
    """Sorted elimination counts of `guess` against every other answer."""
    require_word(guess, scorer.N, "guess")
    return sorted(scorer.score(guess, target) for target in answers if target != guess)


def aggregate(guess: str, answers: Sequence[str], scorer: BaseScorer) -> int:
    """
    Return the median elimination count of `guess` over `answers`.

    Raises PreconditionError when there is no other answer to play against
    (empty answer set, or one made of `guess` alone).
    """
    counts = elimination_counts(guess, answers, scorer)
    if not counts:
        raise PreconditionError(
            f"no targets to score {guess!r} against; answer set has no other words")
    return counts[len(counts) // 2]
