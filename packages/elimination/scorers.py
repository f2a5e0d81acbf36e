"""
Elimination scorers.

Both strategies answer the same question for a (guess, target) pair:
how many answer-set words are inconsistent with the pattern that `guess`
would receive if `target` were the hidden answer?

    eliminated = |answers| - |{a in answers : every constraint of
                                derive(guess, target) holds for a}|

  - "indexed"     : intersect precomputed sorted candidate lists with a
                    k-way merge (fast; used for bulk runs)
  - "brute_force" : run the candidate filter over the whole answer set
                    (simple; used to cross-check the indexed scorer)

Scorers register themselves in REGISTRY by `id`,
so callers pick a strategy by name.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Dict, List, Sequence, Type

from packages.engine.constraints import (Absent, ExactAt, PresentNotAt,
                                         filter_candidates)
from packages.engine.errors import PreconditionError
from packages.engine.patterns import derive
from packages.engine.validation import WORD_LENGTH, require_word

from .index import LookupIndex, Row, letter_index

# ---- Global scorer registry ----
REGISTRY: Dict[str, Type["BaseScorer"]] = {}


def register(cls: Type["BaseScorer"]) -> Type["BaseScorer"]:
    """
    Decorator: @register on a scorer class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate scorer id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseScorer:
    id = "base"
    name = "Base"

    def __init__(self, answers: Sequence[str]):
        if not answers:
            raise PreconditionError("answer set is empty; nothing can be eliminated")
        # positions past WORD_LENGTH cannot be expressed as constraints
        self.N: int = WORD_LENGTH
        for w in answers:
            require_word(w, self.N, "answer")
        self.answers: List[str] = list(answers)
        self.total: int = len(self.answers)

    def score(self, guess: str, target: str) -> int:
        """Number of answer-set words eliminated by derive(guess, target)."""
        if len(guess) != self.N:
            raise PreconditionError(f"guess {guess!r} is not {self.N} letters long")
        if len(target) != self.N:
            raise PreconditionError(f"target {target!r} is not {self.N} letters long")
        return self._eliminated(guess, target)

    def _eliminated(self, guess: str, target: str) -> int:
        raise NotImplementedError("Override in subclass")


def intersection_size(lists: Sequence[Row]) -> int:
    """
    Count values present in every list, given lists sorted ascending.

    Walks all lists in lock-step. The largest current head is the only value
    that can still be common, so every list whose head is behind it jumps
    forward to it by binary search. When all heads agree that value is a
    survivor and every list advances past it. Stops as soon as any list runs
    out.
    """
    if not lists:
        return 0
    # shortest first: it bounds the result and usually sets the pace
    lists = sorted(lists, key=len)
    heads = [0] * len(lists)
    survivors = 0
    while True:
        largest = None
        for lst, h in zip(lists, heads):
            if h == len(lst):
                return survivors
            v = lst[h]
            if largest is None or v > largest:
                largest = v

        in_all = True
        for k, lst in enumerate(lists):
            if lst[heads[k]] < largest:
                heads[k] = bisect_left(lst, largest, heads[k])
                in_all = False
        if in_all:
            survivors += 1
            heads = [h + 1 for h in heads]


@register
class IndexedScorer(BaseScorer):
    id = "indexed"
    name = "Indexed merge"

    def __init__(self, answers: Sequence[str]):
        super().__init__(answers)
        self.index = LookupIndex.build(self.answers)

    def candidate_lists(self, guess: str, target: str) -> List[Row]:
        """Map each constraint of the pattern to its precomputed list."""
        idx = self.index
        lists: List[Row] = []
        for c in derive(guess, target):
            li = letter_index(c.letter)
            if isinstance(c, ExactAt):
                lists.append(idx.with_letter_at[li][c.position])
            elif isinstance(c, PresentNotAt):
                lists.append(idx.with_letter_not_at[li][c.position])
            elif isinstance(c, Absent):
                lists.append(idx.without_letter[li])
        return lists

    def _eliminated(self, guess: str, target: str) -> int:
        return self.total - intersection_size(self.candidate_lists(guess, target))


@register
class BruteForceScorer(BaseScorer):
    id = "brute_force"
    name = "Brute-force scan"

    def _eliminated(self, guess: str, target: str) -> int:
        survivors = filter_candidates(self.answers, derive(guess, target))
        return self.total - len(survivors)


def create_scorer(scorer_id: str, answers: Sequence[str]) -> BaseScorer:
    """
    Factory: instantiate a registered scorer by id over `answers`.
    """
    try:
        cls = REGISTRY[scorer_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown scorer id: {scorer_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(answers)


def get_scorer_ids() -> List[str]:
    """
    Return all registered scorer ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
