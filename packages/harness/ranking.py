"""
Ranking of scored guesses.

Results arrive from the scheduler in arbitrary order; rank() imposes the
final deterministic order (score descending, then word ascending) and keeps
the first `top` entries, each tagged with whether it is itself a possible
answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from .core import ScoreResult

# Default number of candidates to report.
TOP_K = 10


@dataclass(frozen=True)
class RankedCandidate:
    word: str
    score: int
    valid: bool  # also a member of the answer set


def rank(results: Iterable[ScoreResult], answers: Iterable[str],
         top: int = TOP_K) -> List[RankedCandidate]:
    if top < 0:
        raise ValueError(f"top must be >= 0; got {top}")
    answer_set = set(answers)
    ordered = sorted(results, key=lambda r: (-r.score, r.word))
    return [RankedCandidate(r.word, r.score, r.word in answer_set) for r in ordered[:top]]


def format_report(ranked: List[RankedCandidate]) -> str:
    """
    Console block, e.g.

        Top 2 candidates:

            * arise 4 (valid)
            * roate 4
    """
    lines = [f"Top {len(ranked)} candidates:", ""]
    for c in ranked:
        tag = " (valid)" if c.valid else ""
        lines.append(f"\t * {c.word} {c.score}{tag}")
    return "\n".join(lines)
