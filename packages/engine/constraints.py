"""
Constraint model and candidate filtering.

A constraint is one feedback fact about a letter:

  ExactAt(letter, position)       the word has `letter` at `position`
  PresentNotAt(letter, position)  the word has `letter` somewhere other than `position`
  Absent(letter)                  the word does not contain `letter` at all

The three kinds form a closed set. `evaluate` is the single place that knows
how each kind is checked; `filter_candidates` applies a list of them with AND
semantics.

Each kind carries a priority (lower runs first). Priority only changes how
quickly a failing word is rejected, never which words survive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, List, Sequence, Union

from .errors import ConstraintError
from .validation import ALPHABET, WORD_LENGTH


def _check_letter(letter) -> None:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise ConstraintError(f"letter must be a single character a-z; got {letter!r}")


def _check_position(position) -> None:
    # bool is an int subclass; True/False are not positions
    if isinstance(position, bool) or not isinstance(position, int):
        raise ConstraintError(f"position must be an integer; got {position!r}")
    if not 0 <= position < WORD_LENGTH:
        raise ConstraintError(
            f"position must be in [0, {WORD_LENGTH}); got {position}")


@dataclass(frozen=True)
class ExactAt:
    letter: str
    position: int

    priority: ClassVar[int] = 0

    def __post_init__(self):
        _check_letter(self.letter)
        _check_position(self.position)

    def describe(self) -> str:
        return f"With letter {self.letter} at position {self.position}"


@dataclass(frozen=True)
class PresentNotAt:
    letter: str
    position: int

    priority: ClassVar[int] = 1

    def __post_init__(self):
        _check_letter(self.letter)
        _check_position(self.position)

    def describe(self) -> str:
        return f"With letter {self.letter} at any position other than {self.position}"


@dataclass(frozen=True)
class Absent:
    letter: str

    priority: ClassVar[int] = 2

    def __post_init__(self):
        _check_letter(self.letter)

    def describe(self) -> str:
        return f"Without letter {self.letter}"


Constraint = Union[ExactAt, PresentNotAt, Absent]


def evaluate(constraint: Constraint, word: str) -> bool:
    """Return True if `word` satisfies `constraint`."""
    if isinstance(constraint, ExactAt):
        return word[constraint.position] == constraint.letter
    if isinstance(constraint, PresentNotAt):
        return any(ch == constraint.letter
                   for i, ch in enumerate(word) if i != constraint.position)
    if isinstance(constraint, Absent):
        return constraint.letter not in word
    raise TypeError(f"not a constraint: {constraint!r}")


def sort_by_priority(constraints: Iterable[Constraint]) -> List[Constraint]:
    """Stable sort, cheapest/most selective kinds first."""
    return sorted(constraints, key=lambda c: c.priority)


def filter_candidates(words: Iterable[str], constraints: Sequence[Constraint]) -> List[str]:
    """
    Keep only the words that satisfy EVERY constraint.

    Args:
      words       : iterable of candidate words (already validated)
      constraints : constraints to AND together; an empty list keeps everything

    Returns:
      List[str] of surviving words, order preserved as in `words`.
    """
    ordered = sort_by_priority(constraints)

    out: List[str] = []
    for w in words:
        # all() short-circuits on the first failing constraint
        if all(evaluate(c, w) for c in ordered):
            out.append(w)
    return out
