"""
Precomputed lookup tables for the indexed elimination strategy.

Built once from the (sorted) answer set and never mutated afterwards:

  without_letter[letter]                 words that do not contain `letter`
  with_letter_at[letter][position]       words with `letter` at `position`
  with_letter_not_at[letter][position]   words containing `letter` anywhere
                                         except `position`

Letters are indexed 0..25 ('a'..'z'), positions 0..N-1, so every lookup is
two list indexings. Entries are answer-set indices rather than the words
themselves, kept ascending: every table follows the answer set's own order
(lexicographic, as loaded) and stays merge-compatible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from packages.engine.errors import PreconditionError
from packages.engine.validation import ALPHABET, WORD_LENGTH, require_word

Row = Tuple[int, ...]


def letter_index(letter: str) -> int:
    return ord(letter) - ord("a")


@dataclass(frozen=True)
class LookupIndex:
    total: int
    N: int
    without_letter: Tuple[Row, ...]                  # [26]
    with_letter_at: Tuple[Tuple[Row, ...], ...]      # [26][N]
    with_letter_not_at: Tuple[Tuple[Row, ...], ...]  # [26][N]

    @classmethod
    def build(cls, answers: Sequence[str]) -> "LookupIndex":
        """
        Build the tables from `answers`.

        Preconditions:
          - answers is non-empty
          - every word is WORD_LENGTH lowercase letters a-z
        """
        if not answers:
            raise PreconditionError("cannot build a lookup index from an empty answer set")
        N = WORD_LENGTH
        for w in answers:
            require_word(w, N, "answer")

        # (words x N) matrix of letter codes 0..25
        codes = (np.frombuffer("".join(answers).encode("ascii"), dtype=np.uint8)
                 .reshape(len(answers), N) - ord("a"))

        def rows(mask: np.ndarray) -> Row:
            return tuple(int(i) for i in np.flatnonzero(mask))

        without, at, not_at = [], [], []
        for code in range(len(ALPHABET)):
            hits = codes == code            # (words x N) bool
            contains = hits.any(axis=1)
            without.append(rows(~contains))
            at.append(tuple(rows(hits[:, p]) for p in range(N)))
            not_at.append(tuple(
                rows(np.delete(hits, p, axis=1).any(axis=1)) for p in range(N)))

        return cls(
            total=len(answers),
            N=N,
            without_letter=tuple(without),
            with_letter_at=tuple(at),
            with_letter_not_at=tuple(not_at),
        )
