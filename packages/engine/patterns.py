"""
Feedback pattern derivation for a single (guess, target) pair.

For each guess position i, in order:
  - guess[i] == target[i]        -> ExactAt(guess[i], i)
  - guess[i] occurs in target    -> PresentNotAt(guess[i], i)
  - otherwise                    -> Absent(guess[i])

The "occurs in target" test is plain membership over the whole target word.
Letter multiplicities are NOT tracked: a guess letter is reported as present
even when the target's only copy of it is already matched exactly at another
position. This differs from the game's duplicate-letter rule and is kept as
is; every scorer derives patterns through this function so they agree.
"""

from typing import List

from .constraints import Absent, Constraint, ExactAt, PresentNotAt

Pattern = List[Constraint]


def derive(guess: str, target: str) -> Pattern:
    """
    Return one constraint per guess position, in guess-index order.

    Preconditions:
      - len(guess) == len(target), both validated words

    Examples:
      derive("crate", "crane") -> [ExactAt(c,0), ExactAt(r,1), ExactAt(a,2),
                                   Absent(t), ExactAt(e,4)]
    """
    pattern: Pattern = []
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern.append(ExactAt(g, i))
        elif g in target:
            pattern.append(PresentNotAt(g, i))
        else:
            pattern.append(Absent(g))
    return pattern

