"""
Parsing of the user constraint flags into Constraint values.

Formats (positions are zero-based):
  without letters        "abc"           -> Absent(a), Absent(b), Absent(c)
  letters at position    "a=0,b=2"       -> ExactAt(a,0), ExactAt(b,2)
  letters not at position "a=0,b=2"       -> PresentNotAt(a,0), PresentNotAt(b,2)

Malformed tokens are rejected with a ConstraintError that quotes the token;
nothing is coerced to a default letter or position.
"""

from typing import Callable, List, Optional, Tuple

from .constraints import Absent, Constraint, ExactAt, PresentNotAt
from .errors import ConstraintError


def parse_without_letters(text: Optional[str]) -> List[Absent]:
    if not text:
        return []
    out: List[Absent] = []
    for ch in text:
        if ch.isspace() or ch == ",":
            continue
        try:
            out.append(Absent(ch))
        except ConstraintError as e:
            raise ConstraintError(f"invalid letter {ch!r} in {text!r}: {e}") from e
    return out


def _split_pair(token: str) -> Tuple[str, int]:
    """'a=3' -> ('a', 3); raises ConstraintError naming the token."""
    letter, sep, pos = token.partition("=")
    letter, pos = letter.strip(), pos.strip()
    if not sep or not letter or not pos:
        raise ConstraintError(f"expected letter=position, got {token!r}")
    try:
        position = int(pos)
    except ValueError as e:
        raise ConstraintError(f"position is not an integer in {token!r}") from e
    return letter, position


def _parse_pairs(text: Optional[str], make: Callable[[str, int], Constraint]) -> List[Constraint]:
    if not text:
        return []
    out: List[Constraint] = []
    for token in text.split(","):
        if not token.strip():
            continue
        letter, position = _split_pair(token)
        try:
            out.append(make(letter, position))
        except ConstraintError as e:
            raise ConstraintError(f"invalid constraint {token.strip()!r}: {e}") from e
    return out


def parse_letters_at_position(text: Optional[str]) -> List[Constraint]:
    return _parse_pairs(text, ExactAt)


def parse_letters_not_at_position(text: Optional[str]) -> List[Constraint]:
    return _parse_pairs(text, PresentNotAt)


def parse_user_constraints(
        without_letters: Optional[str] = None,
        at_position: Optional[str] = None,
        not_at_position: Optional[str] = None,
) -> List[Constraint]:
    """Parse all three flags; result order is without, at, not-at."""
    return (
        list(parse_without_letters(without_letters))
        + parse_letters_at_position(at_position)
        + parse_letters_not_at_position(not_at_position)
    )
