"""
Lightweight word validation.

A word is valid iff:
  - it is a string
  - it is lowercase a–z only
  - it has exact length N

`require_word` is the raising flavour used at construction boundaries
(scorers, aggregator, scheduler); `is_valid_word` is the boolean flavour
used when building reports.
"""

from .errors import PreconditionError

# Every word in every collection has this length.
WORD_LENGTH = 5

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def is_valid_word(word, N: int = WORD_LENGTH) -> bool:
    """Return True if `word` is a clean N-letter lowercase a–z token."""
    if not isinstance(word, str):
        return False
    return len(word) == N and all(ch in ALPHABET for ch in word)


def require_word(word, N: int = WORD_LENGTH, what: str = "word") -> str:
    """
    Return `word` unchanged if valid, otherwise raise PreconditionError.

    `what` names the role of the value ("guess", "target", ...) in the message.
    """
    if not is_valid_word(word, N):
        raise PreconditionError(f"{what} must be {N} lowercase letters a-z; got {word!r}")
    return word

