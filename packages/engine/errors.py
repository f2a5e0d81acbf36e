"""
Error taxonomy for the elimination ranker.

All errors derive from ValueError so callers that only care about "bad input"
can catch one type. They are raised at the boundary (corpus loading,
constraint construction, scorer construction) and never inside the scoring
hot path once inputs have been validated.
"""


class WordleRankError(ValueError):
    """Base class for every input error raised by this project."""


class ConstraintError(WordleRankError):
    """A user-supplied constraint token is malformed (bad letter/position)."""


class CorpusError(WordleRankError):
    """A word list is missing, unreadable, or contains malformed words."""


class PreconditionError(WordleRankError):
    """Scoring was asked to work on degenerate input (empty set, wrong length)."""
