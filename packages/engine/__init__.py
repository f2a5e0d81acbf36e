from .constraints import (Absent, Constraint, ExactAt, PresentNotAt, evaluate,
                          filter_candidates, sort_by_priority)
from .errors import ConstraintError, CorpusError, PreconditionError, WordleRankError
from .parsing import parse_user_constraints
from .patterns import derive
from .validation import WORD_LENGTH, is_valid_word, require_word

__all__ = [
    "Absent", "Constraint", "ExactAt", "PresentNotAt", "evaluate",
    "filter_candidates", "sort_by_priority",
    "ConstraintError", "CorpusError", "PreconditionError", "WordleRankError",
    "parse_user_constraints",
    "derive",
    "WORD_LENGTH", "is_valid_word", "require_word",
]
