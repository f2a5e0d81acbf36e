"""
Corpus validation and loading.

What this module does:
- Validate a pair of word lists: the answer set (possible hidden answers) and
  the guess dictionary (extra legal guesses). Either may be a JSON array or a
  newline-separated text file.
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid entries; compute SHA-256 of the raw files.
- Report whether answers ⊆ dictionary (informational: the dictionary used for
  scoring is always answers ∪ dictionary).
- load_corpus: fail-fast loader returning the sorted, deduplicated lists the
  scorer expects.

Typical use:
    from packages.datasets import load_corpus
    corpus = load_corpus("possible_answers.json", "possible_guesses.json")
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from packages.engine.errors import CorpusError
from packages.engine.validation import WORD_LENGTH, is_valid_word

from .io import read_words

logger = logging.getLogger(__name__)


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid entries encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, dictionary) pair."""
    N: int
    answers: FileReport
    dictionary: FileReport
    answers_subset_dictionary: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


@dataclass(frozen=True)
class Corpus:
    """Sorted, deduplicated word lists ready for scoring."""
    answers: List[str]
    dictionary: List[str]  # always a superset of answers


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _split_valid(words: List[str], N: int) -> Tuple[List[str], List[str]]:
    """Return (valid_words, invalid_entries) preserving input order."""
    valid: List[str] = []
    invalid: List[str] = []
    for w in words:
        (valid if is_valid_word(w, N) else invalid).append(w)
    return valid, invalid


def _file_report(path: Path, valid: List[str], invalid: List[str]) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(valid),
        sha256=_sha256_file(path),
        unique_count=len(set(valid)),
        invalid_lines=len(invalid),
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(N: int, answers_path: str, dictionary_path: str) -> Dict:
    """
    Validate the answer set / dictionary word lists for length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid counts
          - answers ⊆ dictionary check
          - `passed` boolean (non-empty answers, no invalid entries)
          - `issues` (list of strings) to surface any problems

    Unreadable files are reported as issues rather than raised.
    """
    issues: List[str] = []
    reports: Dict[str, FileReport] = {}
    valid_words: Dict[str, List[str]] = {}
    unreadable = False

    for role, raw in (("answers", answers_path), ("dictionary", dictionary_path)):
        p = Path(raw)
        if not p.exists():
            issues.append(f"{role} file not found: {raw}")
            unreadable = True
            reports[role] = FileReport(raw, False, 0, "", 0, 0)
            valid_words[role] = []
            continue
        try:
            words = read_words(p)
        except CorpusError as e:
            issues.append(str(e))
            unreadable = True
            reports[role] = FileReport(raw, True, 0, _sha256_file(p), 0, 0)
            valid_words[role] = []
            continue

        valid, invalid = _split_valid(words, N)
        reports[role] = _file_report(p, valid, invalid)
        valid_words[role] = valid

        if invalid:
            issues.append(f"{role} has {len(invalid)} invalid entries (e.g., {invalid[:5]})")
        if reports[role].count != reports[role].unique_count:
            issues.append(f"{role} contains duplicate words")

    if reports["answers"].count == 0:
        issues.append("answers file contains 0 valid words")

    subset_ok = set(valid_words["answers"]).issubset(valid_words["dictionary"])

    passed = (
            not unreadable
            and reports["answers"].invalid_lines == 0
            and reports["dictionary"].invalid_lines == 0
            and reports["answers"].count > 0
    )

    rep = ValidationReport(
        N=N,
        answers=reports["answers"],
        dictionary=reports["dictionary"],
        answers_subset_dictionary=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | dictionary=10657 (uniq=10657, sha=def456...) | answers⊆dictionary=False | OK
    """
    N = report["N"]
    a = report["answers"]
    b = report["dictionary"]
    subset = report["answers_subset_dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={N} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| dictionary={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆dictionary={subset} | {status}"
    )


def _load_one(path: str, role: str, N: int) -> List[str]:
    words = read_words(path)
    valid, invalid = _split_valid(words, N)
    if invalid:
        raise CorpusError(
            f"{role} list {path} has {len(invalid)} malformed word(s); every word must be "
            f"{N} lowercase letters a-z (e.g., {invalid[:5]})")
    unique = sorted(set(valid))
    if len(unique) != len(valid):
        logger.warning("%s list %s: dropped %d duplicate word(s)",
                       role, path, len(valid) - len(unique))
    return unique


def load_corpus(answers_path: str, dictionary_path: str) -> Corpus:
    """
    Load both word lists, failing fast on anything malformed.

    Returns a Corpus whose lists are sorted lexicographically and
    deduplicated; `dictionary` is the union of both files. Every word must be
    WORD_LENGTH letters long: the scorers only work at that length.

    Raises:
        CorpusError: missing/unreadable file, invalid JSON or encoding,
                     malformed words, or an empty answer set.
    """
    N = WORD_LENGTH
    answers = _load_one(answers_path, "answers", N)
    if not answers:
        raise CorpusError(f"answers list {answers_path} contains no words")
    guesses = _load_one(dictionary_path, "dictionary", N)
    dictionary = sorted(set(guesses) | set(answers))
    logger.info("loaded %d answers and %d dictionary words (N=%d)",
                len(answers), len(dictionary), N)
    return Corpus(answers=answers, dictionary=dictionary)
