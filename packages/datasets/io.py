from __future__ import annotations

import json
from pathlib import Path
from typing import List

from packages.engine.errors import CorpusError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises CorpusError if the path doesn't exist or is not valid UTF-8.
    """
    p = Path(p)
    if not p.exists():
        raise CorpusError(f"word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CorpusError(f"{p} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise CorpusError(f"cannot read {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def read_words(p: Path | str) -> List[str]:
    """
    Read a word list.

    - *.json : a JSON array of strings, e.g. ["arise", "crane"]
    - other  : one word per line; blank lines are dropped

    Entries are returned as found (no case folding, no dedupe); validation
    is the caller's job. Raises CorpusError on any read/parse problem.
    """
    p = Path(p)
    if p.suffix.lower() != ".json":
        return [ln.strip() for ln in read_lines(p) if ln.strip()]

    try:
        words = json.loads("\n".join(read_lines(p)))
    except json.JSONDecodeError as e:
        raise CorpusError(f"{p} is not valid JSON: {e}") from e
    if not isinstance(words, list):
        raise CorpusError(f"{p} must contain a JSON array of words; got {type(words).__name__}")
    bad = [w for w in words if not isinstance(w, str)]
    if bad:
        raise CorpusError(f"{p} contains non-string entries (e.g., {bad[:5]})")
    return words

