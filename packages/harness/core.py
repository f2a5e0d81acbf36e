"""
Parallel scheduler for scoring a whole guess dictionary.

- partition: split the dictionary into contiguous chunks, one per worker.
- run:       score every guess in every chunk and collect ScoreResults.

Each worker process builds its own scorer once (executor initializer) from the
read-only answer set, then walks its chunk sequentially, putting one
ScoreResult per guess on a shared results queue. The coordinator drains
exactly as many results as guesses were scheduled, then waits for every
worker task to return.
Result order across workers is not defined; the ranker sorts afterwards.

A failure in any worker aborts the whole run; a partial ranking is not
meaningful.
"""

from __future__ import annotations

import logging
import multiprocessing as mp
import multiprocessing.queues
import os
import queue
import time
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from packages.elimination import aggregate, create_scorer
from packages.elimination.scorers import BaseScorer
from packages.engine.errors import PreconditionError
from packages.engine.validation import WORD_LENGTH, require_word

logger = logging.getLogger(__name__)

BACKENDS = ("process", "serial")

# Seconds the coordinator waits on the results queue before checking
# whether a worker has failed.
_POLL_SECONDS = 0.2


@dataclass(frozen=True)
class ScoreResult:
    word: str
    score: int


def partition(words: Sequence[str], workers: int, *,
              drop_remainder: bool = False) -> List[List[str]]:
    """
    Split `words` into at most `workers` contiguous chunks.

    drop_remainder=False (default): sizes differ by at most one and every
        word lands in exactly one chunk.
    drop_remainder=True: every chunk has len(words) // workers words and the
        last len(words) % workers words are left out (legacy behaviour).

    Empty chunks are omitted.
    """
    if workers < 1:
        raise ValueError(f"workers must be >= 1; got {workers}")
    words = list(words)

    if drop_remainder:
        size = len(words) // workers
        chunks = [words[i * size:(i + 1) * size] for i in range(workers)]
    else:
        base, extra = divmod(len(words), workers)
        chunks, start = [], 0
        for i in range(workers):
            end = start + base + (1 if i < extra else 0)
            chunks.append(words[start:end])
            start = end
    return [c for c in chunks if c]


# ---- worker side ----

# Per-process state installed by _init_worker. Read-only once set.
_SCORER: Optional[BaseScorer] = None
_RESULTS = None


def _init_worker(answers: List[str], strategy: str, results) -> None:
    global _SCORER, _RESULTS
    _SCORER = create_scorer(strategy, answers)
    _RESULTS = results
    if isinstance(results, multiprocessing.queues.Queue):
        # a dying or aborted worker must not block on unread results
        results.cancel_join_thread()


def _score_chunk(chunk: List[str]) -> int:
    """Score each guess of `chunk` in order; returns how many were emitted."""
    scorer = _SCORER
    for guess in chunk:
        _RESULTS.put(ScoreResult(guess, aggregate(guess, scorer.answers, scorer)))
    return len(chunk)


# ---- coordinator side ----

def _drain(results, expected: int, bar: tqdm, futures=()) -> List[ScoreResult]:
    """
    Pull `expected` results off the queue. If any of `futures` fails
    meanwhile (an exception in a worker, or a worker process dying, which
    surfaces as BrokenProcessPool), re-raise it.
    """
    out: List[ScoreResult] = []
    while len(out) < expected:
        try:
            r = results.get(timeout=_POLL_SECONDS)
        except queue.Empty:
            for f in futures:
                if f.done() and f.exception() is not None:
                    raise f.exception()
            continue
        out.append(r)
        bar.update(1)
    return out


def run(
        dictionary: Sequence[str],
        answers: Sequence[str],
        *,
        workers: int | None = None,
        strategy: str = "indexed",
        backend: str = "process",
        drop_remainder: bool = False,
        progress: bool = False,
) -> List[ScoreResult]:
    """
    Score every guess in `dictionary` against `answers`.

    Args:
        dictionary:     guesses to score
        answers:        the answer set (targets and elimination population)
        workers:        parallel worker count (default: os.cpu_count())
        strategy:       scorer id, "indexed" or "brute_force"
        backend:        "process" (ProcessPoolExecutor) or "serial"
        drop_remainder: reproduce the legacy chunking that skips the last
                        len(dictionary) % workers guesses
        progress:       show a tqdm bar on stderr

    Returns:
        One ScoreResult per scheduled guess, in no particular order.
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Available: {list(BACKENDS)}")
    if not answers:
        raise PreconditionError("answer set is empty; nothing to score against")
    for g in dictionary:
        require_word(g, WORD_LENGTH, "guess")

    if workers is None:
        workers = os.cpu_count() or 1
    chunks = partition(dictionary, workers, drop_remainder=drop_remainder)
    expected = sum(len(c) for c in chunks)

    dropped = len(dictionary) - expected
    if dropped:
        logger.warning("dropping %d trailing guess(es) not covered by %d equal chunks",
                       dropped, workers)
    logger.info("scoring %d guesses against %d answers with %d %s worker(s) [%s]",
                expected, len(answers), len(chunks), backend, strategy)
    logger.debug("chunk sizes: %s", [len(c) for c in chunks])

    t0 = time.time()
    with tqdm(total=expected, ncols=80, desc="Scoring candidates", unit="word",
              disable=not progress) as bar:
        if backend == "serial" or not chunks:
            results = queue.Queue()
            _init_worker(list(answers), strategy, results)
            for chunk in chunks:
                _score_chunk(chunk)
            out = _drain(results, expected, bar)
        else:
            ctx = mp.get_context()
            results = ctx.Queue()
            executor = ProcessPoolExecutor(max_workers=len(chunks), mp_context=ctx,
                                           initializer=_init_worker,
                                           initargs=(list(answers), strategy, results))
            try:
                futures = [executor.submit(_score_chunk, c) for c in chunks]
                out = _drain(results, expected, bar, futures)
                # barrier: every worker has returned
                for f in futures:
                    f.result()
            except BrokenProcessPool:
                logger.error("a worker process died; aborting the run")
                raise
            finally:
                executor.shutdown(wait=True, cancel_futures=True)

    logger.info("scored %d guesses in %.1fs", len(out), time.time() - t0)
    return out
