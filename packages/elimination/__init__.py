from .aggregate import aggregate, elimination_counts
from .index import LookupIndex
from .scorers import (REGISTRY, BaseScorer, BruteForceScorer, IndexedScorer,
                      create_scorer, get_scorer_ids, intersection_size, register)

__all__ = [
    "aggregate", "elimination_counts", "LookupIndex",
    "REGISTRY", "BaseScorer", "BruteForceScorer", "IndexedScorer",
    "create_scorer", "get_scorer_ids", "intersection_size", "register",
]
