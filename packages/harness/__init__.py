from .core import ScoreResult, partition, run
from .ranking import TOP_K, RankedCandidate, format_report, rank
from .io import write_csv, write_manifest

__all__ = [
    "ScoreResult", "partition", "run",
    "TOP_K", "RankedCandidate", "format_report", "rank",
    "write_csv", "write_manifest",
]
