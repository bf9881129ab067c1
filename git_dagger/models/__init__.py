"""Data models for git-dagger."""

from .commit import CommitRecord, MaterializationResult
from .dag import AdjacencyList, DagSummary, RandomSource

__all__ = [
    # DAG
    "AdjacencyList",
    "DagSummary",
    "RandomSource",
    # Commits
    "CommitRecord",
    "MaterializationResult",
]
