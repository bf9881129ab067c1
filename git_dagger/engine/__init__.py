"""DAG generation engine.

- Generator: randomized single-head DAG construction
- Inspection: invariant checks and shape statistics
"""

from .generator import edge_probability, generate_dag
from .inspection import find_index_violations, find_violations, iter_edges, summarize

__all__ = [
    # Generator
    "edge_probability",
    "generate_dag",
    # Inspection
    "find_index_violations",
    "find_violations",
    "iter_edges",
    "summarize",
]
