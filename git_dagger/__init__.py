"""git-dagger - random commit DAG synthesizer.

Generates a random directed acyclic graph with a single head and a single
root, then writes it into a git repository as a set of empty-tree commits
whose parent links mirror the graph's edges.
"""

__version__ = "0.1.0"
