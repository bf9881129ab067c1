"""Structural checks and statistics for generated DAGs."""

from typing import Iterator

from git_dagger.models.dag import AdjacencyList, DagSummary


def iter_edges(dag: AdjacencyList) -> Iterator[tuple[int, int]]:
    """Yield (child, parent) pairs in adjacency order."""
    for child, parents in enumerate(dag):
        for parent in parents:
            yield child, parent


def find_index_violations(dag: AdjacencyList) -> list[str]:
    """Report edges whose parent index is out of range or not above the child."""
    n = len(dag)
    violations = []
    for child, parent in iter_edges(dag):
        if parent >= n or parent < 0:
            violations.append(f"vertex {child} references missing vertex {parent}")
        elif parent <= child:
            violations.append(f"edge {child} -> {parent} does not point to a higher index")
    return violations


def find_violations(dag: AdjacencyList) -> list[str]:
    """Check every structural invariant of a generated DAG.

    Returns:
        Human-readable descriptions of broken invariants; empty when valid
    """
    violations = find_index_violations(dag)
    n = len(dag)
    if n < 2:
        if n == 1 and dag[0]:
            violations.append("single vertex must have no parents")
        return violations

    if not dag[0] or dag[0][0] != 1:
        violations.append("head vertex 0 does not start with parent 1")
    if dag[-1]:
        violations.append(f"root vertex {n - 1} has parents {dag[-1]}")

    referenced = {parent for child, parent in iter_edges(dag) if child < parent}
    for vertex in range(2, n):
        if vertex not in referenced:
            violations.append(f"vertex {vertex} has no edge from a lower index")

    return violations


def summarize(dag: AdjacencyList) -> DagSummary:
    """Compute shape statistics for a valid DAG."""
    n = len(dag)
    # Longest path from each vertex toward the root; parents always have
    # higher indices, so a reverse sweep visits them first.
    depth = [0] * n
    for vertex in range(n - 1, -1, -1):
        if dag[vertex]:
            depth[vertex] = 1 + max(depth[parent] for parent in dag[vertex])

    return DagSummary(
        vertex_count=n,
        edge_count=sum(len(parents) for parents in dag),
        max_parents=max((len(parents) for parents in dag), default=0),
        merge_count=sum(1 for parents in dag if len(parents) >= 2),
        longest_path=depth[0] if n else 0,
    )
