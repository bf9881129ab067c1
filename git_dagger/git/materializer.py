"""Materializer - writes an adjacency list into git as commits.

Commits are created from the root (highest index) down to the head (index 0),
so every parent already exists when a child references it. All commits share
the empty tree; no refs, index or working tree are modified.
"""

import structlog

from git_dagger.engine.inspection import find_index_violations
from git_dagger.models.commit import CommitRecord, MaterializationResult
from git_dagger.models.dag import AdjacencyList

from .client import GitClient

logger = structlog.get_logger()


class Materializer:
    """Turns a generated DAG into persisted commit objects."""

    def __init__(self, client: GitClient):
        self.client = client
        self._logger = logger.bind(component="Materializer")

    def write_empty_tree(self) -> str:
        """Write the empty tree object and return its id."""
        return self.client.run("hash-object", "-t", "tree", "-w", "--stdin", input="")

    def create_commit(self, index: int, tree_oid: str, parent_oids: list[str]) -> CommitRecord:
        """Create the commit for a single vertex."""
        message = f"Commit #{index}"
        args = ["commit-tree", tree_oid]
        for parent in parent_oids:
            args.extend(["-p", parent])
        args.extend(["-m", message])

        oid = self.client.run(*args, env=self.client.signature_env())
        return CommitRecord(index=index, oid=oid, parents=parent_oids, message=message)

    def materialize(self, dag: AdjacencyList) -> MaterializationResult:
        """Write every vertex of the DAG as a commit.

        Args:
            dag: Adjacency list whose entry i holds the parent indices of vertex i

        Returns:
            Result whose head_oid is the commit for vertex 0

        Raises:
            ValueError: If the DAG is empty or references invalid indices
        """
        if not dag:
            raise ValueError("cannot materialize an empty DAG")
        violations = find_index_violations(dag)
        if violations:
            raise ValueError("invalid DAG: " + "; ".join(violations))

        self._logger.info("Materializing DAG", vertices=len(dag))

        tree_oid = self.write_empty_tree()
        oids: dict[int, str] = {}
        commits: list[CommitRecord] = []

        for index in range(len(dag) - 1, -1, -1):
            parent_oids = [oids[parent] for parent in dag[index]]
            record = self.create_commit(index, tree_oid, parent_oids)
            oids[index] = record.oid
            commits.append(record)
            self._logger.debug(
                "Created commit",
                index=index,
                oid=record.oid,
                parents=len(parent_oids),
            )

        head_oid = commits[-1].oid
        self._logger.info("DAG materialized", head=head_oid, commits=len(commits))
        return MaterializationResult(head_oid=head_oid, tree_oid=tree_oid, commits=commits)
