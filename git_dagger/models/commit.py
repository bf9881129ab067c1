"""Commit models produced by the materializer."""

from pydantic import BaseModel, Field


class CommitRecord(BaseModel):
    """A commit written for one DAG vertex."""

    index: int = Field(..., ge=0, description="Vertex index in the adjacency list")
    oid: str = Field(..., description="Commit object id")
    parents: list[str] = Field(default_factory=list, description="Parent commit ids in adjacency order")
    message: str = ""


class MaterializationResult(BaseModel):
    """Outcome of writing a whole DAG into a repository."""

    head_oid: str
    tree_oid: str
    commits: list[CommitRecord] = Field(
        default_factory=list, description="Commits in creation order (root first)"
    )

    @property
    def commit_count(self) -> int:
        return len(self.commits)

    def by_index(self) -> dict[int, CommitRecord]:
        """Map vertex index to its commit."""
        return {commit.index: commit for commit in self.commits}
