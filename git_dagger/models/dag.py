"""DAG models.

An adjacency list maps each vertex index to the indices that become the
parents of that vertex's commit. Vertex 0 is the head (the commit handed
back to the user); vertex n-1 is the root (the parentless commit).
"""

from typing import Callable

from pydantic import BaseModel, Field

# Entry i lists the parent indices of vertex i, each strictly greater than i
AdjacencyList = list[list[int]]

# Zero-argument callable returning a uniform float in [0, 1)
RandomSource = Callable[[], float]


class DagSummary(BaseModel):
    """Shape statistics for a generated DAG."""

    vertex_count: int = Field(..., ge=0)
    edge_count: int = Field(..., ge=0)
    max_parents: int = Field(default=0, description="Largest parent count of any vertex")
    merge_count: int = Field(default=0, description="Vertices with two or more parents")
    longest_path: int = Field(default=0, description="Edges on the longest path starting at the head")
