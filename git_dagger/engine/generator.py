"""Random DAG generator.

Builds an adjacency list over vertices 0..n-1 in which every edge points
from a lower index to a strictly higher one, so the graph is acyclic by
construction. Vertex 0 (the head) always gets the backbone edge to vertex 1,
and every vertex from 2 onward is guaranteed at least one edge from a lower
index by rejection sampling the whole candidate scan.

The probability of an edge between child c and parent v is

    p(c, v) = 0.5 * exp(-linearity * (v - c - 1))

so immediate neighbours are most likely and a larger linearity suppresses
long-range edges, pushing the graph toward a single chain.
"""

import math
import random

import structlog

from git_dagger.models.dag import AdjacencyList, RandomSource

logger = structlog.get_logger()


def edge_probability(child: int, parent: int, linearity: float) -> float:
    """Probability that `parent` is drawn as a parent of `child`.

    The gap exponent is never positive for non-negative linearity, so the
    result lies in (0, 0.5]. A negative linearity amplifies long-range edges
    and may overflow to infinity, which simply means "always".
    """
    gap = parent - child - 1
    if gap == 0:
        return 0.5
    exponent = -linearity * gap
    try:
        return 0.5 * math.exp(exponent)
    except OverflowError:
        return math.inf


def generate_dag(
    n: int,
    linearity: float = 0.0,
    rng: RandomSource | None = None,
    max_trials: int | None = None,
) -> AdjacencyList:
    """Generate a random DAG with a single head and a single root.

    Args:
        n: Number of vertices
        linearity: Decay rate of edge probability with index distance
        rng: Uniform [0, 1) source; defaults to a private random.Random
        max_trials: Optional cap on rejection-sampling scans per vertex. Once
            exhausted, the edge (v-1, v) is forced. This skews the
            distribution, so it is off by default.

    Returns:
        Adjacency list where entry i holds the parent indices of vertex i
    """
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")
    if max_trials is not None and max_trials < 1:
        raise ValueError(f"max_trials must be at least 1, got {max_trials}")

    draw = rng if rng is not None else random.Random().random

    dag: AdjacencyList = [[] for _ in range(n)]
    if n > 1:
        dag[0].append(1)

    for vertex in range(2, n):
        trials = 0
        while True:
            trials += 1
            added = False
            for child in range(vertex):
                if draw() < edge_probability(child, vertex, linearity):
                    dag[child].append(vertex)
                    added = True
            if added:
                break

            if max_trials is not None and trials >= max_trials:
                logger.warning(
                    "Rejection sampling exhausted, forcing nearest edge",
                    vertex=vertex,
                    trials=trials,
                )
                dag[vertex - 1].append(vertex)
                break

        if trials > 1:
            logger.debug("Vertex needed resampling", vertex=vertex, trials=trials)

    logger.debug(
        "Generated DAG",
        vertices=n,
        edges=sum(len(parents) for parents in dag),
        linearity=linearity,
    )
    return dag
