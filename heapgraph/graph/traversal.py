"""
Traversal algorithms over a Graph: breadth-first search and Dijkstra.

Both start from a Vertex (see Graph.get_vertex) and keep their own
visited bookkeeping, so a graph can be traversed any number of times.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable

from heapgraph.graph.model import Edge, Vertex
from heapgraph.heap import BinaryHeap

logger = logging.getLogger(__name__)

VisitFunction = Callable[[Vertex, Edge], None]


def log_edge(vertex: Vertex, edge: Edge) -> None:
    """Default BFS callback: log each traversed edge."""
    logger.info(f"{vertex.key} -> {edge.vertex.key} (cost {edge.cost})")


def bfs(source: Vertex, visit: VisitFunction = log_edge) -> None:
    """
    Breadth-first traversal from ``source``.

    Calls ``visit(vertex, edge)`` once for every outgoing edge of each
    reachable vertex. Destinations are enqueued without checking whether
    they were already seen; a vertex is skipped when dequeued a second
    time, so its edges are visited exactly once even on cyclic graphs.

    Args:
        source: Starting vertex
        visit: Callback invoked per traversed edge
    """
    visited: set[Hashable] = set()
    queue = deque([source])

    while queue:
        current = queue.popleft()
        if current.key in visited:
            continue

        for edge in current.edges:
            visit(current, edge)
            queue.append(edge.vertex)

        visited.add(current.key)


def dijkstra(source: Vertex) -> dict[Hashable, float]:
    """
    Minimum cost from ``source`` to every reachable vertex.

    The working queue holds (cost, vertex) entries ordered by the cost
    recorded when the entry was pushed. A vertex whose distance improves
    is pushed again instead of being repositioned; stale copies are
    discarded when popped after their vertex was settled.

    Entry costs are never read back from the distance map: once an entry
    is placed, its key must not change or the heap order breaks.

    Edge costs must be non-negative. Negative costs are not detected and
    may produce wrong distances (the visited check still guarantees
    termination).

    Args:
        source: Starting vertex

    Returns:
        Dict mapping vertex key to minimum cost. Unreachable vertices
        are absent.
    """
    distance: dict[Hashable, float] = {source.key: 0}
    visited: set[Hashable] = set()

    queue: BinaryHeap[tuple[float, Vertex]] = BinaryHeap(
        [(0, source)],
        compare=lambda child, parent: child[0] < parent[0],
    )

    stale_pops = 0
    while len(queue) > 0:
        _, current = queue.pop()
        if current.key in visited:
            stale_pops += 1
            continue

        visited.add(current.key)
        for edge in current.edges:
            # Relax: keep the cheaper of the recorded and candidate costs
            candidate = distance[current.key] + edge.cost
            known = distance.get(edge.vertex.key)
            if known is None or candidate < known:
                distance[edge.vertex.key] = candidate
            queue.push((distance[edge.vertex.key], edge.vertex))

    logger.debug(
        f"Dijkstra from {source.key!r}: settled {len(visited)} vertices, "
        f"discarded {stale_pops} stale entries"
    )
    return distance
