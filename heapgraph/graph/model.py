"""
Directed, weighted graph built from an edge list.

Usage:
    from heapgraph.graph import Graph

    graph = Graph.create([(1, 2, 2), (1, 3, 4), (2, 3, 1)])
    graph.get_vertex(1).edges  # -> [Edge(2, cost=2), Edge(3, cost=4)]
    graph.get_vertex(99)       # -> None
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass(eq=False)
class Edge:
    """
    Directed link to a destination vertex.

    Attributes:
        vertex: Destination vertex (not owned)
        cost: Non-negative traversal cost
    """

    vertex: Vertex
    cost: float

    def __repr__(self) -> str:
        return f"Edge({self.vertex.key!r}, cost={self.cost!r})"


@dataclass(eq=False)
class Vertex(Generic[K]):
    """
    Graph vertex identified by its key.

    Two vertices with the same key compare equal and hash alike,
    regardless of their edges.

    Attributes:
        key: Unique hashable identifier
        edges: Outgoing edges in insertion order
    """

    key: K
    edges: list[Edge] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Vertex({self.key!r}, edges={len(self.edges)})"


class Graph(Generic[K]):
    """
    Graph holding a lookup table of key -> Vertex.

    Vertices are created lazily while building from an edge list and are
    never removed. Self-loops and parallel edges are kept as distinct edges.
    """

    def __init__(self) -> None:
        self.lookup: dict[K, Vertex[K]] = {}

    @classmethod
    def create(cls, edges: Iterable[tuple[K, K, float]]) -> Graph[K]:
        """
        Build a graph from (source, destination, cost) triples.

        Entries are processed in order, so each vertex's adjacency list
        mirrors the order its edges appear in the input.
        """
        graph = cls()
        for src, dst, cost in edges:
            src_vertex = graph._get_or_create(src)
            dst_vertex = graph._get_or_create(dst)
            src_vertex.edges.append(Edge(dst_vertex, cost))
        return graph

    def _get_or_create(self, key: K) -> Vertex[K]:
        vertex = self.lookup.get(key)
        if vertex is None:
            vertex = Vertex(key)
            self.lookup[key] = vertex
        return vertex

    # =========================================================================
    # Accessors
    # =========================================================================

    def get_vertex(self, key: K) -> Vertex[K] | None:
        """Get vertex by key, or None if not found."""
        return self.lookup.get(key)

    def keys(self) -> list[K]:
        """All vertex keys in creation order."""
        return list(self.lookup)

    def edges(self) -> Iterator[tuple[K, K, float]]:
        """Iterate (source, destination, cost) triples in adjacency order."""
        for vertex in self.lookup.values():
            for edge in vertex.edges:
                yield vertex.key, edge.vertex.key, edge.cost

    def edge_count(self) -> int:
        """Total number of directed edges."""
        return sum(len(vertex.edges) for vertex in self.lookup.values())

    def __contains__(self, key: object) -> bool:
        return key in self.lookup

    def __len__(self) -> int:
        return len(self.lookup)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def stats(self) -> dict:
        """Get statistics about the graph."""
        triples = list(self.edges())
        return {
            "vertices": len(self.lookup),
            "edges": len(triples),
            "self_loops": sum(1 for src, dst, _ in triples if src == dst),
            "negative_costs": sum(1 for _, _, cost in triples if cost < 0),
            "sinks": sum(1 for vertex in self.lookup.values() if not vertex.edges),
        }

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.lookup)}, edges={self.edge_count()})"


def build_graph(edges: Iterable[tuple[K, K, float]]) -> Graph[K]:
    """Build a graph from (source, destination, cost) triples."""
    return Graph.create(edges)
