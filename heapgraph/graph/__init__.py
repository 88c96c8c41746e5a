"""
Graph algorithms module.

Provides a weighted directed graph and traversals over it:
- Graph / Vertex / Edge: Graph model built from an edge list
- bfs: Level-order traversal with a per-edge callback
- dijkstra: Single-source minimum costs via the binary heap
"""

from heapgraph.graph.model import Edge, Graph, Vertex, build_graph
from heapgraph.graph.traversal import bfs, dijkstra, log_edge

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "build_graph",
    "bfs",
    "dijkstra",
    "log_edge",
]
