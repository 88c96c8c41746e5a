"""
Data loading module.

Provides edge-list file I/O and validation.

Usage:
    from heapgraph.data import load_graph

    graph = load_graph("data/sample_edges.json")
"""

from heapgraph.data.loader import load_edges, load_graph, validate_edges

__all__ = ["load_edges", "load_graph", "validate_edges"]
