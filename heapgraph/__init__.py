"""
Heap-backed priority queue and weighted graph toolkit.

Provides a comparator-driven binary heap and a directed, weighted graph
with breadth-first traversal and Dijkstra shortest paths built on top of it.
"""

__version__ = "0.1.0"
