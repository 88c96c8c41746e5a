"""
Priority queue module.

Provides a comparator-parameterized binary heap:
- BinaryHeap: Heap with any ordering predicate
- MinHeap: Pop returns the smallest element
- MaxHeap: Pop returns the largest element
"""

from heapgraph.heap.binary_heap import (
    BinaryHeap,
    Comparator,
    MaxHeap,
    MinHeap,
    ascending,
    descending,
)

__all__ = [
    "BinaryHeap",
    "Comparator",
    "MinHeap",
    "MaxHeap",
    "ascending",
    "descending",
]
