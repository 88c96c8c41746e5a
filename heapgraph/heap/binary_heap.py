"""
Array-backed binary heap with a pluggable ordering predicate.

The heap stores its elements as an implicit binary tree in a list:
the parent of position i is (i - 1) // 2 and its children are 2i + 1
and 2i + 2. Ordering is decided by a comparator ``compare(child, parent)``
that returns True when the child must move above the parent.

Usage:
    from heapgraph.heap import MinHeap, MaxHeap, BinaryHeap

    heap = MaxHeap()
    heap.push(3)
    heap.pop()  # -> 3

    # Custom ordering on (priority, item) entries
    heap = BinaryHeap(compare=lambda child, parent: child[0] < parent[0])
    heap.push((2, "a"))

The comparator must give the same answer for an element for as long as
it sits in the heap. Keys that change after a push (e.g. read live from
an external map) leave misplaced entries behind.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], bool]


def ascending(child, parent) -> bool:
    """Swap when the child is strictly less than the parent (min-heap)."""
    return child < parent


def descending(child, parent) -> bool:
    """Swap when the child is strictly greater than the parent (max-heap)."""
    return child > parent


class BinaryHeap(Generic[T]):
    """
    Priority queue backed by a binary heap.

    The root (position 0) always holds the element the comparator favours
    most strongly. Popping or peeking an empty heap returns None instead
    of raising, so callers must check before using the result.

    Attributes:
        compare: Predicate (child, parent) -> bool, fixed for the heap's lifetime
    """

    def __init__(
        self,
        items: Iterable[T] | None = None,
        compare: Comparator = ascending,
    ) -> None:
        """
        Initialize the heap.

        Args:
            items: Initial elements, which must already satisfy the heap
                property under ``compare`` (no heapify is performed)
            compare: Ordering predicate (child, parent) -> bool
        """
        self._items: list[T] = list(items) if items is not None else []
        self.compare = compare

    def push(self, value: T) -> None:
        """Add an element and sift it up."""
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T | None:
        """Remove and return the root element, or None if empty."""
        if not self._items:
            return None

        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> T | None:
        """Return the root element without removing it, or None if empty."""
        return self._items[0] if self._items else None

    def size(self) -> int:
        """Number of elements in the heap."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[T]:
        """Snapshot of the backing array in heap order."""
        return list(self._items)

    def is_valid(self) -> bool:
        """Check that no element should move above its parent."""
        return not any(
            self.compare(self._items[i], self._items[(i - 1) // 2])
            for i in range(1, len(self._items))
        )

    def _sift_up(self, pivot: int) -> None:
        """
        Restore the heap property after an append at ``pivot``.

        At each level the candidate is whichever of the pivot's sibling
        pair the comparator favours (left on ties or when the right
        sibling does not exist), and it is swapped with the parent if it
        must move above it; otherwise the walk stops.
        """
        items = self._items
        while pivot > 0:
            parent = (pivot - 1) // 2
            left = 2 * parent + 1
            right = left + 1

            candidate = left
            if right < len(items) and self.compare(items[right], items[left]):
                candidate = right

            if not self.compare(items[candidate], items[parent]):
                break

            items[parent], items[candidate] = items[candidate], items[parent]
            pivot = parent

    def _sift_down(self, pivot: int) -> None:
        """Restore the heap property after the root was replaced."""
        items = self._items
        size = len(items)
        while True:
            left = 2 * pivot + 1
            if left >= size:
                break  # Leaf

            right = left + 1
            child = left
            if right < size and self.compare(items[right], items[left]):
                child = right

            if not self.compare(items[child], items[pivot]):
                break

            items[pivot], items[child] = items[child], items[pivot]
            pivot = child

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._items)})"


class MinHeap(BinaryHeap[T]):
    """Heap whose pop returns the smallest element."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        super().__init__(items, compare=ascending)


class MaxHeap(BinaryHeap[T]):
    """Heap whose pop returns the largest element."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        super().__init__(items, compare=descending)
