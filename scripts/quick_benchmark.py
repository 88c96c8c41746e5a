#!/usr/bin/env python3
"""
Quick benchmark for the binary heap and Dijkstra on random graphs.

Usage:
    python scripts/quick_benchmark.py
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import numpy as np

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from heapgraph.config import (
    BENCHMARK_EDGE_FACTOR,
    BENCHMARK_MAX_COST,
    BENCHMARK_SEED,
    BENCHMARK_VERTICES,
)
from heapgraph.graph import Graph, dijkstra
from heapgraph.heap import MinHeap

# Graph sizes to test, as fractions of BENCHMARK_VERTICES
SCALES = [0.1, 0.5, 1.0]


def random_edges(rng: np.random.Generator, vertices: int) -> list[tuple[int, int, int]]:
    """Random directed edges with non-negative integer costs."""
    count = vertices * BENCHMARK_EDGE_FACTOR
    src = rng.integers(0, vertices, size=count)
    dst = rng.integers(0, vertices, size=count)
    cost = rng.integers(0, BENCHMARK_MAX_COST, size=count)
    return list(zip(src.tolist(), dst.tolist(), cost.tolist(), strict=True))


def bench_heap(rng: np.random.Generator, n: int) -> float:
    """Push n random values and pop them all; returns elapsed seconds."""
    values = rng.integers(0, 1_000_000, size=n)
    heap = MinHeap()

    start_time = time.time()
    for value in values.tolist():
        heap.push(value)
    popped = [heap.pop() for _ in range(n)]
    elapsed = time.time() - start_time

    if popped != np.sort(values).tolist():
        raise RuntimeError("Heap pop order does not match sorted input")
    return elapsed


def run_benchmark():
    print("=" * 70)
    print("heapgraph - Quick Benchmark")
    print("=" * 70)

    rng = np.random.default_rng(BENCHMARK_SEED)

    for scale in SCALES:
        vertices = max(2, int(BENCHMARK_VERTICES * scale))
        edges = random_edges(rng, vertices)

        start_time = time.time()
        graph = Graph.create(edges)
        build_time = time.time() - start_time

        source = graph.get_vertex(edges[0][0])
        start_time = time.time()
        distance = dijkstra(source)
        dijkstra_time = time.time() - start_time

        heap_time = bench_heap(rng, len(edges))

        print(f"\n[{vertices:,} vertices, {len(edges):,} edges]")
        print("-" * 50)
        print(f"  {'build':15} : {build_time * 1000:8.1f}ms")
        print(f"  {'dijkstra':15} : {dijkstra_time * 1000:8.1f}ms ({len(distance):,} reachable)")
        print(f"  {'heap sort':15} : {heap_time * 1000:8.1f}ms ({len(edges):,} values)")


if __name__ == "__main__":
    run_benchmark()
