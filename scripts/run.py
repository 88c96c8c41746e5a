#!/usr/bin/env python3
"""
heapgraph CLI - Build a graph from an edge list and compute minimum costs.

Usage:
    python scripts/run.py
    python scripts/run.py --edges data/sample_edges.json --source 1
    python scripts/run.py --edges graph.msgpack --source a --bfs
    python scripts/run.py --heap-demo --verbose

Edge files:
    .json     JSON array of [source, destination, cost]
    .msgpack  msgpack array of [source, destination, cost]
    .npy      numeric array of shape (n, 3)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from heapgraph.config import DEFAULT_SOURCE, LOG_LEVEL, SAMPLE_EDGES_PATH  # noqa: E402
from heapgraph.data import load_edges, validate_edges  # noqa: E402
from heapgraph.graph import Graph, bfs, dijkstra  # noqa: E402
from heapgraph.heap import MaxHeap  # noqa: E402

logger = logging.getLogger(__name__)


def parse_key(raw: str):
    """Interpret a CLI key as int when numeric, else keep the string."""
    try:
        return int(raw)
    except ValueError:
        return raw


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Minimum-cost paths over a weighted directed graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--edges",
        type=Path,
        default=SAMPLE_EDGES_PATH,
        help=f"Edge list file (default: {SAMPLE_EDGES_PATH.name})",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=DEFAULT_SOURCE,
        help=f"Source vertex key (default: {DEFAULT_SOURCE})",
    )
    parser.add_argument(
        "--bfs",
        action="store_true",
        help="Also log a breadth-first traversal from the source",
    )
    parser.add_argument(
        "--heap-demo",
        action="store_true",
        help="Push 1..5 into a max-heap and pop them back",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def run_heap_demo() -> None:
    """Show max-heap ordering on a fixed input."""
    heap = MaxHeap()
    for value in range(1, 6):
        heap.push(value)
    print(f"\nMax-heap array: {heap.to_list()}")
    popped = [heap.pop() for _ in range(len(heap))]
    print(f"Popped: {popped}")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL.upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        edges = load_edges(args.edges)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    checks = validate_edges(edges)
    if not checks["numeric_costs"]:
        print(f"Error: {args.edges} has non-numeric costs", file=sys.stderr)
        return 1
    if not checks["non_negative_costs"]:
        logger.warning("Edge list has negative costs; distances may be wrong")

    graph = Graph.create(edges)
    source_key = parse_key(args.source)
    source = graph.get_vertex(source_key)
    if source is None:
        print(f"Error: source '{args.source}' not in graph", file=sys.stderr)
        return 1

    stats = graph.stats()
    print("\n" + "=" * 60)
    print("heapgraph")
    print("=" * 60)
    print(f"  Edges file: {args.edges}")
    print(f"  Vertices:   {stats['vertices']}")
    print(f"  Edges:      {stats['edges']}")
    print(f"  Source:     {source_key!r}")
    print("=" * 60)

    distance = dijkstra(source)
    print("\nMinimum costs:")
    for key in graph.keys():
        cost = distance.get(key)
        print(f"  {key!r:>8}: {cost if cost is not None else 'unreachable'}")

    if args.bfs:
        print("\nBreadth-first traversal:")
        bfs(source)

    if args.heap_demo:
        run_heap_demo()

    return 0


if __name__ == "__main__":
    sys.exit(main())
