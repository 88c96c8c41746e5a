"""
Edge-list file I/O.

An edge list is a sequence of (source, destination, cost) triples. Three
file formats are supported, picked by suffix:
    .json     JSON array of 3-element arrays
    .msgpack  msgpack array of 3-element arrays
    .npy      numeric array of shape (n, 3)

Usage:
    from heapgraph.data import load_edges, load_graph

    edges = load_edges("data/sample_edges.json")
    graph = load_graph("data/sample_edges.json")
"""

from __future__ import annotations

import json
import logging
from numbers import Number
from pathlib import Path
from typing import Any

import msgpack
import numpy as np

from heapgraph.config import EDGE_FILE_SUFFIXES
from heapgraph.graph import Graph

logger = logging.getLogger(__name__)

EdgeTriple = tuple[Any, Any, float]


def load_edges(path: str | Path) -> list[EdgeTriple]:
    """
    Load an edge list from disk.

    Raises:
        ValueError: If the suffix is unsupported or an entry is not a triple
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()
    _check_suffix(suffix)

    logger.info(f"Loading edges from {path}...")
    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    elif suffix == ".msgpack":
        with open(path, "rb") as f:
            raw = msgpack.load(f)
    else:
        raw = _rows_from_array(np.load(path))

    edges = _to_triples(raw, path)
    logger.info(f"Loaded {len(edges):,} edges")
    return edges


def load_graph(path: str | Path) -> Graph:
    """Load an edge list and build a Graph from it."""
    return Graph.create(load_edges(path))


def validate_edges(edges: list) -> dict[str, bool]:
    """Run validation checks on an edge list."""
    well_formed = all(_is_triple(edge) for edge in edges)
    costs = [edge[2] for edge in edges if _is_triple(edge)]
    numeric = all(
        isinstance(cost, Number) and not isinstance(cost, bool) for cost in costs
    )
    return {
        "non_empty": len(edges) > 0,
        "well_formed": well_formed,
        "numeric_costs": numeric,
        "non_negative_costs": numeric and all(cost >= 0 for cost in costs),
    }


def _check_suffix(suffix: str) -> None:
    if suffix not in EDGE_FILE_SUFFIXES:
        supported = ", ".join(EDGE_FILE_SUFFIXES)
        raise ValueError(f"Unsupported edge file '{suffix}'. Supported: {supported}")


def _rows_from_array(array: np.ndarray) -> list[list]:
    """Convert an (n, 3) array to rows, with integral keys as int."""
    if array.ndim != 2 or array.shape[1] != 3:
        raise ValueError(f"Edge array must have shape (n, 3), got {array.shape}")

    rows = []
    for src, dst, cost in array.tolist():
        rows.append([_as_key(src), _as_key(dst), cost])
    return rows


def _as_key(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _is_triple(entry) -> bool:
    return isinstance(entry, (list, tuple)) and len(entry) == 3


def _to_triples(raw: list, path: Path) -> list[EdgeTriple]:
    if not isinstance(raw, list):
        raise ValueError(f"{path} must hold an array of edges, got {type(raw).__name__}")

    edges = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, (list, tuple)):
            raise ValueError(
                f"Entry {i} in {path} is {type(entry).__name__}, expected [source, destination, cost]"
            )
        if len(entry) != 3:
            raise ValueError(
                f"Entry {i} in {path} has {len(entry)} items, expected 3 (source, destination, cost)"
            )
        edges.append(tuple(entry))
    return edges
