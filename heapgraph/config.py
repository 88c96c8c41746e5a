"""
Configuration constants for the heapgraph project.

All paths, defaults, and tunable parameters are defined here.
Values can be overridden through environment variables or a .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of heapgraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (contains sample edge lists)
DATA_DIR = Path(os.environ.get("HEAPGRAPH_DATA_DIR", PROJECT_ROOT / "data"))

# Reference edge list used by the demo driver
SAMPLE_EDGES_PATH = DATA_DIR / "sample_edges.json"

# Supported edge-list file formats (by suffix)
EDGE_FILE_SUFFIXES = (".json", ".msgpack", ".npy")

# =============================================================================
# Traversal Configuration
# =============================================================================

# Default source vertex key for the CLI (parsed as int when numeric)
DEFAULT_SOURCE = os.environ.get("HEAPGRAPH_SOURCE", "1")

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of vertices in generated benchmark graphs
BENCHMARK_VERTICES = int(os.environ.get("HEAPGRAPH_BENCHMARK_VERTICES", "2000"))

# Edges per vertex (edge count = vertices * factor)
BENCHMARK_EDGE_FACTOR = 8

# Edge costs are drawn uniformly from [0, BENCHMARK_MAX_COST)
BENCHMARK_MAX_COST = 100

# Seed for reproducible graphs
BENCHMARK_SEED = 42

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "sample_edges": SAMPLE_EDGES_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
