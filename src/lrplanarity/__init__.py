"""
lrplanarity: Left-right planarity testing in Python.

This package decides whether a graph can be drawn in the plane without
edge crossings, using the linear-time left-right planarity test, and uses
that oracle to build planar maximally filtered graphs.

Available modules:
- planarity: LR-planarity test (is_planar, check_planarity)
- pmfg: Planar Maximally Filtered Graph builder
- preprocessing: Connected components and connectivity checks
- validation: Input validation and exceptions
"""

__version__ = "0.1.0"

# Planarity testing
from .planarity import PlanarityResult, check_planarity, is_planar

# Planar maximally filtered graph
from .pmfg import planar_maximally_filtered_graph

# Preprocessing utilities
from .preprocessing import connected_components, is_connected

# Shared types
from .types import DiGraph, Graph, GraphStructureWarning
from .validation import (
    DisconnectedGraphError,
    InvalidDistanceMatrixError,
    InvalidEdgeError,
    InvalidGraphError,
    NotCompleteError,
    ValidationError,
)

__all__ = [
    "__version__",
    # Types
    "Graph",
    "DiGraph",
    "GraphStructureWarning",
    # Planarity
    "is_planar",
    "check_planarity",
    "PlanarityResult",
    # PMFG
    "planar_maximally_filtered_graph",
    # Preprocessing
    "connected_components",
    "is_connected",
    # Validation
    "ValidationError",
    "InvalidGraphError",
    "InvalidEdgeError",
    "NotCompleteError",
    "DisconnectedGraphError",
    "InvalidDistanceMatrixError",
]
