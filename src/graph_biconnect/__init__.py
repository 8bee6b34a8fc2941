"""
graph-biconnect: Articulation points and biconnection of undirected graphs.

This package finds the articulation points of a connected undirected
graph with a single depth-first low-link pass, and adds edges so the
graph becomes biconnected, in O(n + m).

Modules:
- graph: Adjacency-list graph model and construction from structures
- traversal: Depth-first traversal computing discovery and low-link values
- biconnect: Articulation point classification and edge insertion
- generators: Random connected simple graphs for benchmarking
"""

__version__ = "0.1.0"

# Biconnection
from .biconnect import (
    Biconnector,
    DisconnectedGraphWarning,
    biconnect,
    classify,
    find_articulation_points,
    format_report,
)

# Random graphs
from .generators import random_simple_graph, random_tree

# Graph model
from .graph import Graph, arc_name

# Traversal
from .traversal import LowLinkState, depth_first_lowlink
from .types import (
    Arc,
    BiconnectResult,
    Edge,
    Event,
    EventType,
    Vertex,
)

# Validation
from .validation import (
    MAX_VERTICES,
    AsymmetricAdjacencyError,
    DuplicateVertexError,
    EdgeCountOutOfRangeError,
    EmptyGraphError,
    MalformedGraphError,
    ParallelEdgeError,
    SelfLoopError,
    ValidationError,
    VertexCountExceededError,
    validate_edge_count,
    validate_structure,
    validate_vertex_count,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Vertex",
    "Arc",
    "Edge",
    "EventType",
    "Event",
    "BiconnectResult",
    # Graph model
    "Graph",
    "arc_name",
    # Traversal
    "LowLinkState",
    "depth_first_lowlink",
    # Biconnection
    "Biconnector",
    "DisconnectedGraphWarning",
    "biconnect",
    "classify",
    "find_articulation_points",
    "format_report",
    # Random graphs
    "random_tree",
    "random_simple_graph",
    # Validation
    "MAX_VERTICES",
    "ValidationError",
    "MalformedGraphError",
    "EmptyGraphError",
    "VertexCountExceededError",
    "EdgeCountOutOfRangeError",
    "AsymmetricAdjacencyError",
    "SelfLoopError",
    "ParallelEdgeError",
    "DuplicateVertexError",
    "validate_vertex_count",
    "validate_edge_count",
    "validate_structure",
]
