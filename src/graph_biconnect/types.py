"""
Common types for the biconnection algorithms.

This module provides the fundamental records shared by the graph model,
the traversal engine and the biconnector:
- Vertex: Graph vertex with the head and tail of its outgoing-arc list
- Arc: Directed arc, half of an undirected edge
- EventType: Traversal events
- Event: Event payload for traversal callbacks
- BiconnectResult: Articulation points and edges added by one pass
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, TypedDict, Union

# Undirected edge as a pair of vertex ids
Edge = tuple[str, str]


class EventType(IntEnum):
    """
    Depth-first traversal events.

    - discover: A vertex received its discovery index
    - tree_edge: An unvisited vertex was found through the current vertex
    - back_edge: An arc leads to an already discovered ancestor
    - finish: The subtree of a vertex is fully processed
    """

    discover = 0
    tree_edge = 1
    back_edge = 2
    finish = 3


class Event(TypedDict, total=False):
    """Event payload passed to traversal listeners."""

    type: EventType
    vertex: str
    target: Optional[str]
    discovery: int
    low: int


@dataclass
class Vertex:
    """
    Graph vertex.

    Attributes:
        id: Name of the vertex, unique within a graph.
        index: Position in the graph's vertex arena.
        first_arc: Arena index of the first outgoing arc, None if there is none.
        last_arc: Arena index of the last outgoing arc, None if there is none.
    """

    id: str
    index: int
    first_arc: Optional[int] = None
    last_arc: Optional[int] = None

    def __str__(self) -> str:
        return self.id


@dataclass
class Arc:
    """
    Directed arc between two vertices.

    An undirected edge is stored as two arcs, one per direction. An arc
    created on its own (``Arc("a_b")``) is unregistered until a graph
    links it into a vertex's arc list.

    Attributes:
        id: Name of the arc.
        index: Position in the graph's arc arena, None while unregistered.
        source: Arena index of the vertex the arc leaves.
        target: Arena index of the vertex the arc points at.
        next_arc: Arena index of the next arc of the same source vertex.
    """

    id: str
    index: Optional[int] = None
    source: Optional[int] = None
    target: Optional[int] = None
    next_arc: Optional[int] = None

    def __str__(self) -> str:
        return self.id


@dataclass
class BiconnectResult:
    """
    Outcome of one biconnection pass.

    Attributes:
        articulation_points: Ids of vertices classified as articulation points.
        added_edges: Undirected edges inserted, in insertion order.
        added_arcs: The two arcs inserted for each added edge.
    """

    articulation_points: set[str] = field(default_factory=set)
    added_edges: list[Edge] = field(default_factory=list)
    added_arcs: list[tuple[Arc, Arc]] = field(default_factory=list)

    @property
    def edge_count_added(self) -> int:
        """Number of undirected edges inserted by the pass."""
        return len(self.added_edges)


# Vertices can be referred to by object or by id
VertexRef = Union[Vertex, str]


__all__ = [
    "Edge",
    "EventType",
    "Event",
    "Vertex",
    "Arc",
    "BiconnectResult",
    "VertexRef",
]
