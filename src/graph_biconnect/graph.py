"""
Adjacency-list model of an undirected graph.

Vertices and arcs live in two growable arenas and refer to each other by
arena index. Each vertex keeps the head and tail of a singly linked list
of its outgoing arcs; an undirected edge is two arcs, one per direction.
Vertices and arcs are never removed, so indices stay valid for the
lifetime of the graph.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Optional, Sequence

import numpy as np

from .types import Arc, Edge, Vertex, VertexRef
from .validation import (
    MAX_VERTICES,
    DuplicateVertexError,
    ValidationError,
    VertexCountExceededError,
    validate_structure,
)


def arc_name(source: str, target: str) -> str:
    """Name of the arc from source to target."""
    return f"a{source}_{target}"


class Graph:
    """
    Undirected graph stored as per-vertex arc lists.

    Example:
        graph = Graph.from_structure(
            {"a": ["b", "c"], "b": ["a", "c"], "c": ["a", "b"]},
            name="Triangle",
        )
        print(graph)
        graph.neighbors("a")  # ['b', 'c']
    """

    def __init__(self, name: str = "Graph", *, max_vertices: int = MAX_VERTICES) -> None:
        """
        Create an empty graph.

        Args:
            name: Name printed as the first line of the text rendering
            max_vertices: Largest number of vertices the graph accepts
        """
        if max_vertices < 1:
            raise ValidationError(f"max_vertices must be >= 1, got {max_vertices}")

        self._name = name
        self._max_vertices = max_vertices
        self._vertices: list[Vertex] = []
        self._arcs: list[Arc] = []
        self._ids: dict[str, int] = {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_structure(
        cls,
        structure: Mapping[str, Sequence[str]],
        name: str = "Graph",
        *,
        max_vertices: int = MAX_VERTICES,
    ) -> Graph:
        """
        Build a connected simple graph from an adjacency description.

        The mapping order gives the vertex order and each neighbour list
        gives the arc order of its vertex, so the first key becomes the
        DFS root.

        Args:
            structure: Mapping from vertex id to the ids of its neighbours
            name: Graph name
            max_vertices: Largest accepted vertex count

        Returns:
            The new graph

        Raises:
            MalformedGraphError: If the structure is not an undirected
                simple graph within the size bounds. No graph is built.
        """
        validate_structure(structure, max_vertices)

        graph = cls(name, max_vertices=max_vertices)
        for key in structure:
            graph.create_vertex(key)
        for key, neighbours in structure.items():
            for value in neighbours:
                graph.add_last_arc(key, Arc(arc_name(key, value)), value)
        return graph

    def create_vertex(self, vertex_id: str) -> Vertex:
        """
        Append a new vertex.

        Raises:
            DuplicateVertexError: If the id is already used in this graph
            VertexCountExceededError: If the graph is already full
        """
        if vertex_id in self._ids:
            raise DuplicateVertexError(f"Vertex {vertex_id} already exists in {self._name}")
        if len(self._vertices) >= self._max_vertices:
            raise VertexCountExceededError(
                f"Too many vertices: {self._name} is limited to {self._max_vertices}"
            )

        vertex = Vertex(id=vertex_id, index=len(self._vertices))
        self._vertices.append(vertex)
        self._ids[vertex_id] = vertex.index
        return vertex

    def create_arc(self, arc_id: str, source: VertexRef, target: VertexRef) -> Arc:
        """
        Create an arc from source to target at the head of source's arc list.

        No check is made for self-arcs or duplicates; an undirected edge
        needs one call per direction.
        """
        src = self._vertices[self.index_of(source)]
        arc = Arc(
            id=arc_id,
            index=len(self._arcs),
            source=src.index,
            target=self.index_of(target),
            next_arc=src.first_arc,
        )
        self._arcs.append(arc)
        src.first_arc = arc.index
        if src.last_arc is None:
            src.last_arc = arc.index
        return arc

    def add_last_arc(self, source: VertexRef, arc: Arc, target: VertexRef) -> Arc:
        """
        Link an unregistered arc at the tail of source's arc list.

        Keeps arcs in insertion order, which fixes the order in which a
        depth-first search visits the neighbours of source.

        Raises:
            ValidationError: If the arc already belongs to a graph
        """
        if arc.index is not None:
            raise ValidationError(f"Arc {arc.id} is already linked")

        src = self._vertices[self.index_of(source)]
        arc.index = len(self._arcs)
        arc.source = src.index
        arc.target = self.index_of(target)
        arc.next_arc = None
        self._arcs.append(arc)

        if src.last_arc is None:
            src.first_arc = arc.index
        else:
            self._arcs[src.last_arc].next_arc = arc.index
        src.last_arc = arc.index
        return arc

    def add_edge(self, u: VertexRef, v: VertexRef) -> tuple[Arc, Arc]:
        """Add the undirected edge u-v as two arcs at the tails of both lists."""
        u_id = self.vertex(u).id
        v_id = self.vertex(v).id
        forward = self.add_last_arc(u_id, Arc(arc_name(u_id, v_id)), v_id)
        backward = self.add_last_arc(v_id, Arc(arc_name(v_id, u_id)), u_id)
        return forward, backward

    # -------------------------------------------------------------------------
    # Properties and lookup
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Get the graph name."""
        return self._name

    @property
    def max_vertices(self) -> int:
        """Get the vertex limit."""
        return self._max_vertices

    @property
    def vertices(self) -> list[Vertex]:
        """Get the vertices in insertion order."""
        return self._vertices

    @property
    def arcs(self) -> list[Arc]:
        """Get the arcs in creation order."""
        return self._arcs

    @property
    def first(self) -> Optional[Vertex]:
        """First vertex of the graph, the default DFS root."""
        return self._vertices[0] if self._vertices else None

    @property
    def arc_count(self) -> int:
        return len(self._arcs)

    @property
    def edge_count(self) -> int:
        return len(self._arcs) // 2

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._ids

    def index_of(self, ref: VertexRef) -> int:
        """
        Arena index of a vertex given by object or id.

        Raises:
            KeyError: If no such vertex belongs to this graph
        """
        if isinstance(ref, Vertex):
            if ref.index < len(self._vertices) and self._vertices[ref.index] is ref:
                return ref.index
            raise KeyError(f"Vertex {ref.id} does not belong to {self._name}")
        return self._ids[ref]

    def vertex(self, ref: VertexRef) -> Vertex:
        """Look up a vertex by object or id."""
        return self._vertices[self.index_of(ref)]

    def arcs_from(self, ref: VertexRef) -> Iterator[Arc]:
        """Iterate the outgoing arcs of a vertex in list order."""
        arc_index = self.vertex(ref).first_arc
        while arc_index is not None:
            arc = self._arcs[arc_index]
            yield arc
            arc_index = arc.next_arc

    def neighbors(self, ref: VertexRef) -> list[str]:
        """Ids of the arc targets of a vertex, in arc-list order."""
        return [self._vertices[arc.target].id for arc in self.arcs_from(ref)]

    def edges(self) -> list[Edge]:
        """Each undirected edge once, oriented as its first-created arc."""
        seen: set[tuple[int, int]] = set()
        result: list[Edge] = []
        for arc in self._arcs:
            key = (min(arc.source, arc.target), max(arc.source, arc.target))
            if key in seen:
                continue
            seen.add(key)
            result.append((self._vertices[arc.source].id, self._vertices[arc.target].id))
        return result

    def adjacency_matrix(self) -> np.ndarray:
        """
        Count arcs between every ordered pair of vertices.

        Returns:
            (n, n) integer array, entry [i, j] is the number of arcs from
            vertex i to vertex j in insertion order.
        """
        n = len(self._vertices)
        matrix = np.zeros((n, n), dtype=np.int32)
        for arc in self._arcs:
            matrix[arc.source, arc.target] += 1
        return matrix

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        lines = [self._name]
        for vertex in self._vertices:
            parts = [f"{vertex.id} -->"]
            for arc in self.arcs_from(vertex):
                parts.append(f"{arc.id} ({vertex.id}->{self._vertices[arc.target].id})")
            lines.append(" ".join(parts))
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Graph(name={self._name!r}, vertices={len(self)}, edges={self.edge_count})"


__all__ = ["Graph", "arc_name"]
