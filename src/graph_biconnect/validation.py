"""
Input validation utilities for graph construction.

Provides centralized validation of vertex counts, edge counts and
adjacency structures. Raises descriptive exceptions on invalid input;
nothing is built until validation has passed.
"""

from __future__ import annotations

from collections import Counter
from typing import Mapping, Sequence

# Resource bound on the number of vertices of a graph
MAX_VERTICES = 2500


class ValidationError(ValueError):
    """Base exception for graph validation errors."""

    pass


class MalformedGraphError(ValidationError):
    """Raised when a graph description cannot form a connected simple graph."""

    pass


class EmptyGraphError(MalformedGraphError):
    """Raised when a graph would have no vertices."""

    pass


class VertexCountExceededError(MalformedGraphError):
    """Raised when the vertex count is above the configured maximum."""

    pass


class EdgeCountOutOfRangeError(MalformedGraphError):
    """Raised when the edge count cannot belong to a connected simple graph."""

    pass


class AsymmetricAdjacencyError(MalformedGraphError):
    """Raised when a neighbour relation is not mutual."""

    pass


class SelfLoopError(MalformedGraphError):
    """Raised when a vertex lists itself as a neighbour."""

    pass


class ParallelEdgeError(MalformedGraphError):
    """Raised when a vertex lists the same neighbour more than once."""

    pass


class DuplicateVertexError(ValidationError):
    """Raised when a vertex id is created twice in one graph."""

    pass


def validate_vertex_count(n: int, max_vertices: int = MAX_VERTICES) -> int:
    """
    Validate the number of vertices.

    Args:
        n: Number of vertices
        max_vertices: Largest accepted vertex count

    Returns:
        Validated vertex count

    Raises:
        EmptyGraphError: If n < 1
        VertexCountExceededError: If n > max_vertices
    """
    if n < 1:
        raise EmptyGraphError(f"A graph must have at least one vertex, got {n}")
    if n > max_vertices:
        raise VertexCountExceededError(
            f"Too many vertices: {n} (maximum is {max_vertices})"
        )
    return n


def validate_edge_count(n: int, m: int) -> int:
    """
    Validate that m edges can form a connected simple graph on n vertices.

    Args:
        n: Number of vertices
        m: Number of undirected edges

    Returns:
        Validated edge count

    Raises:
        EdgeCountOutOfRangeError: If m is outside [n - 1, n(n - 1) / 2]
    """
    low = n - 1
    high = n * (n - 1) // 2
    if m < low or m > high:
        raise EdgeCountOutOfRangeError(
            f"Impossible number of edges: {m} for {n} vertices "
            f"(must be in [{low}, {high}])"
        )
    return m


def validate_structure(
    structure: Mapping[str, Sequence[str]],
    max_vertices: int = MAX_VERTICES,
) -> tuple[int, int]:
    """
    Validate an undirected adjacency description.

    Every key is a vertex; its value lists the neighbours of that vertex.
    Checks run in order: vertex count, edge count, then for each vertex
    unknown neighbours, symmetry, self-loops and repeated neighbours.

    Args:
        structure: Mapping from vertex id to its neighbour ids
        max_vertices: Largest accepted vertex count

    Returns:
        (vertex_count, edge_count) of the described graph

    Raises:
        EmptyGraphError: If the mapping is empty
        VertexCountExceededError: If there are more than max_vertices keys
        EdgeCountOutOfRangeError: If the edge count is impossible
        AsymmetricAdjacencyError: If u lists v but v does not list u
        SelfLoopError: If a vertex lists itself
        ParallelEdgeError: If a vertex lists a neighbour twice
    """
    n = validate_vertex_count(len(structure), max_vertices)
    m = sum(len(neighbours) for neighbours in structure.values()) // 2
    validate_edge_count(n, m)

    for key, neighbours in structure.items():
        unknown = [v for v in neighbours if v not in structure]
        if unknown:
            raise AsymmetricAdjacencyError(
                f"Graph can't be directed: {key} lists {unknown[0]} among "
                f"{list(neighbours)} but {unknown[0]} is not a vertex"
            )

        for value in neighbours:
            if key not in structure[value]:
                raise AsymmetricAdjacencyError(
                    f"Graph can't be directed: {key} has {value} among "
                    f"{list(neighbours)} but {value} doesn't have {key} "
                    f"among {list(structure[value])}"
                )

        if key in neighbours:
            raise SelfLoopError(
                f"Self loops are not allowed: {key} has itself among {list(neighbours)}"
            )

        repeated = [v for v, count in Counter(neighbours).items() if count > 1]
        if repeated:
            raise ParallelEdgeError(
                f"Parallel edges are not allowed: {key} lists {repeated[0]} "
                f"more than once in {list(neighbours)}"
            )

    return n, m


__all__ = [
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
