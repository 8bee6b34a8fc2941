"""
Random connected graph generators.

Used to build large inputs for benchmarking. Graphs are connected and
simple: a random spanning tree guarantees connectivity, extra edges are
sampled between distinct, non-adjacent vertices.
"""

from __future__ import annotations

import random
from typing import Optional

from .graph import Graph, arc_name
from .validation import MAX_VERTICES, validate_edge_count, validate_vertex_count


def random_tree(n: int, seed: Optional[int] = None, graph: Optional[Graph] = None) -> Graph:
    """
    Add a random tree with n vertices to a graph.

    Vertices are named v1..vn. Each vertex after the first is joined to a
    uniformly chosen vertex created before it.

    Args:
        n: Number of vertices
        seed: Random seed for reproducible trees
        graph: Graph to add to (default: a new empty graph)

    Returns:
        The graph the tree was added to
    """
    if graph is None:
        graph = Graph(f"Random tree {n}")
    if seed is not None:
        random.seed(seed)

    created = []
    for i in range(n):
        vertex = graph.create_vertex(f"v{i + 1}")
        if created:
            other = created[random.randrange(len(created))]
            graph.create_arc(arc_name(other.id, vertex.id), other, vertex)
            graph.create_arc(arc_name(vertex.id, other.id), vertex, other)
        created.append(vertex)
    return graph


def random_simple_graph(
    n: int,
    m: int,
    seed: Optional[int] = None,
    name: Optional[str] = None,
    *,
    max_vertices: int = MAX_VERTICES,
) -> Graph:
    """
    Generate a connected simple graph with n vertices and m edges.

    Args:
        n: Number of vertices
        m: Number of undirected edges, n - 1 <= m <= n(n - 1) / 2
        seed: Random seed for reproducible graphs
        name: Graph name (default: derived from n and m)
        max_vertices: Largest accepted vertex count

    Returns:
        The new graph

    Raises:
        EmptyGraphError: If n < 1
        VertexCountExceededError: If n > max_vertices
        EdgeCountOutOfRangeError: If m is impossible for n vertices
    """
    validate_vertex_count(n, max_vertices)
    validate_edge_count(n, m)

    graph = Graph(name or f"Random graph {n}x{m}", max_vertices=max_vertices)
    random_tree(n, seed=seed, graph=graph)

    vertices = graph.vertices
    connected = graph.adjacency_matrix() > 0
    remaining = m - (n - 1)
    while remaining > 0:
        i = random.randrange(n)
        j = random.randrange(n)
        if i == j or connected[i, j] or connected[j, i]:
            continue
        vi, vj = vertices[i], vertices[j]
        graph.create_arc(arc_name(vi.id, vj.id), vi, vj)
        graph.create_arc(arc_name(vj.id, vi.id), vj, vi)
        connected[i, j] = connected[j, i] = True
        remaining -= 1
    return graph


__all__ = ["random_tree", "random_simple_graph"]
