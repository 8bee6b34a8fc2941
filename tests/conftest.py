"""Shared fixtures and helpers for graph_biconnect tests."""

from __future__ import annotations

from collections import deque

import pytest

from graph_biconnect import Graph


def make_chain(n: int) -> dict[str, list[str]]:
    """Structure of a path v0 - v1 - ... - v(n-1)."""
    names = [f"v{i}" for i in range(n)]
    structure: dict[str, list[str]] = {name: [] for name in names}
    for a, b in zip(names, names[1:]):
        structure[a].append(b)
        structure[b].append(a)
    return structure


def make_cycle(n: int) -> dict[str, list[str]]:
    """Structure of a cycle on n >= 3 vertices."""
    structure = make_chain(n)
    structure[f"v{n - 1}"].append("v0")
    structure["v0"].append(f"v{n - 1}")
    return structure


def make_complete(n: int) -> dict[str, list[str]]:
    """Structure of K_n."""
    names = [f"v{i}" for i in range(n)]
    return {a: [b for b in names if b != a] for a in names}


def make_star(k: int) -> dict[str, list[str]]:
    """Structure of a star with centre 'c' and k leaves, centre first."""
    leaves = [f"l{i}" for i in range(k)]
    structure: dict[str, list[str]] = {"c": list(leaves)}
    for leaf in leaves:
        structure[leaf] = ["c"]
    return structure


def brute_force_articulation_points(graph: Graph) -> set[str]:
    """Vertices whose removal leaves the rest of the graph disconnected."""
    ids = [v.id for v in graph]
    result: set[str] = set()
    for removed in ids:
        rest = [v for v in ids if v != removed]
        if len(rest) < 2:
            continue
        seen = {rest[0]}
        queue = deque([rest[0]])
        while queue:
            u = queue.popleft()
            for w in graph.neighbors(u):
                if w != removed and w not in seen:
                    seen.add(w)
                    queue.append(w)
        if len(seen) != len(rest):
            result.add(removed)
    return result


@pytest.fixture
def chain5() -> Graph:
    return Graph.from_structure(
        {
            "a": ["b"],
            "b": ["a", "c"],
            "c": ["b", "d"],
            "d": ["c", "e"],
            "e": ["d"],
        },
        "Simple chain graph",
    )


@pytest.fixture
def star() -> Graph:
    return Graph.from_structure(
        {"a": ["b", "c", "d"], "b": ["a"], "c": ["a"], "d": ["a"]},
        "Root articulation point",
    )
