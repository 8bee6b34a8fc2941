"""Example adjacency structures used by the command line demo."""

from __future__ import annotations

EXAMPLE_STRUCTURES: dict[str, dict[str, list[str]]] = {
    "Complex example graph": {
        "a": ["b", "e", "p"],
        "b": ["a", "c"],
        "c": ["b", "d"],
        "d": ["c", "f", "h", "l", "q", "e"],
        "e": ["q", "d", "m", "a"],
        "f": ["d", "g"],
        "g": ["f", "i", "k", "h"],
        "h": ["g", "d"],
        "i": ["g", "j"],
        "j": ["i"],
        "k": ["g"],
        "l": ["d"],
        "m": ["e", "n", "o"],
        "n": ["m", "o"],
        "o": ["m", "n"],
        "p": ["a"],
        "q": ["d", "e"],
    },
    "Small graph with one vertex": {
        "a": [],
    },
    "Small graph with two vertices": {
        "a": ["b"],
        "b": ["a"],
    },
    "Full graph": {
        "a": ["b", "c", "d"],
        "b": ["a", "c", "d"],
        "c": ["a", "b", "d"],
        "d": ["a", "b", "c"],
    },
    "Simple cycle graph": {
        "a": ["b", "e"],
        "b": ["a", "c"],
        "c": ["b", "d"],
        "d": ["c", "e"],
        "e": ["d", "a"],
    },
    "Simple chain graph": {
        "a": ["b"],
        "b": ["a", "c"],
        "c": ["b", "d"],
        "d": ["c", "e"],
        "e": ["d"],
    },
    "Root articulation point": {
        "a": ["b", "c", "d"],
        "b": ["a"],
        "c": ["a"],
        "d": ["a"],
    },
    "Complex graph with cycles": {
        "a": ["b", "c"],
        "b": ["a", "d"],
        "c": ["d", "a", "g", "h"],
        "d": ["b", "e", "f", "c"],
        "e": ["f", "d"],
        "f": ["d", "e"],
        "g": ["c", "h"],
        "h": ["c", "g"],
    },
    "Complex graph without cycles": {
        "a": ["b"],
        "b": ["a", "c", "d", "f"],
        "c": ["b"],
        "d": ["b", "e"],
        "e": ["d"],
        "f": ["b", "g", "h"],
        "g": ["f"],
        "h": ["f"],
    },
}

# (title, n, m) of the random graphs timed by the demo
RANDOM_EXAMPLES: list[tuple[str, int, int]] = [
    ("Big graph with the most edges (fewest articulation points)", 2222, 10000),
    ("Big graph with more edges (some articulation points)", 2222, 3333),
    ("Big graph with the fewest edges (most articulation points)", 2222, 2221),
]


__all__ = ["EXAMPLE_STRUCTURES", "RANDOM_EXAMPLES"]
