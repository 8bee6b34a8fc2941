"""
Command line demo.

Usage:
    python -m graph_biconnect [--detailed] [--show-graph]
    python -m graph_biconnect --random 2222 3333 --seed 42
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Mapping, Optional, Sequence

from .biconnect import biconnect, format_report
from .examples import EXAMPLE_STRUCTURES, RANDOM_EXAMPLES
from .generators import random_simple_graph
from .graph import Graph
from .validation import ValidationError


def show_example(
    name: str,
    structure: Mapping[str, Sequence[str]],
    detailed: bool = True,
    show_graph: bool = True,
) -> None:
    """Print a structure's graph before and after biconnection."""
    print("=" * 80)
    graph = Graph.from_structure(structure, name)
    if show_graph:
        print(graph)
        print("-" * 80)
        print("Graph after biconnecting:")
    else:
        print(name)
    print(format_report(biconnect(graph), detailed=detailed))
    if show_graph:
        print(graph)


def time_random(title: str, n: int, m: int, seed: Optional[int] = None, detailed: bool = False) -> float:
    """Biconnect a random graph and print how long it took."""
    print("-" * 80)
    print(title)
    graph = random_simple_graph(n, m, seed=seed)

    start = time.perf_counter()
    result = biconnect(graph)
    elapsed = time.perf_counter() - start

    print(format_report(result, detailed=detailed))
    print(
        f"For a graph with {n} vertices and {m} edges, finding and eliminating "
        f"articulation points took: {elapsed * 1000:.2f} ms"
    )
    return elapsed


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="graph_biconnect",
        description="Find articulation points and make graphs biconnected",
    )
    parser.add_argument("--detailed", action="store_true", help="List articulation points and added arcs")
    parser.add_argument("--show-graph", action="store_true", help="Print graphs before and after")
    parser.add_argument(
        "--random", nargs=2, type=int, metavar=("N", "M"),
        help="Biconnect one random graph with N vertices and M edges",
    )
    parser.add_argument("--seed", type=int, help="Random seed for generated graphs")

    args = parser.parse_args(argv)

    try:
        if args.random:
            n, m = args.random
            time_random(f"Random graph with {n} vertices and {m} edges", n, m, args.seed, args.detailed)
            return 0

        for name, structure in EXAMPLE_STRUCTURES.items():
            show_example(name, structure, detailed=args.detailed, show_graph=args.show_graph)
        for title, n, m in RANDOM_EXAMPLES:
            time_random(title, n, m, args.seed, args.detailed)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
