#!/usr/bin/env python3
"""
Benchmark biconnection on random connected graphs.

Usage:
    uv run python scripts/benchmark_biconnect.py [--sizes N:M,...] [--repeat R]

Examples:
    uv run python scripts/benchmark_biconnect.py
    uv run python scripts/benchmark_biconnect.py --sizes 2500:2499,2500:5000 --repeat 5
    uv run python scripts/benchmark_biconnect.py --output results.json
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from graph_biconnect import biconnect, find_articulation_points, random_simple_graph

DEFAULT_SIZES = [
    (500, 499),
    (500, 1000),
    (2222, 2221),
    (2222, 3333),
    (2222, 10000),
    (2500, 2499),
]


def benchmark_graph(n: int, m: int, seed: int) -> dict[str, Any]:
    """
    Time detection and biconnection on one random graph.

    Returns:
        Dict with timing and result info
    """
    graph = random_simple_graph(n, m, seed=seed)

    start = time.perf_counter()
    points = find_articulation_points(graph)
    detect_time = time.perf_counter() - start

    start = time.perf_counter()
    result = biconnect(graph)
    fix_time = time.perf_counter() - start

    return {
        "num_vertices": n,
        "num_edges": m,
        "articulation_points": len(points),
        "edges_added": result.edge_count_added,
        "detect_seconds": detect_time,
        "biconnect_seconds": fix_time,
    }


def run_benchmarks(sizes: list[tuple[int, int]], repeat: int = 3, seed: int = 42) -> list[dict]:
    """Run benchmarks for every (n, m) size."""
    results = []

    print(f"\nBenchmarking {len(sizes)} graph sizes, {repeat} runs each")
    print("=" * 80)
    print(f"{'Vertices':>10s}{'Edges':>10s}{'APs':>8s}{'Added':>8s}{'Detect':>12s}{'Biconnect':>12s}")
    print("-" * 80)

    for n, m in sizes:
        for run in range(repeat):
            try:
                result = benchmark_graph(n, m, seed + run)
            except ValueError as e:
                print(f"{n:>10d}{m:>10d}  ERROR - {e}")
                break
            print(
                f"{n:>10d}{m:>10d}{result['articulation_points']:>8d}{result['edges_added']:>8d}"
                f"{result['detect_seconds']:>12.4f}{result['biconnect_seconds']:>12.4f}"
            )
            results.append({"run": run, **result})

    return results


def parse_sizes(text: str) -> list[tuple[int, int]]:
    sizes = []
    for item in text.split(","):
        n, m = item.split(":")
        sizes.append((int(n), int(m)))
    return sizes


def main():
    parser = argparse.ArgumentParser(description="Benchmark biconnection on random graphs")
    parser.add_argument("--sizes", help="Comma-separated N:M pairs (e.g., '500:499,2222:3333')")
    parser.add_argument("--repeat", type=int, default=3, help="Runs per size")
    parser.add_argument("--seed", type=int, default=42, help="Base random seed")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = parse_sizes(args.sizes) if args.sizes else DEFAULT_SIZES
    results = run_benchmarks(sizes, repeat=args.repeat, seed=args.seed)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
