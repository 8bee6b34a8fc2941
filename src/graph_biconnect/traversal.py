"""
Depth-first traversal with discovery order and low-link values.

A single iterative DFS assigns each reached vertex a 1-based discovery
index, records its DFS-tree children and the discovery indices of its
back-edge targets, and computes its low-link value once its subtree is
complete:

    low(v) = min(discovery(v), low(c) for DFS children c,
                 discovery(w) for back edges v -> w)

All per-pass values live in a ``LowLinkState`` side table allocated for
each traversal, so running a traversal twice over the same graph always
re-evaluates from scratch.
"""

from __future__ import annotations

from typing import Callable, Optional

from .graph import Graph
from .types import Event, EventType, VertexRef

# Called once per vertex, after its low-link value is known and while
# its DFS children are still recorded: (vertex, parent or None, state)
FinishCallback = Callable[[int, Optional[int], "LowLinkState"], None]
EventCallback = Callable[[Event], None]


class LowLinkState:
    """
    Per-pass traversal values, indexed by vertex arena index.

    Attributes:
        visited: Whether the vertex has been reached
        discovery: Discovery index, 0 while undefined
        low: Low-link value, 0 while undefined
        parent: DFS-tree parent, None for the root and unreached vertices
        dfs_children: Tree children in discovery order (cleared on finish)
        back_edge_discoveries: Discovery indices of back-edge targets
            (cleared on finish)
        counter: Last discovery index handed out
        order: Vertices in discovery order
    """

    def __init__(self, n: int) -> None:
        self.visited: list[bool] = [False] * n
        self.discovery: list[int] = [0] * n
        self.low: list[int] = [0] * n
        self.parent: list[Optional[int]] = [None] * n
        self.dfs_children: list[list[int]] = [[] for _ in range(n)]
        self.back_edge_discoveries: list[list[int]] = [[] for _ in range(n)]
        self.counter = 0
        self.order: list[int] = []

    def discover(self, v: int, parent: Optional[int]) -> int:
        self.visited[v] = True
        self.parent[v] = parent
        self.counter += 1
        self.discovery[v] = self.counter
        self.order.append(v)
        return self.counter

    def compute_low(self, v: int) -> int:
        """Compute and store low(v); children must already be finished."""
        low = self.discovery[v]
        for child in self.dfs_children[v]:
            low = min(low, self.low[child])
        for disc in self.back_edge_discoveries[v]:
            low = min(low, disc)
        self.low[v] = low
        return low

    def release(self, v: int) -> None:
        self.dfs_children[v] = []
        self.back_edge_discoveries[v] = []

    def unreached(self) -> list[int]:
        """Vertices the traversal never visited."""
        return [v for v, seen in enumerate(self.visited) if not seen]


def depth_first_lowlink(
    graph: Graph,
    root: Optional[VertexRef] = None,
    on_finish: Optional[FinishCallback] = None,
    on_event: Optional[EventCallback] = None,
) -> LowLinkState:
    """
    Run one depth-first pass and compute low-link values.

    Arcs are followed in arc-list order. The next arc of a vertex is read
    only when the traversal returns to it, so arcs appended by
    ``on_finish`` are seen too; they always lead to vertices discovered
    later than the current one and are neither tree nor back edges.

    Only the connected component of ``root`` is traversed. No validation
    is performed.

    Args:
        graph: Graph to traverse
        root: Start vertex (default: the graph's first vertex)
        on_finish: Called when a vertex's subtree is complete
        on_event: Receives discover, tree_edge, back_edge and finish events

    Returns:
        The pass state; empty if the graph has no vertices.
    """
    n = len(graph)
    state = LowLinkState(n)
    if n == 0:
        return state

    vertices = graph.vertices
    arcs = graph.arcs

    def emit(event: Event) -> None:
        if on_event is not None:
            on_event(event)

    start = graph.index_of(root) if root is not None else 0
    emit({"type": EventType.discover, "vertex": vertices[start].id,
          "discovery": state.discover(start, None)})

    # Frames hold [vertex, index of the last arc examined or None]
    stack: list[list[Optional[int]]] = [[start, None]]

    while stack:
        frame = stack[-1]
        v: int = frame[0]  # type: ignore[assignment]
        cursor = frame[1]
        arc_index = vertices[v].first_arc if cursor is None else arcs[cursor].next_arc

        if arc_index is not None:
            frame[1] = arc_index
            w = arcs[arc_index].target
            if not state.visited[w]:
                state.dfs_children[v].append(w)
                emit({"type": EventType.tree_edge, "vertex": vertices[v].id,
                      "target": vertices[w].id})
                emit({"type": EventType.discover, "vertex": vertices[w].id,
                      "discovery": state.discover(w, v)})
                stack.append([w, None])
            elif w != state.parent[v] and state.discovery[w] < state.discovery[v]:
                state.back_edge_discoveries[v].append(state.discovery[w])
                emit({"type": EventType.back_edge, "vertex": vertices[v].id,
                      "target": vertices[w].id, "discovery": state.discovery[w]})
            continue

        stack.pop()
        low = state.compute_low(v)
        if on_finish is not None:
            on_finish(v, state.parent[v], state)
        emit({"type": EventType.finish, "vertex": vertices[v].id,
              "discovery": state.discovery[v], "low": low})
        state.release(v)

    return state


__all__ = ["LowLinkState", "depth_first_lowlink", "FinishCallback", "EventCallback"]
