"""
Articulation point classification and biconnection.

A vertex v is classified when its DFS subtree is complete:

- the root is an articulation point iff it has at least two DFS children;
  its children are then chained pairwise (c1-c2, c2-c3, ...) so the
  subtrees stay connected without the root;
- a non-root vertex is an articulation point iff some child c has
  low(c) >= discovery(v); each such child is joined to v's parent so
  that c's subtree reaches the ancestors of v without passing through v.

Each added edge routes around one separation, so after a pass no vertex
separates the graph. At most one edge is added per DFS tree edge, which
bounds the number of new edges by n - 1.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .graph import Graph
from .traversal import LowLinkState, depth_first_lowlink
from .types import BiconnectResult, Event, EventType, VertexRef


class DisconnectedGraphWarning(UserWarning):
    """Warning issued when a traversal cannot reach every vertex."""

    pass


def classify(
    v: int,
    parent: Optional[int],
    state: LowLinkState,
) -> tuple[bool, list[tuple[int, int]]]:
    """
    Decide whether a finished vertex is an articulation point.

    Must be called while ``state.dfs_children[v]`` is still populated.

    Args:
        v: Vertex arena index
        parent: DFS parent of v, None for the root
        state: Traversal state of the current pass

    Returns:
        (is_articulation_point, edges) where edges lists the vertex index
        pairs to join so that v no longer separates the graph.
    """
    children = state.dfs_children[v]

    if parent is None and len(children) == 1:
        return False, []
    if not children:
        return False, []

    if parent is None:
        return True, list(zip(children, children[1:]))

    disc = state.discovery[v]
    edges = [(parent, child) for child in children if state.low[child] >= disc]
    return bool(edges), edges


def _warn_unreached(graph: Graph, state: LowLinkState) -> None:
    unreached = state.unreached()
    if unreached:
        warnings.warn(
            f"{len(unreached)} of {len(graph)} vertices of {graph.name} are not reachable "
            f"from the root (first: {graph.vertices[unreached[0]].id}). "
            "Only the root's connected component was processed.",
            DisconnectedGraphWarning,
            stacklevel=3,
        )


class Biconnector:
    """
    Find articulation points and add edges until none remain.

    The graph is modified in place: new edges are appended to the tails
    of both endpoints' arc lists as soon as a vertex is classified.

    Example:
        graph = Graph.from_structure({"a": ["b"], "b": ["a", "c"], "c": ["b"]})
        result = Biconnector(graph).run()
        result.articulation_points  # {'b'}
        result.added_edges          # [('a', 'c')]
    """

    def __init__(
        self,
        graph: Graph,
        *,
        root: Optional[VertexRef] = None,
        on_event: Optional[Callable[[Event], None]] = None,
    ) -> None:
        """
        Args:
            graph: Connected simple graph to augment
            root: DFS root (default: the graph's first vertex)
            on_event: Callback receiving every traversal event
        """
        self._graph = graph
        self._root = root
        self._events: dict[EventType, Callable[[Event], None]] = {}
        self._listener = on_event

    @property
    def graph(self) -> Graph:
        return self._graph

    def on(self, event: EventType | str, callback: Callable[[Event], None]) -> Self:
        """
        Subscribe to a traversal event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Forward an event to the general listener and its registered callback."""
        if self._listener is not None:
            self._listener(event)
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    def run(self) -> BiconnectResult:
        """
        Run one biconnection pass.

        Every pass allocates fresh traversal state, so running again on
        the same graph re-evaluates it; after a first pass nothing is left
        to fix.

        Returns:
            BiconnectResult with articulation point ids and added edges
        """
        graph = self._graph
        vertices = graph.vertices
        result = BiconnectResult()

        def finish(v: int, parent: Optional[int], state: LowLinkState) -> None:
            is_articulation, edges = classify(v, parent, state)
            if is_articulation:
                result.articulation_points.add(vertices[v].id)
            for a, b in edges:
                arcs = graph.add_edge(vertices[a], vertices[b])
                result.added_edges.append((vertices[a].id, vertices[b].id))
                result.added_arcs.append(arcs)

        state = depth_first_lowlink(graph, self._root, on_finish=finish, on_event=self.trigger)
        _warn_unreached(graph, state)
        return result


def biconnect(graph: Graph, root: Optional[VertexRef] = None) -> BiconnectResult:
    """
    Make a connected graph biconnected in place.

    Args:
        graph: Connected simple graph
        root: DFS root (default: the graph's first vertex)

    Returns:
        BiconnectResult with articulation point ids and added edges
    """
    return Biconnector(graph, root=root).run()


def find_articulation_points(graph: Graph, root: Optional[VertexRef] = None) -> set[str]:
    """
    Find the articulation points of a connected graph without modifying it.

    Args:
        graph: Connected simple graph
        root: DFS root (default: the graph's first vertex)

    Returns:
        Set of vertex ids
    """
    found: set[str] = set()

    def finish(v: int, parent: Optional[int], state: LowLinkState) -> None:
        if classify(v, parent, state)[0]:
            found.add(graph.vertices[v].id)

    state = depth_first_lowlink(graph, root, on_finish=finish)
    _warn_unreached(graph, state)
    return found


def format_report(result: BiconnectResult, detailed: bool = False) -> str:
    """
    Describe a biconnection pass.

    Args:
        result: Result of a pass
        detailed: Also list the articulation points and the added arcs

    Returns:
        Multi-line report text
    """
    lines = [f"Articulation point count: ({len(result.articulation_points)})"]
    if detailed:
        lines.append("Articulation points found: " + ", ".join(sorted(result.articulation_points)))
        arc_ids = [arc.id for pair in result.added_arcs for arc in pair]
        lines.append("Edges that were added: " + ", ".join(arc_ids))
    return "\n".join(lines)


__all__ = [
    "Biconnector",
    "DisconnectedGraphWarning",
    "biconnect",
    "classify",
    "find_articulation_points",
    "format_report",
]
