"""Tests for articulation point classification and biconnection."""

import numpy as np
import pytest

from graph_biconnect import (
    Biconnector,
    DisconnectedGraphWarning,
    EventType,
    Graph,
    biconnect,
    find_articulation_points,
    format_report,
    random_simple_graph,
)
from graph_biconnect.examples import EXAMPLE_STRUCTURES

from conftest import (
    brute_force_articulation_points,
    make_chain,
    make_complete,
    make_cycle,
    make_star,
)


def _assert_simple(graph: Graph) -> None:
    matrix = graph.adjacency_matrix()
    assert np.all(np.diag(matrix) == 0)
    assert matrix.max() <= 1
    assert np.array_equal(matrix, matrix.T)


class TestSmallGraphs:
    """Graphs with one or two vertices never have articulation points."""

    def test_one_vertex(self):
        graph = Graph.from_structure(EXAMPLE_STRUCTURES["Small graph with one vertex"])
        result = biconnect(graph)
        assert result.articulation_points == set()
        assert result.added_edges == []

    def test_two_vertices(self):
        graph = Graph.from_structure(EXAMPLE_STRUCTURES["Small graph with two vertices"])
        result = biconnect(graph)
        assert result.articulation_points == set()
        assert result.added_edges == []


class TestBiconnectedInputs:
    """Already biconnected graphs are left unchanged."""

    @pytest.mark.parametrize("n", [3, 4, 6, 10])
    def test_complete_graph(self, n):
        graph = Graph.from_structure(make_complete(n))
        edges_before = graph.edge_count
        result = biconnect(graph)
        assert result.articulation_points == set()
        assert result.edge_count_added == 0
        assert graph.edge_count == edges_before

    @pytest.mark.parametrize("n", [3, 5, 12])
    def test_cycle(self, n):
        result = biconnect(Graph.from_structure(make_cycle(n)))
        assert result.articulation_points == set()
        assert result.added_edges == []

    def test_full_graph_example(self):
        """K4 on {a, b, c, d}: nothing found, nothing added."""
        graph = Graph.from_structure(EXAMPLE_STRUCTURES["Full graph"])
        result = biconnect(graph)
        assert result.articulation_points == set()
        assert result.edge_count_added == 0


class TestChain:
    """A chain's internal vertices are its articulation points."""

    def test_five_chain(self, chain5):
        result = biconnect(chain5)
        assert result.articulation_points == {"b", "c", "d"}

    def test_five_chain_added_edges(self, chain5):
        """Each internal vertex's child is joined to the vertex's parent."""
        result = biconnect(chain5)
        assert result.added_edges == [("c", "e"), ("b", "d"), ("a", "c")]
        assert [(f.id, b.id) for f, b in result.added_arcs] == [
            ("ac_e", "ae_c"),
            ("ab_d", "ad_b"),
            ("aa_c", "ac_a"),
        ]
        assert chain5.neighbors("c") == ["b", "d", "e", "a"]

    def test_five_chain_second_pass(self, chain5):
        biconnect(chain5)
        assert biconnect(chain5).articulation_points == set()

    @pytest.mark.parametrize("n", [3, 4, 10, 50])
    def test_chain_internal_vertices(self, n):
        graph = Graph.from_structure(make_chain(n))
        result = biconnect(graph)
        assert result.articulation_points == {f"v{i}" for i in range(1, n - 1)}

    def test_long_chain(self):
        """A 2500-vertex chain is handled without recursion errors."""
        graph = Graph.from_structure(make_chain(2500))
        result = biconnect(graph)
        assert len(result.articulation_points) == 2498
        assert result.edge_count_added == 2498
        assert find_articulation_points(graph) == set()


class TestStar:
    """A star rooted at its centre has the centre as only articulation point."""

    def test_root_articulation_point(self, star):
        result = biconnect(star)
        assert result.articulation_points == {"a"}

    def test_root_children_are_chained(self, star):
        """The root's children are joined into a path that avoids the root."""
        result = biconnect(star)
        assert result.added_edges == [("b", "c"), ("c", "d")]
        assert all("a" not in edge for edge in result.added_edges)

    def test_second_pass_finds_nothing(self, star):
        biconnect(star)
        result = biconnect(star)
        assert result.articulation_points == set()
        assert result.added_edges == []

    @pytest.mark.parametrize("k", [2, 3, 7])
    def test_star_sizes(self, k):
        result = biconnect(Graph.from_structure(make_star(k)))
        assert result.articulation_points == {"c"}
        assert result.edge_count_added == k - 1

    def test_non_centre_root(self, star):
        """Rooted at a leaf, the centre's children are joined to the root."""
        result = biconnect(star, root="b")
        assert result.articulation_points == {"a"}
        assert result.added_edges == [("b", "c"), ("b", "d")]


class TestExampleGraphs:
    """Articulation points of the demo graphs."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Complex example graph", {"a", "d", "e", "g", "i", "m"}),
            ("Complex graph with cycles", {"c", "d"}),
            ("Complex graph without cycles", {"b", "d", "f"}),
            ("Simple chain graph", {"b", "c", "d"}),
            ("Root articulation point", {"a"}),
            ("Simple cycle graph", set()),
        ],
    )
    def test_articulation_points(self, name, expected):
        graph = Graph.from_structure(EXAMPLE_STRUCTURES[name])
        assert find_articulation_points(graph) == expected
        assert biconnect(graph).articulation_points == expected

    @pytest.mark.parametrize("name", list(EXAMPLE_STRUCTURES))
    def test_result_is_biconnected(self, name):
        graph = Graph.from_structure(EXAMPLE_STRUCTURES[name])
        n = len(graph)
        result = biconnect(graph)
        assert result.edge_count_added <= max(n - 1, 0)
        assert biconnect(graph).articulation_points == set()
        assert brute_force_articulation_points(graph) == set()
        _assert_simple(graph)


class TestRandomGraphs:
    """Detection matches brute force and the fix always works."""

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("n, m", [(12, 11), (20, 24), (40, 45), (30, 60)])
    def test_matches_brute_force(self, n, m, seed):
        graph = random_simple_graph(n, m, seed=seed)
        assert find_articulation_points(graph) == brute_force_articulation_points(graph)

    @pytest.mark.parametrize("seed", range(8))
    @pytest.mark.parametrize("n, m", [(12, 11), (25, 30), (60, 70)])
    def test_biconnects(self, n, m, seed):
        graph = random_simple_graph(n, m, seed=seed)
        result = biconnect(graph)
        assert result.edge_count_added <= n - 1
        assert graph.edge_count == m + result.edge_count_added
        assert brute_force_articulation_points(graph) == set()
        assert find_articulation_points(graph) == set()
        _assert_simple(graph)


class TestDetectionOnly:
    """find_articulation_points never changes the graph."""

    def test_graph_unchanged(self, chain5):
        arcs_before = chain5.arc_count
        assert find_articulation_points(chain5) == {"b", "c", "d"}
        assert chain5.arc_count == arcs_before
        assert find_articulation_points(chain5) == {"b", "c", "d"}


class TestDisconnected:
    """Disconnected input only processes the root's component."""

    def _graph(self) -> Graph:
        graph = Graph("Split")
        for name in "abcde":
            graph.create_vertex(name)
        graph.add_edge("a", "b")
        graph.add_edge("b", "c")
        graph.add_edge("d", "e")
        return graph

    def test_warns_and_processes_root_component(self):
        graph = self._graph()
        with pytest.warns(DisconnectedGraphWarning, match="2 of 5 vertices"):
            result = biconnect(graph)
        assert result.articulation_points == {"b"}
        assert result.added_edges == [("a", "c")]

    def test_detection_warns(self):
        with pytest.warns(DisconnectedGraphWarning):
            assert find_articulation_points(self._graph()) == {"b"}


class TestBiconnector:
    """Tests for the Biconnector driver and its events."""

    def test_on_chains(self, star):
        biconnector = Biconnector(star)
        assert biconnector.on("finish", lambda e: None) is biconnector
        assert biconnector.graph is star

    def test_event_callbacks(self, chain5):
        finished = []
        backs = []
        result = (
            Biconnector(chain5)
            .on(EventType.finish, lambda e: finished.append(e["vertex"]))
            .on("back_edge", lambda e: backs.append(e["vertex"]))
            .run()
        )
        assert finished == ["e", "d", "c", "b", "a"]
        assert backs == []
        assert result.articulation_points == {"b", "c", "d"}

    def test_general_listener(self, star):
        events = []
        Biconnector(star, on_event=events.append).run()
        discovered = [e["vertex"] for e in events if e["type"] == EventType.discover]
        assert discovered == ["a", "b", "c", "d"]


class TestReport:
    """Tests for report formatting."""

    def test_summary(self, star):
        assert format_report(biconnect(star)) == "Articulation point count: (1)"

    def test_detailed(self, star):
        report = format_report(biconnect(star), detailed=True)
        assert report.splitlines() == [
            "Articulation point count: (1)",
            "Articulation points found: a",
            "Edges that were added: ab_c, ac_b, ac_d, ad_c",
        ]
