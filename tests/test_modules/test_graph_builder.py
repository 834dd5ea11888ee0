"""Tests for modules.graph_builder module."""

from __future__ import annotations

from valuegraph.modules.graph_builder import build_graph, classify_pairs, ordered_keys
from valuegraph.modules.models import Graph, GraphLink, GraphNode, Relation


def _link_pairs(graph: Graph) -> set[tuple[int, int]]:
    return {(link.source, link.target) for link in graph.links}


class TestOrderedKeys:
    """Tests for ordered_keys function."""

    def test_sorts_by_default(self):
        """Should sort keys lexicographically."""
        assert ordered_keys({"b": "", "c": "", "a": ""}) == ["a", "b", "c"]

    def test_preserves_mapping_order(self):
        """Should keep mapping order when requested."""
        values = {"b": "", "c": "", "a": ""}
        assert ordered_keys(values, preserve_order=True) == ["b", "c", "a"]


class TestBuildGraph:
    """Tests for build_graph function."""

    def test_scenario_containment(self, sample_values):
        """hello world contains hello; bye relates to nothing else."""
        graph = build_graph(sample_values)

        assert graph.node_names == ["a", "b", "c"]
        assert _link_pairs(graph) == {(0, 0), (1, 0), (1, 1), (2, 2)}

    def test_links_follow_row_order(self, sample_values):
        """Links are emitted row by row in node-index order."""
        graph = build_graph(sample_values)
        assert graph.links == (
            GraphLink(0, 0),
            GraphLink(1, 0),
            GraphLink(1, 1),
            GraphLink(2, 2),
        )

    def test_empty_mapping(self):
        """Should return an empty graph."""
        graph = build_graph({})
        assert graph.nodes == ()
        assert graph.links == ()
        assert graph.to_dict() == {"nodes": [], "links": []}

    def test_identical_values_link_both_ways(self):
        """Equal values produce four links: two self-loops and both directions."""
        graph = build_graph({"x": "same", "y": "same"})
        assert len(graph.links) == 4
        assert _link_pairs(graph) == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_every_node_has_self_loop(self):
        """Self-comparison always yields a self-loop."""
        graph = build_graph({"p": "abc", "q": "", "r": "xyz"})
        for index in range(len(graph.nodes)):
            assert (index, index) in _link_pairs(graph)

    def test_empty_value_is_target_of_all(self):
        """An empty value is contained in every other value."""
        graph = build_graph({"empty": "", "full": "text", "other": "more"})
        empty = graph.index_of("empty")
        for name in ("full", "other"):
            assert (graph.index_of(name), empty) in _link_pairs(graph)
            assert (empty, graph.index_of(name)) not in _link_pairs(graph)

    def test_chain_of_containment(self):
        """Each value links to every value it contains."""
        graph = build_graph({"one": "a", "two": "ab", "three": "abc"})
        one, two, three = (graph.index_of(n) for n in ("one", "two", "three"))
        cross = {pair for pair in _link_pairs(graph) if pair[0] != pair[1]}
        assert cross == {(two, one), (three, one), (three, two)}

    def test_node_order_is_sorted(self):
        """Node indices follow sorted keys regardless of insertion order."""
        first = build_graph({"z": "1", "a": "12", "m": "2"})
        second = build_graph({"a": "12", "m": "2", "z": "1"})
        assert first == second
        assert first.node_names == ["a", "m", "z"]

    def test_preserve_order(self):
        """Node indices follow mapping order when requested."""
        graph = build_graph({"z": "1", "a": "12"}, preserve_order=True)
        assert graph.node_names == ["z", "a"]
        assert GraphLink(source=1, target=0) in graph.links

    def test_nodes_match_keys(self, sample_values):
        """Should produce exactly one node per key."""
        graph = build_graph(sample_values)
        assert len(graph.nodes) == len(sample_values)
        assert set(graph.node_names) == set(sample_values)
        assert all(isinstance(node, GraphNode) for node in graph.nodes)

    def test_right_derived_adds_no_reverse_link(self):
        """Containment stays a single edge from container to contained."""
        graph = build_graph({"short": "ab", "long": "xaby"})
        long_, short = graph.index_of("long"), graph.index_of("short")
        assert (long_, short) in _link_pairs(graph)
        assert (short, long_) not in _link_pairs(graph)


class TestClassifyPairs:
    """Tests for classify_pairs function."""

    def test_yields_every_ordered_pair(self, sample_values):
        """Should yield n*n pairs including self-pairs."""
        pairs = list(classify_pairs(sample_values))
        assert len(pairs) == 9
        assert pairs[0] == ("a", "a", Relation.IS_EQUAL_TO)
        assert ("b", "a", Relation.LEFT_DERIVED_FROM_RIGHT) in pairs
        assert ("a", "b", Relation.RIGHT_DERIVED_FROM_LEFT) in pairs
        assert ("a", "c", Relation.UNRELATED) in pairs

    def test_linking_pairs_match_graph(self, sample_values):
        """Pairs that produce links should match the built graph."""
        graph = build_graph(sample_values)
        linked = {
            (graph.index_of(a), graph.index_of(b))
            for a, b, relation in classify_pairs(sample_values)
            if relation.produces_link
        }
        assert linked == _link_pairs(graph)
