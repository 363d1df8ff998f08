"""
Tests for the de Bruijn graph model and orientation.
"""

import pytest

from bcalm_file import build_graph
from dbg_errors import UnknownNucleotideError
from dbg_graph import Edge, Graph, Node, Orientation
from orientation import resolve_orientation


class TestOrientation:

    def test_signs(self):
        assert Orientation.FORWARD.sign == "+"
        assert Orientation.REVERSE.sign == "-"

    def test_from_sign(self):
        assert Orientation.from_sign("+") is Orientation.FORWARD
        assert Orientation.from_sign("-") is Orientation.REVERSE

    def test_bad_sign(self):
        with pytest.raises(ValueError):
            Orientation.from_sign("*")


class TestNode:

    def test_defaults_forward(self):
        node = Node("ACGT", [1])
        assert node.orientation is Orientation.FORWARD
        assert node.is_dir("+")
        assert not node.is_dir("-")

    def test_set_dir(self):
        node = Node("ACGT", [])
        node.set_dir("-")
        assert not node.is_forward
        assert node.is_dir("-")

    def test_complement(self):
        node = Node("AACCG", [])
        assert node.complement == "CGGTT"
        assert node.length == 5


class TestGraph:

    def test_indexes_in_insertion_order(self):
        graph = Graph()
        assert graph.append("ACGT") == 0
        assert graph.append("TTTT", [3]) == 1
        assert len(graph) == 2

    def test_failed_append_keeps_graph(self):
        graph = Graph()
        graph.append("ACGT")
        with pytest.raises(UnknownNucleotideError):
            graph.append("ACGN")
        assert len(graph.nodes) == 1

    def test_link_from_last_node(self):
        graph = Graph()
        graph.append("ACGT")
        graph.append("TTTT")
        edge = graph.add_link("-", 0, "+")
        assert edge == Edge(1, 0, "-", "+")
        assert graph.edges == [edge]

    def test_self_loop_dropped(self):
        graph = Graph()
        graph.append("ACGT")
        assert graph.add_link("+", 0, "-") is None
        assert graph.edges == []

    def test_link_before_any_node(self):
        with pytest.raises(ValueError):
            Graph().add_link("+", 0, "+")

    def test_eligible_edges(self):
        graph = Graph()
        graph.append("ACGT")
        graph.add_link("+", 1, "+")
        graph.add_link("-", 1, "-")
        graph.append("TTTT")
        assert graph.eligible_edges() == [Edge(0, 1, "+", "+")]


class TestResolveOrientation:

    def test_example(self, example_lines):
        graph = build_graph(example_lines)
        orientations = resolve_orientation(graph)

        assert orientations == [Orientation.FORWARD, Orientation.REVERSE]
        assert graph.nodes[1].orientation is Orientation.REVERSE
        assert len(graph.eligible_edges()) == 1

    def test_chain(self, chain_text):
        graph = build_graph(chain_text.splitlines())
        orientations = resolve_orientation(graph)

        assert orientations == [Orientation.FORWARD, Orientation.FORWARD,
                                Orientation.REVERSE]
        assert graph.eligible_edges() == [Edge(0, 1, "+", "+"), Edge(1, 2, "+", "-")]

    def test_first_edge_wins(self):
        """A node fixed by an earlier edge is not changed by a later one."""
        text = ">0 L:+:1:-\nACGT\n>1\nTTTT\n>2 L:+:1:+\nCCCC\n"
        graph = build_graph(text.splitlines())
        resolve_orientation(graph)
        assert graph.nodes[1].orientation is Orientation.REVERSE

    def test_single_pass(self):
        """An edge is not revisited after a later edge changes its source."""
        text = ">0\nACGT\n>1 L:-:2:-\nTTTT\n>2 L:+:1:-\nCCCC\n"
        graph = build_graph(text.splitlines())
        resolve_orientation(graph)
        # Edge 1->2 is skipped (node 1 is still forward), then 2->1 reverses 1.
        assert graph.nodes[1].orientation is Orientation.REVERSE
        assert graph.nodes[2].orientation is Orientation.FORWARD

    def test_isolated_node_forward(self):
        text = ">0 L:+:1:-\nACGT\n>1\nTTTT\n>2\nGGGG\n"
        graph = build_graph(text.splitlines())
        resolve_orientation(graph)
        assert graph.nodes[2].orientation is Orientation.FORWARD

    def test_deterministic(self, chain_text):
        graph = build_graph(chain_text.splitlines())
        first = resolve_orientation(graph)
        second = resolve_orientation(graph)
        assert first == second
