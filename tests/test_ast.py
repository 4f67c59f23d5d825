"""Tests for dotparse.syntax.types — construction, immutability and canonical strings."""

import dataclasses

import pytest

from dotparse.parsers import parse
from dotparse.syntax.types import Attribute, Edge, EdgeRHS, Graph, IdAssignment, NodeStatement
from dotparse.types import EdgeOp

# ─── EdgeOp ──────────────────────────────────────────────────────────────────


def test_edge_op_tokens():
    assert EdgeOp.Directed.token == "->"
    assert EdgeOp.Undirected.token == "--"
    assert len(EdgeOp) == 2


# ─── EdgeRHS ─────────────────────────────────────────────────────────────────


def test_chain_builds_linked_list_in_order():
    rhs = EdgeRHS.chain([(EdgeOp.Directed, "b"), (EdgeOp.Undirected, "c")])
    assert rhs == EdgeRHS(EdgeOp.Directed, "b", EdgeRHS(EdgeOp.Undirected, "c", None))
    assert [link.node_id for link in rhs.links()] == ["b", "c"]
    assert len(rhs) == 2


def test_chain_requires_a_hop():
    with pytest.raises(ValueError):
        EdgeRHS.chain([])


def test_edge_endpoints_follow_the_chain():
    edge = Edge("a", EdgeRHS.chain([(EdgeOp.Directed, "b"), (EdgeOp.Directed, "c")]))
    assert edge.endpoints() == [("a", "b", EdgeOp.Directed), ("b", "c", EdgeOp.Directed)]


# ─── Immutability ────────────────────────────────────────────────────────────


def test_nodes_are_frozen():
    node = NodeStatement("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.id = "b"


def test_defaults():
    assert NodeStatement("a").attributes == ()
    assert Graph().id is None
    assert Graph().statements == ()
    assert Attribute("bold").is_flag


# ─── Canonical strings ───────────────────────────────────────────────────────


def test_attribute_str():
    assert str(Attribute("color", "red")) == "color = red"
    assert str(Attribute("bold")) == "bold = NULL"


def test_node_statement_str():
    assert str(NodeStatement("n")) == "n [  ]"
    assert str(NodeStatement("n", (Attribute("a", "1"), Attribute("b")))) == "n [ a = 1, b = NULL ]"


def test_edge_rhs_str_ends_without_null():
    rhs = EdgeRHS.chain([(EdgeOp.Directed, "b"), (EdgeOp.Undirected, "c")])
    assert str(rhs) == " -> b -- c"


def test_edge_str():
    edge = Edge("a", EdgeRHS.chain([(EdgeOp.Directed, "b")]), (Attribute("w", "2"),))
    assert str(edge) == "a -> b [ w = 2 ]"


def test_assignment_str():
    assert str(IdAssignment(from_id="LR", to_id="rankdir")) == "rankdir = LR"


def test_graph_str():
    assert str(Graph("g", (NodeStatement("a"),))) == "graph g { a [  ] }"
    assert str(Graph(None, (NodeStatement("a"), NodeStatement("b")))) == "graph  { a [  ], b [  ] }"


def test_parsed_graph_str():
    graph = parse("digraph g { a -> b -> c [color=red]; subgraph { x } }")
    assert str(graph) == "graph g { a -> b -> c [ color = red ], graph  { x [  ] } }"
