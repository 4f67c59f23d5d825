"""Tests for dotparse.ir.graph — flattening, membership and topology queries."""

from dotparse.ir.graph import EdgeData, GraphIR, NodeData
from dotparse.parsers import parse
from dotparse.syntax.types import Attribute, Graph, IdAssignment
from dotparse.types import EdgeOp


def _gir(src: str) -> GraphIR:
    return GraphIR.from_ast(parse(src))


class TestBasicConstruction:
    def test_single_node(self):
        gir = _gir("digraph { a }")
        assert gir.node_count() == 1
        assert gir.edge_count() == 0

    def test_name_preserved(self):
        assert _gir("digraph g { a }").name == "g"

    def test_chain_gives_one_edge_per_hop(self):
        gir = _gir("digraph { a -> b -- c }")
        assert gir.node_ids() == ["a", "b", "c"]
        assert gir.edge_list() == [("a", "b", EdgeOp.Directed), ("b", "c", EdgeOp.Undirected)]

    def test_parallel_edges_are_kept_in_document_order(self):
        gir = _gir("digraph { b -> c; a -> b; b -> c }")
        assert gir.edge_count() == 3
        assert gir.edge_list() == [
            ("b", "c", EdgeOp.Directed),
            ("a", "b", EdgeOp.Directed),
            ("b", "c", EdgeOp.Directed),
        ]

    def test_edge_data_carries_statement_attributes(self):
        gir = _gir("digraph { a -> b -> c [color=red] }")
        data: EdgeData = gir.digraph.edges["b", "c", 0]["data"]
        assert data.op == EdgeOp.Directed
        assert data.attributes == (Attribute("color", "red"),)

    def test_empty_root_graph(self):
        gir = GraphIR.from_ast(Graph())
        assert gir.node_count() == 0
        assert gir.subgraph_members == []


class TestNodeDeclarations:
    def test_endpoint_is_implicit(self):
        gir = _gir("digraph { a -> b }")
        data: NodeData = gir.digraph.nodes["b"]["data"]
        assert data.attributes == ()
        assert not data.declared

    def test_declaration_after_endpoint_supplies_attributes(self):
        gir = _gir("digraph { a -> b; b [color=red] }")
        data: NodeData = gir.digraph.nodes["b"]["data"]
        assert data.attributes == (Attribute("color", "red"),)
        assert data.declared

    def test_first_declaration_wins(self):
        gir = _gir("digraph { a [x=1]; a [x=2] }")
        assert gir.digraph.nodes["a"]["data"].attributes == (Attribute("x", "1"),)


class TestSubgraphs:
    def test_membership(self):
        gir = _gir("digraph { subgraph s { a -> b; a } c }")
        assert gir.subgraph_members == [("s", ["a", "b"])]
        assert gir.digraph.nodes["a"]["data"].subgraph == "s"
        assert gir.digraph.nodes["c"]["data"].subgraph is None

    def test_nested_members_bubble_up(self):
        gir = _gir("digraph { subgraph outer { x; { y } } }")
        assert gir.subgraph_members == [(None, ["y"]), ("outer", ["x", "y"])]
        assert gir.digraph.nodes["y"]["data"].subgraph is None

    def test_assignments_collected(self):
        gir = _gir("digraph { rankdir = LR; subgraph { rank = same; a } }")
        assert gir.assignments == [
            IdAssignment(from_id="LR", to_id="rankdir"),
            IdAssignment(from_id="same", to_id="rank"),
        ]


class TestTopology:
    def test_acyclic(self):
        assert _gir("digraph { a -> b -> c }").is_dag()

    def test_cycle(self):
        assert not _gir("digraph { a -> b -> a }").is_dag()

    def test_degrees(self):
        gir = _gir("digraph { a -> b; a -> c; c -> b }")
        assert gir.out_degree("a") == 2
        assert gir.in_degree("b") == 2
        assert gir.in_degree("missing") == 0
        assert gir.out_degree("missing") == 0
