"""Graph IR — flattens the AST into a networkx MultiDiGraph.

This is the shape downstream consumers (viewers, layout tools) work with:
a flat node list and one edge per hop of every edge chain. Subgraphs are
flattened into the main graph while their membership is kept for later use.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from dotparse.syntax.types import (
    Attribute,
    Edge,
    Graph,
    IdAssignment,
    NodeStatement,
    Statement,
)
from dotparse.types import EdgeOp


@dataclass
class NodeData:
    id: str
    attributes: tuple[Attribute, ...]
    subgraph: str | None = None
    declared: bool = True


@dataclass
class EdgeData:
    op: EdgeOp
    attributes: tuple[Attribute, ...]
    order: int = 0


class GraphIR:
    """The flattened view of a parsed Graph.

    Wraps a networkx MultiDiGraph; parallel edges are kept since DOT allows
    the same pair to be connected more than once.
    """

    def __init__(
        self,
        digraph: nx.MultiDiGraph,
        name: str | None,
        subgraph_members: list[tuple[str | None, list[str]]],
        assignments: list[IdAssignment],
    ) -> None:
        self.digraph = digraph
        self.name = name
        self.subgraph_members = subgraph_members
        self.assignments = assignments

    @classmethod
    def from_ast(cls, graph: Graph) -> GraphIR:
        """Build a GraphIR from an AST Graph."""
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        subgraph_members: list[tuple[str | None, list[str]]] = []
        assignments: list[IdAssignment] = []
        _collect(graph.statements, None, digraph, subgraph_members, assignments)
        return cls(
            digraph=digraph,
            name=graph.id,
            subgraph_members=subgraph_members,
            assignments=assignments,
        )

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def node_ids(self) -> list[str]:
        """Node ids in first-seen order."""
        return list(self.digraph.nodes)

    def edge_list(self) -> list[tuple[str, str, EdgeOp]]:
        """One ``(source, target, op)`` per hop, in document order."""
        edges = sorted(self.digraph.edges(data="data"), key=lambda e: e[2].order)
        return [(u, v, data.op) for u, v, data in edges]

    def is_dag(self) -> bool:
        return nx.is_directed_acyclic_graph(self.digraph)

    def in_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.in_degree(node_id)

    def out_degree(self, node_id: str) -> int:
        if node_id not in self.digraph:
            return 0
        return self.digraph.out_degree(node_id)


def _collect(
    statements: tuple[Statement, ...],
    subgraph: str | None,
    digraph: nx.MultiDiGraph,
    subgraph_members: list[tuple[str | None, list[str]]],
    assignments: list[IdAssignment],
) -> list[str]:
    """Add statements to ``digraph``; return the node ids they mention."""
    mentioned: list[str] = []
    for stmt in statements:
        if isinstance(stmt, NodeStatement):
            _declare_node(digraph, stmt, subgraph)
            mentioned.append(stmt.id)
        elif isinstance(stmt, Edge):
            for source, target, op in stmt.endpoints():
                _ensure_node(digraph, source, subgraph)
                _ensure_node(digraph, target, subgraph)
                order = digraph.number_of_edges()
                digraph.add_edge(source, target, data=EdgeData(op=op, attributes=stmt.attributes, order=order))
            mentioned.append(stmt.from_id)
            mentioned.extend(link.node_id for link in stmt.to.links())
        elif isinstance(stmt, Graph):
            members = _collect(stmt.statements, stmt.id, digraph, subgraph_members, assignments)
            subgraph_members.append((stmt.id, list(dict.fromkeys(members))))
            mentioned.extend(members)
        elif isinstance(stmt, IdAssignment):
            assignments.append(stmt)
        elif isinstance(stmt, Attribute):
            continue
        else:
            raise TypeError(f"not a statement: {stmt!r}")
    return mentioned


def _declare_node(digraph: nx.MultiDiGraph, stmt: NodeStatement, subgraph: str | None) -> None:
    """First declaration wins; a node first seen as an edge endpoint gets its attributes here."""
    existing = digraph.nodes.get(stmt.id)
    if existing is not None and existing["data"].declared:
        return
    if existing is not None:
        existing["data"] = NodeData(id=stmt.id, attributes=stmt.attributes, subgraph=existing["data"].subgraph)
        return
    digraph.add_node(stmt.id, data=NodeData(id=stmt.id, attributes=stmt.attributes, subgraph=subgraph))


def _ensure_node(digraph: nx.MultiDiGraph, node_id: str, subgraph: str | None) -> None:
    if node_id not in digraph:
        digraph.add_node(node_id, data=NodeData(id=node_id, attributes=(), subgraph=subgraph, declared=False))
