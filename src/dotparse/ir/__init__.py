"""Intermediate representation: flattened graph view of the AST."""

from dotparse.ir.graph import EdgeData, GraphIR, NodeData

__all__ = ["EdgeData", "GraphIR", "NodeData"]
