"""AST for the supported DOT grammar subset."""

from dotparse.syntax.types import (
    Attribute,
    Edge,
    EdgeRHS,
    Graph,
    IdAssignment,
    NodeStatement,
    Statement,
)

__all__ = [
    "Attribute",
    "Edge",
    "EdgeRHS",
    "Graph",
    "IdAssignment",
    "NodeStatement",
    "Statement",
]
