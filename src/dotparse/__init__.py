"""dotparse: a parser for the digraph subset of the DOT language."""

from __future__ import annotations

from pathlib import Path

from dotparse.config import ParserConfig
from dotparse.errors import ParseError
from dotparse.ir.graph import GraphIR
from dotparse.parsers import parse
from dotparse.renderers.dot import to_dot
from dotparse.syntax.types import (
    Attribute,
    Edge,
    EdgeRHS,
    Graph,
    IdAssignment,
    NodeStatement,
    Statement,
)
from dotparse.types import EdgeOp

__all__ = [
    "Attribute",
    "Edge",
    "EdgeOp",
    "EdgeRHS",
    "Graph",
    "GraphIR",
    "IdAssignment",
    "NodeStatement",
    "ParseError",
    "ParserConfig",
    "Statement",
    "parse",
    "parse_file",
    "to_dot",
]


def parse_file(path: str | Path, config: ParserConfig | None = None) -> Graph:
    """Read a DOT file as UTF-8 and parse it.

    Raises:
        OSError: If the file cannot be read.
        ParseError: If its contents do not match the grammar.
    """
    text = Path(path).read_text(encoding="utf-8")
    return parse(text, config)
