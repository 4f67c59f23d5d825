"""Renderers that turn an AST back into text."""

from __future__ import annotations

from dotparse.parsers.dot import is_bare_id, is_canonical_numeral
from dotparse.syntax.types import (
    Attribute,
    Edge,
    Graph,
    IdAssignment,
    NodeStatement,
    Statement,
)

_KEYWORDS = frozenset({"digraph", "subgraph"})

INDENT = "    "


def quote_id(text: str) -> str:
    """Return ``text`` in a form the parser reads back as the same identifier."""
    if text not in _KEYWORDS and is_bare_id(text):
        return text
    if is_canonical_numeral(text):
        return text
    if '"' in text:
        raise ValueError(f"identifier {text!r} contains '\"' and cannot be written as DOT")
    return f'"{text}"'


def _attr_list(attrs: tuple[Attribute, ...]) -> str:
    if not attrs:
        return ""
    parts = []
    for attr in attrs:
        if attr.value is None:
            parts.append(quote_id(attr.id))
        else:
            parts.append(f"{quote_id(attr.id)}={quote_id(attr.value)}")
    return " [" + ", ".join(parts) + "]"


def _write_statement(stmt: Statement, depth: int, out: list[str]) -> None:
    pad = INDENT * depth
    if isinstance(stmt, Graph):
        head = "subgraph " + quote_id(stmt.id) + " {" if stmt.id is not None else "subgraph {"
        out.append(pad + head)
        for child in stmt.statements:
            _write_statement(child, depth + 1, out)
        out.append(pad + "}")
    elif isinstance(stmt, NodeStatement):
        out.append(f"{pad}{quote_id(stmt.id)}{_attr_list(stmt.attributes)};")
    elif isinstance(stmt, Edge):
        chain = "".join(f" {link.op.token} {quote_id(link.node_id)}" for link in stmt.to.links())
        out.append(f"{pad}{quote_id(stmt.from_id)}{chain}{_attr_list(stmt.attributes)};")
    elif isinstance(stmt, IdAssignment):
        out.append(f"{pad}{quote_id(stmt.to_id)} = {quote_id(stmt.from_id)};")
    elif isinstance(stmt, Attribute):
        # A loose attribute reads back as an assignment, or a node for flags.
        if stmt.value is None:
            out.append(f"{pad}{quote_id(stmt.id)};")
        else:
            out.append(f"{pad}{quote_id(stmt.id)} = {quote_id(stmt.value)};")
    else:
        raise TypeError(f"not a statement: {stmt!r}")


def to_dot(graph: Graph) -> str:
    """Write ``graph`` as DOT source, one statement per line."""
    head = "digraph " + quote_id(graph.id) + " {" if graph.id is not None else "digraph {"
    out = [head]
    for stmt in graph.statements:
        _write_statement(stmt, 1, out)
    out.append("}")
    return "\n".join(out) + "\n"


class DotRenderer:
    """Emit DOT source that parses back to an equal AST."""

    def render(self, graph: Graph) -> str:
        return to_dot(graph)


class CanonicalRenderer:
    """Emit the single-line canonical form given by ``str(graph)``."""

    def render(self, graph: Graph) -> str:
        return str(graph) + "\n"
