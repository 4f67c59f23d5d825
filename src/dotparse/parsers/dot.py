"""DOT parser — hand-rolled recursive descent.

Parses the supported DOT subset into the immutable AST from syntax.types.
Each grammar rule is one ``parse_*`` method on the cursor. A rule either
returns its node or returns None with the cursor restored, so alternatives
can be tried in order. Lists and edge chains are loops; only subgraph
nesting recurses, bounded by ``ParserConfig.max_depth`` and by the
interpreter stack; running out of either is a ``ParseError``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from dotparse.config import ParserConfig
from dotparse.errors import ParseError
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

logger = logging.getLogger(__name__)

# ─── Tokens ──────────────────────────────────────────────────────────────────

_WHITESPACE_RE = re.compile(r"\s+")

_NUMERAL_RE = re.compile(r"-?(?:\.\d+|\d+(?:\.\d*)?)")

_EDGE_OPS: list[tuple[str, EdgeOp]] = [
    ("->", EdgeOp.Directed),
    ("--", EdgeOp.Undirected),
]


def canonical_numeral(text: str) -> str:
    """Render a matched numeral the way identifiers store it.

    The text goes through ``float`` and back through ``repr``, dropping a
    trailing ``.0``: ``5.`` -> ``5``, ``.5`` -> ``0.5``, ``-0`` -> ``-0``.
    """
    rendered = repr(float(text))
    if rendered.endswith(".0"):
        return rendered[:-2]
    return rendered


def _is_id_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_id_part(ch: str) -> bool:
    return ch == "_" or ch.isalpha() or ch.isdecimal()


def _bare_id_end(src: str, pos: int) -> int:
    """Offset just past the bare identifier at ``pos``, or ``pos`` if there is none.

    Letters or underscore first, then letters, decimal digits, underscores.
    Other numeric characters (``²``, ``Ⅻ``) are not identifier characters.
    """
    if pos >= len(src) or not _is_id_start(src[pos]):
        return pos
    end = pos + 1
    while end < len(src) and _is_id_part(src[end]):
        end += 1
    return end


def is_bare_id(text: str) -> bool:
    return text != "" and _bare_id_end(text, 0) == len(text)


def is_canonical_numeral(text: str) -> bool:
    """True if ``text`` reads back as a numeral with exactly this spelling."""
    return _NUMERAL_RE.fullmatch(text) is not None and canonical_numeral(text) == text


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    max_depth: int
    pos: int = 0
    depth: int = 0
    furthest: int = 0
    expected: set[str] = field(default_factory=set)

    # ── Primitive helpers ─────────────────────────────────────────────────────

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip_ws(self) -> None:
        self.match_re(_WHITESPACE_RE)

    def fail(self, what: str, at: int | None = None) -> None:
        """Record that ``what`` was expected; only the furthest offset is kept."""
        at = self.pos if at is None else at
        if at > self.furthest:
            self.furthest = at
            self.expected = {what}
        elif at == self.furthest:
            self.expected.add(what)

    def expect(self, s: str) -> bool:
        if self.consume(s):
            return True
        self.fail(repr(s))
        return False

    def consume_keyword(self, word: str) -> bool:
        """Consume ``word`` only if it is not the prefix of a longer identifier."""
        if not self.peek(word):
            self.fail(repr(word))
            return False
        after = self.pos + len(word)
        if after < len(self.src) and _is_id_part(self.src[after]):
            self.fail(repr(word))
            return False
        self.pos = after
        return True

    # ── Identifiers ───────────────────────────────────────────────────────────

    def parse_identifier(self) -> str | None:
        end = _bare_id_end(self.src, self.pos)
        if end > self.pos:
            bare = self.src[self.pos : end]
            self.pos = end
            return bare
        numeral = self.match_re(_NUMERAL_RE)
        if numeral is not None:
            return canonical_numeral(numeral)
        if self.peek('"'):
            end = self.src.find('"', self.pos + 1)
            if end == -1:
                self.fail("'\"'", at=len(self.src))
                return None
            value = self.src[self.pos + 1 : end]
            self.pos = end + 1
            return value
        self.fail("identifier")
        return None

    # ── Attributes ────────────────────────────────────────────────────────────

    def parse_attribute(self) -> Attribute | None:
        key = self.parse_identifier()
        if key is None:
            return None
        after_key = self.pos
        self.skip_ws()
        if self.consume("="):
            self.skip_ws()
            value = self.parse_identifier()
            if value is not None:
                return Attribute(id=key, value=value)
        else:
            self.fail("'='")
        self.pos = after_key
        return Attribute(id=key)

    def parse_attribute_list(self) -> list[Attribute]:
        """Attributes inside one bracket pair, `,`/`;` separators optional."""
        attrs: list[Attribute] = []
        while True:
            self.skip_ws()
            attr = self.parse_attribute()
            if attr is None:
                break
            attrs.append(attr)
            self.skip_ws()
            if not (self.consume(",") or self.consume(";")):
                self.fail("','")
        return attrs

    def parse_attribute_groups(self) -> tuple[Attribute, ...]:
        """Zero or more `[...]` groups, concatenated left to right."""
        attrs: list[Attribute] = []
        while True:
            saved = self.pos
            self.skip_ws()
            if not self.expect("["):
                self.pos = saved
                break
            group = self.parse_attribute_list()
            self.skip_ws()
            if not self.expect("]"):
                self.pos = saved
                break
            attrs.extend(group)
        return tuple(attrs)

    # ── Edges ─────────────────────────────────────────────────────────────────

    def parse_edge_op(self) -> EdgeOp | None:
        saved = self.pos
        self.skip_ws()
        for token, op in _EDGE_OPS:
            if self.consume(token):
                self.skip_ws()
                return op
            self.fail(repr(token))
        self.pos = saved
        return None

    def parse_edge_chain(self) -> list[tuple[EdgeOp, str]]:
        hops: list[tuple[EdgeOp, str]] = []
        while True:
            saved = self.pos
            op = self.parse_edge_op()
            if op is None:
                break
            target = self.parse_identifier()
            if target is None:
                self.pos = saved
                break
            hops.append((op, target))
        return hops

    def try_parse_edge_stmt(self) -> Edge | None:
        saved = self.pos
        from_id = self.parse_identifier()
        if from_id is None:
            return None
        hops = self.parse_edge_chain()
        if not hops:
            self.pos = saved
            return None
        attrs = self.parse_attribute_groups()
        return Edge(from_id=from_id, to=EdgeRHS.chain(hops), attributes=attrs)

    # ── Other statements ──────────────────────────────────────────────────────

    def try_parse_assignment(self) -> IdAssignment | None:
        saved = self.pos
        left = self.parse_identifier()
        if left is None:
            return None
        self.skip_ws()
        if self.consume("="):
            self.skip_ws()
            right = self.parse_identifier()
            if right is not None:
                return IdAssignment(from_id=right, to_id=left)
        self.pos = saved
        return None

    def try_parse_subgraph(self) -> Graph | None:
        saved = self.pos
        name: str | None = None
        if self.consume_keyword("subgraph"):
            self.skip_ws()
            name = self.parse_identifier()
        self.skip_ws()
        if not self.peek("{"):
            self.fail("'{'")
            self.pos = saved
            return None
        if self.depth >= self.max_depth:
            raise ParseError.at(self.src, self.pos, ("shallower nesting",))
        self.depth += 1
        try:
            statements = self.parse_block()
        finally:
            self.depth -= 1
        if statements is None:
            self.pos = saved
            return None
        return Graph(id=name, statements=statements)

    def try_parse_node_stmt(self) -> NodeStatement | None:
        node_id = self.parse_identifier()
        if node_id is None:
            return None
        attrs = self.parse_attribute_groups()
        return NodeStatement(id=node_id, attributes=attrs)

    # ── Statement lists ───────────────────────────────────────────────────────

    def parse_statement(self) -> Statement | None:
        """Try each alternative in order: edge, assignment, subgraph, node.

        Edge and assignment both start with an identifier, so they must be
        tried before the node fallback, which accepts any identifier.
        """
        start = self.pos
        for rule in (
            self.try_parse_edge_stmt,
            self.try_parse_assignment,
            self.try_parse_subgraph,
            self.try_parse_node_stmt,
        ):
            stmt = rule()
            if stmt is not None:
                return stmt
            self.pos = start
        if self.furthest == start:
            self.expected = {"statement"}
        return None

    def parse_statement_list(self) -> tuple[Statement, ...] | None:
        """One or more statements, each optionally followed by `;`."""
        statements: list[Statement] = []
        while True:
            saved = self.pos
            self.skip_ws()
            stmt = self.parse_statement()
            if stmt is None:
                self.pos = saved
                break
            statements.append(stmt)
            self.skip_ws()
            self.consume(";")
        if not statements:
            return None
        return tuple(statements)

    def parse_block(self) -> tuple[Statement, ...] | None:
        if not self.expect("{"):
            return None
        statements = self.parse_statement_list()
        if statements is None:
            return None
        self.skip_ws()
        if not self.expect("}"):
            return None
        return statements

    # ── Top-level parse ───────────────────────────────────────────────────────

    def parse_graph(self) -> Graph | None:
        self.skip_ws()
        if not self.consume_keyword("digraph"):
            return None
        self.skip_ws()
        name = self.parse_identifier()
        self.skip_ws()
        statements = self.parse_block()
        if statements is None:
            return None
        return Graph(id=name, statements=statements)

    def parse_document(self) -> Graph:
        try:
            graph = self.parse_graph()
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise ParseError.at(self.src, self.pos, ("shallower nesting",)) from None
        if graph is not None:
            self.skip_ws()
            if self.eof():
                return graph
            self.fail("end of input")
        raise ParseError.at(self.src, self.furthest, self.expected)


class DotParser:
    """Parser for the ``digraph`` subset of DOT."""

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()

    def parse(self, src: str) -> Graph:
        logger.debug("parsing %d characters of DOT source", len(src))
        cursor = _Cursor(src=src, max_depth=self.config.max_depth)
        try:
            graph = cursor.parse_document()
        except ParseError as e:
            logger.debug("parse failed at offset %d: %s", e.position, e)
            raise
        logger.debug("parsed graph %r with %d top-level statements", graph.id, len(graph.statements))
        return graph
