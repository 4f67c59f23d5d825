"""AST data structures for the DOT grammar subset.

Every node is a frozen dataclass built once by the parser and never mutated.
``Statement`` is the closed union of the statement variants a graph body can
hold. ``str()`` on any node gives the canonical serialization used for
diagnostics and round-trip tests; it is DOT-like but not DOT (see
``dotparse.renderers.dot`` for a writer that emits parseable source).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from dotparse.types import EdgeOp


@dataclass(frozen=True)
class Attribute:
    id: str
    value: str | None = None  # None marks a flag attribute (`[bold]`)

    @property
    def is_flag(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return f"{self.id} = {'NULL' if self.value is None else self.value}"


@dataclass(frozen=True)
class NodeStatement:
    id: str
    attributes: tuple[Attribute, ...] = ()

    def __str__(self) -> str:
        return f"{self.id} [ {_join(self.attributes)} ]"


@dataclass(frozen=True)
class EdgeRHS:
    """One hop of an edge chain; ``rest`` links to the next hop."""

    op: EdgeOp
    node_id: str
    rest: EdgeRHS | None = None

    @classmethod
    def chain(cls, hops: list[tuple[EdgeOp, str]]) -> EdgeRHS:
        """Fold ``[(op, id), ...]`` into a linked chain, first hop at the head."""
        if not hops:
            raise ValueError("an edge chain needs at least one hop")
        rest: EdgeRHS | None = None
        for op, node_id in reversed(hops):
            rest = cls(op=op, node_id=node_id, rest=rest)
        assert rest is not None
        return rest

    def links(self) -> Iterator[EdgeRHS]:
        link: EdgeRHS | None = self
        while link is not None:
            yield link
            link = link.rest

    def __len__(self) -> int:
        return sum(1 for _ in self.links())

    def __str__(self) -> str:
        return "".join(f" {link.op.token} {link.node_id}" for link in self.links())


@dataclass(frozen=True)
class Edge:
    from_id: str
    to: EdgeRHS
    attributes: tuple[Attribute, ...] = ()

    def endpoints(self) -> list[tuple[str, str, EdgeOp]]:
        """Expand the chain into ``(source, target, op)`` pairs, one per hop."""
        pairs: list[tuple[str, str, EdgeOp]] = []
        prev = self.from_id
        for link in self.to.links():
            pairs.append((prev, link.node_id, link.op))
            prev = link.node_id
        return pairs

    def __str__(self) -> str:
        return f"{self.from_id}{self.to} [ {_join(self.attributes)} ]"


@dataclass(frozen=True)
class IdAssignment:
    """A bare ``key = value`` statement: ``to_id`` is the key, ``from_id`` the value."""

    from_id: str
    to_id: str

    def __str__(self) -> str:
        return f"{self.to_id} = {self.from_id}"


@dataclass(frozen=True)
class Graph:
    """A top-level ``digraph`` or a (possibly anonymous) subgraph block."""

    id: str | None = None
    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"graph {self.id or ''} {{ {_join(self.statements)} }}"


Statement = Union[Graph, Attribute, NodeStatement, Edge, IdAssignment]


def _join(items: tuple[object, ...]) -> str:
    return ", ".join(str(item) for item in items)
