"""Shared type definitions for dotparse.

Enums used across the parser, the AST, renderers and the graph view.
"""

from __future__ import annotations

from enum import Enum


class EdgeOp(Enum):
    Directed = "->"
    Undirected = "--"

    @property
    def token(self) -> str:
        return self.value
