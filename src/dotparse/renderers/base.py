"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from dotparse.syntax.types import Graph


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, graph: Graph) -> str:
        """Render a parsed graph to an output string."""
        ...
