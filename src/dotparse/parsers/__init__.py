"""Parser entry point."""

from __future__ import annotations

from dotparse.config import ParserConfig
from dotparse.parsers.dot import DotParser, canonical_numeral
from dotparse.syntax.types import Graph

__all__ = ["DotParser", "canonical_numeral", "parse"]


def parse(src: str, config: ParserConfig | None = None) -> Graph:
    """Parse DOT source text and return the root Graph.

    Raises ParseError (a ValueError) if the text does not match the grammar.
    """
    return DotParser(config).parse(src)
