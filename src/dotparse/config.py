"""Centralized configuration for dotparse."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration for a parse run."""

    # Subgraph blocks are the only recursive rule; deeper input is rejected.
    max_depth: int = 64
