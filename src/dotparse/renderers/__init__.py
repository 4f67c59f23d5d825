"""Output renderers for parsed graphs."""

from dotparse.renderers.base import Renderer
from dotparse.renderers.dot import CanonicalRenderer, DotRenderer, to_dot

__all__ = ["CanonicalRenderer", "DotRenderer", "Renderer", "to_dot"]
