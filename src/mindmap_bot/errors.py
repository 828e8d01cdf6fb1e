from __future__ import annotations


class MindMapError(Exception):
    """Base error for mind-map layout and rendering."""


class InvalidConfiguration(MindMapError, ValueError):
    """Configuration is malformed or violates a layout precondition."""


class RenderError(MindMapError):
    """The canvas could not be painted or encoded."""
