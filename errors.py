"""
Exception types raised by the graph container and its loaders.

Algorithms never introduce their own error kinds; they let these propagate
from the bounds-checked graph accessors.
"""

from typing import Optional


class GraphError(Exception):
    """Base class for all graph errors."""


class VertexRangeError(GraphError, IndexError):
    """
    A vertex index lies outside [0, vertex_count).
    """

    def __init__(self, vertex: int, vertex_count: int) -> None:
        super().__init__(f"invalid vertex number {vertex} (graph has {vertex_count} vertices)")
        self.vertex = vertex
        self.vertex_count = vertex_count


class EdgeNotFoundError(GraphError, LookupError):
    """No edge is stored for the requested ordered pair."""

    def __init__(self, origin: int, dest: int) -> None:
        super().__init__(f"no edge from {origin} to {dest}")
        self.origin = origin
        self.dest = dest


class WeightError(GraphError, ValueError):
    """A weight cannot be represented in the graph's weight dtype."""

    def __init__(self, value: object, dtype: object, reason: str) -> None:
        super().__init__(f"weight {value!r} is not valid for {dtype}: {reason}")
        self.value = value
        self.dtype = dtype


class GraphFormatError(GraphError, ValueError):
    """Raised when an edge-list source has an unusable header."""


class GraphSourceError(GraphError):
    """
    An edge-list source could not be opened or read.

    Wraps the underlying OSError as ``cause``.
    """

    def __init__(self, path: str, cause: Optional[Exception] = None) -> None:
        message = f"{path} could not be opened"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.path = path
        self.cause = cause


class ConfigError(GraphError, ValueError):
    """Raised for invalid configuration files or values."""
