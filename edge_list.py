"""
Plain-text edge-list sources.

The first token is the vertex count; every following triple is
``origin destination weight``. Tokens may be split across lines freely.
Parsing stops quietly at end of input or at the first malformed token,
dropping any incomplete trailing triple.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union
import logging

from errors import GraphFormatError, GraphSourceError

logger = logging.getLogger(__name__)

EdgeTriple = Tuple[int, int, float]


@dataclass(frozen=True)
class EdgeList:
    """Vertex count plus the (origin, dest, weight) triples read from a source."""

    vertex_count: int
    edges: Tuple[EdgeTriple, ...]


def parse_edge_list(text: str) -> EdgeList:
    tokens = text.split()
    if not tokens:
        raise GraphFormatError("edge list is empty; expected a vertex count")
    try:
        vertex_count = int(tokens[0])
    except ValueError:
        raise GraphFormatError(f"vertex count must be an integer, got {tokens[0]!r}") from None
    if vertex_count < 0:
        raise GraphFormatError(f"vertex count must be non-negative, got {vertex_count}")

    edges = []
    body = tokens[1:]
    for start in range(0, len(body) - 2, 3):
        origin, dest, weight = body[start:start + 3]
        try:
            edges.append((int(origin), int(dest), float(weight)))
        except ValueError:
            logger.debug(
                "Stopped at malformed edge",
                extra={"token_index": start + 1, "triple": (origin, dest, weight)},
            )
            break

    logger.debug(
        "Edge list parsed",
        extra={"vertex_count": vertex_count, "edges": len(edges)},
    )
    return EdgeList(vertex_count=vertex_count, edges=tuple(edges))


def read_edge_list(path: Union[str, Path], encoding: str = "utf-8") -> EdgeList:
    """
    Read and parse an edge-list file.

    Raises:
        GraphSourceError: the file cannot be opened or read.
        GraphFormatError: the vertex count is missing or invalid.
    """
    try:
        text = Path(path).read_text(encoding=encoding)
    except OSError as e:
        raise GraphSourceError(str(path), cause=e) from e
    return parse_edge_list(text)
