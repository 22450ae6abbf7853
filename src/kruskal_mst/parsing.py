"""Graph input readers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

import pandas as pd

from .structures import Edge, EdgeHeap

_CSV_COLUMNS = ("v1", "v2", "weight")


class InputFormatError(ValueError):
    """Raised when graph input cannot be interpreted."""


@dataclass
class GraphInput:
    """A parsed graph: its declared counts and the edges actually supplied."""

    vertex_count: int
    edge_count: int
    edges: List[Edge]

    def to_heap(self) -> EdgeHeap:
        """Load the edges into a heap sized to the declared edge count."""

        heap = EdgeHeap(self.edge_count)
        for edge in self.edges:
            heap.insert(edge)
        return heap


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputFormatError(f"expected an integer, got {token!r}") from None


def _make_edge(v1: int, v2: int, weight: int, vertex_count: int) -> Edge:
    for vertex in (v1, v2):
        if not 1 <= vertex <= vertex_count:
            raise InputFormatError(f"vertex {vertex} out of range 1..{vertex_count}")
    return Edge.from_one_based(v1, v2, weight)


def parse_tokens(tokens: Iterable[str]) -> GraphInput:
    """Build a :class:`GraphInput` from whitespace-separated integer tokens."""

    values = [_to_int(token) for token in tokens]
    if len(values) < 2:
        raise InputFormatError("missing vertex and edge counts")

    vertex_count, edge_count = values[0], values[1]
    if vertex_count < 0 or edge_count < 0:
        raise InputFormatError("vertex and edge counts must be non-negative")

    body = values[2:]
    if len(body) % 3:
        raise InputFormatError("truncated edge: expected triples of v1 v2 weight")

    edges = [
        _make_edge(body[i], body[i + 1], body[i + 2], vertex_count)
        for i in range(0, len(body), 3)
    ]
    return GraphInput(vertex_count=vertex_count, edge_count=edge_count, edges=edges)


def parse_text(text: str) -> GraphInput:
    return parse_tokens(text.split())


def read_stream(stream: TextIO) -> GraphInput:
    return parse_text(stream.read())


def read_csv(path: str | Path, vertex_count: Optional[int] = None) -> GraphInput:
    """Load a ``v1,v2,weight`` edge list with one-based vertex ids."""

    frame = pd.read_csv(path)
    missing = [column for column in _CSV_COLUMNS if column not in frame.columns]
    if missing:
        raise InputFormatError(f"missing column(s) {', '.join(missing)} in '{path}'")
    if frame[list(_CSV_COLUMNS)].isna().any().any():
        raise InputFormatError(f"empty cells in '{path}'")

    for column in _CSV_COLUMNS:
        if not pd.api.types.is_integer_dtype(frame[column]):
            raise InputFormatError(f"non-integer values in column '{column}' of '{path}'")
    frame = frame[list(_CSV_COLUMNS)].astype("int64")

    if vertex_count is None:
        vertex_count = int(frame[["v1", "v2"]].max().max()) if len(frame) else 0
    if vertex_count < 0:
        raise InputFormatError("vertex count must be non-negative")

    edges = [
        _make_edge(int(row.v1), int(row.v2), int(row.weight), vertex_count)
        for row in frame.itertuples(index=False)
    ]
    return GraphInput(vertex_count=vertex_count, edge_count=len(edges), edges=edges)
