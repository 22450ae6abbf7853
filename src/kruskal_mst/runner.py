"""Convenience helpers for running the solver end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

import pandas as pd

from .kruskal import KruskalConfig, KruskalResult, KruskalSolver
from .parsing import GraphInput, read_csv, read_stream


def solve_graph(graph: GraphInput, config: Optional[KruskalConfig] = None) -> KruskalResult:
    heap = graph.to_heap()
    return KruskalSolver(config).run(heap, graph.vertex_count)


def solve_stream(stream: TextIO, config: Optional[KruskalConfig] = None) -> KruskalResult:
    """Read the whitespace integer format from `stream` and solve it."""

    return solve_graph(read_stream(stream), config)


def solve_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[KruskalConfig] = None,
    vertex_count: Optional[int] = None,
) -> KruskalResult:
    """Solve the graph in `input_path` and optionally write the accepted edges."""

    input_path = Path(input_path)
    if input_path.suffix.lower() == ".csv":
        graph = read_csv(input_path, vertex_count=vertex_count)
    else:
        with input_path.open("r") as handle:
            graph = read_stream(handle)

    result = solve_graph(graph, config)
    if output_path is not None:
        save_edges(result, output_path)
    return result


def save_edges(result: KruskalResult, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix != ".csv":
        raise ValueError(f"Unsupported output file format: '{suffix}'")
    _save_dataframe(result.to_dataframe(), path)


def _save_dataframe(dataframe: pd.DataFrame, path: Path) -> None:
    dataframe.to_csv(path, index=False)
