"""Kruskal MST library initialization."""

from .kruskal import KruskalConfig, KruskalResult, KruskalSolver, KruskalStats, RunState
from .parsing import GraphInput, InputFormatError, parse_text, read_csv, read_stream
from .runner import solve_file, solve_stream
from .structures import DisjointSet, Edge, EdgeHeap, HeapCapacityError

__all__ = [
    "KruskalSolver",
    "KruskalConfig",
    "KruskalResult",
    "KruskalStats",
    "RunState",
    "Edge",
    "EdgeHeap",
    "DisjointSet",
    "HeapCapacityError",
    "GraphInput",
    "InputFormatError",
    "parse_text",
    "read_csv",
    "read_stream",
    "solve_file",
    "solve_stream",
]
