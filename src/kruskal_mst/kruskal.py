"""Kruskal driver for the MST solver."""

from __future__ import annotations

import enum
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

import pandas as pd
from tqdm import tqdm

from .structures import DisjointSet, Edge, EdgeHeap


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class RunState(enum.Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass
class KruskalStats:
    """Summary metrics for a Kruskal run."""

    vertex_count: int
    edge_count: int
    accepted_edges: int
    rejected_edges: int
    unexamined_edges: int
    component_count: int
    runtime_seconds: float


@dataclass
class KruskalResult:
    """Result bundle returned by :class:`KruskalSolver`."""

    total_weight: int
    all_connected: bool
    accepted_edges: List[Edge]
    stats: KruskalStats
    state: RunState = RunState.DONE

    def to_dataframe(self) -> pd.DataFrame:
        """Accepted edges with one-based vertex ids, in acceptance order."""

        return pd.DataFrame(
            {
                "v1": [edge.v1 + 1 for edge in self.accepted_edges],
                "v2": [edge.v2 + 1 for edge in self.accepted_edges],
                "weight": [edge.weight for edge in self.accepted_edges],
            },
            columns=["v1", "v2", "weight"],
        )


@dataclass
class KruskalConfig:
    """Configuration parameters for :class:`KruskalSolver`."""

    verbose: bool = field(default_factory=lambda: _env_flag("KRUSKAL_VERBOSE"))
    use_tqdm: bool | None = None
    early_exit: bool = True


class KruskalSolver:
    """Select edges cheapest-first until every vertex is joined."""

    def __init__(self, config: KruskalConfig | None = None) -> None:
        self.config = config or KruskalConfig()
        self.state = RunState.DONE

    def solve(
        self,
        vertex_count: int,
        edges: Sequence[Edge],
        capacity: int | None = None,
    ) -> KruskalResult:
        """Heapify `edges` and run Kruskal over `vertex_count` vertices.

        Raises :class:`HeapCapacityError` when more edges than `capacity` are
        supplied.
        """

        t0 = time.time()
        self._log("1. Building edge heap...")
        heap = EdgeHeap(len(edges) if capacity is None else capacity)
        for edge in edges:
            heap.insert(edge)
        self._log(f"   Loaded {len(heap)} edges. Done in {time.time() - t0:.2f}s")
        return self.run(heap, vertex_count)

    def run(self, heap: EdgeHeap, vertex_count: int) -> KruskalResult:
        """Consume `heap` cheapest-first; the heap is empty afterwards unless the run stops early."""

        start_time = time.time()
        self._log("2. Selecting spanning edges...")
        self.state = RunState.RUNNING

        sets = DisjointSet(vertex_count)
        edge_count = len(heap)
        total_weight = 0
        accepted: List[Edge] = []
        rejected = 0
        all_connected = False

        steps: Iterable[int] = range(edge_count)
        if edge_count and self._use_tqdm:
            steps = tqdm(steps, desc="   Kruskal", unit="edge", file=sys.stderr)

        for _ in steps:
            edge = heap.peek_min()
            if edge is None:
                break
            if sets.connected(edge.v1, edge.v2):
                heap.extract_min()
                rejected += 1
                continue

            sets.union(edge.v1, edge.v2)
            total_weight += edge.weight
            accepted.append(edge)
            heap.extract_min()

            if self.config.early_exit and sets.components == 1:
                all_connected = True
                break

        self.state = RunState.DONE
        elapsed = time.time() - start_time
        stats = KruskalStats(
            vertex_count=vertex_count,
            edge_count=edge_count,
            accepted_edges=len(accepted),
            rejected_edges=rejected,
            unexamined_edges=len(heap),
            component_count=sets.components,
            runtime_seconds=elapsed,
        )

        if self.config.verbose:
            self._log(f"   Accepted {stats.accepted_edges}, rejected {stats.rejected_edges}, "
                      f"left unexamined {stats.unexamined_edges}.")
            self._log(f"   Components remaining: {stats.component_count}")
            self._log(f"   Done in {elapsed:.2f}s")

        return KruskalResult(
            total_weight=total_weight,
            all_connected=all_connected,
            accepted_edges=accepted,
            stats=stats,
            state=self.state,
        )

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message, file=sys.stderr)


__all__ = [
    "KruskalConfig",
    "KruskalResult",
    "KruskalSolver",
    "KruskalStats",
    "RunState",
]
