"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


class HeapCapacityError(OverflowError):
    """Raised when an edge is inserted into a full :class:`EdgeHeap`."""


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two zero-based vertices."""

    v1: int
    v2: int
    weight: int

    @classmethod
    def from_one_based(cls, v1: int, v2: int, weight: int) -> "Edge":
        return cls(v1 - 1, v2 - 1, weight)


def _parent(index: int) -> int:
    return (index - 1) // 2


@dataclass
class EdgeHeap:
    """Fixed-capacity binary min-heap of edges keyed on weight."""

    capacity: int
    elements: List[Edge] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def size(self) -> int:
        return len(self.elements)

    @property
    def is_full(self) -> bool:
        return len(self.elements) == self.capacity

    def insert(self, edge: Edge) -> None:
        if self.is_full:
            raise HeapCapacityError(
                f"heap overflow: capacity of {self.capacity} edges already reached"
            )
        elements = self.elements
        elements.append(edge)
        index = len(elements) - 1
        # Equal weights never swap.
        while index > 0 and elements[_parent(index)].weight > elements[index].weight:
            parent = _parent(index)
            elements[parent], elements[index] = elements[index], elements[parent]
            index = parent

    def peek_min(self) -> Optional[Edge]:
        if not self.elements:
            return None
        return self.elements[0]

    def extract_min(self) -> Optional[Edge]:
        """Remove and return the cheapest edge, or ``None`` if the heap is empty."""

        elements = self.elements
        if not elements:
            return None
        last = elements.pop()
        if not elements:
            return last
        smallest = elements[0]
        elements[0] = last
        self._sift_down(0)
        return smallest

    def _sift_down(self, index: int) -> None:
        elements = self.elements
        count = len(elements)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < count and elements[left].weight < elements[smallest].weight:
                smallest = left
            if right < count and elements[right].weight < elements[smallest].weight:
                smallest = right
            if smallest == index:
                return
            elements[smallest], elements[index] = elements[index], elements[smallest]
            index = smallest

    def as_list(self) -> List[Edge]:
        return list(self.elements)


@dataclass
class DisjointSet:
    """Union-find structure with path compression and union by rank."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        # Ranks start at 1; only their relative order matters.
        self.rank = [1] * self.size
        self.members = [1] * self.size
        self.components = self.size

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"vertex {index} out of range for {self.size} vertices")

    def find(self, index: int) -> int:
        self._check(index)
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def union(self, left: int, right: int) -> bool:
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return False
        if self.rank[root_left] > self.rank[root_right]:
            root_left, root_right = root_right, root_left
        elif self.rank[root_left] == self.rank[root_right]:
            self.rank[root_right] += 1
        self.parent[root_left] = root_right
        self.members[root_right] += self.members[root_left]
        self.components -= 1
        return True

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def set_size(self, index: int) -> int:
        return self.members[self.find(index)]
