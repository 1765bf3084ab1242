"""Open set ordered by estimated total cost."""

from __future__ import annotations

import heapq
from typing import NamedTuple

from gridstar.search.grid import Position


class FrontierEntry(NamedTuple):
    position: Position
    f: float


class Frontier:
    """Min-priority queue on f, FIFO among equal keys.

    Entries are never updated in place. A cheaper route to a cell pushes a
    second entry, and the caller drops the older one when it surfaces.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Position]] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, position: Position, f: float) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (f, self._seq, position))

    def pop_min(self) -> FrontierEntry:
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        f, _, position = heapq.heappop(self._heap)
        return FrontierEntry(position=position, f=f)

    def is_empty(self) -> bool:
        return not self._heap
