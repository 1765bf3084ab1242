"""Per-cell search state keyed by position."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from gridstar.search.errors import InvariantViolation
from gridstar.search.grid import Position

Heuristic = Callable[[Position, Position], int]


class SearchStatus(str, Enum):
    UNVISITED = "unvisited"
    OPEN = "open"
    CLOSED = "closed"


class RelaxResult(str, Enum):
    IMPROVED = "improved"
    NOT_IMPROVED = "not_improved"


@dataclass
class SearchState:
    position: Position
    h: int
    g: float = math.inf
    predecessor: Position | None = None
    status: SearchStatus = SearchStatus.UNVISITED

    @property
    def f(self) -> float:
        return self.g + self.h


class SearchRegistry:
    """Owns the search state of every cell touched by one search."""

    def __init__(self, goal: Position, heuristic: Heuristic) -> None:
        self._goal = goal
        self._heuristic = heuristic
        self._states: dict[Position, SearchState] = {}

    def __contains__(self, position: object) -> bool:
        return position in self._states

    def __len__(self) -> int:
        return len(self._states)

    def get(self, position: Position) -> SearchState | None:
        return self._states.get(position)

    def get_or_create(self, position: Position) -> SearchState:
        state = self._states.get(position)
        if state is None:
            state = SearchState(
                position=position, h=self._heuristic(position, self._goal)
            )
            self._states[position] = state
        return state

    def relax(
        self,
        position: Position,
        candidate_g: int,
        predecessor: Position | None,
    ) -> RelaxResult:
        state = self.get_or_create(position)
        if state.status == SearchStatus.CLOSED:
            return RelaxResult.NOT_IMPROVED
        if candidate_g >= state.g:
            return RelaxResult.NOT_IMPROVED
        state.g = candidate_g
        state.predecessor = predecessor
        state.status = SearchStatus.OPEN
        return RelaxResult.IMPROVED

    def mark_closed(self, position: Position) -> None:
        state = self._states.get(position)
        if state is None:
            raise InvariantViolation(f"Cannot close {position}: never discovered.")
        if state.status != SearchStatus.OPEN:
            raise InvariantViolation(
                f"Cannot close {position}: status is {state.status.value}."
            )
        state.status = SearchStatus.CLOSED
