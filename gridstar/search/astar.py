"""Grid-based A* search with lazy frontier deletion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from gridstar.search.errors import InvalidEndpoint
from gridstar.search.frontier import Frontier
from gridstar.search.grid import Grid, Position
from gridstar.search.reconstruct import reconstruct_path
from gridstar.search.registry import (
    Heuristic,
    RelaxResult,
    SearchRegistry,
    SearchStatus,
)

logger = logging.getLogger(__name__)

# Left, right, up, down. Fixed so equal-cost ties resolve the same way every run.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

STEP_COST = 1


class SearchPhase(str, Enum):
    READY = "ready"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    expanded: int = 0
    pushed: int = 0
    stale_discarded: int = 0
    discovered: int = 0


def manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class AStarSearch:
    """One A* search over a borrowed grid.

    `step()` performs a single frontier pop so a caller can watch the search
    progress; `run()` steps until the goal is closed or the frontier is empty.
    The heuristic must stay admissible and consistent for the returned path
    to be optimal.
    """

    def __init__(
        self,
        grid: Grid,
        start: Position | tuple[int, int],
        goal: Position | tuple[int, int],
        *,
        heuristic: Heuristic = manhattan,
    ) -> None:
        self._grid = grid
        self._start = Position.of(start)
        self._goal = Position.of(goal)
        _validate_endpoint(grid, self._start, "start")
        _validate_endpoint(grid, self._goal, "goal")
        self._registry = SearchRegistry(self._goal, heuristic)
        self._frontier = Frontier()
        self._phase = SearchPhase.READY
        self.stats = SearchStats()

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    @property
    def registry(self) -> SearchRegistry:
        return self._registry

    @property
    def cost(self) -> int | None:
        if self._phase != SearchPhase.SUCCEEDED:
            return None
        state = self._registry.get(self._goal)
        return int(state.g) if state else None

    def step(self) -> SearchPhase:
        if self._phase == SearchPhase.READY:
            self._seed()
            return self._phase
        if self._phase != SearchPhase.RUNNING:
            return self._phase

        if self._frontier.is_empty():
            self._phase = SearchPhase.EXHAUSTED
            logger.debug(
                "No path from %s to %s after %d expansions",
                self._start,
                self._goal,
                self.stats.expanded,
            )
            return self._phase

        entry = self._frontier.pop_min()
        current = self._registry.get_or_create(entry.position)
        if current.status != SearchStatus.OPEN or current.f != entry.f:
            self.stats.stale_discarded += 1
            return self._phase

        if current.position == self._goal:
            self._registry.mark_closed(current.position)
            self.stats.expanded += 1
            self._phase = SearchPhase.SUCCEEDED
            logger.debug(
                "Reached %s with cost %d (%s)", self._goal, int(current.g), self.stats
            )
            return self._phase

        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = current.position.offset(dx, dy)
            if not self._grid.in_bounds(neighbor) or self._grid.blocked(neighbor):
                continue
            candidate_g = int(current.g) + STEP_COST
            result = self._registry.relax(neighbor, candidate_g, current.position)
            if result == RelaxResult.IMPROVED:
                self._push(neighbor)

        self._registry.mark_closed(current.position)
        self.stats.expanded += 1
        return self._phase

    def run(self) -> list[Position]:
        while self.step() in (SearchPhase.READY, SearchPhase.RUNNING):
            pass
        if self._phase == SearchPhase.SUCCEEDED:
            return reconstruct_path(self._registry, self._goal)
        return []

    def _seed(self) -> None:
        logger.debug(
            "Searching %dx%d grid from %s to %s",
            self._grid.width,
            self._grid.height,
            self._start,
            self._goal,
        )
        self._registry.relax(self._start, 0, None)
        self._push(self._start)
        self._phase = SearchPhase.RUNNING

    def _push(self, position: Position) -> None:
        state = self._registry.get_or_create(position)
        self._frontier.push(position, state.f)
        self.stats.pushed += 1
        self.stats.discovered = len(self._registry)


def find_path(
    grid: Grid,
    start: Position | tuple[int, int],
    goal: Position | tuple[int, int],
) -> list[Position]:
    """Return the shortest start-to-goal path, or [] when none exists."""
    return AStarSearch(grid, start, goal).run()


def _validate_endpoint(grid: Grid, position: Position, label: str) -> None:
    if not grid.in_bounds(position):
        raise InvalidEndpoint(
            f"The {label} {position} is outside the {grid.width}x{grid.height} grid."
        )
    if grid.blocked(position):
        raise InvalidEndpoint(f"The {label} {position} is blocked.")
