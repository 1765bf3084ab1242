"""Walk predecessor links back from the goal."""

from __future__ import annotations

from gridstar.search.errors import InvariantViolation, Unreachable
from gridstar.search.grid import Position
from gridstar.search.registry import SearchRegistry, SearchStatus


def reconstruct_path(registry: SearchRegistry, goal: Position) -> list[Position]:
    state = registry.get(goal)
    if state is None or state.status != SearchStatus.CLOSED:
        raise Unreachable(f"Goal {goal} was never closed.")

    path: list[Position] = []
    current: Position | None = goal
    while current is not None:
        if len(path) > len(registry):
            raise InvariantViolation("Predecessor links form a cycle.")
        path.append(current)
        node = registry.get(current)
        if node is None:
            raise InvariantViolation(f"Predecessor {current} has no search state.")
        current = node.predecessor
    path.reverse()
    return path
