import math

import pytest

from gridstar.search.astar import manhattan
from gridstar.search.errors import InvariantViolation
from gridstar.search.grid import Position
from gridstar.search.registry import (
    RelaxResult,
    SearchRegistry,
    SearchStatus,
)


def test_get_or_create_sets_heuristic_once() -> None:
    calls: list[Position] = []

    def counting(a: Position, b: Position) -> int:
        calls.append(a)
        return manhattan(a, b)

    registry = SearchRegistry(Position(3, 4), counting)
    state = registry.get_or_create(Position(0, 0))
    again = registry.get_or_create(Position(0, 0))

    assert state is again
    assert state.h == 7
    assert state.g == math.inf
    assert state.status == SearchStatus.UNVISITED
    assert state.predecessor is None
    assert calls == [Position(0, 0)]
    assert len(registry) == 1
    assert Position(0, 0) in registry


def test_relax_only_improves_on_lower_cost() -> None:
    registry = SearchRegistry(Position(5, 0), manhattan)
    cell = Position(2, 0)

    assert registry.relax(cell, 4, Position(2, 1)) == RelaxResult.IMPROVED
    assert registry.relax(cell, 4, Position(1, 0)) == RelaxResult.NOT_IMPROVED
    assert registry.relax(cell, 2, Position(1, 0)) == RelaxResult.IMPROVED

    state = registry.get(cell)
    assert state is not None
    assert state.g == 2
    assert state.f == 5
    assert state.predecessor == Position(1, 0)
    assert state.status == SearchStatus.OPEN


def test_relax_never_reopens_closed_state() -> None:
    registry = SearchRegistry(Position(0, 0), manhattan)
    cell = Position(1, 1)
    registry.relax(cell, 3, None)
    registry.mark_closed(cell)

    assert registry.relax(cell, 1, Position(0, 1)) == RelaxResult.NOT_IMPROVED
    state = registry.get(cell)
    assert state is not None
    assert state.g == 3
    assert state.status == SearchStatus.CLOSED


def test_mark_closed_rejects_out_of_order_use() -> None:
    registry = SearchRegistry(Position(0, 0), manhattan)

    with pytest.raises(InvariantViolation):
        registry.mark_closed(Position(1, 0))

    registry.get_or_create(Position(1, 0))
    with pytest.raises(InvariantViolation):
        registry.mark_closed(Position(1, 0))

    registry.relax(Position(1, 0), 1, None)
    registry.mark_closed(Position(1, 0))
    with pytest.raises(AssertionError):
        registry.mark_closed(Position(1, 0))
