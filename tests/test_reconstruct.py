import pytest

from gridstar.search.astar import manhattan
from gridstar.search.errors import InvariantViolation, Unreachable
from gridstar.search.grid import Position
from gridstar.search.reconstruct import reconstruct_path
from gridstar.search.registry import SearchRegistry, SearchStatus


def test_reconstruct_walks_back_to_start() -> None:
    goal = Position(2, 0)
    registry = SearchRegistry(goal, manhattan)
    registry.relax(Position(0, 0), 0, None)
    registry.relax(Position(1, 0), 1, Position(0, 0))
    registry.relax(goal, 2, Position(1, 0))
    registry.mark_closed(goal)

    assert reconstruct_path(registry, goal) == [
        Position(0, 0),
        Position(1, 0),
        Position(2, 0),
    ]


def test_reconstruct_requires_closed_goal() -> None:
    goal = Position(1, 0)
    registry = SearchRegistry(goal, manhattan)

    with pytest.raises(Unreachable):
        reconstruct_path(registry, goal)

    registry.relax(goal, 1, Position(0, 0))
    with pytest.raises(Unreachable):
        reconstruct_path(registry, goal)


def test_reconstruct_detects_predecessor_cycle() -> None:
    a = Position(0, 0)
    b = Position(1, 0)
    registry = SearchRegistry(a, manhattan)
    first = registry.get_or_create(a)
    second = registry.get_or_create(b)
    first.predecessor = b
    first.status = SearchStatus.CLOSED
    second.predecessor = a

    with pytest.raises(InvariantViolation):
        reconstruct_path(registry, a)
