import pytest

from gridstar.search.grid import Grid, Position
from gridstar.world.obstacles import block_rectangle, generate_obstacles


def test_same_seed_same_grid() -> None:
    kwargs = dict(count=10, size=3, start=Position(0, 0), goal=Position(19, 19))

    first = generate_obstacles(20, 20, seed=5, **kwargs)
    second = generate_obstacles(20, 20, seed=5, **kwargs)

    assert first == second
    assert first.walls


def test_obstacles_never_cover_endpoints() -> None:
    start = Position(2, 2)
    goal = Position(7, 6)
    for seed in range(20):
        grid = generate_obstacles(
            12, 12, count=6, size=3, start=start, goal=goal, seed=seed
        )
        assert not grid.blocked(start)
        assert not grid.blocked(goal)
        assert len(grid.walls) <= 6 * 3 * 3


def test_zero_obstacles_gives_open_grid() -> None:
    grid = generate_obstacles(
        4, 4, count=0, size=8, start=Position(0, 0), goal=Position(3, 3)
    )

    assert grid == Grid.empty(4, 4)


def test_obstacle_parameters_validated() -> None:
    with pytest.raises(ValueError):
        generate_obstacles(
            5, 5, count=1, size=5, start=Position(0, 0), goal=Position(4, 4)
        )
    with pytest.raises(ValueError):
        generate_obstacles(
            5, 5, count=-1, size=2, start=Position(0, 0), goal=Position(4, 4)
        )


def test_unplaceable_obstacle_gives_up() -> None:
    # The only legal corner is (0, 0), which covers the start.
    with pytest.raises(ValueError, match="Could not place"):
        generate_obstacles(
            3,
            3,
            count=1,
            size=2,
            start=Position(0, 0),
            goal=Position(2, 2),
            seed=1,
            max_attempts=50,
        )


def test_block_rectangle_clips_to_grid() -> None:
    grid = block_rectangle(Grid.empty(4, 4), Position(3, 3), 2, 2)

    assert grid.walls == frozenset({Position(3, 3)})
