"""Random square obstacle placement."""

from __future__ import annotations

import random

from gridstar.search.grid import Grid, Position

DEFAULT_MAX_ATTEMPTS = 10_000


def block_rectangle(
    grid: Grid, corner: Position, width: int, height: int
) -> Grid:
    """Return a copy of grid with the rectangle at corner blocked, clipped to bounds."""
    cells = [
        Position(corner.x + dx, corner.y + dy)
        for dy in range(height)
        for dx in range(width)
    ]
    return grid.with_blocked(cell for cell in cells if grid.in_bounds(cell))


def generate_obstacles(
    width: int,
    height: int,
    *,
    count: int,
    size: int,
    start: Position,
    goal: Position,
    seed: int | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Grid:
    if count < 0:
        raise ValueError("Obstacle count cannot be negative.")
    if count and (size <= 0 or size >= width or size >= height):
        raise ValueError(
            f"Obstacle size {size} does not fit a {width}x{height} grid."
        )

    rng = random.Random(seed)
    grid = Grid.empty(width, height)
    for index in range(count):
        corner = _pick_corner(
            rng,
            width=width,
            height=height,
            size=size,
            avoid=(start, goal),
            max_attempts=max_attempts,
        )
        if corner is None:
            raise ValueError(
                f"Could not place obstacle {index + 1} of {count} "
                f"after {max_attempts} attempts."
            )
        grid = block_rectangle(grid, corner, size, size)
    return grid


def _pick_corner(
    rng: random.Random,
    *,
    width: int,
    height: int,
    size: int,
    avoid: tuple[Position, ...],
    max_attempts: int,
) -> Position | None:
    for _ in range(max_attempts):
        corner = Position(rng.randrange(width - size), rng.randrange(height - size))
        if not any(_covers(corner, size, point) for point in avoid):
            return corner
    return None


def _covers(corner: Position, size: int, point: Position) -> bool:
    return (
        corner.x <= point.x < corner.x + size
        and corner.y <= point.y < corner.y + size
    )
