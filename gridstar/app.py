"""Application entry for running a path search scenario."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from gridstar.contracts import PathReport, ScenarioConfig
from gridstar.search.astar import AStarSearch
from gridstar.search.grid import Grid, Position
from gridstar.world.ascii_map import load_ascii_map
from gridstar.world.obstacles import generate_obstacles

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "GRIDSTAR_SEED"


def search_report(
    grid: Grid,
    start: Position,
    goal: Position,
    *,
    seed: int | None = None,
) -> PathReport:
    search = AStarSearch(grid, start, goal)
    path = search.run()
    stats = search.stats
    logger.info(
        "Search %s -> %s: %s (expanded=%d, stale=%d)",
        start.as_tuple(),
        goal.as_tuple(),
        f"cost {search.cost}" if path else "no path",
        stats.expanded,
        stats.stale_discarded,
    )
    return PathReport(
        found=bool(path),
        cost=search.cost,
        path=[position.as_tuple() for position in path],
        width=grid.width,
        height=grid.height,
        start=start.as_tuple(),
        goal=goal.as_tuple(),
        expanded=stats.expanded,
        pushed=stats.pushed,
        stale_discarded=stats.stale_discarded,
        discovered=stats.discovered,
        seed=seed,
    )


def run_scenario(config: ScenarioConfig) -> PathReport:
    seed = _resolve_seed(config.seed)
    start = Position.of(config.start)
    goal = Position.of(config.goal)
    grid = generate_obstacles(
        config.width,
        config.height,
        count=config.obstacles,
        size=config.obstacle_size,
        start=start,
        goal=goal,
        seed=seed,
    )
    logger.info(
        "Generated %dx%d grid with %d blocked cells (seed=%s)",
        grid.width,
        grid.height,
        len(grid.walls),
        seed,
    )
    return search_report(grid, start, goal, seed=seed)


def run_map(path: Path) -> PathReport:
    grid_map = load_ascii_map(path)
    logger.info("Loaded %s (%dx%d)", path, grid_map.grid.width, grid_map.grid.height)
    return search_report(grid_map.grid, grid_map.start, grid_map.goal)


def _resolve_seed(seed: int | None) -> int | None:
    if seed is not None:
        return seed
    raw = os.getenv(SEED_ENV_VAR)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}.") from exc
