"""Load grids from ASCII maps."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from gridstar.search.grid import Grid, Position

WALL_TILE = "#"
OPEN_TILE = "."
START_TILE = "S"
GOAL_TILE = "G"

KNOWN_TILES: set[str] = {WALL_TILE, OPEN_TILE, START_TILE, GOAL_TILE}


@dataclass(frozen=True)
class GridMap:
    grid: Grid
    start: Position
    goal: Position


def parse_ascii_map(lines: Iterable[str]) -> GridMap:
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()
    if not rows:
        raise ValueError("Map is empty.")

    width = len(rows[0])
    walls: set[Position] = set()
    starts: list[Position] = []
    goals: list[Position] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y} has width {len(row)}, expected {width}.")
        for x, tile in enumerate(row):
            if tile not in KNOWN_TILES:
                raise ValueError(f"Unknown tile {tile!r} at row {y}, column {x}.")
            position = Position(x, y)
            if tile == WALL_TILE:
                walls.add(position)
            elif tile == START_TILE:
                starts.append(position)
            elif tile == GOAL_TILE:
                goals.append(position)

    if len(starts) != 1:
        raise ValueError(f"Map needs exactly one {START_TILE!r}, found {len(starts)}.")
    if len(goals) != 1:
        raise ValueError(f"Map needs exactly one {GOAL_TILE!r}, found {len(goals)}.")

    grid = Grid(width=width, height=len(rows), walls=frozenset(walls))
    return GridMap(grid=grid, start=starts[0], goal=goals[0])


def load_ascii_map(path: Path) -> GridMap:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing map file: {path}") from exc
    return parse_ascii_map(text.splitlines())
