from pathlib import Path

import pytest

from gridstar.search.astar import find_path
from gridstar.search.grid import Position
from gridstar.world.ascii_map import load_ascii_map, parse_ascii_map

MAZE = [
    "S.#..",
    "..#.#",
    "....G",
]


def test_parse_ascii_map_finds_endpoints_and_walls() -> None:
    grid_map = parse_ascii_map(MAZE)

    assert grid_map.start == Position(0, 0)
    assert grid_map.goal == Position(4, 2)
    assert grid_map.grid.width == 5
    assert grid_map.grid.height == 3
    assert grid_map.grid.walls == frozenset(
        {Position(2, 0), Position(2, 1), Position(4, 1)}
    )
    path = find_path(grid_map.grid, grid_map.start, grid_map.goal)
    assert len(path) - 1 == 6


def test_load_ascii_map_from_file(tmp_path: Path) -> None:
    path = tmp_path / "maze.txt"
    path.write_text("\n".join(MAZE) + "\n\n", encoding="utf-8")

    grid_map = load_ascii_map(path)

    assert grid_map.goal == Position(4, 2)


def test_missing_map_file_names_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="missing.txt"):
        load_ascii_map(tmp_path / "missing.txt")


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["S..", ".G"],
        ["S.x", "..G"],
        ["...", "..G"],
        ["S.S", "..G"],
        ["S..", "..."],
    ],
)
def test_malformed_maps_rejected(lines: list[str]) -> None:
    with pytest.raises(ValueError):
        parse_ascii_map(lines)
