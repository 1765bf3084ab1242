"""Immutable grid model and positions."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from gridstar.search.errors import OutOfRange


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    @classmethod
    def of(cls, value: Position | tuple[int, int]) -> Position:
        if isinstance(value, Position):
            return value
        x, y = value
        try:
            return cls(operator.index(x), operator.index(y))
        except TypeError as exc:
            raise ValueError(f"Coordinates must be integers, got {value!r}.") from exc

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int
    walls: frozenset[Position] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )
        object.__setattr__(
            self, "walls", frozenset(Position.of(cell) for cell in self.walls)
        )
        for cell in self.walls:
            if not self.in_bounds(cell):
                raise ValueError(f"Blocked cell {cell} lies outside the grid.")

    @classmethod
    def empty(cls, width: int, height: int) -> Grid:
        return cls(width=width, height=height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | bool]]) -> Grid:
        """Build a grid from row-major cells; truthy cells are blocked."""
        if not rows:
            raise ValueError("Grid needs at least one row.")
        width = len(rows[0])
        walls: set[Position] = set()
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has width {len(row)}, expected {width}.")
            for x, cell in enumerate(row):
                if cell:
                    walls.add(Position(x, y))
        return cls(width=width, height=len(rows), walls=frozenset(walls))

    def with_blocked(self, cells: Iterable[Position]) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            walls=self.walls | frozenset(cells),
        )

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def blocked(self, position: Position) -> bool:
        if not self.in_bounds(position):
            raise OutOfRange(
                f"{position} is outside the {self.width}x{self.height} grid."
            )
        return position in self.walls

    def is_walkable(self, position: Position) -> bool:
        return self.in_bounds(position) and position not in self.walls
