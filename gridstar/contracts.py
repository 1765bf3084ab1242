"""Scenario configuration and search report contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_WIDTH = 100
DEFAULT_HEIGHT = 100
DEFAULT_OBSTACLES = 50
DEFAULT_OBSTACLE_SIZE = 8


class ScenarioConfig(BaseModel):
    """Parameters for a generated obstacle grid and its endpoints."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    obstacles: int = Field(default=DEFAULT_OBSTACLES, ge=0)
    obstacle_size: int = Field(default=DEFAULT_OBSTACLE_SIZE, ge=1)
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] = (DEFAULT_WIDTH - 1, DEFAULT_HEIGHT - 1)
    seed: int | None = None

    @model_validator(mode="before")
    @classmethod
    def default_goal(cls, data: Any) -> Any:
        # Goal defaults to the far corner of whatever size was requested.
        if isinstance(data, dict) and data.get("goal") is None:
            width = int(data.get("width") or DEFAULT_WIDTH)
            height = int(data.get("height") or DEFAULT_HEIGHT)
            data = {**data, "goal": (width - 1, height - 1)}
        return data

    @model_validator(mode="after")
    def validate_scenario(self) -> "ScenarioConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        for label, (x, y) in (("start", self.start), ("goal", self.goal)):
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(f"{label} ({x}, {y}) is outside the grid")
        if self.obstacles and (
            self.obstacle_size >= self.width or self.obstacle_size >= self.height
        ):
            raise ValueError("obstacle_size must be smaller than the grid")
        return self


class PathReport(BaseModel):
    """Search outcome handed to a path consumer."""

    model_config = ConfigDict(extra="forbid")

    found: bool
    cost: int | None = None
    path: list[tuple[int, int]] = Field(default_factory=list)
    width: int
    height: int
    start: tuple[int, int]
    goal: tuple[int, int]
    expanded: int = 0
    pushed: int = 0
    stale_discarded: int = 0
    discovered: int = 0
    seed: int | None = None

    @model_validator(mode="after")
    def validate_report(self) -> "PathReport":
        if self.found:
            if not self.path or self.cost != len(self.path) - 1:
                raise ValueError("found report needs a path matching its cost")
        elif self.path or self.cost is not None:
            raise ValueError("no-path report cannot carry a path or cost")
        return self
