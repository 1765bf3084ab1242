"""Shortest paths on obstacle grids with A*."""

from gridstar.search import (
    AStarSearch,
    Grid,
    InvalidEndpoint,
    InvariantViolation,
    Position,
    SearchPhase,
    find_path,
)

__all__ = [
    "AStarSearch",
    "Grid",
    "InvalidEndpoint",
    "InvariantViolation",
    "Position",
    "SearchPhase",
    "find_path",
]
