"""A* search core."""

from gridstar.search.astar import (
    NEIGHBOR_OFFSETS,
    AStarSearch,
    SearchPhase,
    SearchStats,
    find_path,
    manhattan,
)
from gridstar.search.errors import (
    GridstarError,
    InvalidEndpoint,
    InvariantViolation,
    OutOfRange,
    Unreachable,
)
from gridstar.search.frontier import Frontier, FrontierEntry
from gridstar.search.grid import Grid, Position
from gridstar.search.reconstruct import reconstruct_path
from gridstar.search.registry import (
    RelaxResult,
    SearchRegistry,
    SearchState,
    SearchStatus,
)

__all__ = [
    "AStarSearch",
    "Frontier",
    "FrontierEntry",
    "Grid",
    "GridstarError",
    "InvalidEndpoint",
    "InvariantViolation",
    "NEIGHBOR_OFFSETS",
    "OutOfRange",
    "Position",
    "RelaxResult",
    "SearchPhase",
    "SearchRegistry",
    "SearchState",
    "SearchStats",
    "SearchStatus",
    "Unreachable",
    "find_path",
    "manhattan",
    "reconstruct_path",
]
