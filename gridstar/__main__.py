"""Module entry point for `python -m gridstar`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from gridstar.app import run_map, run_scenario
from gridstar.contracts import (
    DEFAULT_HEIGHT,
    DEFAULT_OBSTACLE_SIZE,
    DEFAULT_OBSTACLES,
    DEFAULT_WIDTH,
    PathReport,
    ScenarioConfig,
)
from gridstar.render.report import render_report
from gridstar.search.errors import GridstarError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find a shortest path on an obstacle grid with A*."
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Grid width.")
    parser.add_argument(
        "--height", type=int, default=DEFAULT_HEIGHT, help="Grid height."
    )
    parser.add_argument(
        "--obstacles",
        type=int,
        default=DEFAULT_OBSTACLES,
        help="Number of square obstacles to place.",
    )
    parser.add_argument(
        "--obstacle-size",
        type=int,
        default=DEFAULT_OBSTACLE_SIZE,
        help="Side length of each obstacle.",
    )
    parser.add_argument(
        "--start",
        type=_parse_cell,
        default=(0, 0),
        help="Start cell as X,Y.",
    )
    parser.add_argument(
        "--goal",
        type=_parse_cell,
        default=None,
        help="Goal cell as X,Y (defaults to the far corner).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Obstacle seed (falls back to GRIDSTAR_SEED).",
    )
    parser.add_argument(
        "--map",
        type=Path,
        default=None,
        help="Load an ASCII map (# wall, . open, S start, G goal) instead.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)

    console = Console()
    _configure_logging(verbose=args.verbose)

    try:
        report = _run(args)
    except ValidationError as exc:
        raise SystemExit(f"Invalid scenario: {exc}") from exc
    except (GridstarError, ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc

    if args.json:
        console.print_json(report.model_dump_json())
        return
    console.print(render_report(report))


def _run(args: argparse.Namespace) -> PathReport:
    if args.map is not None:
        return run_map(args.map)
    config = ScenarioConfig(
        width=args.width,
        height=args.height,
        obstacles=args.obstacles,
        obstacle_size=args.obstacle_size,
        start=args.start,
        goal=args.goal,
        seed=args.seed,
    )
    return run_scenario(config)


def _parse_cell(value: str) -> tuple[int, int]:
    parts = value.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected X,Y but got {value!r}.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected integers in {value!r}.") from exc


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    main()
