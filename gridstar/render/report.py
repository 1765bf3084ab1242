"""Rich summary of a PathReport."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridstar.contracts import PathReport


def render_report(report: PathReport, *, max_steps: int = 12) -> RenderableType:
    if max_steps < 2:
        raise ValueError(f"max_steps must be at least 2, got {max_steps}.")
    summary = _render_summary(report)
    path = _render_path(report, max_steps=max_steps)
    return Panel(Group(summary, path), title="A* Search")


def _render_summary(report: PathReport) -> RenderableType:
    table = Table(title="Summary", show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Grid", f"{report.width}x{report.height}")
    table.add_row("Start", _format_cell(report.start))
    table.add_row("Goal", _format_cell(report.goal))
    table.add_row("Seed", "-" if report.seed is None else str(report.seed))
    table.add_row(
        "Result",
        Text(f"cost {report.cost}", style="bold green")
        if report.found
        else Text("No path", style="bold red"),
    )
    table.add_row("Expanded", str(report.expanded))
    table.add_row("Pushed", str(report.pushed))
    table.add_row("Stale discarded", str(report.stale_discarded))
    table.add_row("Discovered", str(report.discovered))
    return table


def _render_path(report: PathReport, *, max_steps: int) -> RenderableType:
    if not report.path:
        return Text("Path: None")
    cells = [_format_cell(cell) for cell in report.path]
    if len(cells) > max_steps:
        head = cells[: max_steps // 2]
        tail = cells[-(max_steps - len(head)) :]
        hidden = len(report.path) - len(head) - len(tail)
        cells = [*head, f"... {hidden} more ...", *tail]
    return Text("Path: " + " -> ".join(cells))


def _format_cell(cell: tuple[int, int]) -> str:
    return f"({cell[0]}, {cell[1]})"
