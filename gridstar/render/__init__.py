"""Console output for search reports."""

from gridstar.render.report import render_report

__all__ = ["render_report"]
