"""Console and Markdown output."""

from tracker.reporting.reporter import render_report, render_stats, render_tasks, write_report

__all__ = [
    "render_report",
    "render_stats",
    "render_tasks",
    "write_report",
]
