"""CLI for the study tracker.

Shows the current month's tasks, records study events and prints or writes
progress summaries. Plan and progress live in local JSON files configured
through ``tracker.config.settings``.
"""

import datetime as dt
import re
import sys
from typing import Any

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from models.event import EventKind
from models.progress import Language
from state.progress_engine import current_month, parse_event, record_event
from tracker.config.settings import get_settings
from tracker.core.logger import setup_logger
from tracker.errors import MonthOutOfRangeError
from tracker.reporting import render_stats, render_tasks, write_report
from tracker.stores import PlanStore, ProgressStore

PROG_NAME = "study-tracker"

USAGE = f"""Usage:
    {PROG_NAME} tasks
    {PROG_NAME} log lc [scripting|systems] [count] [easy|medium|hard]
    {PROG_NAME} log project [scripting|systems] [project-name] [hours] [completed(true/false)]
    {PROG_NAME} log design
    {PROG_NAME} log mock
    {PROG_NAME} stats
    {PROG_NAME} report"""

COMMANDS = {"tasks", "log", "stats", "report"}

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name=PROG_NAME,
    help="Study tracker - monthly plan, progress log and reports",
    add_completion=False,
)
log_app = typer.Typer(help="Record a study event", add_completion=False)
app.add_typer(log_app, name="log")

# Arguments are shaped best-effort: "-3" is a value, not an option, and
# surplus arguments are ignored.
LENIENT_ARGS = {"allow_extra_args": True, "ignore_unknown_options": True}

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


def _coerce_int(raw: str | None) -> int | None:
    """Parse the leading integer of ``raw`` ("12abc" -> 12); None if there is none."""
    if raw is None:
        return None
    match = _LEADING_INT_RE.match(raw)
    return int(match.group(1)) if match else None


def _print_usage() -> None:
    console.print(USAGE, markup=False, highlight=False)


def _resolve_language(raw: str) -> Language | None:
    try:
        return Language(raw)
    except ValueError:
        console.print(f"[red]Error:[/red] unknown language tag '{escape(raw)}'")
        _print_usage()
        return None


def _record(event_type: EventKind, payload: dict[str, Any]) -> None:
    try:
        event = parse_event(event_type, payload)
    except ValidationError as e:
        logger.warning(f"Rejected {event_type} event: {e}")
        console.print(f"[red]Error:[/red] invalid {event_type} event")
        _print_usage()
        return

    store = ProgressStore(get_settings().progress_path)
    document = store.load()
    if record_event(document, event, _now()):
        store.save(document)
        console.print("✅ Progress logged successfully!")


@app.command(context_settings=LENIENT_ARGS)
def tasks() -> None:
    """Show the current month's focus, daily targets and resources."""
    cfg = get_settings()
    plan = PlanStore(cfg.plan_path).load()
    document = ProgressStore(cfg.progress_path).load()
    month = current_month(document, _now())
    try:
        render_tasks(plan, month, console)
    except MonthOutOfRangeError as e:
        logger.error(f"Plan lookup failed: {e}")
        console.print(f"[red]Error:[/red] {e}", style="bold red")
        raise typer.Exit(1) from e


@log_app.command("lc", context_settings=LENIENT_ARGS)
def log_problems(
    lang: str = typer.Argument(..., help="Language tag (scripting|systems)"),
    count: str | None = typer.Argument(None, help="Number of problems solved"),
    difficulty: str | None = typer.Argument(None, help="Difficulty (easy|medium|hard)"),
) -> None:
    """Record solved practice problems."""
    language = _resolve_language(lang)
    if language is None:
        return
    parsed = _coerce_int(count)
    _record(
        EventKind.PROBLEMS_SOLVED,
        {"lang": language, "count": parsed if parsed is not None else 0, "difficulty": difficulty},
    )


@log_app.command("project", context_settings=LENIENT_ARGS)
def log_project(
    lang: str = typer.Argument(..., help="Language tag (scripting|systems)"),
    name: str = typer.Argument(..., help="Project name"),
    hours: str | None = typer.Argument(None, help="Hours spent (default 1)"),
    completed: str | None = typer.Argument(None, help="'true' marks the project completed"),
) -> None:
    """Record project hours and completion."""
    language = _resolve_language(lang)
    if language is None:
        return
    _record(
        EventKind.PROJECT,
        {"lang": language, "name": name, "hours": _coerce_int(hours), "completed": completed == "true"},
    )


@log_app.command("design", context_settings=LENIENT_ARGS)
def log_design() -> None:
    """Record a system design session."""
    _record(EventKind.DESIGN, {})


@log_app.command("mock", context_settings=LENIENT_ARGS)
def log_mock() -> None:
    """Record a mock interview."""
    _record(EventKind.MOCK, {})


@app.command(context_settings=LENIENT_ARGS)
def stats() -> None:
    """Print aggregate statistics."""
    document = ProgressStore(get_settings().progress_path).load()
    render_stats(document, _now(), console)


@app.command(context_settings=LENIENT_ARGS)
def report() -> None:
    """Write the Markdown progress report."""
    cfg = get_settings()
    document = ProgressStore(cfg.progress_path).load()
    path = write_report(document, cfg.report_path, _now())
    console.print(f"📄 Report generated: {path}")


def main(argv: list[str] | None = None) -> None:
    """Console entry point.

    Unknown commands print usage and unknown event types are ignored; neither
    touches the data files.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    cfg = get_settings()
    setup_logger(cfg)

    if not args or args[0] not in COMMANDS:
        _print_usage()
        return
    if args[0] == "log" and (len(args) < 2 or args[1] not in {kind.value for kind in EventKind}):
        logger.debug(f"Ignoring unknown event type: {args[1:2]}")
        return

    app(args=args, prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
