"""Console and Markdown rendering of the plan and progress documents."""

import datetime as dt
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from models.plan import StudyPlan
from models.progress import Language, LanguageStats, ProgressDocument
from state.progress_engine import current_month
from tracker.errors import MonthOutOfRangeError

LANGUAGE_LABELS = {
    Language.SCRIPTING: "Scripting",
    Language.SYSTEMS: "Systems",
}


def _hours(value: float) -> str:
    return f"{value:g}"


def _label_table(title: str, rows: dict[str, str]) -> Table:
    table = Table(title=title, title_justify="left", show_header=True, header_style="bold")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Details")
    for label, text in rows.items():
        table.add_row(Text(label), Text(text))
    return table


def render_tasks(plan: StudyPlan, month: int, console: Console) -> None:
    """Print focus, daily targets and resources for a 1-based plan month.

    Raises:
        MonthOutOfRangeError: If ``month`` is outside the plan.
    """
    if not 1 <= month <= len(plan.months):
        raise MonthOutOfRangeError(month, len(plan.months))

    entry = plan.months[month - 1]
    console.print(
        Panel(
            Text(entry.focus, style="bold"),
            title=f"📅 Month {month} Focus",
            border_style="green",
        )
    )
    console.print(_label_table("📝 Daily Targets", entry.daily))
    console.print(_label_table("📚 Recommended Resources", entry.resources))


def render_stats(document: ProgressDocument, now: dt.datetime, console: Console) -> None:
    """Print elapsed months, language stats, projects and the other counters."""
    stats = document.stats

    console.print("\n[bold]📊 Current Statistics[/bold]")
    console.print(f"⌛ Elapsed Months: {current_month(document, now)}")

    languages = Table(title="💻 Language Stats", title_justify="left", header_style="bold")
    languages.add_column("Language", style="cyan")
    languages.add_column("Problems Solved", justify="right")
    languages.add_column("Projects Completed", justify="right")
    languages.add_column("Hours Invested", justify="right")
    for lang in Language:
        lang_stats = stats.for_language(lang)
        languages.add_row(
            LANGUAGE_LABELS[lang],
            str(lang_stats.problems_solved),
            str(lang_stats.projects_completed),
            _hours(lang_stats.hours_invested),
        )
    console.print(languages)

    projects = Table(title="🔨 Projects", title_justify="left", header_style="bold")
    projects.add_column("Name", style="cyan")
    projects.add_column("Language")
    projects.add_column("Hours", justify="right")
    projects.add_column("Completed", justify="center")
    for project in document.projects:
        projects.add_row(
            Text(project.name),
            project.lang.value,
            _hours(project.hours_invested),
            "✅" if project.completed else "⏳",
        )
    console.print(projects)

    other = Table(title="🎯 Other Stats", title_justify="left", header_style="bold")
    other.add_column("Activity", style="cyan")
    other.add_column("Count", justify="right")
    other.add_row("System Designs", str(stats.design_sessions))
    other.add_row("Mock Interviews", str(stats.mock_interviews))
    console.print(other)


def _language_section(label: str, lang_stats: LanguageStats) -> list[str]:
    return [
        f"### {label}",
        f"- Problems Solved: {lang_stats.problems_solved}",
        f"- Projects Completed: {lang_stats.projects_completed}",
        f"- Hours Invested: {_hours(lang_stats.hours_invested)}",
    ]


def render_report(document: ProgressDocument, now: dt.datetime) -> str:
    """Build the Markdown progress report."""
    stats = document.stats
    lines = [
        "# Study Progress Report",
        f"**Start Date**: {document.start_date.isoformat()}",
        f"**Current Month**: {current_month(document, now)}",
        "## Language Progress",
    ]
    for lang in Language:
        lines.extend(_language_section(LANGUAGE_LABELS[lang], stats.for_language(lang)))

    lines.append("## Projects")
    lines.extend(
        f"- **{p.name}** ({p.lang.value}): {_hours(p.hours_invested)}h - {'Completed' if p.completed else 'In Progress'}"
        for p in document.projects
    )
    lines.extend(
        [
            "## System Design",
            f"- Completed Designs: {stats.design_sessions}",
            "## Mock Interviews",
            f"- Completed Mocks: {stats.mock_interviews}",
        ]
    )
    return "\n".join(lines) + "\n"


def write_report(document: ProgressDocument, path: Path, now: dt.datetime) -> Path:
    """Write the Markdown report to ``path``, replacing any previous report."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(document, now), encoding="utf-8")
    logger.info(f"Report written to {path}")
    return path
