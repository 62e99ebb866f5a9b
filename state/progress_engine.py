from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any, assert_never

from loguru import logger

from models.event import (
    DesignSessionEvent,
    EventKind,
    MockInterviewEvent,
    ProblemsSolvedEvent,
    ProjectEvent,
    StudyEvent,
    UnknownEvent,
)
from models.progress import LogEntry, ProgressDocument, ProjectRecord

MONTH_LENGTH = dt.timedelta(days=30)
MAX_MONTH = 12

_EVENT_TYPES: dict[str, type[ProblemsSolvedEvent | ProjectEvent | DesignSessionEvent | MockInterviewEvent]] = {
    EventKind.PROBLEMS_SOLVED: ProblemsSolvedEvent,
    EventKind.PROJECT: ProjectEvent,
    EventKind.DESIGN: DesignSessionEvent,
    EventKind.MOCK: MockInterviewEvent,
}


def current_month(document: ProgressDocument, now: dt.datetime) -> int:
    """Return the 1-based plan month for ``now``.

    Months are fixed 30-day blocks counted from the start date, clamped to [1, 12].
    """
    elapsed = (now - document.start_date) // MONTH_LENGTH
    return max(1, min(elapsed + 1, MAX_MONTH))


def parse_event(event_type: str, payload: Mapping[str, Any] | None = None) -> StudyEvent:
    """Build the event variant for a raw type tag and payload.

    Raises:
        pydantic.ValidationError: If a known event type gets an unusable payload
            (e.g. an unrecognized language tag).
    """
    payload = dict(payload or {})
    event_cls = _EVENT_TYPES.get(event_type)
    if event_cls is None:
        return UnknownEvent(type=event_type, payload=payload)
    return event_cls.model_validate(payload)


def record_event(document: ProgressDocument, event: StudyEvent, now: dt.datetime) -> bool:
    """Apply ``event`` to ``document`` in place.

    Every recognized event appends exactly one entry to today's daily log.
    Unknown events are a complete no-op. The caller persists the document.

    Returns:
        True if the document changed.
    """
    stats = document.stats

    match event:
        case ProblemsSolvedEvent(lang=lang, count=count):
            stats.for_language(lang).problems_solved += count
        case ProjectEvent():
            _apply_project(document, event)
        case DesignSessionEvent():
            stats.design_sessions += 1
        case MockInterviewEvent():
            stats.mock_interviews += 1
        case UnknownEvent(type=event_type):
            logger.debug(f"Ignoring unknown event type: {event_type!r}")
            return False
        case _:
            assert_never(event)

    _append_log(document, event, now)
    logger.info(f"Recorded {event.kind} event: {event.payload()}")
    return True


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------


def _apply_project(document: ProgressDocument, event: ProjectEvent) -> None:
    lang_stats = document.stats.for_language(event.lang)
    lang_stats.hours_invested += event.hours

    project = document.find_project(event.name)
    if project is None:
        project = ProjectRecord(name=event.name, lang=event.lang)
        document.projects.append(project)

    project.hours_invested += event.hours

    if event.completed:
        # Count a completion only on the first transition.
        if not project.completed:
            lang_stats.projects_completed += 1
        project.completed = True


def _append_log(
    document: ProgressDocument,
    event: ProblemsSolvedEvent | ProjectEvent | DesignSessionEvent | MockInterviewEvent,
    now: dt.datetime,
) -> None:
    today = now.date().isoformat()
    entry = LogEntry(type=event.kind.value, payload=event.payload(), timestamp=now)
    document.daily_log.setdefault(today, []).append(entry)
