import datetime as dt

import pytest
from pydantic import ValidationError

from models.event import (
    DesignSessionEvent,
    MockInterviewEvent,
    ProblemsSolvedEvent,
    ProjectEvent,
    UnknownEvent,
)
from models.progress import Language, ProgressDocument
from state.progress_engine import current_month, parse_event, record_event


def days_after(start: dt.datetime, days: float) -> dt.datetime:
    return start + dt.timedelta(days=days)


# -------------------------------------------------------------------
# current_month
# -------------------------------------------------------------------


def test_current_month_is_one_on_creation_day(progress: ProgressDocument, now: dt.datetime):
    assert current_month(progress, now) == 1
    assert current_month(progress, days_after(now, 0.9)) == 1


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (29, 1),
        (30, 2),
        (59, 2),
        (60, 3),
        (329, 11),
        (330, 12),
    ],
)
def test_current_month_uses_fixed_thirty_day_blocks(progress: ProgressDocument, now: dt.datetime, days: int, expected: int):
    assert current_month(progress, days_after(now, days)) == expected


def test_current_month_is_clamped_to_twelve(progress: ProgressDocument, now: dt.datetime):
    assert current_month(progress, days_after(now, 400)) == 12
    assert current_month(progress, days_after(now, 5000)) == 12


def test_current_month_before_start_is_one(progress: ProgressDocument, now: dt.datetime):
    assert current_month(progress, days_after(now, -45)) == 1


# -------------------------------------------------------------------
# parse_event
# -------------------------------------------------------------------


def test_parse_event_builds_each_variant():
    assert isinstance(parse_event("lc", {"lang": "scripting", "count": 2}), ProblemsSolvedEvent)
    assert isinstance(parse_event("project", {"lang": "systems", "name": "Shell"}), ProjectEvent)
    assert isinstance(parse_event("design"), DesignSessionEvent)
    assert isinstance(parse_event("mock", {"ignored": True}), MockInterviewEvent)


def test_parse_event_unknown_type():
    event = parse_event("yoga", {"minutes": 30})
    assert isinstance(event, UnknownEvent)
    assert event.type == "yoga"
    assert event.payload == {"minutes": 30}


@pytest.mark.parametrize("hours", [None, "abc", 0, float("nan")])
def test_project_hours_default_to_one(hours):
    event = parse_event("project", {"lang": "systems", "name": "Shell", "hours": hours})
    assert event.hours == 1


def test_project_hours_missing_defaults_to_one():
    event = parse_event("project", {"lang": "systems", "name": "Shell"})
    assert event.hours == 1
    assert event.completed is False


def test_parse_event_rejects_unknown_language():
    with pytest.raises(ValidationError):
        parse_event("lc", {"lang": "cobol", "count": 1})


# -------------------------------------------------------------------
# record_event
# -------------------------------------------------------------------


def test_problems_solved_adds_count(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProblemsSolvedEvent(lang=Language.SCRIPTING, count=5, difficulty="medium"), now)
    record_event(progress, ProblemsSolvedEvent(lang=Language.SCRIPTING, count=3), now)

    assert progress.stats.scripting.problems_solved == 8
    assert progress.stats.systems.problems_solved == 0


def test_problems_solved_accepts_negative_count(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProblemsSolvedEvent(lang=Language.SYSTEMS, count=4), now)
    record_event(progress, ProblemsSolvedEvent(lang=Language.SYSTEMS, count=-1), now)

    assert progress.stats.systems.problems_solved == 3


def test_project_hours_accumulate(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Ray Tracer", hours=3), now)
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Ray Tracer", hours=2), now)

    assert len(progress.projects) == 1
    project = progress.projects[0]
    assert project.hours_invested == 5
    assert project.completed is False
    assert progress.stats.systems.hours_invested == 5
    assert progress.stats.scripting.hours_invested == 0


def test_project_completion_counted_once(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Ray Tracer", hours=3), now)
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Ray Tracer", hours=2, completed=True), now)
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Ray Tracer", hours=1, completed=True), now)

    project = progress.find_project("Ray Tracer")
    assert project is not None
    assert project.completed is True
    assert project.hours_invested == 6
    assert progress.stats.systems.projects_completed == 1


def test_completed_project_stays_completed(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProjectEvent(lang=Language.SCRIPTING, name="Blog", completed=True), now)
    record_event(progress, ProjectEvent(lang=Language.SCRIPTING, name="Blog", completed=False), now)

    assert progress.find_project("Blog").completed is True
    assert progress.stats.scripting.projects_completed == 1


def test_projects_are_keyed_by_name(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, ProjectEvent(lang=Language.SCRIPTING, name="Blog"), now)
    record_event(progress, ProjectEvent(lang=Language.SYSTEMS, name="Allocator"), now)
    record_event(progress, ProjectEvent(lang=Language.SCRIPTING, name="Blog"), now)

    assert [p.name for p in progress.projects] == ["Blog", "Allocator"]


def test_design_and_mock_counters(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, DesignSessionEvent(), now)
    record_event(progress, DesignSessionEvent(), now)
    record_event(progress, MockInterviewEvent(), now)

    assert progress.stats.design_sessions == 2
    assert progress.stats.mock_interviews == 1


def test_each_recognized_event_appends_one_log_entry(progress: ProgressDocument, now: dt.datetime):
    events = [
        ProblemsSolvedEvent(lang=Language.SCRIPTING, count=1, difficulty="easy"),
        ProjectEvent(lang=Language.SYSTEMS, name="Shell", hours=2),
        DesignSessionEvent(),
        MockInterviewEvent(),
    ]
    for i, event in enumerate(events, start=1):
        assert record_event(progress, event, now) is True
        assert len(progress.daily_log["2025-01-01"]) == i

    entries = progress.daily_log["2025-01-01"]
    assert [e.type for e in entries] == ["lc", "project", "design", "mock"]
    assert entries[0].payload == {"lang": "scripting", "count": 1, "difficulty": "easy"}
    assert entries[1].payload == {"lang": "systems", "name": "Shell", "hours": 2.0, "completed": False}
    assert entries[2].payload == {}
    assert all(e.timestamp == now for e in entries)


def test_log_entries_go_under_the_event_day(progress: ProgressDocument, now: dt.datetime):
    record_event(progress, DesignSessionEvent(), now)
    record_event(progress, DesignSessionEvent(), days_after(now, 1))

    assert sorted(progress.daily_log) == ["2025-01-01", "2025-01-02"]


def test_unknown_event_is_a_noop(progress: ProgressDocument, now: dt.datetime):
    before = progress.model_dump()

    assert record_event(progress, UnknownEvent(type="yoga", payload={"minutes": 30}), now) is False

    assert progress.model_dump() == before
    assert progress.daily_log == {}
