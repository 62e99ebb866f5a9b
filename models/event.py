"""Study events - one user-logged occurrence each.

Events form a closed tagged union keyed by ``kind``. Anything that does not
match a known kind is carried as ``UnknownEvent`` so the engine can ignore it
explicitly instead of dropping it silently.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from models.progress import Language


class EventKind(StrEnum):
    PROBLEMS_SOLVED = "lc"
    PROJECT = "project"
    DESIGN = "design"
    MOCK = "mock"


class _EventBase(BaseModel):
    def payload(self) -> dict[str, Any]:
        """Raw payload as written to the daily log."""
        return self.model_dump(mode="json", exclude={"kind"})


class ProblemsSolvedEvent(_EventBase):
    kind: Literal[EventKind.PROBLEMS_SOLVED] = EventKind.PROBLEMS_SOLVED
    lang: Language
    count: int
    difficulty: str | None = None


class ProjectEvent(_EventBase):
    kind: Literal[EventKind.PROJECT] = EventKind.PROJECT
    lang: Language
    name: str
    hours: float = 1
    completed: bool = False

    @field_validator("hours", mode="before")
    @classmethod
    def default_hours(cls, value: Any) -> Any:
        """Absent, zero or non-numeric hours count as one hour."""
        try:
            hours = float(value)
        except (TypeError, ValueError):
            return 1
        if math.isnan(hours) or hours == 0:
            return 1
        return hours


class DesignSessionEvent(_EventBase):
    kind: Literal[EventKind.DESIGN] = EventKind.DESIGN


class MockInterviewEvent(_EventBase):
    kind: Literal[EventKind.MOCK] = EventKind.MOCK


class UnknownEvent(BaseModel):
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)


StudyEvent = ProblemsSolvedEvent | ProjectEvent | DesignSessionEvent | MockInterviewEvent | UnknownEvent
