from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_LANGUAGE_ALIASES = {
    "js": "scripting",
    "javascript": "scripting",
    "py": "scripting",
    "python": "scripting",
    "cpp": "systems",
    "c++": "systems",
    "rust": "systems",
}


class Language(StrEnum):
    SCRIPTING = "scripting"
    SYSTEMS = "systems"

    @classmethod
    def _missing_(cls, value: object) -> Language | None:
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        key = _LANGUAGE_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None


class _CamelModel(BaseModel):
    """Base model serialized with camelCase keys on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LanguageStats(_CamelModel):
    problems_solved: int = 0
    projects_completed: int = 0
    hours_invested: float = 0.0


class ProgressStats(_CamelModel):
    scripting: LanguageStats = Field(default_factory=LanguageStats)
    systems: LanguageStats = Field(default_factory=LanguageStats)
    design_sessions: int = 0
    mock_interviews: int = 0

    def for_language(self, lang: Language) -> LanguageStats:
        return self.scripting if lang == Language.SCRIPTING else self.systems


class ProjectRecord(_CamelModel):
    name: str
    lang: Language
    hours_invested: float = 0.0
    completed: bool = False


class LogEntry(_CamelModel):
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime


class ProgressDocument(_CamelModel):
    """The single mutable record of logged study activity.

    The current month is never stored; it is derived from ``start_date``.
    """

    start_date: datetime
    stats: ProgressStats = Field(default_factory=ProgressStats)
    projects: list[ProjectRecord] = Field(default_factory=list)
    daily_log: dict[str, list[LogEntry]] = Field(default_factory=dict)

    @field_validator("start_date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are treated as UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def find_project(self, name: str) -> ProjectRecord | None:
        for project in self.projects:
            if project.name == name:
                return project
        return None

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
