from pydantic import BaseModel, Field


class MonthPlan(BaseModel):
    focus: str
    daily: dict[str, str] = Field(default_factory=dict)
    resources: dict[str, str] = Field(default_factory=dict)


class StudyPlan(BaseModel):
    """Month-by-month curriculum. Read-only once loaded."""

    months: list[MonthPlan]
