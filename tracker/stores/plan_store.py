from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from models.plan import StudyPlan
from tracker.defaults import default_plan


class PlanStore:
    """Loads the study plan, creating the default plan file when needed."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> StudyPlan:
        plan = self._read()
        if plan is None:
            plan = default_plan()
            self._write(plan)
            logger.info(f"Created default study plan at {self.path}")
        return plan

    def _read(self) -> StudyPlan | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No file at {self.path}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Study plan not readable at {self.path}: {e}")
            return None
        try:
            return StudyPlan.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Study plan at {self.path} is invalid, replacing with default: {e}")
            return None

    def _write(self, plan: StudyPlan) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(plan.model_dump_json(indent=2), encoding="utf-8")
