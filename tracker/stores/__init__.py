"""JSON file stores for the study plan and progress documents."""

from tracker.stores.plan_store import PlanStore
from tracker.stores.progress_store import ProgressStore

__all__ = [
    "PlanStore",
    "ProgressStore",
]
