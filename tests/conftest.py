"""Root conftest for all tests.

Points every test at temporary data files so nothing touches the real plan
or progress documents.
"""

import datetime as dt
from dataclasses import dataclass
from pathlib import Path

import pytest

from models.progress import ProgressDocument
from tracker.defaults import default_progress

START = dt.datetime(2025, 1, 1, 9, 0, tzinfo=dt.UTC)


@dataclass
class DataPaths:
    plan: Path
    progress: Path
    report: Path


@pytest.fixture
def data_paths(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DataPaths:
    """Route settings to files under tmp_path."""
    paths = DataPaths(
        plan=tmp_path / "data" / "plan.json",
        progress=tmp_path / "data" / "progress.json",
        report=tmp_path / "progress_report.md",
    )
    monkeypatch.setenv("STUDY_PLAN_PATH", str(paths.plan))
    monkeypatch.setenv("STUDY_PROGRESS_PATH", str(paths.progress))
    monkeypatch.setenv("STUDY_REPORT_PATH", str(paths.report))
    monkeypatch.delenv("LOG_FILE", raising=False)
    return paths


@pytest.fixture
def now() -> dt.datetime:
    return START


@pytest.fixture
def progress(now: dt.datetime) -> ProgressDocument:
    return default_progress(now)
