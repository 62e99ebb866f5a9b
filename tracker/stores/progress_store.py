import datetime as dt
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from models.progress import ProgressDocument
from tracker.defaults import default_progress


class ProgressStore:
    """Reads and writes the progress document as a whole.

    Every save overwrites the file in full. Writes are not atomic and the
    file is assumed to be owned by a single process.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self, now: dt.datetime | None = None) -> ProgressDocument:
        document = self._read()
        if document is None:
            document = default_progress(now)
            self.save(document)
            logger.info(f"Started new progress log at {self.path}")
        return document

    def save(self, document: ProgressDocument) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(document.to_json(), encoding="utf-8")
        logger.debug(f"Saved progress to {self.path}")

    def _read(self) -> ProgressDocument | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No file at {self.path}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Progress file not readable at {self.path}: {e}")
            return None
        try:
            return ProgressDocument.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Progress file at {self.path} is invalid, starting over: {e}")
            return None
