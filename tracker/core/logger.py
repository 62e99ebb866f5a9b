import sys
from pathlib import Path

from loguru import logger

from tracker.config.settings import Settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{line} - {message}"


def setup_logger(cfg: Settings) -> None:
    """Send tracker logs to stderr and, when LOG_FILE is set, to a rotating file.

    stdout stays reserved for command output.
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=cfg.log_level, colorize=True)

    if cfg.log_file:
        log_path = Path(cfg.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=cfg.log_level,
            rotation=cfg.log_rotation,
            retention=cfg.log_retention,
            encoding="utf-8",
        )
