from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Relative paths resolve against the working directory.
    plan_path: Path = Field(default=Path("plan.json"), validation_alias="STUDY_PLAN_PATH")
    progress_path: Path = Field(default=Path("progress.json"), validation_alias="STUDY_PROGRESS_PATH")
    report_path: Path = Field(default=Path("progress_report.md"), validation_alias="STUDY_REPORT_PATH")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="LOG_FILE",
        description="Optional log file; console-only logging when unset",
    )
    log_rotation: str = Field(default="1 MB", validation_alias="LOG_ROTATION")
    log_retention: str = Field(default="30 days", validation_alias="LOG_RETENTION")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Read settings fresh from the environment."""
    return Settings()
