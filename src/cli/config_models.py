"""Pydantic configuration models for moodlog."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_dir: Path = Path("~/.moodlog")
    export_file: Optional[Path] = None  # None = <data_dir>/mood_log.csv
    log_file: Optional[Path] = None

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.data_dir = self.data_dir.expanduser()
        if self.export_file is not None:
            self.export_file = self.export_file.expanduser()
        if self.log_file is not None:
            self.log_file = self.log_file.expanduser()
        return self

    @property
    def entries_file(self) -> Path:
        return self.data_dir / "entries.json"

    @property
    def settings_file(self) -> Path:
        return self.data_dir / "config.json"

    @property
    def views_file(self) -> Path:
        return self.data_dir / "views.json"

    @property
    def csv_file(self) -> Path:
        return self.export_file or self.data_dir / "mood_log.csv"


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file_level: str = "DEBUG"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class ReminderConfig(BaseModel):
    """Daily reminder notification settings."""

    title: str = "Mood check-in"
    message: str = "How are you feeling? Take a moment to check in."
    app_name: str = "moodlog"
    misfire_grace_seconds: int = 300

    @field_validator("misfire_grace_seconds")
    @classmethod
    def validate_grace(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"misfire_grace_seconds must be positive, got {v}")
        return v


class MoodlogConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    reminder: ReminderConfig = Field(default_factory=ReminderConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodlogConfig":
        return cls.model_validate(data)
