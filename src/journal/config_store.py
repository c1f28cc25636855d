"""Persisted user settings (config.json), currently just the reminder time."""

import re
from pathlib import Path
from typing import Optional

import structlog

from .storage import JsonDocument

logger = structlog.get_logger()

REMINDER_TIME_KEY = "reminderTime"
REMINDER_TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")


def is_valid_reminder_time(value: str) -> bool:
    return bool(REMINDER_TIME_RE.match(value or ""))


class ConfigStore:
    """Key-value settings document."""

    def __init__(self, path: str | Path):
        self._doc = JsonDocument(path, default_factory=dict)

    @property
    def path(self) -> Path:
        return self._doc.path

    def load(self) -> dict:
        return self._doc.read()

    def save(self, data: dict) -> None:
        self._doc.write(data)

    def get_reminder_time(self) -> Optional[str]:
        value = self.load().get(REMINDER_TIME_KEY)
        if value is not None and not is_valid_reminder_time(str(value)):
            logger.warning("config_store.invalid_reminder_time", value=value)
            return None
        return value

    def set_reminder_time(self, value: str) -> None:
        """Persist HH:MM reminder time, keeping other keys.

        Raises:
            ValueError: If value is not a 24-hour HH:MM time
        """
        if not is_valid_reminder_time(value):
            raise ValueError(f"Invalid reminder time: {value!r}. Use HH:MM (24-hour).")
        data = self.load()
        data[REMINDER_TIME_KEY] = value
        self.save(data)
        logger.info("config_store.reminder_time_set", value=value)
