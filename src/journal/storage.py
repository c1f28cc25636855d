"""JSON-document persistence for mood entries."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from shared_types import MoodlogError

from .models import MoodEntry

logger = structlog.get_logger()


class EntryNotFoundError(MoodlogError):
    """Entry number outside 1..count."""


class JsonDocument:
    """A single JSON file that is read whole and replaced whole."""

    def __init__(self, path: str | Path, default_factory=dict):
        self.path = Path(path).expanduser()
        self._default_factory = default_factory

    def read(self) -> Any:
        """Parsed document, or a fresh default if missing, unreadable or malformed."""
        if not self.path.exists():
            logger.debug("document.missing", path=str(self.path))
            return self._default_factory()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("document.unreadable", path=str(self.path), error=str(e))
            return self._default_factory()

        default = self._default_factory()
        if not isinstance(data, type(default)):
            logger.warning(
                "document.wrong_shape",
                path=str(self.path),
                expected=type(default).__name__,
                got=type(data).__name__,
            )
            return default
        return data

    def write(self, data: Any) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


class EntryStore:
    """Ordered list of mood entries in entries.json.

    Entry numbers are 1-based positions at the time of the call, not stable ids.
    """

    def __init__(self, path: str | Path):
        self._doc = JsonDocument(path, default_factory=list)

    @property
    def path(self) -> Path:
        return self._doc.path

    def _read_records(self) -> list[tuple[Any, MoodEntry | None]]:
        """Raw records paired with their parsed entry, or None where validation failed."""
        records = []
        for i, raw in enumerate(self._doc.read()):
            try:
                records.append((raw, MoodEntry.model_validate(raw)))
            except ValidationError as e:
                logger.warning("entry_store.invalid_entry", position=i + 1, error=str(e))
                records.append((raw, None))
        return records

    def load(self) -> list[MoodEntry]:
        return [entry for _, entry in self._read_records() if entry is not None]

    def save(self, entries: list[MoodEntry]) -> None:
        """Replace the whole document with `entries`."""
        self._doc.write([e.model_dump() for e in entries])

    def count(self) -> int:
        return len(self.load())

    def append(self, entry: MoodEntry) -> MoodEntry:
        """Add entry at the end. Records that failed validation are written back as they were."""
        raws = [raw for raw, _ in self._read_records()]
        raws.append(entry.model_dump())
        self._doc.write(raws)
        logger.info("entry_store.appended", mood=entry.mood, total=len(raws))
        return entry

    def delete(self, number: int) -> MoodEntry:
        """Remove the entry at 1-based position `number` among the valid entries.

        Raises:
            EntryNotFoundError: If number is outside 1..count; the document is not touched
        """
        records = self._read_records()
        valid = [i for i, (_, entry) in enumerate(records) if entry is not None]
        if number < 1 or number > len(valid):
            raise EntryNotFoundError(f"No entry #{number} (have {len(valid)})")
        _, removed = records.pop(valid[number - 1])
        self._doc.write([raw for raw, _ in records])
        logger.info("entry_store.deleted", number=number, remaining=len(valid) - 1)
        return removed

    def clear(self) -> None:
        self.save([])
        logger.info("entry_store.cleared")
