"""Pydantic models for mood entries and history filters."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def utc_now_iso() -> str:
    """Current instant as ISO-8601 UTC with millisecond precision, e.g. 2024-01-15T09:30:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp; naive values are taken as UTC.

    Raises:
        ValueError: If value is not ISO-8601
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def normalize_tags(tags: list[str]) -> list[str]:
    """Strip tags, drop blanks and case-insensitive duplicates, keep first spelling and order."""
    seen = set()
    result = []
    for tag in tags:
        tag = str(tag).strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        result.append(tag)
    return result


def split_tags(raw: Optional[str]) -> list[str]:
    """Split comma-separated tag input."""
    return normalize_tags(raw.split(",")) if raw else []


class MoodEntry(BaseModel):
    """One check-in. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    date: str
    mood: str
    note: str = ""
    tags: list[str] = Field(default_factory=list)

    @classmethod
    def new(cls, mood: str, note: str = "", tags: Optional[list[str]] = None) -> "MoodEntry":
        """Entry stamped with the current time."""
        return cls(date=utc_now_iso(), mood=mood, note=note, tags=tags or [])

    @field_validator("mood", mode="before")
    @classmethod
    def mood_as_str(cls, v):
        return str(v)

    @field_validator("note", mode="before")
    @classmethod
    def none_note_is_empty(cls, v):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def clean_tags(cls, v):
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        return normalize_tags(v)

    @property
    def timestamp(self) -> Optional[datetime]:
        try:
            return parse_timestamp(self.date)
        except ValueError:
            return None

    def local_date(self) -> str:
        """Calendar date in the local timezone, or the raw date prefix if unparseable."""
        ts = self.timestamp
        if ts is None:
            return self.date[:10]
        return ts.astimezone().strftime("%Y-%m-%d")

    def has_tag(self, tag: str) -> bool:
        return tag.lower() in {t.lower() for t in self.tags}


class FilterOptions(BaseModel):
    """Combinable history filter. Serialized with the keys mood/tag/from/to."""

    model_config = ConfigDict(populate_by_name=True)

    mood: Optional[str] = None
    tag: list[str] = Field(default_factory=list)
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None

    @field_validator("tag", mode="before")
    @classmethod
    def coerce_tag_list(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    def is_empty(self) -> bool:
        return not (self.mood or self.tag or self.from_ or self.to)

    def to_document(self) -> dict:
        """Dict for the views document, omitting unset fields."""
        return self.model_dump(by_alias=True, exclude_defaults=True)

    def describe(self) -> str:
        """Short human summary, e.g. 'mood=Happy tag=work,gym from=2024-01-01'."""
        parts = []
        if self.mood:
            parts.append(f"mood={self.mood}")
        if self.tag:
            parts.append(f"tag={','.join(self.tag)}")
        if self.from_:
            parts.append(f"from={self.from_}")
        if self.to:
            parts.append(f"to={self.to}")
        return " ".join(parts) or "(no filters)"
