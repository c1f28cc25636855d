"""History filtering: mood / tag / date-range predicates over an entry list."""

import re
from datetime import datetime, time, timezone
from typing import Optional

from shared_types import MoodlogError

from .models import FilterOptions, MoodEntry, parse_timestamp

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidFilterError(MoodlogError):
    """A from/to bound that is not an ISO date or date-time."""


def parse_bound(value: Optional[str], end_of_day: bool = False) -> Optional[datetime]:
    """Parse a from/to bound. Date-only values cover the whole day; naive values are UTC.

    Raises:
        InvalidFilterError: If value is not ISO-8601
    """
    if not value:
        return None
    value = value.strip()
    if _DATE_ONLY.match(value):
        try:
            day = datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidFilterError(f"Invalid date: {value!r}") from e
        return datetime.combine(day, time.max if end_of_day else time.min, tzinfo=timezone.utc)
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise InvalidFilterError(f"Invalid date: {value!r}. Use YYYY-MM-DD.") from e


def filter_entries(entries: list[MoodEntry], options: Optional[FilterOptions]) -> list[MoodEntry]:
    """Entries matching every supplied option, in their original order."""
    return [entry for _, entry in filter_numbered(entries, options)]


def filter_numbered(
    entries: list[MoodEntry], options: Optional[FilterOptions]
) -> list[tuple[int, MoodEntry]]:
    """Like filter_entries but keeps each entry's 1-based position in the full list."""
    numbered = list(enumerate(entries, start=1))
    if options is None or options.is_empty():
        return numbered

    start = parse_bound(options.from_)
    end = parse_bound(options.to, end_of_day=True)
    mood = options.mood.lower() if options.mood else None
    wanted_tags = [t.strip() for t in options.tag if t.strip()]

    result = []
    for number, entry in numbered:
        if mood and entry.mood.lower() != mood:
            continue
        if not all(entry.has_tag(t) for t in wanted_tags):
            continue
        if start or end:
            ts = entry.timestamp
            if ts is None:
                continue
            if start and ts < start:
                continue
            if end and ts > end:
                continue
        result.append((number, entry))
    return result
