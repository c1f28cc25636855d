"""Tests for history filtering."""

from datetime import timezone

import pytest

from journal.filters import InvalidFilterError, filter_entries, filter_numbered, parse_bound
from journal.models import FilterOptions, MoodEntry


def _moods(entries):
    return [e.mood for e in entries]


class TestNoFilter:
    def test_none_returns_all(self, sample_entries):
        assert filter_entries(sample_entries, None) == sample_entries

    def test_empty_options_returns_all_in_order(self, sample_entries):
        assert filter_entries(sample_entries, FilterOptions()) == sample_entries

    def test_empty_input(self):
        assert filter_entries([], FilterOptions(mood="Happy")) == []


class TestMood:
    def test_case_insensitive(self, sample_entries):
        result = filter_entries(sample_entries, FilterOptions(mood="happy"))
        assert _moods(result) == ["Happy", "Happy"]

    def test_exact_match_only(self, sample_entries):
        assert filter_entries(sample_entries, FilterOptions(mood="Hap")) == []

    def test_unknown_mood_yields_nothing(self, sample_entries):
        assert filter_entries(sample_entries, FilterOptions(mood="Ecstatic")) == []


class TestTags:
    def test_all_requested_tags_required(self):
        both = MoodEntry.new("Happy", tags=["a", "b"])
        only_a = MoodEntry.new("Sad", tags=["a"])
        assert filter_entries([both, only_a], FilterOptions(tag=["a", "b"])) == [both]

    def test_entry_may_have_extra_tags(self, sample_entries):
        result = filter_entries(sample_entries, FilterOptions(tag=["work"]))
        assert result == [sample_entries[1], sample_entries[2]]

    def test_tag_case_insensitive(self, sample_entries):
        result = filter_entries(sample_entries, FilterOptions(tag=["DEADLINE"]))
        assert result == [sample_entries[1]]

    def test_single_string_tag_coerced(self):
        assert FilterOptions(tag="work").tag == ["work"]


class TestDateRange:
    def test_from_to_inclusive_range(self, sample_entries):
        opts = FilterOptions(**{"from": "2024-01-10", "to": "2024-01-31"})
        assert filter_entries(sample_entries, opts) == [sample_entries[1]]

    def test_from_excludes_strictly_before(self, sample_entries):
        opts = FilterOptions(**{"from": "2024-01-15"})
        assert filter_entries(sample_entries, opts) == sample_entries[1:]

    def test_to_date_covers_whole_day(self, sample_entries):
        opts = FilterOptions(to="2024-01-15")
        assert filter_entries(sample_entries, opts) == sample_entries[:2]

    def test_to_datetime_is_exact(self, sample_entries):
        opts = FilterOptions(to="2024-01-15T11:59:59Z")
        assert filter_entries(sample_entries, opts) == sample_entries[:1]

    def test_unparseable_entry_date_excluded(self):
        bad = MoodEntry(date="not-a-date", mood="Meh")
        assert filter_entries([bad], FilterOptions(**{"from": "2020-01-01"})) == []

    def test_invalid_bound_raises(self, sample_entries):
        with pytest.raises(InvalidFilterError):
            filter_entries(sample_entries, FilterOptions(to="31/01/2024"))

    def test_impossible_calendar_date_raises(self):
        with pytest.raises(InvalidFilterError):
            parse_bound("2024-02-30")

    def test_naive_bound_is_utc(self):
        assert parse_bound("2024-01-01T08:00:00").tzinfo == timezone.utc


class TestCombined:
    def test_and_across_fields(self, sample_entries):
        opts = FilterOptions(mood="Happy", tag=["work"], **{"from": "2024-01-01"})
        assert filter_entries(sample_entries, opts) == [sample_entries[2]]

    def test_idempotent(self, sample_entries):
        opts = FilterOptions(tag=["work"], to="2024-12-31")
        first = filter_entries(sample_entries, opts)
        assert filter_entries(sample_entries, opts) == first
        assert filter_entries(first, opts) == first

    def test_numbered_keeps_original_positions(self, sample_entries):
        result = filter_numbered(sample_entries, FilterOptions(mood="Happy"))
        assert [n for n, _ in result] == [1, 3]
