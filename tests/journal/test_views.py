"""Tests for the view store and the reminder settings store."""

import json

import pytest

from journal.config_store import ConfigStore, is_valid_reminder_time
from journal.models import FilterOptions
from journal.views import ViewStore


@pytest.fixture
def view_store(data_dir):
    return ViewStore(data_dir / "views.json")


@pytest.fixture
def settings(data_dir):
    return ConfigStore(data_dir / "config.json")


class TestViewStore:
    def test_empty_when_missing(self, view_store):
        assert view_store.load() == {}
        assert view_store.get("work") is None

    def test_empty_when_corrupt(self, view_store):
        view_store.path.write_text("[[[")
        assert view_store.load() == {}

    def test_put_and_get(self, view_store):
        opts = FilterOptions(mood="Happy", tag=["work"], **{"from": "2024-01-01"})
        view_store.put("work", opts)
        assert view_store.get("work") == opts

    def test_document_uses_from_key_and_omits_unset(self, view_store):
        view_store.put("jan", FilterOptions(**{"from": "2024-01-01", "to": "2024-01-31"}))
        assert json.loads(view_store.path.read_text()) == {
            "jan": {"from": "2024-01-01", "to": "2024-01-31"}
        }

    def test_last_save_wins(self, view_store):
        view_store.put("v", FilterOptions(mood="Happy"))
        view_store.put("v", FilterOptions(mood="Sad"))
        assert view_store.get("v").mood == "Sad"
        assert view_store.names() == ["v"]

    def test_stored_verbatim_without_validation(self, view_store):
        view_store.put("odd", FilterOptions(mood="Nonexistent", to="whenever"))
        loaded = view_store.get("odd")
        assert loaded.mood == "Nonexistent"
        assert loaded.to == "whenever"

    def test_put_and_remove_keep_invalid_views(self, view_store):
        view_store.path.write_text(json.dumps({"broken": {"mood": ["x"]}}))
        assert view_store.load() == {}

        view_store.put("ok", FilterOptions(mood="Meh"))
        view_store.remove("ok")
        assert json.loads(view_store.path.read_text()) == {"broken": {"mood": ["x"]}}

    def test_remove(self, view_store):
        view_store.put("a", FilterOptions())
        view_store.put("b", FilterOptions(mood="Meh"))
        assert view_store.remove("a") is True
        assert view_store.remove("a") is False
        assert view_store.names() == ["b"]

    def test_invalid_view_skipped(self, view_store):
        view_store.path.write_text(json.dumps({"bad": "not a dict", "ok": {"mood": "Meh"}}))
        assert list(view_store.load()) == ["ok"]


class TestConfigStore:
    @pytest.mark.parametrize("value", ["00:00", "08:30", "19:05", "23:59"])
    def test_valid_times(self, value):
        assert is_valid_reminder_time(value)

    @pytest.mark.parametrize("value", ["24:00", "25:00", "8:30", "08:60", "0830", "", "08:30 "])
    def test_invalid_times(self, value):
        assert not is_valid_reminder_time(value)

    def test_unset_reminder_time(self, settings):
        assert settings.get_reminder_time() is None

    def test_set_and_get(self, settings):
        settings.set_reminder_time("08:30")
        assert settings.get_reminder_time() == "08:30"
        assert json.loads(settings.path.read_text()) == {"reminderTime": "08:30"}

    def test_set_rejects_bad_format(self, settings):
        with pytest.raises(ValueError):
            settings.set_reminder_time("25:00")
        assert not settings.path.exists()

    def test_set_keeps_other_keys(self, settings):
        settings.save({"theme": "dark"})
        settings.set_reminder_time("21:00")
        assert settings.load() == {"theme": "dark", "reminderTime": "21:00"}

    def test_corrupt_document_is_empty(self, settings):
        settings.path.write_text("nope")
        assert settings.load() == {}
        assert settings.get_reminder_time() is None

    def test_invalid_stored_time_ignored(self, settings):
        settings.save({"reminderTime": "99:99"})
        assert settings.get_reminder_time() is None
