"""Shared test fixtures for moodlog."""

import logging
import sys
from pathlib import Path

import pytest
import yaml

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from journal.models import MoodEntry  # noqa: E402
from journal.storage import EntryStore  # noqa: E402


@pytest.fixture(autouse=True)
def restore_root_logging():
    """CLI runs reconfigure the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def config_file(tmp_path, data_dir):
    """YAML config pointing every path at tmp_path."""
    path = tmp_path / "moodlog.yaml"
    path.write_text(
        yaml.dump(
            {
                "paths": {
                    "data_dir": str(data_dir),
                    "export_file": str(tmp_path / "mood_log.csv"),
                },
                "logging": {"level": "WARNING"},
            }
        )
    )
    return path


@pytest.fixture
def sample_entries():
    """Three entries across Jan/Feb 2024."""
    return [
        MoodEntry(date="2024-01-01T12:00:00.000Z", mood="Happy", note="New year", tags=["family"]),
        MoodEntry(
            date="2024-01-15T12:00:00.000Z",
            mood="Anxious",
            note='Deadline "soon"',
            tags=["work", "deadline"],
        ),
        MoodEntry(date="2024-02-01T12:00:00.000Z", mood="Happy", note="", tags=["work"]),
    ]


@pytest.fixture
def entry_store(data_dir):
    return EntryStore(data_dir / "entries.json")


@pytest.fixture
def populated_store(entry_store, sample_entries):
    entry_store.save(sample_entries)
    return entry_store
