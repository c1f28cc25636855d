from .config_store import ConfigStore
from .export import CSVExporter
from .filters import InvalidFilterError, filter_entries
from .models import FilterOptions, MoodEntry
from .storage import EntryNotFoundError, EntryStore
from .views import ViewStore

__all__ = [
    "EntryStore",
    "ConfigStore",
    "ViewStore",
    "CSVExporter",
    "MoodEntry",
    "FilterOptions",
    "filter_entries",
    "EntryNotFoundError",
    "InvalidFilterError",
]
