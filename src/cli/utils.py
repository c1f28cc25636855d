"""Shared CLI utilities."""

import functools

import click
import structlog
from rich.console import Console
from rich.markup import escape

from shared_types import mood_label

console = Console()
logger = structlog.get_logger()


def get_config():
    """Config loaded by the root group, or loaded fresh outside a click context."""
    from cli.config import load_config_model

    ctx = click.get_current_context(silent=True)
    if ctx is not None:
        obj = ctx.find_object(dict)
        if obj and obj.get("config") is not None:
            return obj["config"]
    return load_config_model()


def get_components():
    """Initialize stores from config."""
    from journal import ConfigStore, CSVExporter, EntryStore, ViewStore

    config = get_config()
    paths = config.paths

    entries = EntryStore(paths.entries_file)
    return {
        "config": config,
        "paths": paths,
        "entries": entries,
        "settings": ConfigStore(paths.settings_file),
        "views": ViewStore(paths.views_file),
        "exporter": CSVExporter(entries),
    }


def command_boundary(func):
    """Keep any unexpected exception from escaping a command.

    The user sees nothing; the failure is logged at debug level (visible with -v).
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except Exception:
            logger.debug("command_failed", command=func.__name__, exc_info=True)
            return None

    return wrapper


def render_entries(numbered_entries) -> None:
    """Print (number, entry) pairs as the history listing."""
    console.print("\n📖 [bold]Your Mood History:[/]\n")
    for number, entry in numbered_entries:
        console.print(f"{number}. 🗓️  {entry.local_date()}: {escape(mood_label(entry.mood))}")
        if entry.note and entry.note.strip():
            console.print(f"    💬 {escape(entry.note)}")
        if entry.tags:
            console.print(f"    🏷️  [dim]{escape(', '.join(entry.tags))}[/]")
    console.print()
