"""History CLI command and the filter options it shares with views."""

from typing import Optional

import click
from rich.console import Console

from cli.utils import command_boundary, get_components, render_entries
from journal.filters import InvalidFilterError, filter_numbered
from journal.models import FilterOptions
from journal.storage import EntryStore

console = Console()


def filter_options(func):
    """Attach --mood/--tag/--from/--to to a command."""
    func = click.option("--to", "to_date", help="Only entries on or before this date (YYYY-MM-DD)")(func)
    func = click.option("--from", "from_date", help="Only entries on or after this date (YYYY-MM-DD)")(func)
    func = click.option("--tag", "tags", multiple=True, help="Require tag (repeatable, all must match)")(func)
    func = click.option("--mood", help="Only this mood (case-insensitive)")(func)
    return func


def build_filter(
    mood: Optional[str], tags: tuple, from_date: Optional[str], to_date: Optional[str]
) -> FilterOptions:
    return FilterOptions(mood=mood, tag=list(tags), from_=from_date, to=to_date)


def show_history(store: EntryStore, options: Optional[FilterOptions] = None) -> None:
    """Load, filter and print entries numbered by their position in the full list."""
    entries = store.load()
    if not entries:
        console.print("\n📭 No mood entries found yet.\n")
        return

    try:
        matches = filter_numbered(entries, options)
    except InvalidFilterError as e:
        console.print(f"[red]Error:[/] {e}")
        return

    if not matches:
        console.print("\n🔍 No entries match those filters.\n")
        return

    render_entries(matches)


@click.command()
@filter_options
@command_boundary
def history(mood: Optional[str], tags: tuple, from_date: Optional[str], to_date: Optional[str]):
    """View your past mood entries."""
    c = get_components()
    show_history(c["entries"], build_filter(mood, tags, from_date, to_date))
