"""Entry removal CLI commands."""

import click
from rich.console import Console
from rich.markup import escape

from cli.utils import command_boundary, get_components
from journal.storage import EntryNotFoundError

console = Console()


@click.command()
@click.argument("number")
@command_boundary
def delete(number: str):
    """Delete a specific mood entry by its number."""
    c = get_components()
    try:
        removed = c["entries"].delete(int(number))
    except (ValueError, EntryNotFoundError):
        console.print("\n[red]❌ Invalid entry number.[/]\n")
        return

    console.print(
        f"\n🗑️ Deleted entry #{number}: {escape(removed.mood)} on {removed.local_date()}\n"
    )


@click.command()
@command_boundary
def clear():
    """Clear all mood entries."""
    c = get_components()
    c["entries"].clear()
    console.print("\n🗑️ All mood entries cleared.\n")
