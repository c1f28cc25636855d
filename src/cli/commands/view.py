"""Saved view CLI commands."""

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.commands.history import build_filter, filter_options, show_history
from cli.utils import command_boundary, get_components

console = Console()


@click.group()
def view():
    """Save and load named history filters."""
    pass


@view.command("save")
@click.argument("name")
@filter_options
@command_boundary
def view_save(
    name: str, mood: Optional[str], tags: tuple, from_date: Optional[str], to_date: Optional[str]
):
    """Save filter options under NAME (overwrites an existing view)."""
    c = get_components()
    options = build_filter(mood, tags, from_date, to_date)
    try:
        c["views"].put(name, options)
    except OSError as e:
        console.print(f"[red]Failed to save view '{escape(name)}':[/] {escape(str(e))}")
        return
    console.print(f"[green]✅ Saved view[/] '{escape(name)}': {escape(options.describe())}")


@view.command("load")
@click.argument("name")
@command_boundary
def view_load(name: str):
    """Show history using the filters saved as NAME."""
    c = get_components()
    options = c["views"].get(name)
    if options is None:
        console.print(f"[red]View '{escape(name)}' not found.[/]")
        return
    show_history(c["entries"], options)


@view.command("list")
@command_boundary
def view_list():
    """List saved views."""
    c = get_components()
    views = c["views"].load()
    if not views:
        console.print("[yellow]No saved views.[/]")
        return

    table = Table(show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Filters")
    for name, options in views.items():
        table.add_row(escape(name), escape(options.describe()))
    console.print(table)


@view.command("delete")
@click.argument("name")
@command_boundary
def view_delete(name: str):
    """Delete the saved view NAME."""
    c = get_components()
    if not c["views"].remove(name):
        console.print(f"[red]View '{escape(name)}' not found.[/]")
        return
    console.print(f"[green]Deleted view:[/] {escape(name)}")
