"""CSV export CLI command."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from cli.utils import command_boundary, get_components

console = Console()


@click.command()
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False), help="Output CSV path (default from config)"
)
@command_boundary
def export(output: Optional[str]):
    """Export all mood entries to CSV."""
    c = get_components()
    output_path = Path(output).expanduser() if output else c["paths"].csv_file

    count = c["exporter"].export_csv(output_path)
    if count == 0:
        console.print("\n📭 No mood entries to export.\n")
        return

    console.print(f"\n[green]✅ Exported {count} entries[/] to {output_path}\n")
