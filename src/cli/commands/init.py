"""Init CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.config import find_config, write_default_config
from cli.utils import command_boundary, get_config

console = Console()

DEFAULT_CONFIG_PATH = Path("~/.moodlog/config.yaml")


@click.command()
@click.option(
    "--config-path",
    type=click.Path(dir_okay=False),
    help=f"Where to write the config (default: {DEFAULT_CONFIG_PATH})",
)
@command_boundary
def init(config_path: str | None):
    """Create the data directory and a default config file."""
    config = get_config()
    paths = config.paths

    paths.data_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"[green]✓[/] data_dir: {paths.data_dir}")

    if config_path:
        target = Path(config_path).expanduser()
    else:
        target = find_config() or DEFAULT_CONFIG_PATH.expanduser()
    if target.exists():
        console.print(f"[dim]Config exists:[/] {target}")
    else:
        write_default_config(target)
        console.print(f"[green]✓[/] Created config: {target}")

    console.print("\n[bold]Ready![/]")
    console.print("  Run [cyan]moodlog check-in[/] to record how you feel")
    console.print("  Run [cyan]moodlog reminder[/] to get a daily nudge")
