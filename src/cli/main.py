"""CLI entry point for moodlog."""

import sys
from pathlib import Path

import click
from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import check_in, clear, delete, export, history, init, reminder, view
from cli.config import load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: $MOODLOG_CONFIG, ./moodlog.yaml, ~/.moodlog/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None):
    """moodlog - personal mood journal."""
    try:
        config = load_config_model(config_path)
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        ctx.exit()

    log_cfg = config.logging
    setup_logging(
        json_mode=log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=config.paths.log_file,
        file_level=log_cfg.file_level,
    )
    ctx.ensure_object(dict)["config"] = config


cli.add_command(check_in)
cli.add_command(history)
cli.add_command(delete)
cli.add_command(clear)
cli.add_command(export)
cli.add_command(reminder)
cli.add_command(view)
cli.add_command(init)


if __name__ == "__main__":
    cli()
