"""Daily reminder CLI command."""

import time
from typing import Optional

import click
from rich.console import Console

from cli.commands.checkin import run_check_in
from cli.utils import command_boundary, get_components
from journal.config_store import ConfigStore
from reminder.notifier import DesktopNotifier
from reminder.scheduler import ReminderScheduler, validate_reminder_time

console = Console()


def resolve_reminder_time(settings: ConfigStore) -> str:
    """Keep the saved time if the user confirms, otherwise prompt until a valid HH:MM is given."""
    existing = settings.get_reminder_time()
    if existing and click.confirm(f"Reminder is set for {existing}. Keep it?", default=True):
        return existing
    return click.prompt(
        "What time should I remind you each day? (HH:MM, 24-hour)",
        value_proc=validate_reminder_time,
    )


@click.command()
@click.option("--time", "time_opt", help="Reminder time HH:MM (skips the prompt)")
@command_boundary
def reminder(time_opt: Optional[str]):
    """Remind you to check in every day at a set time. Runs until Ctrl+C."""
    c = get_components()
    settings = c["settings"]
    cfg = c["config"].reminder

    if time_opt is not None:
        try:
            reminder_time = validate_reminder_time(time_opt)
        except click.BadParameter as e:
            console.print(f"[red]Error:[/] {e.message}")
            return
    else:
        reminder_time = resolve_reminder_time(settings)
    settings.set_reminder_time(reminder_time)

    notifier = DesktopNotifier(app_name=cfg.app_name)

    def fire():
        notifier.notify(cfg.title, cfg.message)
        run_check_in(c["entries"])

    scheduler = ReminderScheduler(fire, misfire_grace_seconds=cfg.misfire_grace_seconds)
    scheduler.start(reminder_time)

    console.print(f"\n[green]⏰ Reminder set[/] for {reminder_time} every day.")
    console.print("Press Ctrl+C to stop")

    try:
        while True:
            time.sleep(60)
    except KeyboardInterrupt:
        scheduler.stop()
        console.print("\n[yellow]Stopped[/]")
