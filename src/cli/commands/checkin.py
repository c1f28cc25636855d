"""Mood check-in CLI command."""

from typing import Optional

import click
from rich.console import Console

from cli.utils import command_boundary, get_components
from journal.models import MoodEntry, split_tags
from journal.storage import EntryStore
from shared_types import Mood, mood_label

console = Console()

MOOD_CHOICES = [m.value for m in Mood]


def parse_mood(value: str) -> str:
    """click value_proc: accept a menu number or a mood name (any case)."""
    value = (value or "").strip()
    if value.isdigit() and 1 <= int(value) <= len(MOOD_CHOICES):
        return MOOD_CHOICES[int(value) - 1]
    for choice in MOOD_CHOICES:
        if choice.lower() == value.lower():
            return choice
    raise click.BadParameter(f"Pick 1-{len(MOOD_CHOICES)} or one of: {', '.join(MOOD_CHOICES)}")


def prompt_mood() -> str:
    console.print("\n[bold]How are you feeling today?[/]")
    for i, choice in enumerate(MOOD_CHOICES, start=1):
        console.print(f"  {i}) {mood_label(choice)}")
    return click.prompt("Mood", value_proc=parse_mood)


def run_check_in(
    store: EntryStore,
    mood: Optional[str] = None,
    note: Optional[str] = None,
    tags: Optional[str] = None,
) -> MoodEntry:
    """Prompt for whatever was not supplied, then append the entry."""
    if mood is None:
        mood = prompt_mood()
    if note is None:
        note = click.prompt("Anything you'd like to reflect on?", default="", show_default=False)
    if tags is None:
        tags = click.prompt("Tags (comma-separated, optional)", default="", show_default=False)

    entry = store.append(MoodEntry.new(mood, note=note.strip(), tags=split_tags(tags)))
    console.print("\n[green]✅ Mood logged.[/] Thank you for checking in.\n")
    return entry


@click.command("check-in")
@click.option(
    "-m", "--mood", type=click.Choice(MOOD_CHOICES, case_sensitive=False), help="Mood (skips prompt)"
)
@click.option("-n", "--note", help="Reflection note (skips prompt)")
@click.option("-t", "--tags", help="Comma-separated tags (skips prompt)")
@command_boundary
def check_in(mood: Optional[str], note: Optional[str], tags: Optional[str]):
    """Record your current mood."""
    c = get_components()
    run_check_in(c["entries"], mood=parse_mood(mood) if mood else None, note=note, tags=tags)
