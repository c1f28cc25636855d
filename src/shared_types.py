"""Shared enums and types for moodlog."""

from enum import StrEnum


class Mood(StrEnum):
    HAPPY = "Happy"
    MEH = "Meh"
    SAD = "Sad"
    ANGRY = "Angry"
    ANXIOUS = "Anxious"
    GRATEFUL = "Grateful"
    OTHER = "Other"


MOOD_EMOJI = {
    Mood.HAPPY: "😃",
    Mood.MEH: "😐",
    Mood.SAD: "😞",
    Mood.ANGRY: "😠",
    Mood.ANXIOUS: "😰",
    Mood.GRATEFUL: "✨",
    Mood.OTHER: "💭",
}


class MoodlogError(ValueError):
    """Base for user-facing reference errors (bad entry number, bad filter)."""


def mood_label(mood: str) -> str:
    """Mood with its emoji prefix; free-form labels are returned as-is."""
    emoji = MOOD_EMOJI.get(mood)
    return f"{emoji} {mood}" if emoji else mood
