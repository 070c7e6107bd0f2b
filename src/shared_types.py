"""Shared enums and types for mood-journal."""

from enum import StrEnum


class MoodLabel(StrEnum):
    JOY = "joy"
    SADNESS = "sadness"
    ANGER = "anger"
    FEAR = "fear"
    NEUTRAL = "neutral"


class PolarityLabel(StrEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class EntryType(StrEnum):
    DAILY = "daily"
    REFLECTION = "reflection"
    GRATITUDE = "gratitude"
    GOAL = "goal"
    NOTE = "note"
