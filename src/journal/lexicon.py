"""Static keyword lexicons for mood, topic and keyword extraction.

Lexicons are plain immutable data. Swapping, localizing or extending one
never requires touching the matching code in ``journal.sentiment``.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from shared_types import MoodLabel, PolarityLabel

FALLBACK_TOPIC = "general"


def _freeze(table: dict[str, list[str]]) -> Mapping[str, frozenset[str]]:
    """Read-only mapping that keeps declaration order."""
    return MappingProxyType({key: frozenset(words) for key, words in table.items()})


@dataclass(frozen=True)
class Lexicon:
    """Trigger-word tables plus the scoring constants that go with them."""

    name: str
    moods: Mapping[str, frozenset[str]]
    neutral_label: str
    topics: Mapping[str, frozenset[str]]
    stop_words: frozenset[str]
    neutral_baseline: float = 0.2
    neutral_score: float = 0.5
    saturation: int = 3
    max_keywords: int = 5
    min_keyword_length: int = 4
    fallback_topic: str = FALLBACK_TOPIC

    @property
    def labels(self) -> tuple[str, ...]:
        """Every label this lexicon can produce, neutral last."""
        return (*self.moods.keys(), self.neutral_label)


TOPICS = _freeze(
    {
        "work": ["job", "office", "work", "career", "meeting", "project"],
        "health": ["exercise", "workout", "health", "run", "gym", "fitness"],
        "relationships": ["friend", "family", "partner", "date", "conversation"],
        "personal growth": ["learn", "goal", "improve", "progress", "habit"],
        "relaxation": ["rest", "sleep", "relax", "break", "vacation", "weekend"],
    }
)

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "with", "by", "about", "as", "i", "my", "me", "mine", "you", "your",
        "yours", "we", "our", "us", "they", "their", "them", "it", "its",
        "this", "that", "these", "those", "is", "am", "are", "was", "were",
        "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "will", "would", "shall", "should", "may", "might", "must", "can",
        "could", "just", "fine", "okay",
    }
)

EMOTION_LEXICON = Lexicon(
    name="emotion",
    moods=_freeze(
        {
            MoodLabel.JOY: ["happy", "joy", "exciting", "wonderful", "love", "great"],
            MoodLabel.SADNESS: ["sad", "unhappy", "miserable", "depressed", "disappointed"],
            MoodLabel.ANGER: ["angry", "furious", "annoyed", "frustrated", "hate"],
            MoodLabel.FEAR: ["afraid", "scared", "anxious", "worried", "nervous"],
        }
    ),
    neutral_label=MoodLabel.NEUTRAL,
    topics=TOPICS,
    stop_words=STOP_WORDS,
)

POLARITY_LEXICON = Lexicon(
    name="polarity",
    moods=_freeze(
        {
            PolarityLabel.POSITIVE: ["happy", "joy", "excited", "great", "wonderful", "love"],
            PolarityLabel.NEGATIVE: ["sad", "angry", "upset", "terrible", "hate", "awful"],
        }
    ),
    neutral_label=PolarityLabel.NEUTRAL,
    topics=TOPICS,
    stop_words=STOP_WORDS,
)

PROFILES: Mapping[str, Lexicon] = MappingProxyType(
    {lex.name: lex for lex in (EMOTION_LEXICON, POLARITY_LEXICON)}
)

DEFAULT_PROFILE = EMOTION_LEXICON.name


def get_lexicon(profile: str = DEFAULT_PROFILE) -> Lexicon:
    """Look up a lexicon profile by name.

    Raises:
        ValueError: If the profile is unknown
    """
    try:
        return PROFILES[profile]
    except KeyError:
        raise ValueError(
            f"Unknown lexicon profile '{profile}'. Must be one of {tuple(PROFILES)}"
        ) from None
