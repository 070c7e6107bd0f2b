"""Simple keyword-based mood, topic and keyword extraction for journal entries."""

import re
from collections import Counter

from .lexicon import EMOTION_LEXICON, Lexicon

_NON_WORD = re.compile(r"\W+")


def score_mood(text: str, lexicon: Lexicon = EMOTION_LEXICON) -> tuple[str, float]:
    """Score text against the mood lexicon.

    Each trigger word counts once if it appears anywhere in the text, so
    repeating a word does not raise the score. Neutral holds a fixed baseline
    and wins whenever no other label beats it. On equal counts the label
    declared later in the lexicon wins.

    Returns:
        (label, score) with score in [0, 1]
    """
    lowered = text.lower()

    best_label = lexicon.neutral_label
    best_count = 0
    for label, triggers in lexicon.moods.items():
        count = sum(1 for word in triggers if word in lowered)
        if count > 0 and count >= best_count:
            best_label, best_count = label, count

    if best_count <= lexicon.neutral_baseline:
        return lexicon.neutral_label, lexicon.neutral_score

    return best_label, min(best_count / lexicon.saturation, 1.0)


def extract_topics(text: str, lexicon: Lexicon = EMOTION_LEXICON) -> list[str]:
    """Topics whose trigger words appear in the text, in lexicon order."""
    lowered = text.lower()
    topics = [
        topic
        for topic, triggers in lexicon.topics.items()
        if any(word in lowered for word in triggers)
    ]
    return topics or [lexicon.fallback_topic]


def extract_keywords(text: str, lexicon: Lexicon = EMOTION_LEXICON) -> list[str]:
    """Most frequent significant tokens, ties kept in first-seen order."""
    tokens = _NON_WORD.split(text.lower())
    counts = Counter(
        token
        for token in tokens
        if len(token) >= lexicon.min_keyword_length and token not in lexicon.stop_words
    )
    # most_common() sorts stably, so equal counts keep insertion order
    return [word for word, _ in counts.most_common()[: lexicon.max_keywords]]
