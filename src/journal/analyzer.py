"""Mood analysis entry point and backends.

Callers go through :func:`analyze` (or :func:`analyze_text` when they cannot
await). Both are the recovery boundary: a backend failure is logged and turned
into the neutral default, so saving an entry is never blocked by analysis.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

import structlog

from .lexicon import DEFAULT_PROFILE, EMOTION_LEXICON, Lexicon, get_lexicon
from .sentiment import extract_keywords, extract_topics, score_mood

logger = structlog.get_logger()


@dataclass(frozen=True)
class AnalysisResult:
    """Mood, intensity, topics and keywords for one piece of text."""

    mood: str
    score: float
    topics: tuple[str, ...]
    keywords: tuple[str, ...] = ()

    @classmethod
    def neutral(cls, lexicon: Lexicon = EMOTION_LEXICON) -> "AnalysisResult":
        return cls(
            mood=lexicon.neutral_label,
            score=lexicon.neutral_score,
            topics=(lexicon.fallback_topic,),
        )

    def to_dict(self) -> dict:
        return {
            "mood": str(self.mood),
            "score": self.score,
            "topics": list(self.topics),
            "keywords": list(self.keywords),
        }


class MoodAnalyzer(ABC):
    """Abstract analysis backend.

    ``analyze`` is a coroutine so a remote model can replace the lexicon
    backend without changing any caller.
    """

    lexicon: Lexicon = EMOTION_LEXICON

    @abstractmethod
    async def analyze(self, text: str) -> AnalysisResult:
        """Analyze text. May raise; the module-level boundary handles it."""

    def fallback_result(self) -> AnalysisResult:
        return AnalysisResult.neutral(self.lexicon)


class LexiconMoodAnalyzer(MoodAnalyzer):
    """Deterministic dictionary-based backend."""

    def __init__(self, lexicon: Lexicon = EMOTION_LEXICON):
        self.lexicon = lexicon

    def analyze_sync(self, text: str) -> AnalysisResult:
        label, score = score_mood(text, self.lexicon)
        return AnalysisResult(
            mood=label,
            score=score,
            topics=tuple(extract_topics(text, self.lexicon)),
            keywords=tuple(extract_keywords(text, self.lexicon)),
        )

    async def analyze(self, text: str) -> AnalysisResult:
        return self.analyze_sync(text)

    def __repr__(self) -> str:
        return f"LexiconMoodAnalyzer(profile={self.lexicon.name!r})"


@lru_cache(maxsize=None)
def get_analyzer(profile: str = DEFAULT_PROFILE) -> LexiconMoodAnalyzer:
    """Shared lexicon analyzer for a profile (stateless, thread-safe)."""
    return LexiconMoodAnalyzer(get_lexicon(profile))


def _recover(analyzer: MoodAnalyzer, text: str, exc: Exception) -> AnalysisResult:
    logger.warning(
        "mood_analysis.failed",
        analyzer=repr(analyzer),
        error_type=type(exc).__name__,
        error=str(exc),
        text_length=len(text) if isinstance(text, str) else None,
    )
    return analyzer.fallback_result()


async def analyze(text: str, analyzer: Optional[MoodAnalyzer] = None) -> AnalysisResult:
    """Analyze entry text; always returns a result.

    Args:
        text: Raw entry text (may be empty)
        analyzer: Backend to use, defaults to the emotion lexicon

    Returns:
        AnalysisResult, or the neutral default if the backend failed
    """
    analyzer = analyzer or get_analyzer()
    try:
        return await analyzer.analyze(text)
    except Exception as e:
        return _recover(analyzer, text, e)


def analyze_text(text: str, analyzer: Optional[LexiconMoodAnalyzer] = None) -> AnalysisResult:
    """Synchronous variant of :func:`analyze` for non-async callers."""
    analyzer = analyzer or get_analyzer()
    try:
        return analyzer.analyze_sync(text)
    except Exception as e:
        return _recover(analyzer, text, e)
