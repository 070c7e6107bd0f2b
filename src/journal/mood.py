"""Mood timeline, stats and insights over caller-owned journal entries.

Entries are plain dicts (``title``, ``created``, ``content`` and optionally
``mood`` / ``ai_analysis`` from a previous :func:`merge_analysis`).
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from .analyzer import AnalysisResult, LexiconMoodAnalyzer, analyze_text, get_analyzer

IMPROVEMENT_WINDOW = 7


@dataclass
class MoodStats:
    average_mood: float = 0.0
    distribution: dict[str, int] = field(default_factory=dict)
    streak: int = 0
    last_entry_date: Optional[str] = None


def merge_analysis(entry: dict, result: AnalysisResult) -> dict:
    """Return a copy of entry with mood and ai_analysis fields set."""
    merged = dict(entry)
    merged["mood"] = {"type": str(result.mood), "score": result.score}
    merged["ai_analysis"] = {
        "sentiment_score": result.score,
        "detected_mood": str(result.mood),
        "topics": list(result.topics),
        "keywords": list(result.keywords),
    }
    return merged


def _entry_date(value) -> Optional[date]:
    """Coerce a created field (datetime, date or ISO string) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def mood_history(
    entries: Iterable[dict],
    days: int = 30,
    analyzer: Optional[LexiconMoodAnalyzer] = None,
    today: Optional[date] = None,
) -> list[dict]:
    """Get mood timeline from journal entries.

    Returns list of {date, mood, score, title} sorted by date.
    """
    analyzer = analyzer or get_analyzer()
    today = today or date.today()
    cutoff = today - timedelta(days=days)

    timeline = []
    for entry in entries:
        entry_date = _entry_date(entry.get("created"))
        if entry_date is None or not cutoff <= entry_date <= today:
            continue

        # Use stored mood if already computed
        stored = entry.get("mood")
        if isinstance(stored, dict) and stored.get("type"):
            label = str(stored["type"])
            score = stored.get("score")
            # Hand-edited frontmatter may carry null or text scores
            if isinstance(score, bool) or not isinstance(score, (int, float)):
                score = analyzer.lexicon.neutral_score
            score = float(score)
        else:
            result = analyze_text(entry.get("content") or "", analyzer)
            label, score = str(result.mood), result.score

        timeline.append(
            {
                "date": entry_date.isoformat(),
                "mood": label,
                "score": score,
                "title": entry.get("title", ""),
            }
        )

    timeline.sort(key=lambda x: x["date"])
    return timeline


def mood_distribution(timeline: list[dict], labels: Optional[Iterable[str]] = None) -> dict[str, int]:
    """Count entries per mood label. Every known label is present."""
    if labels is None:
        labels = get_analyzer().lexicon.labels
    counts = {str(label): 0 for label in labels}
    for item in timeline:
        counts[item["mood"]] = counts.get(item["mood"], 0) + 1
    return counts


def dominant_mood(distribution: dict[str, int]) -> Optional[str]:
    """Most frequent label; the earlier label wins a tie."""
    best, best_count = None, 0
    for label, count in distribution.items():
        if count > best_count:
            best, best_count = label, count
    return best


def journaling_streak(dates: Iterable, today: Optional[date] = None) -> int:
    """Consecutive days with an entry, counting back from today."""
    today = today or date.today()
    seen = {d for d in (_entry_date(v) for v in dates) if d is not None}

    streak = 0
    current = today
    while current in seen:
        streak += 1
        current -= timedelta(days=1)
    return streak


def compute_mood_stats(
    timeline: list[dict],
    today: Optional[date] = None,
    labels: Optional[Iterable[str]] = None,
) -> MoodStats:
    if not timeline:
        return MoodStats(distribution=mood_distribution([], labels))

    scores = [item["score"] for item in timeline]
    return MoodStats(
        average_mood=round(sum(scores) / len(scores), 2),
        distribution=mood_distribution(timeline, labels),
        streak=journaling_streak((item["date"] for item in timeline), today),
        last_entry_date=max(item["date"] for item in timeline),
    )


def mood_insights(
    timeline: list[dict],
    today: Optional[date] = None,
    labels: Optional[Iterable[str]] = None,
) -> list[dict]:
    """Human-readable insights: dominant mood, streak, week-over-week change."""
    stats = compute_mood_stats(timeline, today, labels)
    insights = []

    dominant = dominant_mood(stats.distribution)
    if dominant:
        insights.append(
            {"title": "Dominant Mood", "description": f"Your most frequent mood is {dominant}."}
        )

    if stats.streak > 0:
        insights.append(
            {
                "title": "Journaling Streak",
                "description": f"You've been journaling for {stats.streak} days in a row!",
            }
        )

    scores = [item["score"] for item in timeline]
    recent = scores[-IMPROVEMENT_WINDOW:]
    previous = scores[-2 * IMPROVEMENT_WINDOW : -IMPROVEMENT_WINDOW]
    if recent and previous and sum(recent) / len(recent) > sum(previous) / len(previous):
        insights.append(
            {
                "title": "Mood Improvement",
                "description": "Your mood has been improving over the last week!",
            }
        )

    return insights
