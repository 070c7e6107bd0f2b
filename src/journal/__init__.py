from .analyzer import AnalysisResult, LexiconMoodAnalyzer, MoodAnalyzer, analyze, analyze_text
from .storage import JournalStorage

__all__ = [
    "AnalysisResult",
    "MoodAnalyzer",
    "LexiconMoodAnalyzer",
    "analyze",
    "analyze_text",
    "JournalStorage",
]
