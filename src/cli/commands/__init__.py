"""CLI command modules."""

from .analysis import analyze, annotate
from .timeline import mood

__all__ = ["analyze", "annotate", "mood"]
