"""Shared CLI utilities."""

from pathlib import Path
from typing import Optional


def get_components(profile: Optional[str] = None):
    """Initialize storage and analyzer from config.

    Args:
        profile: Lexicon profile overriding the configured one
    """
    from cli.config import get_paths, load_config_model
    from journal.analyzer import get_analyzer
    from journal.storage import JournalStorage

    config_model = load_config_model()
    config = config_model.to_dict()
    paths = get_paths(config)

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "storage": JournalStorage(paths["journal_dir"]),
        "analyzer": get_analyzer(profile or config_model.analysis.profile),
    }


def resolve_journal_path(journal_dir: Path, filename: str) -> Optional[Path]:
    """Resolve a journal file by name or partial name.

    Returns resolved Path if valid and found, None otherwise.
    """
    journal_dir = journal_dir.resolve()
    filepath = (journal_dir / filename).resolve()

    if not filepath.is_relative_to(journal_dir):
        return None

    if filepath.exists():
        return filepath

    # Glob fallback for partial match
    matches = sorted(
        m for m in journal_dir.glob(f"*{filename}*") if m.resolve().is_relative_to(journal_dir)
    )
    return matches[0] if matches else None
