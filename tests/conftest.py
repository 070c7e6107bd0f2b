"""Shared test fixtures for mood-journal."""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp journal directory and log file location."""
    journal_dir = tmp_path / "journal"
    journal_dir.mkdir()

    return {
        "journal_dir": journal_dir,
        "log_file": tmp_path / "logs" / "mood-journal.log",
    }


@pytest.fixture
def sample_journal_entries():
    """Pre-populated test journal entries, one per day ending today."""
    now = datetime.now()
    return [
        {
            "type": "daily",
            "title": "Good Day",
            "content": "I feel so happy and joyful today, what a wonderful day with family.",
            "tags": ["family"],
            "created": now,
        },
        {
            "type": "reflection",
            "title": "Work Stress",
            "content": "Anxious and worried about the project deadline at the office.",
            "tags": ["work"],
            "created": now - timedelta(days=1),
        },
        {
            "type": "note",
            "title": "Plain Note",
            "content": "Bought groceries.",
            "tags": [],
            "created": now - timedelta(days=2),
        },
    ]


@pytest.fixture
def populated_journal(temp_dirs, sample_journal_entries):
    """Journal storage with pre-populated entries."""
    from journal.storage import JournalStorage

    storage = JournalStorage(temp_dirs["journal_dir"])

    created_paths = []
    for entry in sample_journal_entries:
        path = storage.create(
            content=entry["content"],
            entry_type=entry["type"],
            title=entry["title"],
            tags=entry.get("tags"),
            created=entry["created"],
        )
        created_paths.append(path)

    return {"storage": storage, "paths": created_paths}
