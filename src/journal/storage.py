"""Markdown journal entries with YAML frontmatter."""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import frontmatter
import structlog
import yaml

from shared_types import EntryType

logger = structlog.get_logger()

ALLOWED_ENTRY_TYPES = tuple(EntryType)
MAX_CONTENT_LENGTH = 100_000  # 100KB
MAX_TAG_LENGTH = 50
MAX_TAGS = 20


def _sanitize_slug(text: str) -> str:
    """Sanitize text into safe filename slug. Only [a-z0-9-] allowed."""
    slug = text.lower().replace(" ", "-")
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug[:50]


def _sanitize_tag(tag: str) -> str:
    return re.sub(r"[^\w\s-]", "", tag).strip()[:MAX_TAG_LENGTH]


class JournalStorage:
    """Reads and writes journal entries as markdown files."""

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _validate_path(self, filepath: str | Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        filepath = Path(filepath)
        if not filepath.is_absolute():
            filepath = self.journal_dir / filepath
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def create(
        self,
        content: str,
        entry_type: str = "daily",
        title: Optional[str] = None,
        tags: Optional[list[str]] = None,
        metadata: Optional[dict] = None,
        created: Optional[datetime] = None,
    ) -> Path:
        """Create new journal entry.

        Args:
            content: Main body text
            entry_type: One of EntryType
            title: Optional title (defaults to date)
            tags: Optional list of tags
            metadata: Additional frontmatter fields
            created: Creation time (defaults to now)

        Returns:
            Path to created file

        Raises:
            ValueError: If entry_type invalid, content too long, or path escapes journal dir
        """
        if entry_type not in ALLOWED_ENTRY_TYPES:
            raise ValueError(
                f"Invalid entry_type '{entry_type}'. Must be one of {ALLOWED_ENTRY_TYPES}"
            )
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        created = created or datetime.now()
        title = title or created.strftime("%B %d, %Y")
        if tags:
            tags = [_sanitize_tag(t) for t in tags[:MAX_TAGS] if t.strip()]

        post = frontmatter.Post(content)
        post["title"] = title
        post["type"] = entry_type
        post["created"] = created.isoformat()
        post["tags"] = tags or []
        for k, v in (metadata or {}).items():
            post[k] = v

        filename = f"{created:%Y-%m-%d}_{_sanitize_slug(entry_type)}_{_sanitize_slug(title)}.md"
        filepath = self._validate_path(filename)

        counter = 1
        while filepath.exists():
            base = filename.rsplit(".", 1)[0]
            filepath = self._validate_path(f"{base}_{counter}.md")
            counter += 1

        filepath.write_text(frontmatter.dumps(post))
        logger.debug("journal.entry_created", path=filepath.name, type=entry_type)
        return filepath

    def read(self, filepath: str | Path) -> Optional[frontmatter.Post]:
        """Read journal entry, None if it does not exist."""
        filepath = self._validate_path(filepath)
        if not filepath.exists():
            return None
        return frontmatter.load(filepath)

    def update(
        self,
        filepath: str | Path,
        content: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> Path:
        """Update body and/or frontmatter of an existing entry."""
        filepath = self._validate_path(filepath)
        post = frontmatter.load(filepath)

        if content is not None:
            post.content = content
        for k, v in (metadata or {}).items():
            post[k] = v
        post["updated"] = datetime.now().isoformat()

        filepath.write_text(frontmatter.dumps(post))
        return filepath

    def list_entries(
        self,
        entry_type: Optional[str] = None,
        tags: Optional[list[str]] = None,
        limit: int = 50,
    ) -> list[dict]:
        """List entries newest first, with optional type/tag filtering."""
        entries = []
        for record in self.load_records():
            if entry_type and record["type"] != entry_type:
                continue
            if tags and not any(t in record["tags"] for t in tags):
                continue
            record["preview"] = record.pop("content")[:200]
            entries.append(record)
            if len(entries) >= limit:
                break
        return entries

    def load_records(self) -> list[dict]:
        """All entries as plain dicts, newest file first, including content."""
        records = []
        for f in sorted(self.journal_dir.glob("*.md"), reverse=True):
            try:
                post = frontmatter.load(f)
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("journal.unreadable_entry", path=f.name, error=str(e))
                continue
            records.append(
                {
                    **post.metadata,
                    "path": f,
                    "title": post.get("title", f.stem),
                    "type": post.get("type", "unknown"),
                    "created": post.get("created"),
                    "tags": post.get("tags", []),
                    "content": post.content or "",
                }
            )
        return records
