"""Configuration loading."""

from pathlib import Path
from typing import Optional

import yaml

from .config_models import MoodJournalConfig

# Default config dict
DEFAULT_CONFIG = MoodJournalConfig().to_dict()


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".mood-journal" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config_model(config_path: Optional[Path] = None) -> MoodJournalConfig:
    """Load configuration as Pydantic model with validation.

    Raises:
        ValueError: On invalid YAML or failed validation
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return MoodJournalConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def get_paths(config: dict) -> dict:
    """Get expanded paths from config."""
    paths = config.get("paths", DEFAULT_CONFIG["paths"])
    return {
        "journal_dir": Path(paths["journal_dir"]).expanduser(),
        "log_file": Path(paths.get("log_file", DEFAULT_CONFIG["paths"]["log_file"])).expanduser(),
    }
