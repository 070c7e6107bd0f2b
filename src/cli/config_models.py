"""Pydantic configuration models for mood-journal."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from journal.lexicon import DEFAULT_PROFILE, PROFILES

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class PathsConfig(BaseModel):
    """File paths configuration."""

    journal_dir: Path = Path("~/mood-journal/entries")
    log_file: Path = Path("~/mood-journal/mood-journal.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.journal_dir = self.journal_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class AnalysisConfig(BaseModel):
    """Mood analysis configuration."""

    profile: str = DEFAULT_PROFILE
    history_days: int = 30

    @field_validator("profile")
    @classmethod
    def validate_profile(cls, v: str) -> str:
        if v not in PROFILES:
            raise ValueError(f"Invalid lexicon profile: {v}. Must be one of {set(PROFILES)}")
        return v

    @field_validator("history_days")
    @classmethod
    def validate_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"history_days must be positive, got {v}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    json_mode: bool = Field(default=False, alias="json")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodJournalConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodJournalConfig":
        """Create config from dict (as loaded from YAML)."""
        if "paths" in data:
            for key in ["journal_dir", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])
        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python", by_alias=True)
