"""Configuration models for PoseSandbox."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from posesandbox.core.poses.presets import PresetConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout when None)")


class NotificationConfig(BaseModel):
    """Fallback toast duration for messages sent without one.

    Messages that carry their own duration (e.g. the preset no-match toast)
    keep it.
    """

    model_config = ConfigDict(extra="forbid")

    default_duration_ms: int = Field(default=1600, gt=0)


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    gallery_dir: str = Field(default="gallery", description="Directory gallery root")
    presets: PresetConfig = Field(default_factory=PresetConfig)

    @classmethod
    def default_path(cls) -> Path:
        return Path("posesandbox.yaml")
