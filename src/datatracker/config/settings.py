"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
tracker.

Usage:
    from datatracker.config import TrackerSettings

    # Load from environment variables (DATATRACKER_*)
    settings = TrackerSettings()

    # Or override with explicit values
    settings = TrackerSettings(enable_data_tracking=False)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for data tracking and its storage.

    Attributes:
        enable_data_tracking: Gates both reading and writing the data file.
        storage_root: World/save directory holding the namespace directory.
            Usually supplied per world by the host when a session is opened.
        namespace: Directory name under the storage root.
        file_extension: Extension of the data file (without the dot).

    Environment Variables:
        DATATRACKER_ENABLE_DATA_TRACKING
        DATATRACKER_STORAGE_ROOT
        DATATRACKER_NAMESPACE
        DATATRACKER_FILE_EXTENSION
    """

    model_config = SettingsConfigDict(
        env_prefix="DATATRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enable_data_tracking: bool = True
    storage_root: Path | None = None
    namespace: str = "worldprimer"
    file_extension: str = "nbt"

    @field_validator("namespace", "file_extension")
    @classmethod
    def _plain_segment(cls, value: str) -> str:
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(f"must be a plain path segment, got {value!r}")
        return value
