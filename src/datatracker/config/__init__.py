"""Configuration module using Pydantic Settings.

Usage:
    from datatracker.config import TrackerSettings

    settings = TrackerSettings(namespace="worldprimer")
"""

from datatracker.config.settings import TrackerSettings

__all__ = [
    "TrackerSettings",
]
