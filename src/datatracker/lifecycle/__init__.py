"""Lifecycle integration: event adapter and per-world session ownership."""

from datatracker.lifecycle.adapter import LifecycleAdapter
from datatracker.lifecycle.session import TrackerSession

__all__ = [
    "LifecycleAdapter",
    "TrackerSession",
]
