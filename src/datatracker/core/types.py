"""Core type definitions for datatracker."""

from __future__ import annotations

from enum import Enum, auto


class PlayerEventKind(Enum):
    """Per-player scalar event counters."""

    JOIN = auto()
    QUIT = auto()
    DEATH = auto()
    RESPAWN = auto()


class DimensionEventKind(Enum):
    """Per-player, per-dimension event counters."""

    ENTER = auto()
    LEAVE = auto()
