"""Result models for persistence operations.

Load and save never raise into the host. They report what happened through
these values; the manager logs failures before returning them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class OperationStatus(Enum):
    """Outcome of a load or save call."""

    LOADED = auto()
    """A data file was read and the store hydrated from it."""

    MISSING = auto()
    """No data file exists yet. The store is empty (first run)."""

    SAVED = auto()
    """The canonical file was replaced with the current state."""

    SKIPPED = auto()
    """Nothing to save: the store is clean."""

    DISABLED = auto()
    """Data tracking is turned off; nothing was read or written."""

    FAILED = auto()
    """An error was caught and logged. See ErrorKind."""


class ErrorKind(Enum):
    """Category of a caught persistence failure."""

    CONFIG = auto()  # no storage root known
    DIRECTORY = auto()  # data directory could not be created
    IO = auto()  # read, write, or rename failed
    DECODE = auto()  # file is corrupt, truncated, or not a tag tree
    ENCODE = auto()  # state could not be represented on disk


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Result of PersistenceManager.read_from_disk().

    Attributes:
        status: LOADED, MISSING, DISABLED or FAILED.
        path: File that was read (or would have been read).
        error_kind: Failure category when status is FAILED.
        error: Failure message when status is FAILED.
        legacy: True if the path is the legacy fallback file.
    """

    status: OperationStatus
    path: Path | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None
    legacy: bool = False

    @property
    def ok(self) -> bool:
        return self.status is not OperationStatus.FAILED


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Result of PersistenceManager.save().

    Attributes:
        status: SAVED, SKIPPED, DISABLED or FAILED.
        path: Canonical file path, when known.
        error_kind: Failure category when status is FAILED.
        error: Failure message when status is FAILED.
    """

    status: OperationStatus
    path: Path | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not OperationStatus.FAILED
