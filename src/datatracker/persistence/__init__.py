"""Persistence: load with legacy fallback, atomic save gated by the dirty flag."""

from datatracker.persistence.manager import DATA_FILE_STEM, LEGACY_FILE_STEM, PersistenceManager
from datatracker.persistence.models import ErrorKind, LoadResult, OperationStatus, SaveResult

__all__ = [
    "PersistenceManager",
    "LoadResult",
    "SaveResult",
    "OperationStatus",
    "ErrorKind",
    "DATA_FILE_STEM",
    "LEGACY_FILE_STEM",
]
