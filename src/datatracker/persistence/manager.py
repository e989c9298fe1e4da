"""Persistence manager: locating, loading and atomically saving the data file.

Files, relative to the storage root:
    <namespace>/data_tracker.<ext>      canonical file
    <namespace>/data_tracker.<ext>.tmp  staging file for the next save
    <namespace>/dim_loads.<ext>         legacy file, read-only fallback

Usage:
    manager = PersistenceManager(store, TrackerSettings())
    manager.read_from_disk(world_dir)
    ...
    manager.save()
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from datatracker.codec import TagFormatError, dumps, loads
from datatracker.config import TrackerSettings
from datatracker.persistence.models import ErrorKind, LoadResult, OperationStatus, SaveResult
from datatracker.storage.protocol import CounterStore

logger = logging.getLogger(__name__)

DATA_FILE_STEM = "data_tracker"
LEGACY_FILE_STEM = "dim_loads"


class PersistenceManager:
    """Loads and saves one CounterStore under a storage root.

    Both operations are gated by `settings.enable_data_tracking`, and save is
    further gated by the store's dirty flag. Neither raises: failures are
    logged as warnings and returned as FAILED results, with the dirty flag
    left set so a later save retries.

    Args:
        store: Counter store to hydrate and persist.
        settings: Tracking configuration. Defaults to TrackerSettings().
    """

    def __init__(self, store: CounterStore, settings: TrackerSettings | None = None):
        self._store = store
        self._settings = settings or TrackerSettings()
        self._root: Path | None = self._settings.storage_root

    @property
    def enabled(self) -> bool:
        return self._settings.enable_data_tracking

    @property
    def root(self) -> Path | None:
        """Storage root of the active world, if known."""
        return self._root

    @property
    def data_dir(self) -> Path | None:
        if self._root is None:
            return None
        return self._root / self._settings.namespace

    def _file(self, stem: str) -> Path | None:
        data_dir = self.data_dir
        if data_dir is None:
            return None
        return data_dir / f"{stem}.{self._settings.file_extension}"

    @property
    def canonical_path(self) -> Path | None:
        return self._file(DATA_FILE_STEM)

    @property
    def legacy_path(self) -> Path | None:
        return self._file(LEGACY_FILE_STEM)

    @property
    def temp_path(self) -> Path | None:
        canonical = self.canonical_path
        return canonical.with_name(canonical.name + ".tmp") if canonical is not None else None

    def read_from_disk(self, root: Path | str | None = None) -> LoadResult:
        """Replace the store's counters with the persisted state.

        The canonical file is preferred; if it does not exist the legacy file
        is read instead. The legacy file is never renamed or removed, the
        next save simply writes the canonical file next to it.

        Args:
            root: Storage root of the world being loaded. None keeps the
                current root (from settings or a previous call).

        Returns:
            LOADED, MISSING (first run), DISABLED, or FAILED. On FAILED the
            store is left empty.
        """
        if not self.enabled:
            logger.debug("Data tracking disabled, not reading tracker data")
            return LoadResult(OperationStatus.DISABLED)

        # Old counters are dropped even when no file exists
        self._store.reset()
        if root is not None:
            self._root = Path(root)

        canonical = self.canonical_path
        legacy = self.legacy_path
        if canonical is None or legacy is None:
            logger.warning("No storage root configured, tracker data not loaded")
            return LoadResult(
                OperationStatus.FAILED,
                error_kind=ErrorKind.CONFIG,
                error="no storage root",
            )

        path, is_legacy = canonical, False
        if not canonical.is_file():
            path, is_legacy = legacy, True

        if not path.is_file():
            logger.debug("No tracker data file under '%s', starting empty", self.data_dir)
            return LoadResult(OperationStatus.MISSING, path=canonical)

        try:
            state = loads(path.read_bytes())
        except OSError as e:
            logger.warning("Failed to read tracker data from file '%s': %s", path, e)
            return LoadResult(
                OperationStatus.FAILED, path=path, error_kind=ErrorKind.IO, error=str(e)
            )
        except (ValueError, ArithmeticError, RecursionError) as e:
            logger.warning("Failed to decode tracker data from file '%s': %s", path, e)
            return LoadResult(
                OperationStatus.FAILED, path=path, error_kind=ErrorKind.DECODE, error=str(e)
            )

        self._store.replace_state(state)
        if is_legacy:
            logger.info("Read tracker data from legacy file '%s'", path)
        return LoadResult(OperationStatus.LOADED, path=path, legacy=is_legacy)

    def save(self) -> SaveResult:
        """Write the store to disk if it has unsaved changes.

        The state is written to the temp file, flushed and synced, and then
        moved over the canonical file in one replace, so the canonical file
        always holds either the previous or the new complete state.

        Returns:
            SAVED, SKIPPED (clean store), DISABLED, or FAILED.
        """
        if not self.enabled:
            return SaveResult(OperationStatus.DISABLED)
        if not self._store.is_dirty:
            return SaveResult(OperationStatus.SKIPPED, path=self.canonical_path)

        data_dir, canonical, tmp = self.data_dir, self.canonical_path, self.temp_path
        if data_dir is None or canonical is None or tmp is None:
            logger.warning("No storage root configured, tracker data not saved")
            return SaveResult(
                OperationStatus.FAILED, error_kind=ErrorKind.CONFIG, error="no storage root"
            )

        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(
                "Failed to create a directory for storing the data tracker file '%s': %s",
                data_dir,
                e,
            )
            return SaveResult(
                OperationStatus.FAILED, path=canonical, error_kind=ErrorKind.DIRECTORY, error=str(e)
            )

        revision = self._store.revision
        try:
            data = dumps(self._store.snapshot())
        except TagFormatError as e:
            logger.warning("Failed to encode tracker data: %s", e)
            return SaveResult(
                OperationStatus.FAILED, path=canonical, error_kind=ErrorKind.ENCODE, error=str(e)
            )

        try:
            with tmp.open("wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(canonical)
        except OSError as e:
            logger.warning("Failed to write tracker data to file '%s': %s", canonical, e)
            self._discard_temp(tmp)
            return SaveResult(
                OperationStatus.FAILED, path=canonical, error_kind=ErrorKind.IO, error=str(e)
            )

        self._store.mark_clean(revision)
        logger.debug("Saved tracker data to '%s' (%d bytes)", canonical, len(data))
        return SaveResult(OperationStatus.SAVED, path=canonical)

    def _discard_temp(self, tmp: Path) -> None:
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp, exc_info=True)
