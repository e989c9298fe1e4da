"""Tracker session: owned store, manager and adapter for one world.

A session replaces a process-wide singleton. The host opens one when a world
is loaded and closes it when the world is unloaded; opening the next world
builds fresh state.

Usage:
    with TrackerSession.open(world_dir) as session:
        session.events.on_server_start()
        session.save()  # periodic
    # close() saved the final state
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from datatracker.config import TrackerSettings
from datatracker.lifecycle.adapter import LifecycleAdapter
from datatracker.persistence import LoadResult, PersistenceManager, SaveResult
from datatracker.storage import CounterStore, LocalCounterStore

logger = logging.getLogger(__name__)


class TrackerSession:
    """Owns the tracker components for a single storage root.

    Args:
        store: Counter store owned by this session.
        manager: Persistence manager bound to the same store.
    """

    def __init__(self, store: CounterStore, manager: PersistenceManager):
        self._store = store
        self._manager = manager
        self._events = LifecycleAdapter(store)
        self._closed = False
        self.load_result: LoadResult | None = None

    @classmethod
    def open(
        cls,
        root: Path | str | None = None,
        settings: TrackerSettings | None = None,
        store: CounterStore | None = None,
    ) -> TrackerSession:
        """Create a session and load the persisted state for a world.

        Args:
            root: World/save directory. Defaults to settings.storage_root.
            settings: Tracking configuration (default: from environment).
            store: Store to own (default: a new LocalCounterStore).

        Returns:
            Session with its store hydrated from disk (or empty on first
            run, read failure, or when tracking is disabled).
        """
        store = store if store is not None else LocalCounterStore()
        session = cls(store, PersistenceManager(store, settings))
        session.load_result = session._manager.read_from_disk(root)
        return session

    @property
    def store(self) -> CounterStore:
        return self._store

    @property
    def events(self) -> LifecycleAdapter:
        return self._events

    @property
    def manager(self) -> PersistenceManager:
        return self._manager

    @property
    def closed(self) -> bool:
        return self._closed

    def save(self) -> SaveResult:
        return self._manager.save()

    def close(self) -> SaveResult | None:
        """Save a final time and release the session.

        Returns:
            Result of the final save, or None if already closed.
        """
        if self._closed:
            return None
        result = self._manager.save()
        self._closed = True
        logger.debug("Closed tracker session for '%s' (%s)", self._manager.root, result.status.name)
        return result

    def __enter__(self) -> TrackerSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
