"""Local in-memory counter store.

Dict-based storage owned by a single storage root. Every public method takes
the store lock, so lazily creating a player record is safe even if callers
leave the host's single event thread.

Usage:
    store = LocalCounterStore()
    store.record_dimension_load(0)
    store.get_dimension_load_count(0)  # 1
"""

from __future__ import annotations

import copy as cp
import threading
from collections.abc import Iterator
from typing import Any

from datatracker.core.identity import DimensionId, PlayerId
from datatracker.core.types import DimensionEventKind, PlayerEventKind
from datatracker.storage.models import PlayerRecord, TrackerState


class LocalCounterStore:
    """In-memory counters with a dirty flag.

    Structure:
        _state.dimension_load_counts[dimension] = count
        _state.player_records[player] = PlayerRecord

    Args:
        state: Initial state to own (default: empty). The store keeps its own copy.
    """

    def __init__(self, state: TrackerState | None = None):
        self._lock = threading.RLock()
        self._state = cp.deepcopy(state) if state is not None else TrackerState()
        self._dirty = False
        self._revision = 0

    def _touch(self) -> None:
        self._dirty = True
        self._revision += 1

    def _get_or_create_record(self, player: PlayerId) -> PlayerRecord:
        record = self._state.player_records.get(player)
        if record is None:
            record = PlayerRecord()
            self._state.player_records[player] = record
        return record

    def record_server_start(self) -> None:
        """Increment the server start counter and mark the store dirty."""
        with self._lock:
            self._state.server_start_count += 1
            self._touch()

    def record_dimension_load(self, dimension: DimensionId) -> None:
        """Increment the load counter of a dimension.

        Args:
            dimension: Dimension that was loaded. Any int is a valid id.
        """
        with self._lock:
            counts = self._state.dimension_load_counts
            counts[dimension] = counts.get(dimension, 0) + 1
            self._touch()

    def get_server_start_count(self) -> int:
        with self._lock:
            return self._state.server_start_count

    def get_dimension_load_count(self, dimension: DimensionId) -> int:
        """Get number of recorded loads for a dimension, 0 if never loaded."""
        with self._lock:
            return self._state.dimension_load_counts.get(dimension, 0)

    def get_player_event_count(self, player: PlayerId, kind: PlayerEventKind) -> int:
        """Get a per-player event counter.

        Unlike the increment path this does not create a record for unseen
        players, so queries never grow the persisted state.

        Args:
            player: Player identity.
            kind: Which counter to read.

        Returns:
            The counter value, 0 if the player has no record.
        """
        with self._lock:
            record = self._state.player_records.get(player)
            return record.get_count(kind) if record is not None else 0

    def increment_player_event_count(self, player: PlayerId, kind: PlayerEventKind) -> None:
        """Increment a per-player event counter.

        Creates the player record on first use.

        Args:
            player: Player identity.
            kind: Which counter to increment.
        """
        with self._lock:
            self._get_or_create_record(player).increment_count(kind)
            self._touch()

    def get_player_dimension_event_count(
        self, player: PlayerId, dimension: DimensionId, kind: DimensionEventKind
    ) -> int:
        with self._lock:
            record = self._state.player_records.get(player)
            if record is None:
                return 0
            return record.get_dimension_event_count(dimension, kind)

    def increment_player_dimension_event_count(
        self, player: PlayerId, dimension: DimensionId, kind: DimensionEventKind
    ) -> None:
        """Increment a per-player, per-dimension event counter.

        Args:
            player: Player identity. The record is created on first use.
            dimension: Dimension entered or left.
            kind: ENTER or LEAVE.
        """
        with self._lock:
            self._get_or_create_record(player).increment_dimension_event_count(dimension, kind)
            self._touch()

    def player_ids(self) -> Iterator[PlayerId]:
        """Iterate all player identities with a record.

        Yields:
            Player identities, from a copy taken under the lock.
        """
        with self._lock:
            players = list(self._state.player_records)
        yield from players

    @property
    def is_dirty(self) -> bool:
        """Whether in-memory state diverged from the last successful write."""
        with self._lock:
            return self._dirty

    def mark_dirty(self) -> None:
        """Force the next save to write, even without new increments."""
        with self._lock:
            self._touch()

    @property
    def revision(self) -> int:
        """Mutation counter, bumped on every increment."""
        with self._lock:
            return self._revision

    def mark_clean(self, revision: int | None = None) -> None:
        """Clear the dirty flag after a confirmed write.

        Args:
            revision: Revision the written snapshot was taken at. If the store
                changed since then the flag stays set so the next save
                picks the newer counters up. None clears unconditionally.
        """
        with self._lock:
            if revision is None or revision == self._revision:
                self._dirty = False

    def snapshot(self) -> TrackerState:
        """Get a deep copy of the current state.

        Returns:
            TrackerState that shares no mutable structure with the store.
        """
        with self._lock:
            return cp.deepcopy(self._state)

    def replace_state(self, state: TrackerState) -> None:
        """Replace all counters with a loaded state.

        The store takes a copy, so the caller's object stays independent.
        The result matches what is on disk, so the dirty flag is cleared.

        Args:
            state: Decoded state to hydrate from.
        """
        with self._lock:
            self._state = cp.deepcopy(state)
            self._dirty = False

    def reset(self) -> None:
        """Discard all counters and clear the dirty flag."""
        with self._lock:
            self._state = TrackerState()
            self._dirty = False

    def to_dict(self) -> dict[str, Any]:
        """Convert all counters to a JSON-serializable dictionary."""
        with self._lock:
            return self._state.to_dict()
