"""Counter store protocol for swappable backends.

The store abstracts the in-memory counters, so the Persistence Manager and the
Lifecycle Adapter depend on this interface rather than on LocalCounterStore.

Usage:
    store = LocalCounterStore()
    manager = PersistenceManager(store, settings)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from datatracker.core.identity import DimensionId, PlayerId
from datatracker.core.types import DimensionEventKind, PlayerEventKind
from datatracker.storage.models import TrackerState


@runtime_checkable
class CounterStore(Protocol):
    """Abstract counter store. Reads never fail; absent keys read as 0."""

    def record_server_start(self) -> None:
        """Increment the server start counter."""
        ...

    def record_dimension_load(self, dimension: DimensionId) -> None:
        """Increment the load counter of a dimension."""
        ...

    def get_server_start_count(self) -> int:
        """Get number of recorded server starts."""
        ...

    def get_dimension_load_count(self, dimension: DimensionId) -> int:
        """Get number of recorded loads for a dimension."""
        ...

    def get_player_event_count(self, player: PlayerId, kind: PlayerEventKind) -> int:
        """Get a per-player event counter."""
        ...

    def increment_player_event_count(self, player: PlayerId, kind: PlayerEventKind) -> None:
        """Increment a per-player event counter."""
        ...

    def get_player_dimension_event_count(
        self, player: PlayerId, dimension: DimensionId, kind: DimensionEventKind
    ) -> int:
        """Get a per-player, per-dimension event counter."""
        ...

    def increment_player_dimension_event_count(
        self, player: PlayerId, dimension: DimensionId, kind: DimensionEventKind
    ) -> None:
        """Increment a per-player, per-dimension event counter."""
        ...

    def player_ids(self) -> Iterator[PlayerId]:
        """Iterate all player identities with a record."""
        ...

    @property
    def is_dirty(self) -> bool:
        """Whether in-memory state diverged from the last successful write."""
        ...

    @property
    def revision(self) -> int:
        """Mutation counter, bumped on every increment."""
        ...

    def mark_clean(self, revision: int | None = None) -> None:
        """Clear the dirty flag if nothing changed since `revision`."""
        ...

    def snapshot(self) -> TrackerState:
        """Get an independent copy of the current state."""
        ...

    def replace_state(self, state: TrackerState) -> None:
        """Replace all counters with a loaded state."""
        ...

    def reset(self) -> None:
        """Discard all counters."""
        ...
