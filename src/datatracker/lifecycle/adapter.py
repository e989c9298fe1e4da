"""Event-facing adapter over a counter store.

Host event hooks call these methods; each one is a single increment on the
store. Persisting is left to the owning TrackerSession.
"""

from __future__ import annotations

from uuid import UUID

from datatracker.core.types import DimensionEventKind, PlayerEventKind
from datatracker.storage.protocol import CounterStore


class LifecycleAdapter:
    """Translates game lifecycle events into counter increments."""

    def __init__(self, store: CounterStore):
        self._store = store

    @property
    def store(self) -> CounterStore:
        return self._store

    def on_server_start(self) -> None:
        self._store.record_server_start()

    def on_dimension_load(self, dimension: int) -> None:
        self._store.record_dimension_load(dimension)

    def on_player_join(self, player: UUID) -> None:
        self._store.increment_player_event_count(player, PlayerEventKind.JOIN)

    def on_player_quit(self, player: UUID) -> None:
        self._store.increment_player_event_count(player, PlayerEventKind.QUIT)

    def on_player_death(self, player: UUID) -> None:
        self._store.increment_player_event_count(player, PlayerEventKind.DEATH)

    def on_player_respawn(self, player: UUID) -> None:
        self._store.increment_player_event_count(player, PlayerEventKind.RESPAWN)

    def on_player_enter_dimension(self, player: UUID, dimension: int) -> None:
        self._store.increment_player_dimension_event_count(
            player, dimension, DimensionEventKind.ENTER
        )

    def on_player_leave_dimension(self, player: UUID, dimension: int) -> None:
        self._store.increment_player_dimension_event_count(
            player, dimension, DimensionEventKind.LEAVE
        )
