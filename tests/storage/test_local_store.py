"""Tests for LocalCounterStore.

Why these tests exist:
- Getters must equal the exact number of increments per key, 0 when unseen
- Reads must not create records or mark the store dirty
- The dirty flag and revision drive whether and when saves happen
"""

import threading
from uuid import UUID

from hypothesis import given
from hypothesis import strategies as st

from datatracker import (
    CounterStore,
    DimensionEventKind,
    LocalCounterStore,
    PlayerEventKind,
    PlayerRecord,
    TrackerState,
)


def test_local_store_is_counter_store(store: LocalCounterStore) -> None:
    assert isinstance(store, CounterStore)


def test_new_store_is_empty_and_clean(store: LocalCounterStore) -> None:
    assert store.get_server_start_count() == 0
    assert store.get_dimension_load_count(0) == 0
    assert not store.is_dirty
    assert store.snapshot().is_empty()


def test_dimension_load_scenario(store: LocalCounterStore) -> None:
    """Three loads of 0 and one of -1; unseen dimension 7 reads 0."""
    for _ in range(3):
        store.record_dimension_load(0)
    store.record_dimension_load(-1)

    assert store.get_dimension_load_count(0) == 3
    assert store.get_dimension_load_count(-1) == 1
    assert store.get_dimension_load_count(7) == 0


def test_player_event_scenario(store: LocalCounterStore, player: UUID) -> None:
    store.increment_player_event_count(player, PlayerEventKind.JOIN)
    store.increment_player_event_count(player, PlayerEventKind.DEATH)
    store.increment_player_event_count(player, PlayerEventKind.DEATH)

    assert store.get_player_event_count(player, PlayerEventKind.JOIN) == 1
    assert store.get_player_event_count(player, PlayerEventKind.DEATH) == 2
    assert store.get_player_event_count(player, PlayerEventKind.QUIT) == 0
    assert store.get_player_event_count(player, PlayerEventKind.RESPAWN) == 0


def test_players_are_independent(store: LocalCounterStore, player: UUID, other_player: UUID) -> None:
    store.increment_player_event_count(player, PlayerEventKind.RESPAWN)

    assert store.get_player_event_count(player, PlayerEventKind.RESPAWN) == 1
    assert store.get_player_event_count(other_player, PlayerEventKind.RESPAWN) == 0


def test_dimension_events_split_by_kind(store: LocalCounterStore, player: UUID) -> None:
    store.increment_player_dimension_event_count(player, 1, DimensionEventKind.ENTER)
    store.increment_player_dimension_event_count(player, 1, DimensionEventKind.ENTER)
    store.increment_player_dimension_event_count(player, 1, DimensionEventKind.LEAVE)

    assert store.get_player_dimension_event_count(player, 1, DimensionEventKind.ENTER) == 2
    assert store.get_player_dimension_event_count(player, 1, DimensionEventKind.LEAVE) == 1
    assert store.get_player_dimension_event_count(player, 0, DimensionEventKind.ENTER) == 0


def test_reads_do_not_create_records(store: LocalCounterStore, player: UUID) -> None:
    """Querying an unseen player leaves no trace in state or dirty flag."""
    store.get_player_event_count(player, PlayerEventKind.JOIN)
    store.get_player_dimension_event_count(player, 0, DimensionEventKind.ENTER)

    assert list(store.player_ids()) == []
    assert not store.is_dirty


def test_increment_creates_record_lazily(store: LocalCounterStore, player: UUID) -> None:
    store.increment_player_dimension_event_count(player, -1, DimensionEventKind.LEAVE)

    assert list(store.player_ids()) == [player]
    record = store.snapshot().player_records[player]
    assert record == PlayerRecord(dimension_leave_counts={-1: 1})


def test_every_mutation_sets_dirty(store: LocalCounterStore, player: UUID) -> None:
    mutations = [
        store.record_server_start,
        lambda: store.record_dimension_load(0),
        lambda: store.increment_player_event_count(player, PlayerEventKind.QUIT),
        lambda: store.increment_player_dimension_event_count(player, 0, DimensionEventKind.ENTER),
    ]
    for mutate in mutations:
        store.mark_clean()
        mutate()
        assert store.is_dirty


def test_mark_clean_with_stale_revision_keeps_dirty(store: LocalCounterStore) -> None:
    """A write of an older snapshot must not hide later increments."""
    store.record_server_start()
    revision = store.revision
    store.record_server_start()

    store.mark_clean(revision)
    assert store.is_dirty

    store.mark_clean(store.revision)
    assert not store.is_dirty


def test_snapshot_is_independent(store: LocalCounterStore, player: UUID) -> None:
    store.increment_player_event_count(player, PlayerEventKind.JOIN)
    snapshot = store.snapshot()

    snapshot.player_records[player].join_count = 99
    snapshot.dimension_load_counts[5] = 5

    assert store.get_player_event_count(player, PlayerEventKind.JOIN) == 1
    assert store.get_dimension_load_count(5) == 0


def test_replace_state_copies_and_clears_dirty(store: LocalCounterStore, player: UUID) -> None:
    state = TrackerState(
        server_start_count=4,
        dimension_load_counts={0: 2},
        player_records={player: PlayerRecord(death_count=3)},
    )
    store.record_server_start()

    store.replace_state(state)
    state.player_records[player].death_count = 0

    assert not store.is_dirty
    assert store.get_server_start_count() == 4
    assert store.get_player_event_count(player, PlayerEventKind.DEATH) == 3


def test_reset_discards_everything(store: LocalCounterStore, player: UUID) -> None:
    store.record_server_start()
    store.record_dimension_load(3)
    store.increment_player_event_count(player, PlayerEventKind.JOIN)

    store.reset()

    assert store.snapshot() == TrackerState()
    assert not store.is_dirty


def test_to_dict(store: LocalCounterStore, player: UUID) -> None:
    store.record_dimension_load(-1)
    store.increment_player_dimension_event_count(player, 1, DimensionEventKind.ENTER)

    data = store.to_dict()
    assert data["dimension_loads"] == {"-1": 1}
    assert data["players"][str(player)]["dimension_enter"] == {"1": 1}
    assert data["players"][str(player)]["join"] == 0


def test_concurrent_increments_are_not_lost(store: LocalCounterStore, player: UUID) -> None:
    """Lazy record creation under many threads still counts every call."""

    def work() -> None:
        for _ in range(500):
            store.increment_player_event_count(player, PlayerEventKind.JOIN)
            store.record_dimension_load(0)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.get_player_event_count(player, PlayerEventKind.JOIN) == 4000
    assert store.get_dimension_load_count(0) == 4000


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), max_size=50))
def test_dimension_counts_equal_increments(dimensions: list[int]) -> None:
    store = LocalCounterStore()
    for dim in dimensions:
        store.record_dimension_load(dim)

    for dim in set(dimensions):
        assert store.get_dimension_load_count(dim) == dimensions.count(dim)
    assert store.get_dimension_load_count(2**31) == 0


@given(
    st.lists(
        st.tuples(
            st.sampled_from([UUID(int=1), UUID(int=2), UUID(int=3)]),
            st.sampled_from(list(PlayerEventKind)),
        ),
        max_size=60,
    )
)
def test_player_counts_equal_increments(events: list[tuple[UUID, PlayerEventKind]]) -> None:
    store = LocalCounterStore()
    for player, kind in events:
        store.increment_player_event_count(player, kind)

    for player in (UUID(int=1), UUID(int=2), UUID(int=3), UUID(int=4)):
        for kind in PlayerEventKind:
            assert store.get_player_event_count(player, kind) == events.count((player, kind))
