"""Mapping between TrackerState and the persisted tag tree.

Root compound layout:
    ServerStarts: Int
    DimLoadCounts: List[{Dim: Int, Count: Int}]
    PlayerData: List[{
        UUIDM: Long, UUIDL: Long,
        JoinCount: Int, QuitCount: Int, DeathCount: Int, RespawnCount: Int,
        DimEnter: List[{Dim: Int, Count: Int}],
        DimLeave: List[{Dim: Int, Count: Int}],
    }]

Usage:
    data = dumps(state)
    assert loads(data) == state
"""

from __future__ import annotations

from datatracker.codec.binary import read_root, write_root
from datatracker.codec.compression import compress, decompress
from datatracker.codec.tags import Compound, Int, Long, TagList, TagType
from datatracker.core.identity import join_player_id, split_player_id
from datatracker.storage.models import PlayerRecord, TrackerState

SERVER_STARTS = "ServerStarts"
DIM_LOAD_COUNTS = "DimLoadCounts"
PLAYER_DATA = "PlayerData"
UUID_MOST = "UUIDM"
UUID_LEAST = "UUIDL"
JOIN_COUNT = "JoinCount"
QUIT_COUNT = "QuitCount"
DEATH_COUNT = "DeathCount"
RESPAWN_COUNT = "RespawnCount"
DIM_ENTER = "DimEnter"
DIM_LEAVE = "DimLeave"
DIM = "Dim"
COUNT = "Count"


def _encode_dimension_counts(counts: dict[int, int]) -> TagList:
    return TagList(
        (Compound({DIM: Int(dim), COUNT: Int(count)}) for dim, count in counts.items()),
        element_type=TagType.COMPOUND,
    )


def _decode_dimension_counts(tag: Compound, key: str) -> dict[int, int]:
    return {entry.get_int(DIM): entry.get_int(COUNT) for entry in tag.get_compound_list(key)}


def _encode_player(player_most: int, player_least: int, record: PlayerRecord) -> Compound:
    return Compound(
        {
            UUID_MOST: Long(player_most),
            UUID_LEAST: Long(player_least),
            JOIN_COUNT: Int(record.join_count),
            QUIT_COUNT: Int(record.quit_count),
            DEATH_COUNT: Int(record.death_count),
            RESPAWN_COUNT: Int(record.respawn_count),
            DIM_ENTER: _encode_dimension_counts(record.dimension_enter_counts),
            DIM_LEAVE: _encode_dimension_counts(record.dimension_leave_counts),
        }
    )


def _decode_player(tag: Compound) -> PlayerRecord:
    return PlayerRecord(
        join_count=tag.get_int(JOIN_COUNT),
        quit_count=tag.get_int(QUIT_COUNT),
        death_count=tag.get_int(DEATH_COUNT),
        respawn_count=tag.get_int(RESPAWN_COUNT),
        dimension_enter_counts=_decode_dimension_counts(tag, DIM_ENTER),
        dimension_leave_counts=_decode_dimension_counts(tag, DIM_LEAVE),
    )


def encode_state(state: TrackerState) -> Compound:
    """Build the root compound for a state.

    Args:
        state: State to encode.

    Returns:
        Root compound ready for write_root().

    Raises:
        TagFormatError: If a counter or dimension id does not fit in 32 bits.
    """
    players = TagList(element_type=TagType.COMPOUND)
    for player, record in state.player_records.items():
        most, least = split_player_id(player)
        players.append(_encode_player(most, least, record))

    return Compound(
        {
            DIM_LOAD_COUNTS: _encode_dimension_counts(state.dimension_load_counts),
            PLAYER_DATA: players,
            SERVER_STARTS: Int(state.server_start_count),
        }
    )


def decode_state(root: Compound) -> TrackerState:
    """Build a state from a root compound.

    A root without a DimLoadCounts list is treated as holding no prior state.
    Missing integer fields inside records read as 0.

    Args:
        root: Decoded root compound.

    Returns:
        A new TrackerState.
    """
    if not root.has(DIM_LOAD_COUNTS, TagType.LIST):
        return TrackerState()

    state = TrackerState(
        server_start_count=root.get_int(SERVER_STARTS),
        dimension_load_counts=_decode_dimension_counts(root, DIM_LOAD_COUNTS),
    )
    for tag in root.get_compound_list(PLAYER_DATA):
        player = join_player_id(tag.get_long(UUID_MOST), tag.get_long(UUID_LEAST))
        state.player_records[player] = _decode_player(tag)
    return state


def dumps(state: TrackerState) -> bytes:
    """Encode, serialize and compress a state."""
    return compress(write_root(encode_state(state)))


def loads(data: bytes) -> TrackerState:
    """Decompress, parse and decode a state.

    Raises:
        TagFormatError: If the data is corrupt, truncated, or not a tag tree.
    """
    _, root = read_root(decompress(data))
    return decode_state(root)
