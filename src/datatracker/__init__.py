"""datatracker: persistent lifecycle event counters.

Usage:
    from datatracker import TrackerSession

    with TrackerSession.open(world_dir) as session:
        session.events.on_server_start()
        session.events.on_dimension_load(0)
        session.store.get_dimension_load_count(0)  # 1
"""

__version__ = "0.1.0"

# Core primitives
from datatracker.core import (
    DimensionEventKind,
    DimensionId,
    PlayerEventKind,
    PlayerId,
    join_player_id,
    split_player_id,
)

# Configuration
from datatracker.config import TrackerSettings

# Storage
from datatracker.storage import (
    CounterStore,
    LocalCounterStore,
    PlayerRecord,
    TrackerState,
)

# Codec
from datatracker.codec import TagFormatError, dumps, loads

# Persistence
from datatracker.persistence import (
    ErrorKind,
    LoadResult,
    OperationStatus,
    PersistenceManager,
    SaveResult,
)

# Lifecycle
from datatracker.lifecycle import LifecycleAdapter, TrackerSession

__all__ = [
    # Version
    "__version__",
    # Core
    "PlayerId",
    "DimensionId",
    "PlayerEventKind",
    "DimensionEventKind",
    "split_player_id",
    "join_player_id",
    # Config
    "TrackerSettings",
    # Storage
    "CounterStore",
    "LocalCounterStore",
    "PlayerRecord",
    "TrackerState",
    # Codec
    "dumps",
    "loads",
    "TagFormatError",
    # Persistence
    "PersistenceManager",
    "LoadResult",
    "SaveResult",
    "OperationStatus",
    "ErrorKind",
    # Lifecycle
    "LifecycleAdapter",
    "TrackerSession",
]
