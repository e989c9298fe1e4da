"""Counter storage backends."""

from datatracker.storage.local import LocalCounterStore
from datatracker.storage.models import PlayerRecord, TrackerState
from datatracker.storage.protocol import CounterStore

__all__ = [
    "CounterStore",
    "LocalCounterStore",
    "PlayerRecord",
    "TrackerState",
]
