"""Core functionalities: identities and event kinds.

Architecture Note:
    core/ holds stateless primitives only. For stateful services, see
    storage/ and persistence/.
"""

from datatracker.core.identity import (
    DimensionId,
    PlayerId,
    join_player_id,
    split_player_id,
)
from datatracker.core.types import DimensionEventKind, PlayerEventKind

__all__ = [
    "DimensionId",
    "PlayerId",
    "join_player_id",
    "split_player_id",
    "PlayerEventKind",
    "DimensionEventKind",
]
