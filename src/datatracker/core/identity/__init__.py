"""Identity functionality: player ids, dimension ids, and their on-disk split form."""

from datatracker.core.identity.models import (
    DimensionId,
    PlayerId,
    join_player_id,
    split_player_id,
)

__all__ = [
    "DimensionId",
    "PlayerId",
    "join_player_id",
    "split_player_id",
]
