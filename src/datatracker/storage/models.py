"""Counter data models.

These are plain value containers. All mutation goes through a CounterStore,
which owns the single TrackerState for a storage root.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from datatracker.core.types import DimensionEventKind, PlayerEventKind


@dataclass(slots=True)
class PlayerRecord:
    """Counters for one player identity.

    Attributes:
        join_count: Number of logins.
        quit_count: Number of logouts.
        death_count: Number of deaths.
        respawn_count: Number of respawns.
        dimension_enter_counts: dimension -> times the player entered it.
        dimension_leave_counts: dimension -> times the player left it.
    """

    join_count: int = 0
    quit_count: int = 0
    death_count: int = 0
    respawn_count: int = 0
    dimension_enter_counts: dict[int, int] = field(default_factory=dict)
    dimension_leave_counts: dict[int, int] = field(default_factory=dict)

    def get_count(self, kind: PlayerEventKind) -> int:
        match kind:
            case PlayerEventKind.JOIN:
                return self.join_count
            case PlayerEventKind.QUIT:
                return self.quit_count
            case PlayerEventKind.DEATH:
                return self.death_count
            case PlayerEventKind.RESPAWN:
                return self.respawn_count
        return 0

    def increment_count(self, kind: PlayerEventKind) -> None:
        match kind:
            case PlayerEventKind.JOIN:
                self.join_count += 1
            case PlayerEventKind.QUIT:
                self.quit_count += 1
            case PlayerEventKind.DEATH:
                self.death_count += 1
            case PlayerEventKind.RESPAWN:
                self.respawn_count += 1

    def dimension_counts(self, kind: DimensionEventKind) -> dict[int, int]:
        """Get the per-dimension map backing the given event kind."""
        if kind is DimensionEventKind.ENTER:
            return self.dimension_enter_counts
        return self.dimension_leave_counts

    def get_dimension_event_count(self, dimension: int, kind: DimensionEventKind) -> int:
        return self.dimension_counts(kind).get(dimension, 0)

    def increment_dimension_event_count(self, dimension: int, kind: DimensionEventKind) -> None:
        counts = self.dimension_counts(kind)
        counts[dimension] = counts.get(dimension, 0) + 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "join": self.join_count,
            "quit": self.quit_count,
            "death": self.death_count,
            "respawn": self.respawn_count,
            "dimension_enter": {str(k): v for k, v in self.dimension_enter_counts.items()},
            "dimension_leave": {str(k): v for k, v in self.dimension_leave_counts.items()},
        }


@dataclass(slots=True)
class TrackerState:
    """Complete persisted state of the tracker for one storage root.

    Attributes:
        server_start_count: Number of server starts.
        dimension_load_counts: dimension -> number of times it was loaded.
        player_records: player identity -> counters for that player.

    Example:
        state = TrackerState(server_start_count=3, dimension_load_counts={0: 3, -1: 1})
    """

    server_start_count: int = 0
    dimension_load_counts: dict[int, int] = field(default_factory=dict)
    player_records: dict[UUID, PlayerRecord] = field(default_factory=dict)

    def is_empty(self) -> bool:
        """Check if no counter has ever been incremented.

        Returns:
            True if the state holds no server starts, dimension loads or players.
        """
        return (
            self.server_start_count == 0
            and not self.dimension_load_counts
            and not self.player_records
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "server_starts": self.server_start_count,
            "dimension_loads": {str(k): v for k, v in self.dimension_load_counts.items()},
            "players": {str(k): v.to_dict() for k, v in self.player_records.items()},
        }
