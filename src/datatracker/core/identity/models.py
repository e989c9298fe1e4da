"""Player and dimension identity models.

Usage:
    player = PlayerId("069a79f4-44e9-4726-a5be-fca90e38aaf5")
    most, least = split_player_id(player)
    assert join_player_id(most, least) == player
"""

from uuid import UUID

DimensionId = int
"""Integer identifier of a world/dimension instance (signed 32-bit on disk)."""

PlayerId = UUID
"""128-bit player identity, stable across sessions."""

_MASK_64 = (1 << 64) - 1
_SIGN_64 = 1 << 63


def _to_signed_64(value: int) -> int:
    value &= _MASK_64
    return value - (1 << 64) if value & _SIGN_64 else value


def split_player_id(player: UUID) -> tuple[int, int]:
    """Split a player identity into signed most/least significant 64-bit halves.

    Args:
        player: Player identity.

    Returns:
        Tuple of (most_significant, least_significant), each a signed 64-bit int.
    """
    value = player.int
    return _to_signed_64(value >> 64), _to_signed_64(value)


def join_player_id(most: int, least: int) -> UUID:
    """Rebuild a player identity from its two signed 64-bit halves.

    Args:
        most: Most significant 64 bits (signed or unsigned form).
        least: Least significant 64 bits (signed or unsigned form).

    Returns:
        The combined UUID.
    """
    return UUID(int=((most & _MASK_64) << 64) | (least & _MASK_64))
