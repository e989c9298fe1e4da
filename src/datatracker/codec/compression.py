"""Stream compression for tag files.

gzip with a fixed header timestamp, so identical trees compress to identical
bytes.
"""

from __future__ import annotations

import gzip
import zlib

from datatracker.codec.errors import TagFormatError


def compress(data: bytes) -> bytes:
    return gzip.compress(data, mtime=0)


def decompress(data: bytes) -> bytes:
    """Decompress a gzip stream.

    Args:
        data: Compressed bytes as read from disk.

    Returns:
        The uncompressed tag stream.

    Raises:
        TagFormatError: If the data is not gzip, is truncated, or fails its checksum.
    """
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise TagFormatError(f"Corrupt or truncated compressed data: {e}") from e
