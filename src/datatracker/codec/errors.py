"""Codec error types."""


class TagFormatError(ValueError):
    """Raised when bytes or values cannot be represented as a valid tag tree.

    Covers truncated or corrupt compressed data, unknown tag types, excessive
    nesting, and integers outside the range of their tag type.
    """
