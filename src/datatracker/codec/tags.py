"""Tag tree model for the named binary tag format.

Each tag type is a thin subclass of the matching Python builtin, so a decoded
tree behaves like ordinary ints, strs, lists and dicts while still carrying
the exact on-disk type needed to write it back unchanged.

Usage:
    root = Compound()
    root["ServerStarts"] = Int(3)
    root["DimLoadCounts"] = TagList([Compound({"Dim": Int(0), "Count": Int(3)})])

    root.get_int("ServerStarts")  # 3
    root.get_int("Missing")  # 0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import IntEnum
from typing import Any, ClassVar

from datatracker.codec.errors import TagFormatError


class TagType(IntEnum):
    """Type ids as written in the binary stream."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10
    INT_ARRAY = 11
    LONG_ARRAY = 12


class Tag:
    """Base class for all tag values."""

    __slots__ = ()
    tag_type: ClassVar[TagType]


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _clamp_float(value: float, bits: int) -> int:
    if math.isnan(value):
        return 0
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if math.isinf(value):
        return high if value > 0 else low
    return max(low, min(high, math.floor(value)))


def _check_range(value: int, bits: int, name: str) -> int:
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise TagFormatError(f"{name} value {value} outside signed {bits}-bit range")
    return value


class _IntegralTag(Tag, int):
    __slots__ = ()
    bits: ClassVar[int]

    def __new__(cls, value: Any = 0) -> Any:
        return super().__new__(cls, _check_range(int(value), cls.bits, cls.__name__))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Byte(_IntegralTag):
    __slots__ = ()
    tag_type = TagType.BYTE
    bits = 8


class Short(_IntegralTag):
    __slots__ = ()
    tag_type = TagType.SHORT
    bits = 16


class Int(_IntegralTag):
    __slots__ = ()
    tag_type = TagType.INT
    bits = 32


class Long(_IntegralTag):
    __slots__ = ()
    tag_type = TagType.LONG
    bits = 64


class Float(Tag, float):
    __slots__ = ()
    tag_type = TagType.FLOAT

    def __repr__(self) -> str:
        return f"Float({float(self)!r})"


class Double(Tag, float):
    __slots__ = ()
    tag_type = TagType.DOUBLE

    def __repr__(self) -> str:
        return f"Double({float(self)!r})"


class ByteArray(Tag, bytes):
    __slots__ = ()
    tag_type = TagType.BYTE_ARRAY


class String(Tag, str):
    __slots__ = ()
    tag_type = TagType.STRING


class _ArrayTag(Tag, list):
    element_bits: ClassVar[int]

    def __init__(self, values: Iterable[int] = ()):
        super().__init__(
            _check_range(int(v), self.element_bits, type(self).__name__) for v in values
        )


class IntArray(_ArrayTag):
    tag_type = TagType.INT_ARRAY
    element_bits = 32


class LongArray(_ArrayTag):
    tag_type = TagType.LONG_ARRAY
    element_bits = 64


class TagList(Tag, list):
    """Homogeneous list of tags.

    The element type is taken from the first item when not given explicitly.
    An empty list is written with element type END.

    Args:
        items: Tag values; all must share one tag type.
        element_type: Explicit element type, kept even when the list is empty.
    """

    tag_type = TagType.LIST

    def __init__(self, items: Iterable[Tag] = (), element_type: TagType | None = None):
        super().__init__(items)
        self.element_type = element_type

    @property
    def resolved_type(self) -> TagType:
        """Element type as it will be written."""
        if self:
            return self[0].tag_type
        return self.element_type if self.element_type is not None else TagType.END


class Compound(Tag, dict):
    """Named tags, in insertion order.

    Typed accessors mirror lenient game-side readers: a missing key or a key
    holding the wrong type yields the default instead of raising.
    """

    tag_type = TagType.COMPOUND

    def __init__(self, entries: Mapping[str, Tag] | None = None):
        super().__init__(entries or {})

    def has(self, key: str, tag_type: TagType) -> bool:
        """Check that a key exists and holds the given tag type."""
        value = self.get(key)
        return isinstance(value, Tag) and value.tag_type is tag_type

    def _get_number(self, key: str, bits: int, default: int) -> int:
        value = self.get(key)
        if isinstance(value, _IntegralTag):
            return _wrap(int(value), bits)
        if isinstance(value, (Float, Double)):
            return _clamp_float(float(value), bits)
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Read a numeric tag narrowed to signed 32 bits.

        Wider integers wrap to their low 32 bits. Floats are floored and
        clamped, with NaN reading as 0, so the result always fits an Int tag.
        """
        return self._get_number(key, 32, default)

    def get_long(self, key: str, default: int = 0) -> int:
        """Read a numeric tag narrowed to signed 64 bits."""
        return self._get_number(key, 64, default)

    def get_compound_list(self, key: str) -> list[Compound]:
        """Get compound elements of a list, or an empty list.

        Lists of any other element type read as empty.
        """
        value = self.get(key)
        if not isinstance(value, TagList):
            return []
        return [item for item in value if isinstance(item, Compound)]

