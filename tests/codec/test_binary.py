"""Tests for the binary tag stream reader/writer.

Why these tests exist:
- The on-disk layout must match the big-endian named tag format byte for byte
- Malformed input must fail with TagFormatError, never with partial results
"""

import pytest

from datatracker.codec import (
    Byte,
    ByteArray,
    Compound,
    Double,
    Float,
    Int,
    IntArray,
    Long,
    LongArray,
    Short,
    String,
    TagFormatError,
    TagList,
    TagType,
    read_root,
    write_root,
)
from datatracker.codec.binary import MAX_DEPTH


def test_known_layout() -> None:
    data = write_root(Compound({"A": Int(1)}))

    assert data == (
        b"\x0a\x00\x00"  # root compound, empty name
        b"\x03\x00\x01A\x00\x00\x00\x01"  # Int "A" = 1
        b"\x00"  # END
    )


def test_list_layout() -> None:
    data = write_root(Compound({"L": TagList([Short(2), Short(-1)])}))

    assert data == (
        b"\x0a\x00\x00"
        b"\x09\x00\x01L\x02\x00\x00\x00\x02\x00\x02\xff\xff"
        b"\x00"
    )


def test_empty_list_keeps_declared_type() -> None:
    name, root = read_root(write_root(Compound({"L": TagList(element_type=TagType.COMPOUND)})))

    assert root["L"] == []
    assert root["L"].element_type is TagType.COMPOUND


def test_all_tag_types_survive() -> None:
    root = Compound(
        {
            "byte": Byte(-3),
            "short": Short(300),
            "int": Int(-70000),
            "long": Long(2**40),
            "float": Float(0.5),
            "double": Double(1.25),
            "bytes": ByteArray(b"\x00\x01\xff"),
            "string": String("héllo"),
            "list": TagList([TagList([Int(1)]), TagList([Int(2), Int(3)])]),
            "compound": Compound({"nested": Compound()}),
            "ints": IntArray([1, -2]),
            "longs": LongArray([2**62, -1]),
        }
    )

    name, decoded = read_root(write_root(root, name="root"))

    assert name == "root"
    assert decoded == root
    for key, value in root.items():
        assert type(decoded[key]) is type(value)


def test_root_must_be_compound() -> None:
    with pytest.raises(TagFormatError, match="Root tag"):
        read_root(b"\x03\x00\x00\x00\x00\x00\x01")


@pytest.mark.parametrize("cut", [0, 1, 3, 7, 10])
def test_truncated_stream_raises(cut: int) -> None:
    data = write_root(Compound({"A": Int(1)}))

    with pytest.raises(TagFormatError):
        read_root(data[:cut])


def test_unknown_tag_type_raises() -> None:
    with pytest.raises(TagFormatError, match="Unknown tag type"):
        read_root(b"\x0a\x00\x00\x63\x00\x01A\x00")


def test_negative_length_raises() -> None:
    with pytest.raises(TagFormatError, match="Negative length"):
        read_root(b"\x0a\x00\x00\x07\x00\x01B\xff\xff\xff\xff\x00")


def test_nesting_limit() -> None:
    """A stream nested deeper than MAX_DEPTH is rejected."""
    depth = MAX_DEPTH + 5
    body = b"\x0a\x00\x01c" * depth + b"\x00" * depth
    with pytest.raises(TagFormatError, match="nesting"):
        read_root(b"\x0a\x00\x00" + body + b"\x00")


def test_mixed_list_cannot_be_written() -> None:
    with pytest.raises(TagFormatError, match="Mixed"):
        write_root(Compound({"L": TagList([Int(1), Long(1)])}))


def test_non_tag_entry_cannot_be_written() -> None:
    with pytest.raises(TagFormatError, match="not a tag"):
        write_root(Compound({"A": 1}))  # type: ignore[dict-item]
