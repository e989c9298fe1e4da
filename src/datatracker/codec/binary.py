"""Big-endian binary reader/writer for tag trees.

Stream layout:
    root     := type:u8 name:string payload
    string   := length:u16 utf8-bytes
    list     := element_type:u8 length:i32 payload*
    compound := (type:u8 name:string payload)* END:u8
    arrays   := length:i32 element*

Usage:
    data = write_root(compound)
    name, compound = read_root(data)
"""

from __future__ import annotations

import struct
from typing import cast

from datatracker.codec.errors import TagFormatError
from datatracker.codec.tags import (
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
    Tag,
    TagList,
    TagType,
)

MAX_DEPTH = 512

_BYTE = struct.Struct(">b")
_UBYTE = struct.Struct(">B")
_SHORT = struct.Struct(">h")
_USHORT = struct.Struct(">H")
_INT = struct.Struct(">i")
_LONG = struct.Struct(">q")
_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")


class TagReader:
    """Sequential reader over an uncompressed tag stream.

    Every read is bounds checked; reading past the end raises TagFormatError
    rather than returning partial values.
    """

    def __init__(self, data: bytes):
        self.data = data
        self.pos = 0
        self.size = len(data)

    def _unpack(self, fmt: struct.Struct) -> int | float:
        if self.pos + fmt.size > self.size:
            raise TagFormatError(f"Read past end at offset 0x{self.pos:x}")
        value = fmt.unpack_from(self.data, self.pos)[0]
        self.pos += fmt.size
        return value

    def read_bytes(self, count: int) -> bytes:
        if count < 0 or self.pos + count > self.size:
            raise TagFormatError(f"Read of {count} bytes past end at offset 0x{self.pos:x}")
        value = self.data[self.pos : self.pos + count]
        self.pos += count
        return value

    def read_type(self) -> TagType:
        raw = int(self._unpack(_UBYTE))
        try:
            return TagType(raw)
        except ValueError:
            raise TagFormatError(f"Unknown tag type {raw} at offset 0x{self.pos - 1:x}") from None

    def read_length(self) -> int:
        length = int(self._unpack(_INT))
        if length < 0:
            raise TagFormatError(f"Negative length {length} at offset 0x{self.pos - 4:x}")
        return length

    def read_string(self) -> str:
        length = int(self._unpack(_USHORT))
        raw = self.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TagFormatError(f"Invalid string at offset 0x{self.pos - length:x}") from e

    def read_payload(self, tag_type: TagType, depth: int = 0) -> Tag:
        """Read the payload of a tag whose type is already known.

        Args:
            tag_type: Type of the tag to read.
            depth: Current nesting depth.

        Returns:
            Decoded tag value.

        Raises:
            TagFormatError: On truncation, bad types, or nesting over MAX_DEPTH.
        """
        if depth > MAX_DEPTH:
            raise TagFormatError(f"Tag nesting deeper than {MAX_DEPTH}")

        match tag_type:
            case TagType.BYTE:
                return Byte(self._unpack(_BYTE))
            case TagType.SHORT:
                return Short(self._unpack(_SHORT))
            case TagType.INT:
                return Int(self._unpack(_INT))
            case TagType.LONG:
                return Long(self._unpack(_LONG))
            case TagType.FLOAT:
                return Float(self._unpack(_FLOAT))
            case TagType.DOUBLE:
                return Double(self._unpack(_DOUBLE))
            case TagType.BYTE_ARRAY:
                return ByteArray(self.read_bytes(self.read_length()))
            case TagType.STRING:
                return String(self.read_string())
            case TagType.LIST:
                element_type = self.read_type()
                length = self.read_length()
                if element_type is TagType.END and length > 0:
                    raise TagFormatError("Non-empty list with END element type")
                items = [self.read_payload(element_type, depth + 1) for _ in range(length)]
                return TagList(items, element_type=element_type)
            case TagType.COMPOUND:
                compound = Compound()
                while (entry_type := self.read_type()) is not TagType.END:
                    name = self.read_string()
                    compound[name] = self.read_payload(entry_type, depth + 1)
                return compound
            case TagType.INT_ARRAY:
                length = self.read_length()
                return IntArray(self._unpack(_INT) for _ in range(length))
            case TagType.LONG_ARRAY:
                length = self.read_length()
                return LongArray(self._unpack(_LONG) for _ in range(length))
        raise TagFormatError(f"Tag type {tag_type.name} has no payload")


class TagWriter:
    """Accumulates an uncompressed tag stream."""

    def __init__(self) -> None:
        self.data = bytearray()

    def write_type(self, tag_type: TagType) -> None:
        self.data.extend(_UBYTE.pack(tag_type))

    def write_string(self, value: str) -> None:
        raw = value.encode("utf-8")
        if len(raw) > 0xFFFF:
            raise TagFormatError(f"String of {len(raw)} bytes is too long")
        self.data.extend(_USHORT.pack(len(raw)))
        self.data.extend(raw)

    def write_payload(self, tag: Tag) -> None:
        """Write the payload of a tag (without type byte or name)."""
        match tag.tag_type:
            case TagType.BYTE:
                self.data.extend(_BYTE.pack(tag))
            case TagType.SHORT:
                self.data.extend(_SHORT.pack(tag))
            case TagType.INT:
                self.data.extend(_INT.pack(tag))
            case TagType.LONG:
                self.data.extend(_LONG.pack(tag))
            case TagType.FLOAT:
                self.data.extend(_FLOAT.pack(tag))
            case TagType.DOUBLE:
                self.data.extend(_DOUBLE.pack(tag))
            case TagType.BYTE_ARRAY:
                self.data.extend(_INT.pack(len(tag)))  # type: ignore[arg-type]
                self.data.extend(tag)  # type: ignore[arg-type]
            case TagType.STRING:
                self.write_string(tag)  # type: ignore[arg-type]
            case TagType.LIST:
                self._write_list(tag)  # type: ignore[arg-type]
            case TagType.COMPOUND:
                for name, value in tag.items():  # type: ignore[attr-defined]
                    if not isinstance(value, Tag):
                        raise TagFormatError(f"Entry {name!r} is not a tag: {value!r}")
                    self.write_type(value.tag_type)
                    self.write_string(name)
                    self.write_payload(value)
                self.write_type(TagType.END)
            case TagType.INT_ARRAY:
                self.data.extend(_INT.pack(len(tag)))  # type: ignore[arg-type]
                for value in tag:  # type: ignore[attr-defined]
                    self.data.extend(_INT.pack(value))
            case TagType.LONG_ARRAY:
                self.data.extend(_INT.pack(len(tag)))  # type: ignore[arg-type]
                for value in tag:  # type: ignore[attr-defined]
                    self.data.extend(_LONG.pack(value))

    def _write_list(self, tag: TagList) -> None:
        if not all(isinstance(item, Tag) for item in tag):
            raise TagFormatError("List contains values that are not tags")
        element_type = tag.resolved_type
        for item in tag:
            if item.tag_type is not element_type:
                raise TagFormatError(f"Mixed element types in list of {element_type.name}")
        self.write_type(element_type)
        self.data.extend(_INT.pack(len(tag)))
        for item in tag:
            self.write_payload(item)


def read_root(data: bytes) -> tuple[str, Compound]:
    """Decode an uncompressed stream holding one named root compound.

    Args:
        data: Raw tag stream.

    Returns:
        Tuple of (root name, root compound).

    Raises:
        TagFormatError: If the stream is malformed or the root is not a compound.
    """
    reader = TagReader(data)
    root_type = reader.read_type()
    if root_type is not TagType.COMPOUND:
        raise TagFormatError(f"Root tag must be a named compound, got {root_type.name}")
    name = reader.read_string()
    return name, cast(Compound, reader.read_payload(root_type))


def write_root(root: Compound, name: str = "") -> bytes:
    """Encode a named root compound to an uncompressed stream."""
    writer = TagWriter()
    writer.write_type(TagType.COMPOUND)
    writer.write_string(name)
    writer.write_payload(root)
    return bytes(writer.data)
