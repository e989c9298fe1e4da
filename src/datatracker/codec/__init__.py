"""Binary codec: compressed tag-tree encoding of TrackerState."""

from datatracker.codec.binary import TagReader, TagWriter, read_root, write_root
from datatracker.codec.compression import compress, decompress
from datatracker.codec.errors import TagFormatError
from datatracker.codec.state import decode_state, dumps, encode_state, loads
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

__all__ = [
    # State
    "dumps",
    "loads",
    "encode_state",
    "decode_state",
    # Stream
    "TagReader",
    "TagWriter",
    "read_root",
    "write_root",
    "compress",
    "decompress",
    "TagFormatError",
    # Tags
    "Tag",
    "TagType",
    "Byte",
    "Short",
    "Int",
    "Long",
    "Float",
    "Double",
    "ByteArray",
    "String",
    "TagList",
    "Compound",
    "IntArray",
    "LongArray",
]
