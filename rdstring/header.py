"""Header layout for dynamic strings: type tags, sizes and byte encoding."""

from __future__ import annotations

import enum
import struct

MAX_PREALLOC = 0x100000
"""Once a string reaches this many bytes, growth becomes linear instead of doubling."""

TYPE_MASK = 0b00000111
TYPE_BITS = 3


class HeaderType(enum.IntEnum):
    """Header variants, named after the bit width of their length fields."""

    TYPE_5 = 0
    TYPE_8 = 1
    TYPE_16 = 2
    TYPE_32 = 3
    TYPE_64 = 4

    @classmethod
    def from_flags(cls, flags: int) -> "HeaderType":
        """Return the header type stored in the low bits of a flags byte."""
        try:
            return cls(flags & TYPE_MASK)
        except ValueError:
            raise ValueError(f"unknown header type in flags {flags:#04x}") from None

    @property
    def bits(self) -> int:
        return _BITS[self]


_BITS = {
    HeaderType.TYPE_5: 5,
    HeaderType.TYPE_8: 8,
    HeaderType.TYPE_16: 16,
    HeaderType.TYPE_32: 32,
    HeaderType.TYPE_64: 64,
}

_LAYOUTS = {
    HeaderType.TYPE_5: struct.Struct("<B"),
    HeaderType.TYPE_8: struct.Struct("<BBB"),
    HeaderType.TYPE_16: struct.Struct("<HHB"),
    HeaderType.TYPE_32: struct.Struct("<IIB"),
    HeaderType.TYPE_64: struct.Struct("<QQB"),
}


def header_size(flags: int) -> int:
    """Return the header size in bytes for the type held in ``flags``, or 0 if unknown."""
    try:
        header_type = HeaderType.from_flags(flags)
    except ValueError:
        return 0
    return _LAYOUTS[header_type].size


def recommended_header_type(length: int) -> HeaderType:
    """Return the smallest header type able to record ``length``."""
    if length < 0:
        raise ValueError("length must not be negative")
    for header_type in HeaderType:
        if length < 1 << header_type.bits:
            return header_type
    raise OverflowError(f"length {length} does not fit in any header")


def encode_header(header_type: int, size: int, allocated: int | None = None) -> bytes:
    """Encode a header; ``allocated`` defaults to ``size``.

    The 5-bit header keeps the size in the flags byte and has no room for an
    allocation count, so ``allocated`` must equal ``size`` there.
    """
    header_type = HeaderType(header_type)
    if allocated is None:
        allocated = size
    if size < 0 or allocated < 0:
        raise ValueError("size and allocation must not be negative")
    if size > allocated:
        raise ValueError(f"size {size} exceeds allocation {allocated}")
    limit = 1 << header_type.bits
    if allocated >= limit:
        raise ValueError(f"{allocated} does not fit in a {header_type.name} header")
    layout = _LAYOUTS[header_type]
    if header_type is HeaderType.TYPE_5:
        if allocated != size:
            raise ValueError("a TYPE_5 header cannot record spare allocation")
        return layout.pack((size << TYPE_BITS) | header_type)
    return layout.pack(size, allocated, header_type)


def decode_header(raw: bytes) -> tuple[HeaderType, int, int]:
    """Decode a header into ``(header_type, size, allocated)``.

    ``raw`` must be exactly one header, ending with its flags byte.
    """
    raw = bytes(raw)
    if not raw:
        raise ValueError("empty header")
    header_type = HeaderType.from_flags(raw[-1])
    layout = _LAYOUTS[header_type]
    if len(raw) != layout.size:
        raise ValueError(
            f"{header_type.name} header needs {layout.size} bytes, got {len(raw)}"
        )
    if header_type is HeaderType.TYPE_5:
        size = raw[-1] >> TYPE_BITS
        return header_type, size, size
    size, allocated, _flags = layout.unpack(raw)
    return header_type, size, allocated