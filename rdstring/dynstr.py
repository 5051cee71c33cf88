"""A growable byte string that tracks its header type and spare allocation."""

from __future__ import annotations

from rdstring.header import (
    MAX_PREALLOC,
    HeaderType,
    encode_header,
    header_size,
    recommended_header_type,
)


def _as_bytes(data) -> bytes:
    if isinstance(data, DynamicString):
        return bytes(data._buf)
    if isinstance(data, str):
        raise TypeError("text must be encoded first; use append_str or from_str")
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"expected a bytes-like object, got {type(data).__name__}"
        ) from None


class DynamicString:
    """Binary-safe string whose capacity grows the way a length-prefixed buffer would."""

    __slots__ = ("_buf", "_type", "_allocated")
    __hash__ = None  # mutable

    def __init__(self, data=b"") -> None:
        content = b"" if data is None else _as_bytes(data)
        self._buf = bytearray(content)
        self._type = recommended_header_type(len(content))
        self._allocated = len(content)

    @classmethod
    def from_str(cls, text: str, encoding: str = "utf-8") -> "DynamicString":
        """Create a string from text encoded with ``encoding``."""
        return cls(text.encode(encoding))

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __eq__(self, other) -> bool:
        if isinstance(other, DynamicString):
            return self._buf == other._buf
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buf == bytes(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._buf)!r})"

    @property
    def header_type(self) -> HeaderType:
        return self._type

    @property
    def header_size(self) -> int:
        return header_size(self._type)

    @property
    def allocated(self) -> int:
        return self._allocated

    @property
    def available(self) -> int:
        return self._allocated - len(self._buf)

    def _grow(self, add_len: int) -> None:
        if self.available >= add_len:
            return
        new_len = len(self._buf) + add_len
        if new_len < MAX_PREALLOC:
            new_len *= 2
        else:
            new_len += MAX_PREALLOC
        new_type = recommended_header_type(new_len)
        # A 5-bit header cannot remember spare room, so never grow into one.
        if new_type is HeaderType.TYPE_5:
            new_type = HeaderType.TYPE_8
        self._type = new_type
        self._allocated = new_len

    def append(self, other) -> None:
        """Append another dynamic string or any bytes-like object."""
        data = _as_bytes(other)
        self._grow(len(self._buf) + len(data))
        self._buf += data

    def append_str(self, text: str, encoding: str = "utf-8") -> None:
        """Append text encoded with ``encoding``."""
        self.append(text.encode(encoding))

    def __iadd__(self, other) -> "DynamicString":
        self.append(other)
        return self

    def to_bytes(self) -> bytes:
        """Return the content as bytes."""
        return bytes(self._buf)

    def raw(self) -> bytes:
        """Return the header, the content and a terminating NUL byte."""
        return (
            encode_header(self._type, len(self._buf), self._allocated)
            + bytes(self._buf)
            + b"\0"
        )