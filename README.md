# rdstring

Dynamic byte strings that carry their own length. Each string has a compact
header whose width depends on how large the string is.

The package has two modules:

- `rdstring.header` handles header types, header sizes, and the byte encoding
  of a header.
- `rdstring.dynstr` provides `DynamicString`, a growable, binary-safe byte
  string that tracks its header type and spare capacity.

## Header types

A string's header type is chosen from its length:

| Header type | Used for lengths below | Header bytes |
|-------------|------------------------|--------------|
| `TYPE_5`    | 32                     | 1            |
| `TYPE_8`    | 256                    | 3            |
| `TYPE_16`   | 65 536                 | 5            |
| `TYPE_32`   | 2**32                  | 9            |
| `TYPE_64`   | 2**64                  | 17           |

A length of 2**64 or more does not fit any header, and
`recommended_header_type` raises `OverflowError` for it.

The `TYPE_5` header keeps the length in the upper five bits of the flags byte.
It has no room to record spare capacity. The wider headers store three fields,
little-endian:

1. the length
2. the allocated capacity
3. a flags byte, whose low three bits hold the type

## Installation

```
pip install rdstring
```

## DynamicString

```python
from rdstring.dynstr import DynamicString

s = DynamicString(b"hello")
len(s)              # 5
s.header_type       # HeaderType.TYPE_5
s.allocated         # 5
s.available         # 0

s.append_str(", world")
s += b"!"
bytes(s)            # b"hello, world!"
s == b"hello, world!"   # True

t = DynamicString.from_str("grüße", "utf-8")
s.append(t)
```

What a `DynamicString` accepts and returns:

- **Construction.** `DynamicString(data)` accepts any bytes-like object or
  another `DynamicString`. `None` or no argument gives an empty string. A
  `str` raises `TypeError`; use `from_str` to encode text first.
- **Appending.** `append` and `+=` take bytes-like objects or other dynamic
  strings. `append_str` encodes text first, with UTF-8 by default.
- **Reading the content.** `to_bytes()` and `bytes(s)` return the content.
- **Header properties.** `header_type`, `header_size`, `allocated` and
  `available` are read-only properties.
- **Equality and hashing.** A string compares equal to another
  `DynamicString`, `bytes`, `bytearray` or `memoryview` with the same content.
  Strings are mutable and so cannot be hashed.

### Growth

An append that needs more room than `available` enlarges the capacity. The
new size is worked out from the required size: it is doubled while it stays
below 1 MiB, and 1 MiB is added to it from that point on. The header type is
then chosen from the new capacity. A grown string never takes the `TYPE_5`
header, because that header cannot record spare room. If enough space is
already available, the capacity and header type stay the same.

### Raw layout

`raw()` returns the encoded header, the content and a trailing NUL byte as a
single `bytes` object:

```python
DynamicString(b"abc").raw()   # b"\x18abc\x00"
```

## Header helpers

```python
from rdstring.header import (
    HeaderType, header_size, recommended_header_type,
    encode_header, decode_header,
)

recommended_header_type(300)           # HeaderType.TYPE_16
header_size(HeaderType.TYPE_8)         # 3
HeaderType.from_flags(0b10101001)      # HeaderType.TYPE_8
raw = encode_header(HeaderType.TYPE_8, 10, 20)
decode_header(raw)                     # (HeaderType.TYPE_8, 10, 20)
```

**`header_size(flags)`** returns 0 when the type bits in `flags` name no
known header.

**`HeaderType.from_flags`** raises `ValueError` in that case.

**`encode_header(header_type, size, allocated)`** sets `allocated` to `size`
when it is omitted. It raises `ValueError` in any of these cases:

- the size is larger than the allocation
- either value does not fit the header
- a `TYPE_5` header is asked to record spare allocation

**`decode_header(raw)`** expects exactly one header, ending with its flags
byte.

## What this package does not do

Strings are ordinary Python objects. `raw()` builds their byte layout on
request, but the package does not manage memory itself. Capacity is
bookkeeping only: no space is reserved in advance.

## Running the tests

```
pip install -e ".[test]"
pytest
```