import pytest

from rdstring.dynstr import DynamicString
from rdstring.header import MAX_PREALLOC, HeaderType, decode_header


def test_init_creates_empty():
    s = DynamicString()
    assert s.to_bytes() == b""
    assert len(s) == 0
    assert s.header_type is HeaderType.TYPE_5


def test_none_creates_empty():
    assert DynamicString(None) == b""


@pytest.mark.parametrize(
    "length, expected_type",
    [
        ((1 << 5) - 1, HeaderType.TYPE_5),
        ((1 << 8) - 1, HeaderType.TYPE_8),
        ((1 << 16) - 1, HeaderType.TYPE_16),
    ],
)
def test_new_creates_type(length, expected_type):
    data = bytes(length)
    s = DynamicString(data)
    assert len(s) == length
    assert s.header_type is expected_type
    assert s.to_bytes() == data
    assert s.available == 0


@pytest.mark.parametrize("length", [(1 << 5) - 1, (1 << 8) - 1, (1 << 16) - 1])
def test_append_to_empty(length):
    s = DynamicString()
    start = len(s)
    data = b"\x01" * length
    s.append(data)
    assert len(s) == start + length
    assert s.to_bytes()[start:] == data


def test_append_never_leaves_type5():
    s = DynamicString(b"ab")
    s.append(b"c")
    assert s.header_type is not HeaderType.TYPE_5
    assert s == b"abc"


def test_append_nothing_to_empty_keeps_type5():
    s = DynamicString()
    s.append(b"")
    assert s.header_type is HeaderType.TYPE_5
    assert s.allocated == len(s)


def test_capacity_invariants_across_appends():
    s = DynamicString()
    expected = b""
    for chunk in (b"a", b"bcd", b"x" * 40, b"y" * 300, b"z" * 70000):
        s.append(chunk)
        expected += chunk
        assert s == expected
        assert s.allocated >= len(s)
        assert s.available == s.allocated - len(s)
        assert s.header_type is not HeaderType.TYPE_5


def test_spare_capacity_absorbs_empty_append():
    s = DynamicString()
    s.append(b"abcdefghij")
    allocated = s.allocated
    s.append(b"")
    assert s.allocated == allocated


def test_large_append_switches_to_linear_growth():
    s = DynamicString()
    s.append(bytes(MAX_PREALLOC))
    assert len(s) == MAX_PREALLOC
    assert s.allocated >= len(s) + MAX_PREALLOC
    assert s.header_type is HeaderType.TYPE_32


def test_append_dynamic_string():
    a = DynamicString(b"foo")
    a.append(DynamicString(b"bar"))
    assert a == b"foobar"


def test_self_append_with_iadd():
    s = DynamicString(b"ab")
    s += s
    assert s == b"abab"


def test_from_str_and_append_str():
    s = DynamicString.from_str("héllo")
    s.append_str("ü", "latin-1")
    assert s.to_bytes() == "héllo".encode() + "ü".encode("latin-1")


def test_append_text_rejected():
    s = DynamicString()
    with pytest.raises(TypeError):
        s.append("text")


def test_append_non_bytes_rejected():
    s = DynamicString()
    with pytest.raises(TypeError):
        s.append(42)


def test_binary_safe_content():
    data = b"a\x00b\x00"
    s = DynamicString(data)
    assert bytes(s) == data
    assert len(s) == len(data)


def test_raw_layout_round_trips():
    s = DynamicString(b"hello")
    s.append(b" world")
    raw = s.raw()
    size = s.header_size
    assert raw.endswith(b"\0")
    assert decode_header(raw[:size]) == (s.header_type, len(s), s.allocated)
    assert raw[size:-1] == s.to_bytes()


def test_equality():
    assert DynamicString(b"ab") == bytearray(b"ab")
    assert DynamicString(b"ab") == DynamicString(b"ab")
    assert not (DynamicString(b"ab") == 1)


def test_repr():
    assert repr(DynamicString(b"ab")) == "DynamicString(b'ab')"


def test_unhashable():
    with pytest.raises(TypeError):
        hash(DynamicString(b"ab"))