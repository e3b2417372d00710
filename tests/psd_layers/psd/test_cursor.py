import logging

import pytest

from psd_layers.exceptions import TruncatedInput
from psd_layers.psd.cursor import Cursor

logger = logging.getLogger(__name__)


@pytest.mark.parametrize(
    "data, size, expected",
    [
        (b"\x00\x00\x00\x01", 4, 1),
        (b"\x12\x34\x56\x78", 4, 0x12345678),
        (b"\xff\xff\xff\xff", 4, 0xFFFFFFFF),
        (b"\x01\x02", 2, 0x0102),
        (b"\xff", 1, 255),
    ],
)
def test_read_be(data: bytes, size: int, expected: int) -> None:
    cursor = Cursor(data)
    assert cursor.read_be(size) == expected
    assert cursor.tell() == size
    assert cursor.remaining == 0


def test_read_be_truncated() -> None:
    cursor = Cursor(b"\x00\x01")
    with pytest.raises(TruncatedInput) as excinfo:
        cursor.read_be(4)
    assert excinfo.value.requested == 4
    assert excinfo.value.available == 2
    # A failed read does not move the cursor.
    assert cursor.tell() == 0
    assert cursor.read_be(2) == 1


def test_read_be_invalid_size() -> None:
    with pytest.raises(ValueError):
        Cursor(b"\x00" * 8).read_be(3)


def test_read_past_sub_range() -> None:
    cursor = Cursor(b"\x00\x01\x02\x03", position=1, end=3)
    assert cursor.read(2) == b"\x01\x02"
    with pytest.raises(TruncatedInput):
        cursor.read_be(1)


def test_skip() -> None:
    cursor = Cursor(b"\x00" * 4 + b"\x2a")
    cursor.skip(4)
    assert cursor.read_be(1) == 42
    cursor.skip(0)
    with pytest.raises(TruncatedInput):
        cursor.skip(1)


@pytest.mark.parametrize("size", [5, 2**32, 2**64 + 1, -1])
def test_skip_out_of_range(size: int) -> None:
    cursor = Cursor(b"\x00" * 4)
    with pytest.raises(TruncatedInput):
        cursor.skip(size)
    assert cursor.tell() == 0


def test_read_fmt_signed() -> None:
    cursor = Cursor(b"\xff\xfe\x00\x00\x00\x10")
    assert cursor.read_fmt("hI") == (-2, 16)
    with pytest.raises(TruncatedInput):
        cursor.read_fmt("h")


def test_read_length_block() -> None:
    cursor = Cursor(b"\x00\x00\x00\x02\xaa\xbb\xcc")
    block = cursor.read_length_block()
    assert block.remaining == 2
    assert cursor.read(1) == b"\xcc"
    assert block.read(2) == b"\xaa\xbb"
    with pytest.raises(TruncatedInput):
        block.read_be(1)


def test_read_length_block_truncated() -> None:
    cursor = Cursor(b"\x00\x00\x00\x08\xaa\xbb")
    with pytest.raises(TruncatedInput):
        cursor.read_length_block()


@pytest.mark.parametrize(
    "data, expected, consumed",
    [
        (b"\x00\x00\x00\x00", "", 4),
        (b"\x03abc", "abc", 4),
        (b"\x04abcd\x00\x00\x00", "abcd", 8),
        (b"\x05Layer\x00\x00", "Layer", 8),
    ],
)
def test_read_pascal_string(data: bytes, expected: str, consumed: int) -> None:
    cursor = Cursor(data + b"\xff")
    assert cursor.read_pascal_string("macroman", padding=4) == expected
    assert cursor.tell() == consumed


def test_read_pascal_string_truncated() -> None:
    with pytest.raises(TruncatedInput):
        Cursor(b"\x05abc").read_pascal_string(padding=4)


def test_invalid_range() -> None:
    with pytest.raises(ValueError):
        Cursor(b"\x00", position=0, end=2)
