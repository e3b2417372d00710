import logging
import struct

import pytest

from psd_layers.compression import decode_rle, decompress
from psd_layers.constants import Compression
from psd_layers.exceptions import TruncatedInput, UnsupportedCompression
from psd_layers.psd.cursor import Cursor

from ..utils import rle_channel

logger = logging.getLogger(__name__)

RAW_IMAGE_3x3_8bit = b"\x00\x01\x02\x01\x01\x01\x01\x00\x00"


def test_raw() -> None:
    cursor = Cursor(RAW_IMAGE_3x3_8bit + b"\xff")
    assert decompress(cursor, Compression.RAW, 3, 3) == RAW_IMAGE_3x3_8bit
    assert cursor.remaining == 1


def test_raw_truncated() -> None:
    with pytest.raises(TruncatedInput):
        decompress(Cursor(RAW_IMAGE_3x3_8bit[:-1]), Compression.RAW, 3, 3)


@pytest.mark.parametrize(
    "fixture, width, height",
    [
        (RAW_IMAGE_3x3_8bit, 3, 3),
        (bytes(bytearray(range(256))), 128, 2),
        (b"\x05" * 300, 150, 2),
        (b"", 0, 4),
    ],
)
def test_rle(fixture: bytes, width: int, height: int) -> None:
    _, payload = rle_channel(0, fixture, width, height)
    cursor = Cursor(payload)
    assert cursor.read_be(2) == Compression.RLE
    assert decompress(cursor, Compression.RLE, width, height) == fixture
    assert cursor.remaining == 0


def test_rle_ignores_row_counts() -> None:
    counts = struct.pack(">HH", 0xFFFF, 0)
    cursor = Cursor(counts + b"\xfd\x01")
    assert decode_rle(cursor, 2, 2) == b"\x01" * 4


def test_rle_truncated_row_counts() -> None:
    with pytest.raises(TruncatedInput):
        decode_rle(Cursor(b"\x00\x02\x00"), 1, 2)


@pytest.mark.parametrize(
    "kind", [Compression.ZIP, Compression.ZIP_WITH_PREDICTION, 4, 0xFFFF]
)
def test_unsupported(kind: int) -> None:
    with pytest.raises(UnsupportedCompression) as excinfo:
        decompress(Cursor(b"\x00" * 16), kind, 2, 2)
    assert excinfo.value.compression == kind
