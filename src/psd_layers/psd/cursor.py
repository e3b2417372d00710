"""
Bounds-checked byte cursor.

Every structure in :py:mod:`psd_layers.psd` reads through a
:py:class:`Cursor`; nothing else indexes into the input bytes. A cursor
covers the half-open range ``[position, end)`` of an immutable buffer, and any
read that would cross ``end`` raises
:py:class:`~psd_layers.exceptions.TruncatedInput` before moving.

Example::

    from psd_layers.psd.cursor import Cursor

    cursor = Cursor(b"\\x00\\x00\\x00\\x01\\x00\\x02")
    cursor.read_be(4)  # 1
    cursor.read_be(2)  # 2
"""

import logging
import struct
from typing import Any, Tuple

from attrs import define, field

from psd_layers.exceptions import TruncatedInput

logger = logging.getLogger(__name__)

_BE_FORMATS = {1: ">B", 2: ">H", 4: ">I"}


def _pad(number: int, divisor: int) -> int:
    if number % divisor:
        number = (number // divisor + 1) * divisor
    return number


@define(repr=False)
class Cursor:
    """
    Read position over an immutable byte buffer.

    .. py:attribute:: data

        Backing bytes.

    .. py:attribute:: position

        Offset of the next byte to read.

    .. py:attribute:: end

        Offset one past the last readable byte. Defaults to ``len(data)``.
    """

    data: bytes = field(converter=bytes)
    position: int = 0
    end: int = field(default=None)

    def __attrs_post_init__(self) -> None:
        if self.end is None:
            self.end = len(self.data)
        if not 0 <= self.position <= self.end <= len(self.data):
            raise ValueError(
                "Invalid cursor range [%d, %d) over %d bytes"
                % (self.position, self.end, len(self.data))
            )

    def __repr__(self) -> str:
        return "Cursor(position=%d, end=%d)" % (self.position, self.end)

    @property
    def remaining(self) -> int:
        """Number of bytes left before ``end``."""
        return self.end - self.position

    def tell(self) -> int:
        return self.position

    def is_readable(self, size: int = 1) -> bool:
        return 0 <= size <= self.remaining

    def _advance(self, size: int) -> int:
        if not self.is_readable(size):
            raise TruncatedInput(self.position, size, self.remaining)
        start = self.position
        self.position += size
        return start

    def skip(self, size: int) -> None:
        """Advance by ``size`` bytes without reading them."""
        self._advance(size)

    def read(self, size: int) -> bytes:
        """Read ``size`` raw bytes."""
        start = self._advance(size)
        return self.data[start : start + size]

    def read_be(self, size: int) -> int:
        """
        Read an unsigned big-endian integer of ``size`` bytes.

        :param size: 1, 2 or 4.
        :return: int
        """
        fmt = _BE_FORMATS.get(size)
        if fmt is None:
            raise ValueError("Unsupported integer size: %r" % size)
        start = self._advance(size)
        return struct.unpack_from(fmt, self.data, start)[0]

    def read_fmt(self, fmt: str) -> Tuple[Any, ...]:
        """
        Read big-endian values according to the ``struct`` format ``fmt``.
        """
        fmt = ">" + fmt
        start = self._advance(struct.calcsize(fmt))
        return struct.unpack_from(fmt, self.data, start)

    def read_length_block(self, fmt: str = "I") -> "Cursor":
        """
        Read a length field and return a cursor limited to the block that
        follows it. The parent cursor moves past the whole block.
        """
        length = self.read_fmt(fmt)[0]
        start = self._advance(length)
        return Cursor(self.data, start, start + length)

    def read_pascal_string(self, encoding: str = "macroman", padding: int = 1) -> str:
        """
        Read a length-prefixed string followed by zero padding, so that the
        length byte plus the text spans a multiple of ``padding`` bytes.
        """
        length = self.read_be(1)
        data = self.read(length)
        self.skip(_pad(length + 1, padding) - (length + 1))
        return data.decode(encoding, "replace")
