"""
Decompression of layer channel data.

Supported compression methods:

- **RAW** (``Compression.RAW``): ``width * height`` bytes stored verbatim.
- **RLE** (``Compression.RLE``): a table of per-row byte counts followed by
  PackBits packets, see :py:mod:`psd_layers.compression.packbits`.

ZIP compressed channels raise
:py:class:`~psd_layers.exceptions.UnsupportedCompression`; the position of the
following channels cannot be known without decoding them.

Example usage::

    from psd_layers.compression import decompress
    from psd_layers.constants import Compression

    data = decompress(cursor, Compression.RLE, width=100, height=100)
"""

import logging

from psd_layers.compression import packbits
from psd_layers.constants import Compression
from psd_layers.exceptions import UnsupportedCompression
from psd_layers.psd.cursor import Cursor

logger = logging.getLogger(__name__)


def decompress(cursor: Cursor, compression: int, width: int, height: int) -> bytes:
    """Decompress one channel of 8-bit data from ``cursor``.

    :param cursor: cursor positioned right after the compression field.
    :param compression: compression type,
            see :py:class:`~psd_layers.constants.Compression`.
    :param width: width of the layer.
    :param height: height of the layer.
    :return: decompressed data bytes, exactly ``width * height`` long.
    """
    length = width * height
    if compression == Compression.RAW:
        return cursor.read(length)
    elif compression == Compression.RLE:
        return decode_rle(cursor, width, height)
    logger.error("Unsupported compression kind: %d", compression)
    raise UnsupportedCompression(compression)


def decode_rle(cursor: Cursor, width: int, height: int) -> bytes:
    # Row byte counts are not needed; packets are decoded back to back.
    cursor.skip(2 * height)
    return packbits.decode(cursor, width * height)
