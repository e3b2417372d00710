"""
PackBits run-length codec.

Each packet starts with a header byte ``n``:

- 0 to 127: copy the next ``n + 1`` bytes literally.
- 129 to 255: repeat the next byte ``257 - n`` times.
- 128: no-op.

Decoding reads straight from a :py:class:`~psd_layers.psd.cursor.Cursor`
until the expected number of bytes is produced, so packets may span row
boundaries.

Example usage::

    from psd_layers.compression import packbits
    from psd_layers.psd.cursor import Cursor

    encoded = packbits.encode(b"\\x00" * 100 + b"\\xff" * 50)
    decoded = packbits.decode(Cursor(encoded), 150)
"""

from psd_layers.exceptions import FormatError
from psd_layers.psd.cursor import Cursor

MAX_LENGTH = 128


def decode(cursor: Cursor, size: int) -> bytes:
    """decode(cursor, size) -> bytes

    Decode packets until ``size`` bytes are produced.
    """
    result = bytearray()
    while len(result) < size:
        header = cursor.read_be(1)
        if header < 0x80:
            count = header + 1
            chunk = cursor.read(count)
        elif header > 0x80:
            count = 257 - header
            chunk = cursor.read(1) * count
        else:
            continue
        if len(result) + count > size:
            raise FormatError(
                "channel-length",
                "RLE packet overruns channel: %d > %d" % (len(result) + count, size),
            )
        result.extend(chunk)
    return bytes(result)


def encode(data: bytes) -> bytes:
    """encode(data) -> bytes

    Encode ``data`` into literal and repeat packets of at most 128 bytes.
    """
    result = bytearray()
    literal = bytearray()
    length = len(data)
    i = 0

    def flush_literal() -> None:
        if literal:
            result.append(len(literal) - 1)
            result.extend(literal)
            literal.clear()

    while i < length:
        j = i + 1
        while j < length and j - i < MAX_LENGTH and data[j] == data[i]:
            j += 1
        run = j - i
        if run > 1:
            flush_literal()
            result.append(257 - run)
            result.append(data[i])
        else:
            literal.append(data[i])
            if len(literal) == MAX_LENGTH:
                flush_literal()
        i = j

    flush_literal()
    return bytes(result)
