"""
Various constants for psd_layers
"""
from enum import IntEnum

#: File header signature.
SIGNATURE = b"8BPS"

#: Signature that precedes the blend mode key of each layer record.
LAYER_SIGNATURE = b"8BIM"

#: Name of the marker layer that closes a group when walking bottom-up.
GROUP_END_NAME = "</Layer group>"

#: Flag bits that are both set on group marker records.
GROUP_FLAGS = 0x18


class ColorMode(IntEnum):
    """
    Color mode.
    """

    BITMAP = 0
    GRAYSCALE = 1
    INDEXED = 2
    RGB = 3
    CMYK = 4
    MULTICHANNEL = 7
    DUOTONE = 8
    LAB = 9


class ChannelID(IntEnum):
    """
    Channel types.
    """

    CHANNEL_0 = 0  # Red
    CHANNEL_1 = 1  # Green
    CHANNEL_2 = 2  # Blue
    TRANSPARENCY_MASK = -1
    USER_LAYER_MASK = -2
    REAL_USER_LAYER_MASK = -3


class Compression(IntEnum):
    """
    Compression modes.

    Compression. 0 = Raw Data, 1 = RLE compressed, 2 = ZIP without prediction,
    3 = ZIP with prediction. Only the first two are decoded.
    """

    RAW = 0
    RLE = 1
    ZIP = 2
    ZIP_WITH_PREDICTION = 3
