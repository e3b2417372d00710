"""
Low-level API that translates binary data to Python structure.

Everything in this subpackage reads through
:py:class:`~psd_layers.psd.cursor.Cursor`.
"""

from .cursor import Cursor as Cursor
from .document import PSD as PSD
from .header import FileHeader as FileHeader
from .layer_and_mask import (
    ChannelImageData as ChannelImageData,
    ChannelInfo as ChannelInfo,
    LayerAndMaskInformation as LayerAndMaskInformation,
    LayerFlags as LayerFlags,
    LayerRecord as LayerRecord,
    LayerRecords as LayerRecords,
)

__all__ = [
    "Cursor",
    "PSD",
    "FileHeader",
    "LayerAndMaskInformation",
    "LayerRecords",
    "LayerRecord",
    "LayerFlags",
    "ChannelInfo",
    "ChannelImageData",
]
