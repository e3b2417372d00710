"""
psd-layers: decode layered Photoshop PSD files into canvas-sized pixel layers.

Basic usage::

    from psd_layers import Document

    document = Document.open('example.psd')

    for layer in document:
        print("/".join(layer.name_path), layer.size)

    document[0].topil().save('output.png')

Only 8-bit RGB documents with RAW or RLE compressed channels are supported.
Group folders are flattened into each layer's
:py:attr:`~psd_layers.api.layers.Layer.name_path`.

Architecture:

- :py:mod:`psd_layers.psd`: Low-level binary structure parsing
- :py:mod:`psd_layers.compression`: Channel decompression (RAW, RLE)
- :py:mod:`psd_layers.api`: Recomposition and the user-facing classes
"""

from psd_layers.api.document import Document
from psd_layers.api.layers import Layer
from psd_layers.exceptions import (
    FormatError,
    PSDLayersError,
    TruncatedInput,
    UnsupportedChannelKind,
    UnsupportedCompression,
)
from psd_layers.version import __version__

__all__ = [
    "Document",
    "Layer",
    "PSDLayersError",
    "TruncatedInput",
    "FormatError",
    "UnsupportedCompression",
    "UnsupportedChannelKind",
    "__version__",
]
