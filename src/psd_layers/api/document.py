"""
Document module.

This module provides the :py:class:`Document` class, the entry point for
decoding a PSD file into a flat list of canvas-sized layers.

Example usage::

    from psd_layers import Document

    document = Document.open('document.psd')
    print(f"Size: {document.width}x{document.height}")

    for layer in document:
        print("/".join(layer.name_path))

    document[0].topil().save('top-layer.png')
"""

import logging
import os
from typing import Any, BinaryIO, Iterator, Optional, Sequence, Tuple, Union

from psd_layers.api.composer import recompose
from psd_layers.api.layers import Layer
from psd_layers.psd.document import PSD
from psd_layers.psd.header import FileHeader

logger = logging.getLogger(__name__)


class Document:
    """
    Decoded document: canvas size and layers, top-most first.

    The low-level data structure is accessible at :py:attr:`Document._record`.
    Decoded channel bytes are released once the layers own their packed
    pixels.

    Example::

        from psd_layers import Document

        document = Document.open('example.psd')
        for layer in document:
            layer_image = layer.topil()
    """

    def __init__(self, data: PSD):
        if not isinstance(data, PSD):
            raise TypeError(f"Expected PSD instance, got {type(data).__name__}")
        self._record = data
        header = data.header
        self._layers = tuple(
            recompose(
                data.layer_and_mask_information.layer_records,
                header.width,
                header.height,
            )
        )
        for record in data.layer_and_mask_information.layer_records:
            for channel in record.channel_info:
                channel.data = b""

    @classmethod
    def frombytes(cls, data: bytes, encoding: str = "macroman") -> "Document":
        """
        Decode a document held in memory.

        :param data: full file contents.
        :param encoding: charset encoding of the pascal string layer names,
            default 'macroman'.
        :return: A :py:class:`~psd_layers.api.document.Document` object.
        :raise TruncatedInput: the data ends before the layer data does.
        :raise FormatError: not an 8-bit RGB PSD file, or broken layer data.
        :raise UnsupportedCompression: a channel uses ZIP compression.
        """
        return cls(PSD.frombytes(data, encoding=encoding))

    @classmethod
    def open(
        cls, fp: Union[BinaryIO, str, bytes, os.PathLike], encoding: str = "macroman"
    ) -> "Document":
        """
        Open and decode a PSD document.

        :param fp: filename or file-like object.
        :param encoding: charset encoding of the pascal string layer names,
            default 'macroman'.
        :return: A :py:class:`~psd_layers.api.document.Document` object.
        """
        if isinstance(fp, (str, bytes, os.PathLike)):
            with open(fp, "rb") as f:
                data = f.read()
        else:
            data = fp.read()
        return cls.frombytes(data, encoding=encoding)

    @property
    def header(self) -> FileHeader:
        return self._record.header

    @property
    def width(self) -> int:
        """Document width."""
        return self._record.header.width

    @property
    def height(self) -> int:
        """Document height."""
        return self._record.header.height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def has_merged_alpha(self) -> bool:
        """Whether the merged image stores an extra alpha channel first."""
        return self._record.layer_and_mask_information.has_merged_alpha

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._layers

    def find(self, name_path: Union[str, Sequence[str]]) -> Optional[Layer]:
        """
        Find the first layer with the given name path.

        :param name_path: sequence of names, or a '/'-joined string.
        :return: :py:class:`~psd_layers.api.layers.Layer` or `None`.
        """
        if isinstance(name_path, str):
            name_path = name_path.split("/")
        target = tuple(name_path)
        for layer in self._layers:
            if layer.name_path == target:
                return layer
        return None

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    def __repr__(self) -> str:
        return "%s(size=%dx%d, layers=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
            len(self._layers),
        )

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text(repr(self))
            return

        header = "%s(size=%dx%d)[" % (self.__class__.__name__, self.width, self.height)
        with p.group(2, header, "]"):
            for idx, layer in enumerate(self._layers):
                if idx:
                    p.text(",")
                p.breakable()
                p.pretty(layer)
            p.breakable("")
