"""
PSD document structure module.

This module contains the :py:class:`PSD` class that represents the low-level
binary structure of a PSD file, up to and including the layer records.
"""

import logging
from typing import Any, TypeVar

from attrs import define, field

from .cursor import Cursor
from .header import FileHeader
from .layer_and_mask import LayerAndMaskInformation

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="PSD")


@define(repr=False)
class PSD:
    """
    Low-level PSD file structure.

    The color mode data and image resources sections are skipped, and the
    merged image data at the end of the file is never read.

    Example::

        from psd_layers.psd import PSD

        with open(input_file, 'rb') as f:
            psd = PSD.frombytes(f.read())

        for record in psd.layer_and_mask_information.layer_records:
            print(record.name)

    .. py:attribute:: header

        See :py:class:`.FileHeader`.

    .. py:attribute:: layer_and_mask_information

        See :py:class:`.LayerAndMaskInformation`.
    """

    header: FileHeader = field(factory=FileHeader)
    layer_and_mask_information: LayerAndMaskInformation = field(
        factory=LayerAndMaskInformation
    )

    def __repr__(self) -> str:
        return "PSD(header=%r, layer_and_mask_information=%r)" % (
            self.header,
            self.layer_and_mask_information,
        )

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("PSD(...)")
            return

        with p.group(2, "PSD(", ")"):
            p.breakable("")
            p.text("header=")
            p.pretty(self.header)
            for record in self.layer_and_mask_information.layer_records:
                p.text(",")
                p.breakable()
                p.pretty(record)
            p.breakable("")

    @classmethod
    def read(cls: type[T], cursor: Cursor, encoding: str = "macroman", **kwargs: Any) -> T:
        header = FileHeader.read(cursor)
        logger.debug("read %s" % header)

        # Color mode data and image resources are not interpreted.
        for section in ("color mode data", "image resources"):
            length = cursor.read_be(4)
            logger.debug("skipping %s, len=%d" % (section, length))
            cursor.skip(length)

        return cls(header, LayerAndMaskInformation.read(cursor, encoding))

    @classmethod
    def frombytes(cls: type[T], data: bytes, *args: Any, **kwargs: Any) -> T:
        return cls.read(Cursor(data), *args, **kwargs)
