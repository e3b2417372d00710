"""
File header structure.
"""

import logging
from typing import Any, TypeVar

from attrs import define, field, validators

from psd_layers.constants import SIGNATURE, ColorMode
from psd_layers.exceptions import FormatError
from psd_layers.psd.cursor import Cursor

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileHeader")


@define(repr=True)
class FileHeader:
    """
    Header section of the PSD file.

    Only version 1 documents with 8 bits per channel in RGB mode are
    accepted, with a canvas of at least one pixel each way; anything else is
    rejected with a :py:class:`~psd_layers.exceptions.FormatError`.

    .. py:attribute:: signature

        Signature: always equal to ``b'8BPS'``.

    .. py:attribute:: version

        Version number. Always 1.

    .. py:attribute:: channels

        The number of channels in the image, including any user-defined alpha
        channel.

    .. py:attribute:: height

        The height of the image in pixels.

    .. py:attribute:: width

        The width of the image in pixels.

    .. py:attribute:: depth

        The number of bits per channel. Always 8.

    .. py:attribute:: color_mode

        The color mode of the file. Always
        :py:attr:`~psd_layers.constants.ColorMode.RGB`.
    """

    signature: bytes = field(default=SIGNATURE, repr=False)
    version: int = 1
    channels: int = 3
    height: int = field(default=64, validator=validators.ge(1))
    width: int = field(default=64, validator=validators.ge(1))
    depth: int = 8
    color_mode: ColorMode = field(default=ColorMode.RGB, converter=ColorMode)

    @classmethod
    def read(cls: type[T], cursor: Cursor, **kwargs: Any) -> T:
        signature = cursor.read(4)
        if signature != SIGNATURE:
            raise FormatError("signature", "found %r" % signature)
        version = cursor.read_be(2)
        if version != 1:
            raise FormatError("version", "found %d" % version)
        cursor.skip(6)
        channels = cursor.read_be(2)
        height = cursor.read_be(4)
        width = cursor.read_be(4)
        depth = cursor.read_be(2)
        if depth != 8:
            raise FormatError("depth", "found %d bits per channel" % depth)
        color_mode = cursor.read_be(2)
        if color_mode != ColorMode.RGB:
            raise FormatError("color-mode", "found %d" % color_mode)
        if width < 1 or height < 1:
            raise FormatError("size", "found %dx%d" % (width, height))
        return cls(signature, version, channels, height, width, depth, color_mode)
