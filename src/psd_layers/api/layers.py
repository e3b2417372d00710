"""
Layer module.
"""

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

import numpy as np

if TYPE_CHECKING:
    from PIL import Image

from psd_layers.psd.layer_and_mask import LayerRecord

logger = logging.getLogger(__name__)


class Layer:
    """
    Decoded pixel layer, padded or cropped to the canvas.

    Pixels are packed 32-bit values in row-major order, so the pixel at
    ``(x, y)`` is ``layer.pixels[x + y * layer.width]``. Byte 0 holds red,
    byte 1 green, byte 2 blue and byte 3 the transparency; channels that the
    document did not store stay zero.

    Example::

        layer = document[0]
        print(layer.name_path, layer.size)
        image = layer.topil()
    """

    def __init__(
        self,
        name_path: Sequence[str],
        width: int,
        height: int,
        pixels: Optional[np.ndarray] = None,
        record: Optional[LayerRecord] = None,
    ):
        self._name_path = tuple(name_path)
        self._width = width
        self._height = height
        if pixels is None:
            pixels = np.zeros(width * height, dtype=np.uint32)
        if pixels.shape != (width * height,):
            raise ValueError(
                "Expected %d pixels, got shape %r" % (width * height, pixels.shape)
            )
        self._pixels = pixels.view()
        self._pixels.flags.writeable = False
        self._record = record if record is not None else LayerRecord()

    @property
    def name_path(self) -> Tuple[str, ...]:
        """Group folder names followed by the layer name."""
        return self._name_path

    @property
    def name(self) -> str:
        """Layer name, the last segment of :py:attr:`name_path`."""
        return self._name_path[-1] if self._name_path else ""

    @property
    def width(self) -> int:
        """Width of the canvas."""
        return self._width

    @property
    def height(self) -> int:
        """Height of the canvas."""
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self._width, self._height

    @property
    def pixels(self) -> np.ndarray:
        """Flat read-only :py:class:`numpy.ndarray` of packed ``uint32`` pixels."""
        return self._pixels

    @property
    def bbox(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple as recorded in the file."""
        record = self._record
        return record.left, record.top, record.right, record.bottom

    @property
    def opacity(self) -> int:
        """Opacity of this layer in [0, 255] range."""
        return self._record.opacity

    @property
    def blend_mode(self) -> bytes:
        """Blend mode key of this layer, e.g. ``b'norm'``."""
        return self._record.blend_mode

    @property
    def clipping(self) -> bool:
        """Whether the layer is clipped to the layer below it."""
        return bool(self._record.clipping)

    @property
    def visible(self) -> bool:
        """Visibility flag of the layer record."""
        return self._record.flags.visible

    def is_visible(self) -> bool:
        return self.visible

    def numpy(self) -> np.ndarray:
        """
        Get the pixels as an RGBA array.

        :return: :py:class:`numpy.ndarray` of shape ``(height, width, 4)`` and
            dtype ``uint8``.
        """
        from .numpy_io import unpack_pixels

        return unpack_pixels(self._pixels, self._width, self._height)

    def topil(self, channel: Optional[int] = None) -> "Image.Image":
        """
        Get PIL Image of the layer.

        :param channel: Which channel to return; e.g., 0 for 'R' channel. See
            :py:class:`~psd_layers.constants.ChannelID`. When `None`, the
            method returns an RGBA image.
        :return: :py:class:`PIL.Image.Image`.

        Example::

            from psd_layers.constants import ChannelID

            image = layer.topil()
            alpha = layer.topil(ChannelID.TRANSPARENCY_MASK)
        """
        from .pil_io import convert_layer_to_pil

        return convert_layer_to_pil(self, channel)

    def __repr__(self) -> str:
        return "%s(%r size=%dx%d%s%s)" % (
            self.__class__.__name__,
            "/".join(self._name_path),
            self._width,
            self._height,
            " invisible" if not self.visible else "",
            " clip" if self.clipping else "",
        )
