"""
Conversion between packed pixels and NumPy arrays.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def unpack_pixels(pixels: np.ndarray, width: int, height: int) -> np.ndarray:
    """Split packed ``uint32`` pixels into a ``(height, width, 4)`` uint8 array."""
    shifts = np.arange(4, dtype=np.uint32) * 8
    array = (pixels.reshape((height, width, 1)) >> shifts) & 0xFF
    return array.astype(np.uint8)


def pack_pixels(array: np.ndarray) -> np.ndarray:
    """Inverse of :py:func:`unpack_pixels`; returns a flat ``uint32`` array."""
    if array.ndim != 3 or array.shape[2] != 4:
        raise ValueError("Expected (height, width, 4) array, got %r" % (array.shape,))
    shifts = np.arange(4, dtype=np.uint32) * 8
    packed = np.bitwise_or.reduce(array.astype(np.uint32) << shifts, axis=2)
    return packed.reshape(-1)
