"""
PIL IO module.
"""

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np
from PIL import Image

from psd_layers.constants import ChannelID

if TYPE_CHECKING:
    from .layers import Layer

logger = logging.getLogger(__name__)


def get_channel_index(channel: int) -> int:
    """Position of ``channel`` in the packed pixel, e.g. 3 for transparency."""
    if channel == ChannelID.TRANSPARENCY_MASK:
        return 3
    if channel in (ChannelID.CHANNEL_0, ChannelID.CHANNEL_1, ChannelID.CHANNEL_2):
        return int(channel)
    raise ValueError("Invalid channel specified: %s" % channel)


def convert_layer_to_pil(layer: "Layer", channel: Optional[int]) -> Image.Image:
    """Convert a decoded layer to PIL Image."""
    array = layer.numpy()
    if channel is None:
        return Image.fromarray(array)
    return Image.fromarray(np.ascontiguousarray(array[:, :, get_channel_index(channel)]))
