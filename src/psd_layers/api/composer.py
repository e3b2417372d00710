"""
Recomposition of decoded layer records into canvas-sized layers.

Layer records are stored bottom-most first, so walking them in reverse visits
the stack from the top. In that direction a group marker carrying the group
name opens the group and the ``</Layer group>`` marker closes it. The open
groups are kept on a plain list of names; every pixel layer gets a copy of
that list with its own name appended.

Channel bytes are placed left to right within a row, and rows are consumed
from the bottom row of the layer box upwards.
"""

import logging
import warnings
from typing import Iterable, List

import numpy as np

from psd_layers.constants import GROUP_END_NAME, ChannelID
from psd_layers.exceptions import UnsupportedChannelKind
from psd_layers.psd.layer_and_mask import ChannelInfo, LayerRecord

from .layers import Layer

logger = logging.getLogger(__name__)

#: Channel id to byte position within a packed pixel.
CHANNEL_SLOTS = {
    ChannelID.CHANNEL_0: 0,
    ChannelID.CHANNEL_1: 1,
    ChannelID.CHANNEL_2: 2,
    ChannelID.TRANSPARENCY_MASK: 3,
}


def recompose(records: Iterable[LayerRecord], width: int, height: int) -> List[Layer]:
    """
    Build layers from decoded records.

    :param records: layer records in file order, with channel data decoded.
    :param width: canvas width.
    :param height: canvas height.
    :return: list of :py:class:`~psd_layers.api.layers.Layer`, top-most first.
    """
    group_path: List[str] = []
    layers = []

    for record in reversed(list(records)):
        if record.is_group:
            if record.name == GROUP_END_NAME:
                if group_path:
                    group_path.pop()
                else:
                    logger.warning("Group end marker found outside of any group")
            else:
                group_path.append(record.name)
            continue

        pixels = np.zeros(width * height, dtype=np.uint32)
        for channel in record.channel_info:
            slot = CHANNEL_SLOTS.get(channel.id)
            if slot is None:
                logger.warning(
                    "Unsupported channel kind %s in layer %r, ignoring"
                    % (channel.id, record.name)
                )
                warnings.warn(
                    "Unsupported channel kind %s in layer %r" % (channel.id, record.name),
                    UnsupportedChannelKind,
                    stacklevel=2,
                )
                continue
            place_channel(pixels, width, height, record, channel, slot * 8)

        layers.append(Layer(group_path + [record.name], width, height, pixels, record))

    if group_path:
        logger.warning("Unclosed groups at the end of layer list: %r" % group_path)
    logger.debug("recomposed %d layers" % len(layers))
    return layers


def place_channel(
    pixels: np.ndarray,
    width: int,
    height: int,
    record: LayerRecord,
    channel: ChannelInfo,
    offset: int,
) -> None:
    """
    OR one channel into ``pixels`` at bit ``offset``.

    Byte ``i`` of the channel lands at ``x = left + i % layer_width`` and
    ``y = bottom - 1 - i // layer_width``; bytes falling outside the canvas
    are dropped.
    """
    layer_width, layer_height = record.width, record.height
    if layer_width == 0 or layer_height == 0:
        return

    data = np.frombuffer(channel.data, dtype=np.uint8)
    if data.size != layer_width * layer_height:
        raise ValueError(
            "Channel size mismatch: %d, expected %d"
            % (data.size, layer_width * layer_height)
        )
    # Flip so that array row k sits at canvas row top + k.
    rows = data.reshape((layer_height, layer_width))[::-1]

    top, left = max(record.top, 0), max(record.left, 0)
    bottom, right = min(record.bottom, height), min(record.right, width)
    if left >= right or top >= bottom:
        return

    canvas = pixels.reshape((height, width))
    region = rows[
        top - record.top : bottom - record.top, left - record.left : right - record.left
    ]
    canvas[top:bottom, left:right] |= (
        region.astype(np.uint32) << np.uint32(offset)
    )
