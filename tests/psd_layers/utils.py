"""Builders for synthetic PSD files."""

import logging
import struct
from typing import Iterable, List, Optional, Sequence, Tuple

from psd_layers.compression import packbits

logging.basicConfig(level=logging.DEBUG)

GROUP_MARKER_FLAGS = 0x18
GROUP_END = "</Layer group>"


def header(
    width: int,
    height: int,
    signature: bytes = b"8BPS",
    version: int = 1,
    channels: int = 3,
    depth: int = 8,
    color_mode: int = 3,
) -> bytes:
    return (
        signature
        + struct.pack(">H", version)
        + b"\x00" * 6
        + struct.pack(">HIIHH", channels, height, width, depth, color_mode)
    )


def pascal_string(name: str, padding: int = 4) -> bytes:
    data = name.encode("macroman")
    result = struct.pack(">B", len(data)) + data
    if len(result) % padding:
        result += b"\x00" * (padding - len(result) % padding)
    return result


def raw_channel(channel_id: int, data: bytes) -> Tuple[int, bytes]:
    return channel_id, struct.pack(">H", 0) + data


def rle_channel(channel_id: int, data: bytes, width: int, height: int) -> Tuple[int, bytes]:
    rows = [packbits.encode(data[y * width : (y + 1) * width]) for y in range(height)]
    counts = b"".join(struct.pack(">H", len(row)) for row in rows)
    return channel_id, struct.pack(">H", 1) + counts + b"".join(rows)


def layer(
    name: str,
    bbox: Tuple[int, int, int, int] = (0, 0, 0, 0),
    channels: Sequence[Tuple[int, bytes]] = (),
    flags: int = 0x08,
    opacity: int = 255,
    clipping: int = 0,
    blend_mode: bytes = b"norm",
    signature: bytes = b"8BIM",
    mask_data: bytes = b"",
    blending_ranges: bytes = b"",
    tagged_blocks: bytes = b"",
) -> Tuple[bytes, bytes]:
    """Return (layer record, channel image data) for one layer.

    ``bbox`` is (top, left, bottom, right).
    """
    top, left, bottom, right = bbox
    record = struct.pack(">4iH", top, left, bottom, right, len(channels))
    for channel_id, payload in channels:
        record += struct.pack(">hI", channel_id, len(payload))
    record += signature + blend_mode + struct.pack(">BBBx", opacity, clipping, flags)
    extra = (
        struct.pack(">I", len(mask_data))
        + mask_data
        + struct.pack(">I", len(blending_ranges))
        + blending_ranges
        + pascal_string(name)
        + tagged_blocks
    )
    record += struct.pack(">I", len(extra)) + extra
    return record, b"".join(payload for _, payload in channels)


def group_begin(name: str) -> Tuple[bytes, bytes]:
    return layer(name, flags=GROUP_MARKER_FLAGS)


def group_end() -> Tuple[bytes, bytes]:
    return layer(GROUP_END, flags=GROUP_MARKER_FLAGS)


def psd(
    width: int,
    height: int,
    layers: Iterable[Tuple[bytes, bytes]] = (),
    layer_count: Optional[int] = None,
    color_mode_data: bytes = b"",
    image_resources: bytes = b"",
    **kwargs,
) -> bytes:
    """Assemble a document; ``layers`` are in file order, bottom-most first."""
    layers = list(layers)
    if layer_count is None:
        layer_count = len(layers)
    result = header(width, height, **kwargs)
    result += struct.pack(">I", len(color_mode_data)) + color_mode_data
    result += struct.pack(">I", len(image_resources)) + image_resources
    if layers or layer_count:
        body = struct.pack(">h", layer_count)
        body += b"".join(record for record, _ in layers)
        body += b"".join(data for _, data in layers)
        layer_info = struct.pack(">I", len(body)) + body
    else:
        layer_info = struct.pack(">I", 0)
    result += struct.pack(">I", len(layer_info)) + layer_info
    # Merged image data, never read.
    result += struct.pack(">H", 0) + b"\x00" * (width * height * 3)
    return result


def rgb_layer(
    name: str,
    bbox: Tuple[int, int, int, int],
    colors: Sequence[bytes],
    alpha: Optional[bytes] = None,
    compression: int = 0,
    **kwargs,
) -> Tuple[bytes, bytes]:
    top, left, bottom, right = bbox
    width, height = right - left, bottom - top
    planes: List[Tuple[int, bytes]] = list(enumerate(colors))
    if alpha is not None:
        planes.append((-1, alpha))
    if compression:
        channels = [rle_channel(i, data, width, height) for i, data in planes]
    else:
        channels = [raw_channel(i, data) for i, data in planes]
    return layer(name, bbox, channels, **kwargs)
