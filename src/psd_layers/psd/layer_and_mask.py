"""
Layer and mask data structures.

This module reads the "Layer and Mask Information" section of a PSD file,
which holds the per-layer records followed by the compressed channel data.

Key classes:

- :py:class:`LayerAndMaskInformation`: Section container, owns the layer list
- :py:class:`LayerRecords`: List of individual layer records
- :py:class:`LayerRecord`: Single layer metadata (name, bounds, blend mode, etc.)
- :py:class:`ChannelInfo`: Channel kind, declared length and decoded bytes
- :py:class:`LayerFlags`: Bits of the layer flags byte
- :py:class:`ChannelImageData`: Second pass that decodes every channel

The layer structure in PSD files is stored as a flat list with implicit
hierarchy, bottom-most layer first. Groups are delimited by marker records
whose flags have both ``0x08`` and ``0x10`` set; the recomposition in
:py:mod:`psd_layers.api.composer` turns them back into name paths.

Each layer record contains:

1. **Bounds**: top, left, bottom, right
2. **Channel info**: List of channels (R, G, B, A, masks) with byte lengths
3. **Blending**: signature, blend mode key, opacity, clipping, flags
4. **Extra data**: mask data and blending ranges (skipped), the Pascal name,
   and tagged blocks (skipped)

Example of reading layer metadata::

    from psd_layers.psd import PSD

    psd = PSD.frombytes(data)
    for record in psd.layer_and_mask_information.layer_records:
        print(f"Layer: {record.name}")
        print(f"  Bounds: {record.top}, {record.left}, {record.bottom}, {record.right}")
        print(f"  Channels: {len(record.channel_info)}")
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define, field

from psd_layers import compression
from psd_layers.constants import GROUP_FLAGS, LAYER_SIGNATURE, ChannelID
from psd_layers.exceptions import FormatError
from psd_layers.psd.cursor import Cursor

logger = logging.getLogger(__name__)

T_LayerAndMaskInformation = TypeVar(
    "T_LayerAndMaskInformation", bound="LayerAndMaskInformation"
)
T_ChannelInfo = TypeVar("T_ChannelInfo", bound="ChannelInfo")
T_LayerFlags = TypeVar("T_LayerFlags", bound="LayerFlags")
T_LayerRecords = TypeVar("T_LayerRecords", bound="LayerRecords")
T_LayerRecord = TypeVar("T_LayerRecord", bound="LayerRecord")


def _channel_id(value: int) -> Any:
    try:
        return ChannelID(value)
    except ValueError:
        return value


@define(repr=False)
class LayerAndMaskInformation:
    """
    Layer and mask information section.

    .. py:attribute:: layer_count

        Layer count as stored. If it is a negative number, its absolute value
        is the number of layers and the first alpha channel contains the
        transparency data for the merged result.

    .. py:attribute:: layer_records

        Information about each layer. See :py:class:`.LayerRecords`.
    """

    layer_count: int = 0
    layer_records: "LayerRecords" = field(factory=lambda: LayerRecords())

    @property
    def has_merged_alpha(self) -> bool:
        return self.layer_count < 0

    def __repr__(self) -> str:
        return "LayerAndMaskInformation(layer_count=%d, layer_records=%r)" % (
            self.layer_count,
            self.layer_records,
        )

    @classmethod
    def read(
        cls: type[T_LayerAndMaskInformation],
        cursor: Cursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_LayerAndMaskInformation:
        start_pos = cursor.tell()
        length = cursor.read_be(4)
        logger.debug(
            "reading layer and mask info, len=%d, offset=%d" % (length, start_pos)
        )
        if length == 0:
            return cls()

        # Section lengths are informative only; reads are bounded by the input.
        length = cursor.read_be(4)
        logger.debug("reading layer info, len=%d" % length)
        if length == 0:
            return cls()
        return cls._read_body(cursor, encoding)

    @classmethod
    def _read_body(
        cls: type[T_LayerAndMaskInformation], cursor: Cursor, encoding: str
    ) -> T_LayerAndMaskInformation:
        start_pos = cursor.tell()
        layer_count = cursor.read_fmt("h")[0]
        layer_records = LayerRecords.read(cursor, layer_count, encoding)
        logger.debug("  read layer records, len=%d" % (cursor.tell() - start_pos))
        ChannelImageData.read(cursor, layer_records)
        return cls(layer_count=layer_count, layer_records=layer_records)


@define(repr=False)
class ChannelInfo:
    """
    Channel information.

    .. py:attribute:: id

        Channel ID: 0 = red, 1 = green, 2 = blue; -1 = transparency mask; -2 =
        user supplied layer mask, -3 real user supplied layer mask (when both
        a user mask and a vector mask are present). See
        :py:class:`~psd_layers.constants.ChannelID`. Unknown values are kept
        as plain integers.

    .. py:attribute:: length

        Length of the corresponding channel data as declared in the record.

    .. py:attribute:: data

        Decompressed channel bytes, filled in by :py:class:`.ChannelImageData`.
    """

    id: Any = field(default=ChannelID.CHANNEL_0, converter=_channel_id)
    length: int = 0
    data: bytes = b""

    def __repr__(self) -> str:
        return "ChannelInfo(id=%r, length=%d, data=<%d bytes>)" % (
            self.id,
            self.length,
            len(self.data),
        )

    @classmethod
    def read(cls: type[T_ChannelInfo], cursor: Cursor, **kwargs: Any) -> T_ChannelInfo:
        values = cursor.read_fmt("hI")
        return cls(id=values[0], length=values[1])


@define(repr=False)
class LayerFlags:
    """
    Layer flags.

    Note there are undocumented flags.

    .. py:attribute:: transparency_protected
    .. py:attribute:: visible
    .. py:attribute:: pixel_data_irrelevant
    .. py:attribute:: value

        The raw flags byte.
    """

    value: int = 0

    def __repr__(self) -> str:
        return "LayerFlags(0x%02x)" % self.value

    @property
    def transparency_protected(self) -> bool:
        return bool(self.value & 1)

    @property
    def visible(self) -> bool:
        return not bool(self.value & 2)

    @property
    def pixel_data_irrelevant(self) -> bool:
        return bool(self.value & 16)

    @property
    def is_group(self) -> bool:
        """Both the photoshop 5 bit and the irrelevant pixel data bit are set."""
        return (self.value & GROUP_FLAGS) == GROUP_FLAGS

    @classmethod
    def read(cls: type[T_LayerFlags], cursor: Cursor, **kwargs: Any) -> T_LayerFlags:
        return cls(cursor.read_be(1))


class LayerRecords(list):
    """
    List of layer records. See :py:class:`.LayerRecord`.
    """

    @classmethod
    def read(
        cls: type[T_LayerRecords],
        cursor: Cursor,
        layer_count: int,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_LayerRecords:
        items = []
        for _ in range(abs(layer_count)):
            items.append(LayerRecord.read(cursor, encoding))
        return cls(items)


@define(repr=False)
class LayerRecord:
    """
    Layer record.

    The box fields are signed; a layer that sticks out above or left of the
    canvas has a negative top or left.

    .. py:attribute:: top

        Top position.

    .. py:attribute:: left

        Left position.

    .. py:attribute:: bottom

        Bottom position.

    .. py:attribute:: right

        Right position.

    .. py:attribute:: channel_info

        List of :py:class:`.ChannelInfo`.

    .. py:attribute:: signature

        Blend mode signature ``b'8BIM'``.

    .. py:attribute:: blend_mode

        Blend mode key, e.g. ``b'norm'`` or ``b'pass'``. Not validated.

    .. py:attribute:: opacity

        Opacity, 0 = transparent, 255 = opaque.

    .. py:attribute:: clipping

        Clipping, 0 = base, 1 = non-base.

    .. py:attribute:: flags

        See :py:class:`.LayerFlags`.

    .. py:attribute:: name

        Layer name.
    """

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0
    channel_info: list[ChannelInfo] = field(factory=list)
    signature: bytes = LAYER_SIGNATURE
    blend_mode: bytes = b"norm"
    opacity: int = 255
    clipping: int = 0
    flags: LayerFlags = field(factory=LayerFlags)
    name: str = ""

    def __repr__(self) -> str:
        return (
            "LayerRecord(name=%r, bbox=(%d, %d, %d, %d), channels=%r, "
            "blend_mode=%r, opacity=%d, flags=%r)"
            % (
                self.name,
                self.left,
                self.top,
                self.right,
                self.bottom,
                [c.id for c in self.channel_info],
                self.blend_mode,
                self.opacity,
                self.flags,
            )
        )

    @classmethod
    def read(
        cls: type[T_LayerRecord],
        cursor: Cursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_LayerRecord:
        start_pos = cursor.tell()
        top, left, bottom, right, num_channels = cursor.read_fmt("4iH")
        channel_info = [ChannelInfo.read(cursor) for i in range(num_channels)]
        signature, blend_mode, opacity, clipping = cursor.read_fmt("4s4sBB")
        if signature != LAYER_SIGNATURE:
            raise FormatError("layer-signature", "found %r" % signature)
        flags = LayerFlags.read(cursor)
        cursor.skip(1)

        extra = cursor.read_length_block()
        name = cls._read_extra(extra, encoding)
        logger.debug("  read layer record, len=%d" % (cursor.tell() - start_pos))
        return cls(
            top=top,
            left=left,
            bottom=bottom,
            right=right,
            channel_info=channel_info,
            signature=signature,
            blend_mode=blend_mode,
            opacity=opacity,
            clipping=clipping,
            flags=flags,
            name=name,
        )

    @classmethod
    def _read_extra(cls, cursor: Cursor, encoding: str) -> str:
        mask_data = cursor.read_length_block()
        blending_ranges = cursor.read_length_block()
        logger.debug(
            "  skipped mask data, len=%d, blending ranges, len=%d"
            % (mask_data.remaining, blending_ranges.remaining)
        )
        name = cursor.read_pascal_string(encoding, padding=4)
        # Tagged blocks are not interpreted.
        cursor.skip(cursor.remaining)
        return name

    @property
    def width(self) -> int:
        """Width of the layer."""
        return max(self.right - self.left, 0)

    @property
    def height(self) -> int:
        """Height of the layer."""
        return max(self.bottom - self.top, 0)

    @property
    def is_group(self) -> bool:
        """Whether this record is a group marker rather than a drawable layer."""
        return self.flags.is_group


class ChannelImageData:
    """
    Channel image data that follows the layer records.

    Channels are stored layer by layer in record order, each one prefixed by
    its compression type.
    """

    @classmethod
    def read(
        cls, cursor: Cursor, layer_records: Optional[LayerRecords] = None, **kwargs: Any
    ) -> None:
        """Decode every channel and store it on its :py:class:`.ChannelInfo`."""
        start_pos = cursor.tell()
        for record in layer_records or []:
            width, height = record.width, record.height
            for channel in record.channel_info:
                kind = cursor.read_be(2)
                channel.data = compression.decompress(cursor, kind, width, height)
        logger.debug("  read channel image data, len=%d" % (cursor.tell() - start_pos))
