"""
Errors raised while decoding a document.

Every fatal error derives from :py:class:`PSDLayersError`; decoding stops at
the point of the offending read and no partial document is returned.
:py:class:`UnsupportedChannelKind` is a warning category instead, since an
unknown channel only drops that channel from the output.
"""


class PSDLayersError(Exception):
    """Base class of decode errors."""


class TruncatedInput(PSDLayersError):
    """
    A read or skip would cross the end of the input.

    .. py:attribute:: position

        Cursor position when the read was attempted.

    .. py:attribute:: requested

        Number of bytes requested.

    .. py:attribute:: available

        Number of bytes left before the end of the readable range.
    """

    def __init__(self, position: int, requested: int, available: int):
        super().__init__(
            "Truncated PSD: requested %d bytes at offset %d, %d available"
            % (requested, position, available)
        )
        self.position = position
        self.requested = requested
        self.available = available


class FormatError(PSDLayersError):
    """
    Not a supported document.

    .. py:attribute:: reason

        One of ``signature``, ``version``, ``depth``, ``color-mode``, ``size``,
        ``layer-signature`` or ``channel-length``.
    """

    def __init__(self, reason: str, detail: str = ""):
        message = "not a supported document: %s" % reason
        if detail:
            message += " (%s)" % detail
        super().__init__(message)
        self.reason = reason


class UnsupportedCompression(PSDLayersError):
    """A channel uses a compression method other than RAW or RLE."""

    def __init__(self, compression: int):
        super().__init__("Unsupported compression kind: %d" % compression)
        self.compression = compression


class UnsupportedChannelKind(UserWarning):
    """A channel kind that recomposition does not place; the channel is skipped."""
