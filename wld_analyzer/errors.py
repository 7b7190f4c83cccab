"""Errors raised while decoding and rendering world files."""


class WldError(Exception):
    """Base class for all world file errors."""
    pass


class CursorBoundsError(WldError):
    """Raised when a strict cursor reads past the end of its buffer."""

    def __init__(self, offset: int, size: int, length: int):
        self.offset = offset
        self.size = size
        self.length = length
        super().__init__(
            f"Read of {size} bytes at offset {offset} exceeds buffer size {length}"
        )


class FormatError(WldError):
    """Raised when the file is not a world save or its preamble is unreadable."""
    pass


class UnsupportedVersionError(FormatError):
    """Raised when the structural version is older than the minimum supported."""

    def __init__(self, version: int, minimum: int):
        self.version = version
        self.minimum = minimum
        super().__init__(
            f"World version {version} is older than {minimum} and cannot be parsed"
        )


class HeaderDecodeError(WldError):
    """Raised when the header section cannot be decoded."""
    pass


class TileDecodeError(WldError):
    """Raised when the tile section cannot be decoded."""
    pass


class RenderError(WldError):
    """Raised when a decoded world cannot be turned into an image."""
    pass
