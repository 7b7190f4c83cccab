"""World file preamble: identity checks and section pointers."""
from dataclasses import dataclass
from typing import Tuple
import logging

from ..errors import CursorBoundsError, FormatError, UnsupportedVersionError
from ..reader import ByteCursor
from .constants import (
    MAGIC,
    FILE_TYPE_WORLD,
    MIN_SUPPORTED_VERSION,
    PREAMBLE_RESERVED_BYTES,
    PREAMBLE_SKIPPED_BYTES,
    SECTION_POINTERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorldPreamble:
    """Fields every later decoding pass depends on."""
    version: int
    pointers: Tuple[int, ...]       # pointers[0] is always 0 ("no section")
    importants: Tuple[bool, ...]    # indexed by block id
    width: int
    height: int

    def section_offset(self, name: str) -> int:
        """Byte offset of a named section."""
        index = SECTION_POINTERS[name]
        if index >= len(self.pointers):
            raise FormatError(f"File has no pointer for section '{name}'")
        return self.pointers[index]


def read_preamble(cursor: ByteCursor) -> WorldPreamble:
    """Validate the file identity and read the section table.

    The cursor is moved to offset 0 first and left there on success.

    Raises:
        FormatError: Wrong magic or file type, truncated preamble, negative
            section pointers or world size
        UnsupportedVersionError: Version older than MIN_SUPPORTED_VERSION
    """
    cursor.seek(0)
    try:
        version = cursor.read_i32()
        magic = cursor.read_string(len(MAGIC))
        file_type = cursor.read_u8()
        cursor.skip(PREAMBLE_RESERVED_BYTES)
        pointers = [0]
        for _ in range(cursor.read_i16()):
            pointers.append(cursor.read_i32())
        importants = cursor.read_bit_flags(max(0, cursor.read_i16()))
        cursor.read_string()    # world name, decoded again by the header
        cursor.read_string()    # seed text
        cursor.skip(PREAMBLE_SKIPPED_BYTES)
        height = cursor.read_i32()
        width = cursor.read_i32()
    except CursorBoundsError as e:
        raise FormatError(f"Invalid file type: truncated preamble ({e})") from e
    finally:
        cursor.seek(0)

    if magic != MAGIC or file_type != FILE_TYPE_WORLD:
        raise FormatError(
            f"Invalid file type: magic={magic!r} file_type={file_type}"
        )
    if version < MIN_SUPPORTED_VERSION:
        raise UnsupportedVersionError(version, MIN_SUPPORTED_VERSION)
    bad_pointers = [p for p in pointers if p < 0]
    if bad_pointers:
        raise FormatError(f"Invalid section pointers: {bad_pointers}")
    if width < 0 or height < 0:
        raise FormatError(f"Invalid world size {width}x{height}")

    logger.debug(
        f"World version {version}, {width}x{height} tiles, "
        f"{len(pointers) - 1} section pointers, {len(importants)} tile types"
    )
    return WorldPreamble(
        version=version,
        pointers=tuple(pointers),
        importants=tuple(importants),
        width=width,
        height=height,
    )
