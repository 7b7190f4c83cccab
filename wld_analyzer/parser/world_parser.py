"""Decode entry point for world files."""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Union
import logging

from ..reader import ByteCursor, ProgressCallback
from .constants import SECTION_POINTERS
from .header import WorldHeader, decode_header
from .preamble import WorldPreamble, read_preamble
from .tiles import WorldGrid, decode_tiles

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS = ('header', 'tiles')


@dataclass(frozen=True)
class WorldData:
    """Result of a decode pass; unrequested sections are None."""
    preamble: WorldPreamble
    header: Optional[WorldHeader] = None
    tiles: Optional[WorldGrid] = None

    @property
    def sections(self) -> Dict[str, object]:
        """Decoded sections by name."""
        return {
            name: getattr(self, name)
            for name in SECTION_POINTERS
            if getattr(self, name) is not None
        }

    def section(self, name: str):
        name = name.lower()
        if name not in SECTION_POINTERS:
            raise KeyError(f"Unknown section '{name}'")
        return getattr(self, name)


def normalize_sections(sections: Iterable[str]) -> tuple:
    """Lower-case section names and reject unknown ones."""
    normalized = tuple(s.lower() for s in sections)
    unknown = [s for s in normalized if s not in SECTION_POINTERS]
    if unknown:
        raise ValueError(
            f"Unknown section(s) {unknown}; expected any of {list(SECTION_POINTERS)}"
        )
    return normalized


class WorldParser:
    """Parser for world save files.

    Args:
        data: Entire file contents
        ignore_bounds: Lenient cursor mode; out-of-range reads yield zeros.
            For diagnostics only.
        progress_callback: Receives increasing integer percentages
    """

    def __init__(self,
                 data: bytes,
                 ignore_bounds: bool = False,
                 progress_callback: Optional[ProgressCallback] = None):
        self.cursor = ByteCursor(
            data,
            ignore_bounds=ignore_bounds,
            progress_callback=progress_callback,
        )
        if ignore_bounds:
            logger.warning("Cursor bounds checks disabled; truncated data will read as zeros")

    def parse(self, sections: Iterable[str] = DEFAULT_SECTIONS) -> WorldData:
        """Decode the preamble and the requested sections.

        Raises:
            FormatError: Not a world file or preamble unreadable
            UnsupportedVersionError: World version too old
            HeaderDecodeError: Header section failed to decode
            TileDecodeError: Tile section failed to decode
        """
        wanted = normalize_sections(sections)
        preamble = read_preamble(self.cursor)
        decoded = {}

        if 'header' in wanted:
            self.cursor.seek(preamble.section_offset('header'))
            decoded['header'] = decode_header(self.cursor, preamble.version)

        if 'tiles' in wanted:
            self.cursor.seek(preamble.section_offset('tiles'))
            decoded['tiles'] = decode_tiles(self.cursor, preamble)

        return WorldData(preamble=preamble, **decoded)


def parse_world(data: bytes,
                sections: Iterable[str] = DEFAULT_SECTIONS,
                progress_callback: Optional[ProgressCallback] = None,
                ignore_bounds: bool = False) -> WorldData:
    """Decode a world file held in memory."""
    parser = WorldParser(data, ignore_bounds=ignore_bounds,
                         progress_callback=progress_callback)
    return parser.parse(sections)


def load_world(path: Union[str, Path], **kwargs) -> WorldData:
    """Read a world file from disk and decode it."""
    path = Path(path)
    with open(path, 'rb') as f:
        data = f.read()
    logger.info(f"Loaded {path} ({len(data)} bytes)")
    return parse_world(data, **kwargs)
