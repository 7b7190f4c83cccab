"""Tile section decoder.

Each physical record starts with a chain of one to four flag bytes; bit 0 of
each byte says whether another flag byte follows. The payload fields that the
flags announce come next, and the record ends with an optional run length:
the number of identical tiles that follow it further down the same column.
"""
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from ..errors import CursorBoundsError, TileDecodeError
from ..reader import ByteCursor
from .constants import (
    FRAME_Y_RESET_TILE_ID,
    LIQUID_CODES,
    LIQUID_MASK,
    LIQUID_SHIFT,
    RLE_MASK,
    RLE_SHIFT,
    SLOPE_CODES,
    SLOPE_MASK,
    SLOPE_SHIFT,
    LiquidKind,
    SlopeShape,
    TileFlags1,
    TileFlags2,
    TileFlags3,
    TileFlags4,
)
from .preamble import WorldPreamble

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    """One grid cell. ``None`` means the property is absent."""
    block_id: Optional[int] = None
    frame_x: Optional[int] = None
    frame_y: Optional[int] = None
    block_color: Optional[int] = None
    wall_id: Optional[int] = None
    wall_color: Optional[int] = None
    liquid_amount: Optional[int] = None
    liquid_kind: Optional[LiquidKind] = None
    wire_red: Optional[bool] = None
    wire_blue: Optional[bool] = None
    wire_green: Optional[bool] = None
    wire_yellow: Optional[bool] = None
    slope: Optional[SlopeShape] = None
    actuator: Optional[bool] = None
    actuated: Optional[bool] = None
    invisible_block: Optional[bool] = None
    invisible_wall: Optional[bool] = None
    full_bright_block: Optional[bool] = None
    full_bright_wall: Optional[bool] = None

    @property
    def is_empty(self) -> bool:
        """No block, wall or liquid: only the depth background shows."""
        return (self.block_id is None
                and self.wall_id is None
                and self.liquid_kind is None)


def read_flag_chain(cursor: ByteCursor) -> Tuple[int, Optional[int], Optional[int], Optional[int]]:
    """Read the flag bytes of one record.

    Returns:
        (flags1, flags2, flags3, flags4); bytes that were not present are None
    """
    flags1 = cursor.read_u8()
    flags2 = flags3 = flags4 = None
    if flags1 & TileFlags1.HAS_FLAGS2:
        flags2 = cursor.read_u8()
        if flags2 & TileFlags2.HAS_FLAGS3:
            flags3 = cursor.read_u8()
            if flags3 & TileFlags3.HAS_FLAGS4:
                flags4 = cursor.read_u8()
    return flags1, flags2, flags3, flags4


def decode_tile(cursor: ByteCursor, importants: Sequence[bool]) -> Tuple[Tile, int]:
    """Decode one physical tile record.

    Args:
        cursor: Positioned at the record's first flag byte
        importants: Block ids that carry frame coordinates

    Returns:
        The tile and the number of copies that follow it in the same column
    """
    flags1, flags2, flags3, flags4 = read_flag_chain(cursor)
    f3 = flags3 or 0
    tile = {}

    if flags1 > 1:
        if flags1 & TileFlags1.HAS_BLOCK:
            if flags1 & TileFlags1.WIDE_BLOCK_ID:
                block_id = cursor.read_u16()
            else:
                block_id = cursor.read_u8()
            tile['block_id'] = block_id
            if block_id < len(importants) and importants[block_id]:
                tile['frame_x'] = cursor.read_i16()
                frame_y = cursor.read_i16()
                tile['frame_y'] = 0 if block_id == FRAME_Y_RESET_TILE_ID else frame_y
            if f3 & TileFlags3.BLOCK_COLOR:
                tile['block_color'] = cursor.read_u8()

        if flags1 & TileFlags1.HAS_WALL:
            tile['wall_id'] = cursor.read_u8()
            if f3 & TileFlags3.WALL_COLOR:
                tile['wall_color'] = cursor.read_u8()

        liquid_code = (flags1 >> LIQUID_SHIFT) & LIQUID_MASK
        if liquid_code:
            tile['liquid_amount'] = cursor.read_u8()
            if f3 & TileFlags3.SHIMMER:
                tile['liquid_kind'] = LiquidKind.SHIMMER
            else:
                tile['liquid_kind'] = LIQUID_CODES[liquid_code]

    if flags2:
        if flags2 & TileFlags2.WIRE_RED:
            tile['wire_red'] = True
        if flags2 & TileFlags2.WIRE_BLUE:
            tile['wire_blue'] = True
        if flags2 & TileFlags2.WIRE_GREEN:
            tile['wire_green'] = True
        slope_code = (flags2 >> SLOPE_SHIFT) & SLOPE_MASK
        if slope_code in SLOPE_CODES:
            tile['slope'] = SLOPE_CODES[slope_code]

        if flags3:
            if flags3 & TileFlags3.ACTUATOR:
                tile['actuator'] = True
            if flags3 & TileFlags3.ACTUATED:
                tile['actuated'] = True
            if flags3 & TileFlags3.WIRE_YELLOW:
                tile['wire_yellow'] = True
            if flags3 & TileFlags3.WIDE_WALL_ID:
                high = cursor.read_u8()
                tile['wall_id'] = (high << 8) | tile.get('wall_id', 0)

            if flags4:
                if flags4 & TileFlags4.INVISIBLE_BLOCK:
                    tile['invisible_block'] = True
                if flags4 & TileFlags4.INVISIBLE_WALL:
                    tile['invisible_wall'] = True
                if flags4 & TileFlags4.FULL_BRIGHT_BLOCK:
                    tile['full_bright_block'] = True
                if flags4 & TileFlags4.FULL_BRIGHT_WALL:
                    tile['full_bright_wall'] = True

    rle_width = (flags1 >> RLE_SHIFT) & RLE_MASK
    if rle_width == 1:
        run_length = cursor.read_u8()
    elif rle_width == 2:
        run_length = cursor.read_i16()
    else:
        run_length = 0

    return Tile(**tile), run_length


class WorldGrid:
    """Column-major grid of decoded tiles.

    Cells of one run share a single Tile instance; Tile is immutable so the
    sharing is invisible to callers.
    """

    def __init__(self,
                 width: int,
                 height: int,
                 columns: List[List[Tile]],
                 record_count: int = 0,
                 run_total: int = 0):
        self.width = width
        self.height = height
        self._columns = columns
        self.record_count = record_count
        self.run_total = run_total

    def __getitem__(self, position: Tuple[int, int]) -> Tile:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Tile ({x}, {y}) outside {self.width}x{self.height} grid")
        return self._columns[x][y]

    def column(self, x: int) -> Sequence[Tile]:
        return tuple(self._columns[x])

    def columns(self) -> Iterator[Sequence[Tile]]:
        for column in self._columns:
            yield tuple(column)

    def runs(self, x: int) -> Iterator[Tuple[int, int, Tile]]:
        """Yield (start_row, length, tile) for each run of shared cells in column x."""
        column = self._columns[x]
        start = 0
        while start < len(column):
            tile = column[start]
            end = start + 1
            while end < len(column) and column[end] is tile:
                end += 1
            yield start, end - start, tile
            start = end

    @property
    def tile_count(self) -> int:
        return self.width * self.height


def decode_tiles(cursor: ByteCursor, preamble: WorldPreamble) -> WorldGrid:
    """Decode the full tile grid at the cursor's current position.

    Raises:
        TileDecodeError: Any read failure; no partial grid is returned
    """
    width = preamble.width
    height = preamble.height
    importants = preamble.importants
    columns: List[List[Tile]] = []
    record_count = 0
    run_total = 0
    truncated = 0
    start = cursor.offset

    try:
        for x in range(width):
            column: List[Tile] = []
            while len(column) < height:
                tile, run_length = decode_tile(cursor, importants)
                record_count += 1
                column.append(tile)
                if run_length > 0:
                    copies = min(run_length, height - len(column))
                    column.extend([tile] * copies)
                    run_total += copies
                    truncated += run_length - copies
            columns.append(column)
    except CursorBoundsError as e:
        raise TileDecodeError(
            f"Tile data truncated at column {len(columns)}, offset {cursor.offset}: {e}"
        ) from e

    if truncated:
        logger.warning(f"Dropped {truncated} run-length copies past column ends")
    logger.debug(
        f"Decoded {width}x{height} tiles from {record_count} records "
        f"({start} -> {cursor.offset})"
    )
    return WorldGrid(width, height, columns, record_count, run_total)
