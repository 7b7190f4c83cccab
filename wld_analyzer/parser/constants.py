# wld_analyzer/parser/constants.py
"""World file format constants."""
from enum import Enum, IntFlag

MAGIC = "relogic"
FILE_TYPE_WORLD = 2
MIN_SUPPORTED_VERSION = 194  # 1.3.5.3

PREAMBLE_RESERVED_BYTES = 12
PREAMBLE_SKIPPED_BYTES = 44

# Index into the section pointer table; 0 means "no section".
SECTION_POINTERS = {
    'header': 1,
    'tiles': 2,
}

# Block whose stored frame Y is meaningless and always reads as 0.
FRAME_Y_RESET_TILE_ID = 144


class TileFlags1(IntFlag):
    """First (always present) tile flag byte."""
    HAS_FLAGS2 = 0x01
    HAS_BLOCK = 0x02
    HAS_WALL = 0x04
    LIQUID_LOW = 0x08
    LIQUID_HIGH = 0x10
    WIDE_BLOCK_ID = 0x20     # Block id is 16-bit
    RLE_LOW = 0x40
    RLE_HIGH = 0x80


class TileFlags2(IntFlag):
    HAS_FLAGS3 = 0x01
    WIRE_RED = 0x02
    WIRE_BLUE = 0x04
    WIRE_GREEN = 0x08
    SLOPE_0 = 0x10
    SLOPE_1 = 0x20
    SLOPE_2 = 0x40


class TileFlags3(IntFlag):
    HAS_FLAGS4 = 0x01
    ACTUATOR = 0x02
    ACTUATED = 0x04
    BLOCK_COLOR = 0x08
    WALL_COLOR = 0x10
    WIRE_YELLOW = 0x20
    WIDE_WALL_ID = 0x40      # Extra byte holds the wall id high byte
    SHIMMER = 0x80


class TileFlags4(IntFlag):
    HAS_FLAGS5 = 0x01
    INVISIBLE_BLOCK = 0x02
    INVISIBLE_WALL = 0x04
    FULL_BRIGHT_BLOCK = 0x08
    FULL_BRIGHT_WALL = 0x10


LIQUID_SHIFT = 3
LIQUID_MASK = 0b11
SLOPE_SHIFT = 4
SLOPE_MASK = 0b111
RLE_SHIFT = 6
RLE_MASK = 0b11


class LiquidKind(Enum):
    WATER = "water"
    LAVA = "lava"
    HONEY = "honey"
    SHIMMER = "shimmer"


class SlopeShape(Enum):
    HALF = "half"
    TOP_RIGHT = "TR"
    TOP_LEFT = "TL"
    BOTTOM_RIGHT = "BR"
    BOTTOM_LEFT = "BL"


LIQUID_CODES = {
    1: LiquidKind.WATER,
    2: LiquidKind.LAVA,
    3: LiquidKind.HONEY,
}

SLOPE_CODES = {
    1: SlopeShape.HALF,
    2: SlopeShape.TOP_RIGHT,
    3: SlopeShape.TOP_LEFT,
    4: SlopeShape.BOTTOM_RIGHT,
    5: SlopeShape.BOTTOM_LEFT,
}
