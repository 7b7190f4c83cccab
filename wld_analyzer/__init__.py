# wld_analyzer/__init__.py
"""World save decoder and map renderer."""
from .errors import (
    WldError,
    CursorBoundsError,
    FormatError,
    UnsupportedVersionError,
    HeaderDecodeError,
    TileDecodeError,
    RenderError,
)
from .reader import ByteCursor
from .parser import (
    WorldData,
    WorldHeader,
    WorldPreamble,
    WorldGrid,
    Tile,
    LiquidKind,
    SlopeShape,
    parse_world,
    load_world,
)
from .render import render_pixels, render_image
from .handler import convert_world, convert_files

__version__ = '0.1.0'

__all__ = [
    'WldError',
    'CursorBoundsError',
    'FormatError',
    'UnsupportedVersionError',
    'HeaderDecodeError',
    'TileDecodeError',
    'RenderError',
    'ByteCursor',
    'WorldData',
    'WorldHeader',
    'WorldPreamble',
    'WorldGrid',
    'Tile',
    'LiquidKind',
    'SlopeShape',
    'parse_world',
    'load_world',
    'render_pixels',
    'render_image',
    'convert_world',
    'convert_files'
]
