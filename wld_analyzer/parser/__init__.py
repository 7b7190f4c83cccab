# wld_analyzer/parser/__init__.py
"""World file parser module."""
from .constants import LiquidKind, SlopeShape, MIN_SUPPORTED_VERSION
from .preamble import WorldPreamble, read_preamble
from .header import WorldHeader, HeaderDecoder, decode_header
from .tiles import Tile, WorldGrid, decode_tile, decode_tiles
from .world_parser import WorldData, WorldParser, parse_world, load_world

__all__ = [
    'LiquidKind',
    'SlopeShape',
    'MIN_SUPPORTED_VERSION',
    'WorldPreamble',
    'read_preamble',
    'WorldHeader',
    'HeaderDecoder',
    'decode_header',
    'Tile',
    'WorldGrid',
    'decode_tile',
    'decode_tiles',
    'WorldData',
    'WorldParser',
    'parse_world',
    'load_world'
]
