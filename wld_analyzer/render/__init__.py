# wld_analyzer/render/__init__.py
"""World map rendering."""
from .rasterizer import (
    DepthBands,
    block_color,
    foreground_color,
    tile_color,
    render_pixels,
    encode_image,
    render_image,
)

__all__ = [
    'DepthBands',
    'block_color',
    'foreground_color',
    'tile_color',
    'render_pixels',
    'encode_image',
    'render_image'
]
