"""Flat per-cell colour rendering of a decoded world."""
from dataclasses import dataclass
from typing import Optional, Tuple
import io
import logging

import numpy as np
from PIL import Image

from ..errors import RenderError
from ..parser.header import WorldHeader
from ..parser.tiles import Tile, WorldGrid
from .colors import (
    BG_CAVERN,
    BG_HELL,
    BG_SKY,
    BG_UNDERGROUND,
    DEFAULT_LIQUID_COLOR,
    HELL_LAYER_OFFSET,
    LIQUID_COLORS,
    MAX_KNOWN_TILE_ID,
    MISSING_TILE_COLOR,
    MISSING_WALL_COLOR,
    MOD_TILE_COLORS,
    TILE_COLORS,
    WALL_COLORS,
)

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

RAW_FORMAT = 'rgba'


@dataclass(frozen=True)
class DepthBands:
    """Row boundaries of the background bands, top to bottom."""
    surface: int
    rock_layer: int
    hell: int

    @classmethod
    def from_header(cls, header: WorldHeader) -> 'DepthBands':
        return cls(
            surface=header.surface_row,
            rock_layer=header.rock_layer_row,
            hell=header.max_tiles_y - HELL_LAYER_OFFSET,
        )

    def background(self, y: int) -> Color:
        if y < self.surface:
            return BG_SKY
        if y < self.rock_layer:
            return BG_UNDERGROUND
        if y < self.hell:
            return BG_CAVERN
        return BG_HELL


def block_color(block_id: int) -> Color:
    if block_id > MAX_KNOWN_TILE_ID:
        return MOD_TILE_COLORS[block_id % len(MOD_TILE_COLORS)]
    return TILE_COLORS.get(block_id, MISSING_TILE_COLOR)


def foreground_color(tile: Tile) -> Optional[Color]:
    """Block, liquid or wall colour; None when the background shows through."""
    if tile.block_id is not None:
        return block_color(tile.block_id)
    if tile.liquid_kind is not None:
        return LIQUID_COLORS.get(tile.liquid_kind, DEFAULT_LIQUID_COLOR)
    if tile.wall_id is not None and tile.wall_id > 0:
        return WALL_COLORS.get(tile.wall_id, MISSING_WALL_COLOR)
    return None


def tile_color(tile: Tile, y: int, bands: DepthBands) -> Color:
    """Colour of one cell: block, then liquid, then wall, then background."""
    color = foreground_color(tile)
    return bands.background(y) if color is None else color


def render_pixels(header: WorldHeader, grid: WorldGrid) -> np.ndarray:
    """Rasterize the grid into an opaque RGBA array of shape (height, width, 4).

    Raises:
        RenderError: Header and grid disagree on the world size, or the size
            is negative
    """
    width, height = header.max_tiles_x, header.max_tiles_y
    if width < 0 or height < 0:
        raise RenderError(f"Invalid world size {width}x{height}")
    if (grid.width, grid.height) != (width, height):
        raise RenderError(
            f"Header size {width}x{height} does not match "
            f"tile grid {grid.width}x{grid.height}"
        )

    bands = DepthBands.from_header(header)
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    background = np.array([bands.background(y) for y in range(height)],
                          dtype=np.uint8).reshape(height, 3)
    pixels[:, :, :3] = background[:, np.newaxis, :]

    # one lookup per run of shared cells
    for x in range(width):
        for start, length, tile in grid.runs(x):
            color = foreground_color(tile)
            if color is not None:
                pixels[start:start + length, x, :3] = color

    logger.debug(f"Rendered {width}x{height} pixels (surface={bands.surface}, "
                 f"rock={bands.rock_layer}, hell={bands.hell})")
    return pixels


def encode_image(pixels: np.ndarray, output_format: str = 'png') -> bytes:
    """Encode an RGBA array; RAW_FORMAT returns the bytes untouched.

    Raises:
        RenderError: The image library could not encode the pixels
    """
    output_format = output_format.lower()
    if output_format == RAW_FORMAT:
        return pixels.tobytes()
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise RenderError(f"Cannot encode an empty {pixels.shape[1]}x{pixels.shape[0]} image")

    image = Image.fromarray(pixels)
    if output_format in ('jpg', 'jpeg', 'bmp'):
        image = image.convert('RGB')
    buffer = io.BytesIO()
    try:
        image.save(buffer, format='JPEG' if output_format == 'jpg' else output_format.upper())
    except (KeyError, ValueError, OSError) as e:
        raise RenderError(f"Failed to encode {output_format} image: {e}") from e
    return buffer.getvalue()


def render_image(header: WorldHeader, grid: WorldGrid, output_format: str = 'png') -> bytes:
    """Render a decoded world and encode it in `output_format`."""
    return encode_image(render_pixels(header, grid), output_format)
