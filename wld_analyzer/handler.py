"""World file conversion handler.

Takes named input buffers, decodes each world and returns named image
buffers. A world that fails to convert is reported and skipped; the rest of
the batch still converts.
"""
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Iterable, List, Optional, Tuple
import logging

from .errors import WldError
from .parser import parse_world
from .reader import ProgressCallback
from .render import render_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileFormat:
    name: str
    format: str
    extension: str
    mime: str
    source: bool        # Can be converted from
    target: bool        # Can be converted to


SUPPORTED_FORMATS = (
    FileFormat(
        name="Terraria World",
        format="wld",
        extension="wld",
        mime="application/x-terraria-world",
        source=True,
        target=False,
    ),
    FileFormat(
        name="Portable Network Graphics",
        format="png",
        extension="png",
        mime="image/png",
        source=False,
        target=True,
    ),
)


@dataclass(frozen=True)
class ConvertedFile:
    name: str
    data: bytes


@dataclass
class ConversionReport:
    """Outputs of a batch plus the inputs that failed and why."""
    files: List[ConvertedFile] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def target_format(output_format: str) -> FileFormat:
    for fmt in SUPPORTED_FORMATS:
        if fmt.target and fmt.format == output_format.lower():
            return fmt
    raise ValueError(f"Unsupported output format: {output_format}")


def output_name(name: str, extension: str) -> str:
    """Swap a .wld suffix for `extension`, or append it."""
    path = PurePath(name)
    if path.suffix.lower() == '.wld':
        return str(path.with_suffix(f'.{extension}'))
    return f"{name}.{extension}"


def convert_world(name: str,
                  data: bytes,
                  output_format: str = 'png',
                  progress_callback: Optional[ProgressCallback] = None) -> ConvertedFile:
    """Decode one world file and render it as an image.

    Raises:
        WldError: Any decode or render failure
        ValueError: Unsupported output format
    """
    fmt = target_format(output_format)
    world = parse_world(data, sections=('header', 'tiles'),
                        progress_callback=progress_callback)
    header = world.header
    logger.info(f"Rendering {name}: {header.max_tiles_x}x{header.max_tiles_y} "
                f"'{header.map_name}' (version {header.version})")
    image = render_image(header, world.tiles, fmt.format)
    return ConvertedFile(output_name(name, fmt.extension), image)


def convert_files(files: Iterable[Tuple[str, bytes]],
                  output_format: str = 'png',
                  progress_callback: Optional[ProgressCallback] = None) -> ConversionReport:
    """Convert a batch of (name, bytes) world files."""
    target_format(output_format)
    report = ConversionReport()
    for name, data in files:
        try:
            report.files.append(
                convert_world(name, data, output_format, progress_callback)
            )
        except WldError as e:
            logger.error(f"Failed to convert {name}: {e}")
            report.errors.append((name, str(e)))
    return report
