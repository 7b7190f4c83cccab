"""Command line front end: render world files to images."""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .errors import WldError
from .handler import output_name
from .parser import load_world
from .parser.world_parser import DEFAULT_SECTIONS
from .render import render_image
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def find_worlds(path: Path) -> List[Path]:
    if path.is_dir():
        return sorted(p for p in path.iterdir() if p.suffix.lower() == '.wld')
    return [path]


def make_progress_logger(name: str):
    """Progress callback that logs every tenth percent."""
    def report(percent: int) -> None:
        if percent % 10 == 0:
            logger.info(f"{name}: {percent}%")
    return report


def process_world(world_path: Path,
                  output_dir: Path,
                  output_format: str = 'png',
                  sections=DEFAULT_SECTIONS,
                  dump_header: bool = False,
                  ignore_bounds: bool = False) -> Optional[Path]:
    """Decode one world and write its outputs.

    Returns:
        Path of the written image, or None when tiles were not decoded
    """
    world = load_world(
        world_path,
        sections=sections,
        progress_callback=make_progress_logger(world_path.name),
        ignore_bounds=ignore_bounds,
    )

    if dump_header and world.header is not None:
        header_path = output_dir / f"{world_path.stem}_header.json"
        with open(header_path, 'w', encoding='utf-8') as f:
            json.dump(world.header.to_dict(), f, indent=2)
        logger.info(f"Header written to {header_path}")

    if world.header is None or world.tiles is None:
        logger.info(f"Skipping render of {world_path.name}: header and tiles are both required")
        return None

    image = render_image(world.header, world.tiles, output_format)
    image_path = output_dir / output_name(world_path.name, output_format)
    with open(image_path, 'wb') as f:
        f.write(image)
    logger.info(f"Image written to {image_path}")
    return image_path


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Render world save files to map images'
    )
    parser.add_argument('path',
                        help='World file or directory containing world files')
    parser.add_argument('--output',
                        default='output',
                        help='Output directory')
    parser.add_argument('--format',
                        choices=['png', 'bmp', 'rgba'],
                        default='png',
                        help='Image format (rgba writes the raw pixel buffer)')
    parser.add_argument('--sections',
                        nargs='+',
                        default=list(DEFAULT_SECTIONS),
                        help='Sections to decode')
    parser.add_argument('--dump-header',
                        action='store_true',
                        help='Also write the decoded header as JSON')
    parser.add_argument('--ignore-bounds',
                        action='store_true',
                        help='Read past the end of truncated files as zeros (diagnostics only)')
    parser.add_argument('--log-dir',
                        default=None,
                        help='Log directory')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_dir, log_level)

    path = Path(args.path)
    if not path.exists():
        logger.error(f"Path not found: {path}")
        return 1

    worlds = find_worlds(path)
    if not worlds:
        logger.error(f"No world files found in {path}")
        return 1

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for world_path in worlds:
        try:
            logger.info(f"Processing {world_path}")
            process_world(
                world_path,
                output_dir,
                args.format,
                args.sections,
                args.dump_header,
                args.ignore_bounds,
            )
        except (WldError, ValueError, OSError) as e:
            failures += 1
            logger.error(f"Failed to process {world_path}: {e}")
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception("Detailed error:")

    if failures:
        logger.error(f"{failures} of {len(worlds)} world(s) failed")
        return 1
    logger.info("Processing complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
