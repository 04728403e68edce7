"""
Command Line Interface for creating thumbnails.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ThumbnailConfig
from .dimensions import target_from
from .errors import InvalidSpecError
from .progress import ThumbnailProgress
from .thumbnailer import Thumbnailer


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('sh').setLevel(logging.WARNING)

    return logging.getLogger('create_thumbnail')


def get_config(args: argparse.Namespace) -> ThumbnailConfig:
    """Get renderer configuration from environment and CLI overrides."""
    config = ThumbnailConfig.from_env()

    if args.ffmpeg:
        config.ffmpeg_path = args.ffmpeg
    if args.quality is not None:
        config.quality = args.quality
    if args.encoder_timeout is not None:
        config.encoder_timeout = args.encoder_timeout

    return config


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='create_thumbnail',
        description='Create a thumbnail for an image; animated GIF/WebP images become looping MP4s',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  create_thumbnail photo.jpg --out-dir thumbs --width 200
  create_thumbnail *.gif --out-dir thumbs --width 320 --height 240

Environment:
  THUMBNAIL_FFMPEG, THUMBNAIL_QUALITY, THUMBNAIL_ENCODER_TIMEOUT
"""
    )

    parser.add_argument('paths', nargs='+', metavar='PATH', help='Path to the image to be thumbnailed')
    parser.add_argument('--out-dir', required=True, help='Path to the directory to save the thumbnail in')
    parser.add_argument('--width', type=positive_int, help='Maximum width of the thumbnail')
    parser.add_argument('--height', type=positive_int, help='Maximum height of the thumbnail')
    parser.add_argument('-n', '--dry-run', action='store_true', help='Show what would be done')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')
    parser.add_argument('--show-files', action='store_true',
                        help='Print each file as processed with result')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    encoder_group = parser.add_argument_group('Rendering')
    encoder_group.add_argument('--ffmpeg', metavar='PATH', help='Override THUMBNAIL_FFMPEG')
    encoder_group.add_argument('--quality', type=int, help='Override THUMBNAIL_QUALITY')
    encoder_group.add_argument('--encoder-timeout', type=float, metavar='SECONDS',
                               help='Override THUMBNAIL_ENCODER_TIMEOUT')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    try:
        target = target_from(parsed_args.width, parsed_args.height)
    except InvalidSpecError:
        parser.error('at least one of --width or --height is required')

    logger = setup_logging(parsed_args.verbose)

    config = get_config(parsed_args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    thumbnailer = Thumbnailer.from_config(config, dry_run=parsed_args.dry_run, logger=logger)

    progress = None
    if not parsed_args.quiet:
        progress = ThumbnailProgress(show_files=parsed_args.show_files, logger=logger)

    try:
        stats = thumbnailer.create_thumbnails(
            parsed_args.paths,
            parsed_args.out_dir,
            target,
            progress=progress,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    for result in stats.results:
        print(result.destination)
    for message in stats.error_details:
        print(f"error: {message}", file=sys.stderr)

    return 0 if stats.errors == 0 else 1
