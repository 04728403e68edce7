"""
AnimationStatus - Decide whether an image is animated.

Only GIF and WebP are checked for extra frames; anything else is treated as
a single still picture. A GIF or WebP that Pillow cannot parse is also
treated as still, so a corrupt file can still go down the static path.
"""

import enum
import logging
from typing import BinaryIO, Optional

from PIL import Image, ImageSequence

from .errors import SourceNotFoundError
from .image_info import PathLike, format_from_extension

ANIMATION_FORMATS = ('GIF', 'WEBP')

logger = logging.getLogger(__name__)


class AnimationStatus(enum.Enum):
    ANIMATED = 'animated'
    STATIC = 'static'

    @property
    def is_animated(self) -> bool:
        return self is AnimationStatus.ANIMATED


def classify(path: PathLike) -> AnimationStatus:
    """
    Return ANIMATED if the image has more than one frame, STATIC otherwise.

    Args:
        path: Path to the image

    Raises:
        SourceNotFoundError: If the file cannot be opened at all
    """
    try:
        fp = open(path, 'rb')
    except OSError as e:
        raise SourceNotFoundError(path, e.strerror or str(e)) from e

    with fp:
        image_format = format_from_extension(path)
        if image_format not in ANIMATION_FORMATS:
            return AnimationStatus.STATIC

        img = _open_animation(fp, image_format)
        if img is None:
            logger.debug(f"Unreadable {image_format} container, treating as static: {path}")
            return AnimationStatus.STATIC

        with img:
            frames = _count_frames(img, limit=2)

    return AnimationStatus.ANIMATED if frames > 1 else AnimationStatus.STATIC


def _open_animation(fp: BinaryIO, image_format: str) -> Optional[Image.Image]:
    """Parse the container header, or return None if it is malformed."""
    try:
        return Image.open(fp, formats=[image_format])
    except Exception as e:
        # Pillow's GIF/WebP plugins raise IndexError, struct.error and others
        # on truncated data, not only UnidentifiedImageError
        logger.debug(f"Cannot parse {image_format} container: {e!r}")
        return None


def _count_frames(img: Image.Image, limit: int) -> int:
    """
    Count frames until ``limit`` is reached.

    Frames are visited lazily; a frame that fails to decode ends the count.
    """
    frames = ImageSequence.Iterator(img)
    count = 0
    while count < limit:
        try:
            next(frames)
        except StopIteration:
            break
        except Exception as e:
            logger.debug(f"Frame {count} failed to decode, stopping count: {e!r}")
            break
        count += 1
    return count
