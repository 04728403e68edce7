"""
Read what we need to know about a source image before thumbnailing it.
"""

import os
from pathlib import Path
from typing import Optional, Union

from PIL import ExifTags, Image, UnidentifiedImageError

from .dimensions import Dimensions
from .errors import ImageTooLargeError, SourceNotFoundError, UnrecognizedFormatError

PathLike = Union[str, os.PathLike]

# EXIF orientations that rotate the picture by 90 or 270 degrees
TRANSPOSED_ORIENTATIONS = (5, 6, 7, 8)


def format_from_extension(path: PathLike) -> Optional[str]:
    """
    Return the Pillow format name (e.g. 'GIF', 'WEBP') for a file extension.

    Returns None when the extension is missing or unknown to Pillow.
    """
    ext = Path(path).suffix.lower()
    if not ext:
        return None
    return Image.registered_extensions().get(ext)


def open_image(path: PathLike) -> Image.Image:
    """
    Open an image with Pillow, translating its failures into ThumbnailErrors.

    Raises:
        SourceNotFoundError: If the file cannot be opened
        UnrecognizedFormatError: If Pillow cannot identify the image
        ImageTooLargeError: If the image trips Pillow's decompression bomb limit
    """
    try:
        return Image.open(path)
    except UnidentifiedImageError as e:
        raise UnrecognizedFormatError(f"Cannot identify image file {path}") from e
    except Image.DecompressionBombError as e:
        raise ImageTooLargeError(f"Image {path} is too large to decode: {e}") from e
    except OSError as e:
        raise SourceNotFoundError(path, e.strerror or str(e)) from e
    except Exception as e:
        # a truncated GIF raises EOFError from its first-frame header
        raise UnrecognizedFormatError(f"Cannot read image file {path}: {e}") from e


def read_dimensions(path: PathLike) -> Dimensions:
    """
    Read the display size of an image.

    The size is reported after EXIF orientation is applied, so a portrait
    photo stored sideways reports its portrait size.

    Raises:
        SourceNotFoundError: If the file cannot be opened
        UnrecognizedFormatError: If Pillow cannot identify the image
        ImageTooLargeError: If the image trips Pillow's decompression bomb limit
    """
    with open_image(path) as img:
        width, height = img.size
        orientation = img.getexif().get(ExifTags.Base.Orientation)

    if orientation in TRANSPOSED_ORIENTATIONS:
        width, height = height, width
    return Dimensions(width, height)
