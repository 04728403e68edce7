"""
StaticRenderer - Resizes still images with Pillow.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps

from .dimensions import Dimensions
from .errors import ResampleFailedError
from .image_info import PathLike, open_image


class StaticRenderer:
    """
    Writes a resized copy of a still image, in the same format as the original.
    """

    def __init__(self, quality: int = 85, logger: Optional[logging.Logger] = None):
        """
        Initialize the renderer.

        Args:
            quality: JPEG quality for output (default: 85)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def render(self, source: PathLike, destination: PathLike, size: Dimensions) -> Path:
        """
        Resize ``source`` to exactly ``size`` and save it at ``destination``.

        EXIF orientation is applied before resizing, so ``size`` must already
        describe the upright image.

        Args:
            source: Path to the original image
            destination: Path to write the thumbnail to
            size: Dimensions of the thumbnail

        Returns:
            The destination path

        Raises:
            SourceNotFoundError: If the source cannot be opened
            UnrecognizedFormatError: If Pillow cannot identify the source
            ImageTooLargeError: If the source trips Pillow's decompression bomb limit
            ResampleFailedError: If resizing or saving fails
        """
        destination = Path(destination)
        with open_image(source) as img:
            output_format = img.format
            try:
                upright = ImageOps.exif_transpose(img)
                upright = self._convert_for_resampling(upright)
                thumbnail = upright.resize((size.width, size.height), Image.Resampling.LANCZOS)
                self._save(thumbnail, destination, output_format)
            except Exception as e:
                # remove any half-written thumbnail
                destination.unlink(missing_ok=True)
                raise ResampleFailedError(f"Failed to save thumbnail {destination}: {e}") from e

        self.logger.debug(f"Resized {source} to {size} -> {destination}")
        return destination

    def _convert_for_resampling(self, img: Image.Image) -> Image.Image:
        """Pillow only resizes palette/bilevel images with NEAREST, so expand them first."""
        if img.mode == 'P':
            return img.convert('RGBA' if 'transparency' in img.info else 'RGB')
        elif img.mode == '1':
            return img.convert('L')
        return img

    def _save(self, img: Image.Image, destination: Path, output_format: Optional[str]) -> None:
        if output_format == 'JPEG':
            img = self._flatten_alpha(img)
            img.save(destination, format='JPEG', quality=self.quality, optimize=True)
        elif output_format == 'PNG':
            img.save(destination, format='PNG', optimize=True)
        elif output_format:
            img.save(destination, format=output_format)
        else:
            img.save(destination)

    def _flatten_alpha(self, img: Image.Image) -> Image.Image:
        """Convert image to a color mode JPEG can store."""
        if img.mode in ('RGBA', 'LA'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'LA':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode not in ('RGB', 'L', 'CMYK'):
            return img.convert('RGB')
        return img
