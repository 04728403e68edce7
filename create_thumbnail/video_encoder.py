"""
VideoLoopEncoder - Turns an animated image into a looping MP4 with ffmpeg.

An MP4 of the animation is typically much smaller than a resized GIF.
"""

import logging
from pathlib import Path
from typing import Optional

import sh

from .dimensions import Dimensions
from .errors import EncoderFailedError
from .image_info import PathLike


class VideoLoopEncoder:
    """
    Runs ffmpeg to encode an animated image as an H.264 MP4.
    """

    def __init__(
        self,
        ffmpeg_path: str = 'ffmpeg',
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the encoder.

        Args:
            ffmpeg_path: Name or path of the ffmpeg binary
            timeout: Seconds before ffmpeg is killed (None waits forever)
            logger: Optional logger instance
        """
        self.ffmpeg_path = ffmpeg_path
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def build_args(source: PathLike, destination: PathLike, size: Dimensions) -> list:
        """Return the ffmpeg argument list; ``size`` must already be even."""
        return [
            '-y',
            '-i', str(source),
            '-movflags', 'faststart',
            '-pix_fmt', 'yuv420p',
            '-vf', f"scale={size.width}:{size.height}",
            str(destination),
        ]

    def encode(self, source: PathLike, destination: PathLike, size: Dimensions) -> Path:
        """
        Encode ``source`` as a looping video of ``size`` at ``destination``.

        Raises:
            EncoderFailedError: If ffmpeg is missing, times out or exits non-zero
        """
        if size.width % 2 or size.height % 2:
            raise ValueError(f"Video dimensions must be even, got {size}")

        ffmpeg = self._ffmpeg_command()

        args = self.build_args(source, destination, size)
        self.logger.debug(f"Running {self.ffmpeg_path} {' '.join(args)}")

        try:
            ffmpeg(*args, _timeout=self.timeout)
        except sh.ErrorReturnCode as e:
            stderr = e.stderr.decode('utf-8', errors='replace') if e.stderr else ''
            raise EncoderFailedError(f"Unable to invoke ffmpeg on {source}!", stderr) from e
        except sh.TimeoutException as e:
            raise EncoderFailedError(
                f"ffmpeg did not finish {source} within {self.timeout}s"
            ) from e

        return Path(destination)

    def _ffmpeg_command(self):
        try:
            return sh.Command(self.ffmpeg_path)
        except sh.CommandNotFound as e:
            raise EncoderFailedError(f"Unable to find ffmpeg ({self.ffmpeg_path})") from e
