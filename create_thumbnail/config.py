"""
ThumbnailConfig - Settings for the renderers, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ThumbnailConfig:
    """
    Renderer settings.

    Attributes:
        ffmpeg_path: Name or path of the ffmpeg binary
        quality: JPEG quality for static thumbnails (1-95)
        encoder_timeout: Seconds before ffmpeg is killed, or None to wait forever
    """
    ffmpeg_path: str = 'ffmpeg'
    quality: int = 85
    encoder_timeout: Optional[float] = None

    @classmethod
    def from_env(cls) -> 'ThumbnailConfig':
        """
        Load configuration from environment variables.

        THUMBNAIL_FFMPEG, THUMBNAIL_QUALITY and THUMBNAIL_ENCODER_TIMEOUT
        override the defaults. Values that are not numbers are kept as-is so
        that validate() can report them.
        """
        config = cls()
        config.ffmpeg_path = os.environ.get('THUMBNAIL_FFMPEG', config.ffmpeg_path)

        quality = os.environ.get('THUMBNAIL_QUALITY')
        if quality:
            config.quality = _to_number(quality, int)

        timeout = os.environ.get('THUMBNAIL_ENCODER_TIMEOUT')
        if timeout:
            config.encoder_timeout = _to_number(timeout, float)

        return config

    def validate(self) -> List[str]:
        """Return a list of problems with this configuration (empty if valid)."""
        errors = []

        if not self.ffmpeg_path:
            errors.append("ffmpeg path must not be empty (THUMBNAIL_FFMPEG)")

        if not isinstance(self.quality, int) or not 1 <= self.quality <= 95:
            errors.append(f"Quality must be an integer between 1 and 95, got {self.quality!r}")

        if self.encoder_timeout is not None:
            if not isinstance(self.encoder_timeout, (int, float)) or self.encoder_timeout <= 0:
                errors.append(
                    f"Encoder timeout must be a positive number of seconds, "
                    f"got {self.encoder_timeout!r}"
                )

        return errors


def _to_number(value: str, kind):
    try:
        return kind(value)
    except ValueError:
        return value
