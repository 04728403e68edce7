"""
Thumbnail creation for still and animated images.

Still images are resized with Pillow. Animated GIF and WebP images are
turned into a looping MP4 with ffmpeg, which is usually far smaller than a
resized GIF.
"""

__version__ = "1.0.0"

from .dimensions import Dimensions, MaxWidth, MaxHeight, BoundingBox, TargetSpec, resolve, target_from
from .animation import AnimationStatus, classify
from .errors import (
    ThumbnailError,
    InvalidSpecError,
    SourceNotFoundError,
    UnrecognizedFormatError,
    SameInputOutputPathError,
    EncoderFailedError,
    ResampleFailedError,
    ImageTooLargeError,
)
from .config import ThumbnailConfig
from .image_info import read_dimensions
from .static_renderer import StaticRenderer
from .video_encoder import VideoLoopEncoder
from .thumbnail_stats import ThumbnailStats
from .progress import ThumbnailProgress
from .thumbnailer import Thumbnailer, ThumbnailResult, create_thumbnail

__all__ = [
    "Dimensions",
    "MaxWidth",
    "MaxHeight",
    "BoundingBox",
    "TargetSpec",
    "resolve",
    "target_from",
    "AnimationStatus",
    "classify",
    "ThumbnailError",
    "InvalidSpecError",
    "SourceNotFoundError",
    "UnrecognizedFormatError",
    "SameInputOutputPathError",
    "EncoderFailedError",
    "ResampleFailedError",
    "ImageTooLargeError",
    "ThumbnailConfig",
    "read_dimensions",
    "StaticRenderer",
    "VideoLoopEncoder",
    "ThumbnailStats",
    "ThumbnailProgress",
    "Thumbnailer",
    "ThumbnailResult",
    "create_thumbnail",
]
