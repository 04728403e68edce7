"""
Thumbnailer - Picks the rendering path for each source image.

Still images are resized with Pillow and keep their name and format.
Animated GIF/WebP images become a looping MP4 with the same stem.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .animation import AnimationStatus, classify
from .config import ThumbnailConfig
from .dimensions import Dimensions, TargetSpec, resolve, target_from
from .errors import SameInputOutputPathError, SourceNotFoundError, ThumbnailError
from .image_info import PathLike, read_dimensions
from .progress import ThumbnailProgress
from .static_renderer import StaticRenderer
from .thumbnail_stats import ThumbnailStats
from .video_encoder import VideoLoopEncoder

VIDEO_SUFFIX = '.mp4'


@dataclass(frozen=True)
class ThumbnailResult:
    """
    A thumbnail that was created (or would be, in dry-run mode).

    Attributes:
        source: Path of the original image
        destination: Path of the thumbnail
        size: Dimensions written (even-sided for videos)
        status: Whether the source was animated
    """
    source: Path
    destination: Path
    size: Dimensions
    status: AnimationStatus

    @property
    def animated(self) -> bool:
        return self.status.is_animated


class Thumbnailer:
    """
    Creates thumbnails, one independent request per source image.
    """

    def __init__(
        self,
        static_renderer: Optional[StaticRenderer] = None,
        video_encoder: Optional[VideoLoopEncoder] = None,
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize thumbnailer.

        Args:
            static_renderer: Renderer for still images
            video_encoder: Encoder for animated images
            dry_run: If True, work out what would be written but write nothing
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.static_renderer = static_renderer or StaticRenderer(logger=self.logger)
        self.video_encoder = video_encoder or VideoLoopEncoder(logger=self.logger)
        self.dry_run = dry_run
        self._stop_requested = False

    @classmethod
    def from_config(
        cls,
        config: ThumbnailConfig,
        dry_run: bool = False,
        logger: Optional[logging.Logger] = None
    ) -> 'Thumbnailer':
        """Build a thumbnailer whose renderers use ``config``."""
        logger = logger or logging.getLogger(__name__)
        return cls(
            static_renderer=StaticRenderer(quality=config.quality, logger=logger),
            video_encoder=VideoLoopEncoder(
                ffmpeg_path=config.ffmpeg_path,
                timeout=config.encoder_timeout,
                logger=logger,
            ),
            dry_run=dry_run,
            logger=logger,
        )

    def stop(self) -> None:
        """Request the batch to stop after the current image."""
        self._stop_requested = True

    @staticmethod
    def destination_for(source: PathLike, out_dir: PathLike, status: AnimationStatus) -> Path:
        """Return where the thumbnail for ``source`` goes inside ``out_dir``."""
        source = Path(source)
        if not source.name:
            raise SourceNotFoundError(source, "image path is missing a file name")
        destination = Path(out_dir) / source.name
        if status.is_animated:
            destination = destination.with_suffix(VIDEO_SUFFIX)
        return destination

    def create_thumbnail(
        self,
        source: PathLike,
        out_dir: PathLike,
        target: TargetSpec
    ) -> ThumbnailResult:
        """
        Create the thumbnail for one image.

        Args:
            source: Path to the original image
            out_dir: Directory to save the thumbnail in (created if needed)
            target: How big the thumbnail may be

        Returns:
            ThumbnailResult describing what was written

        Raises:
            ThumbnailError: Any of its subclasses, see ``errors``
        """
        source = Path(source)
        status = classify(source)
        destination = self.destination_for(source, out_dir, status)

        if destination.resolve() == source.resolve():
            raise SameInputOutputPathError(source)

        original = read_dimensions(source)
        size = resolve(original, target)
        if status.is_animated:
            size = size.to_even()
        self.logger.debug(f"{source}: {original} -> {size} ({status.value})")

        result = ThumbnailResult(source, destination, size, status)
        if self.dry_run:
            return result

        destination.parent.mkdir(parents=True, exist_ok=True)

        if status.is_animated:
            self.video_encoder.encode(source, destination, size)
        else:
            self.static_renderer.render(source, destination, size)

        return result

    def create_thumbnails(
        self,
        sources: Iterable[PathLike],
        out_dir: PathLike,
        target: TargetSpec,
        progress: Optional[ThumbnailProgress] = None
    ) -> ThumbnailStats:
        """
        Create thumbnails for several images, one after another.

        A failure is recorded in ``error_details`` and the batch carries on
        with the next image.

        Returns:
            ThumbnailStats with results
        """
        sources = list(sources)
        stats = ThumbnailStats(total_to_process=len(sources))

        mode_str = " [DRY RUN]" if self.dry_run else ""
        self.logger.info(f"Creating {len(sources)} thumbnail(s) in {out_dir}{mode_str}")

        for source in sources:
            if self._stop_requested:
                self.logger.info("Stop requested, halting")
                break

            try:
                result = self.create_thumbnail(source, out_dir, target)
            except ThumbnailError as e:
                # callers report error_details themselves
                self.logger.debug(f"Failed {source}: {e}")
                stats.record_error(str(e))
                if progress:
                    progress.on_file_processed(source, success=False, error=str(e))
            else:
                stats.record_success(result)
                if progress:
                    if self.dry_run:
                        progress.on_dry_run(result)
                    else:
                        progress.on_file_processed(result, success=True)
                if not self.dry_run:
                    self.logger.info(f"Created: {result.destination}")

            if progress:
                progress.on_progress_update(stats)

        self.logger.info(
            f"Done: {stats.processed} created ({stats.animated} video, "
            f"{stats.static} image), {stats.errors} errors "
            f"({stats.elapsed_seconds:.1f}s)"
        )
        return stats


def create_thumbnail(
    path: PathLike,
    out_dir: PathLike,
    width: Optional[int] = None,
    height: Optional[int] = None,
    config: Optional[ThumbnailConfig] = None
) -> Path:
    """
    Create a thumbnail for the image and return the path it was written to.

    Args:
        path: Path to the original image
        out_dir: Directory to save the thumbnail in
        width: Maximum width of the thumbnail
        height: Maximum height of the thumbnail
        config: Renderer settings (default: ThumbnailConfig())

    Raises:
        InvalidSpecError: If neither width nor height is given
        ThumbnailError: If the thumbnail cannot be created
    """
    target = target_from(width, height)
    thumbnailer = Thumbnailer.from_config(config or ThumbnailConfig())
    return thumbnailer.create_thumbnail(path, out_dir, target).destination
