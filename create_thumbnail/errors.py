"""
Errors raised while creating a thumbnail.
"""


class ThumbnailError(Exception):
    """Base class for every failure surfaced to the caller."""


class InvalidSpecError(ThumbnailError, ValueError):
    """The target size is malformed (no width and no height, or not positive)."""


class SourceNotFoundError(ThumbnailError, OSError):
    """The source image is missing or cannot be opened."""

    def __init__(self, path, reason: str = ''):
        self.path = path
        message = f"Cannot open source image {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnrecognizedFormatError(ThumbnailError):
    """Pillow cannot tell what kind of image the source is."""


class SameInputOutputPathError(ThumbnailError):
    """The thumbnail would overwrite the original image."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"Cannot write thumbnail to the same path as the original image: {path}"
        )


class EncoderFailedError(ThumbnailError):
    """ffmpeg could not produce the looping video."""

    def __init__(self, message: str, stderr: str = ''):
        self.stderr = stderr
        if stderr:
            message = f"{message}\nstderr from ffmpeg:\n{stderr}"
        super().__init__(message)


class ResampleFailedError(ThumbnailError):
    """Resizing or saving the static thumbnail failed."""


class ImageTooLargeError(ThumbnailError):
    """The source has more pixels than Pillow is allowed to decode."""
