"""
Dimensions - Work out how big a thumbnail should be.

Everything here is pure arithmetic on sizes that are already known; reading
the size of an image file lives in ``image_info``.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from .errors import InvalidSpecError


@dataclass(frozen=True)
class Dimensions:
    """
    Pixel size of an image.

    Attributes:
        width: Width in pixels (> 0)
        height: Height in pixels (> 0)
    """
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Dimensions must be positive, got {self.width}x{self.height}"
            )

    def to_even(self) -> 'Dimensions':
        """Round each odd side up by one pixel (video encoders want even sizes)."""
        return Dimensions(
            self.width + self.width % 2,
            self.height + self.height % 2,
        )

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class MaxWidth:
    """Constrain the width, scale the height to match."""
    width: int

    def __post_init__(self):
        _check_positive('width', self.width)


@dataclass(frozen=True)
class MaxHeight:
    """Constrain the height, scale the width to match."""
    height: int

    def __post_init__(self):
        _check_positive('height', self.height)


@dataclass(frozen=True)
class BoundingBox:
    """Fit the image inside a ``width`` x ``height`` box."""
    width: int
    height: int

    def __post_init__(self):
        _check_positive('width', self.width)
        _check_positive('height', self.height)


TargetSpec = Union[MaxWidth, MaxHeight, BoundingBox]


def _check_positive(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidSpecError(f"Target {name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidSpecError(f"Target {name} must be positive, got {value}")


def target_from(width: Optional[int] = None, height: Optional[int] = None) -> TargetSpec:
    """
    Build a target from the optional width/height a caller supplied.

    Args:
        width: Maximum width, or None
        height: Maximum height, or None

    Returns:
        MaxWidth, MaxHeight, or BoundingBox when both are given

    Raises:
        InvalidSpecError: If neither is given, or either is not positive
    """
    if width is None and height is None:
        raise InvalidSpecError("At least one of width or height must be given")
    if height is None:
        return MaxWidth(width)
    if width is None:
        return MaxHeight(height)
    return BoundingBox(width, height)


def _round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return int(math.floor(value + 0.5))


def _scale(target: int, binding: int, other: int) -> int:
    """Scale ``other`` by target/binding, never below one pixel."""
    return max(1, _round_half_up(target * other / binding))


def resolve(original: Dimensions, target: TargetSpec) -> Dimensions:
    """
    Calculate the size of the thumbnail.

    The aspect ratio of ``original`` is kept and the image is never made
    bigger: a target at least as large as the binding dimension returns
    ``original`` unchanged.

    For a bounding box the height binds when the box is at least as wide
    (relative to its height) as the original, including an exact tie;
    otherwise the width binds.

    Args:
        original: Size of the source image
        target: How to constrain it

    Returns:
        Dimensions of the thumbnail

    Raises:
        InvalidSpecError: If ``target`` is not a TargetSpec
    """
    if isinstance(target, BoundingBox):
        # w/h >= ow/oh, compared without floating point so ties are exact
        if target.width * original.height >= original.width * target.height:
            target = MaxHeight(target.height)
        else:
            target = MaxWidth(target.width)

    if isinstance(target, MaxWidth):
        if target.width >= original.width:
            return original
        return Dimensions(
            target.width,
            _scale(target.width, original.width, original.height),
        )

    if isinstance(target, MaxHeight):
        if target.height >= original.height:
            return original
        return Dimensions(
            _scale(target.height, original.height, original.width),
            target.height,
        )

    raise InvalidSpecError(f"Unsupported target specification: {target!r}")
