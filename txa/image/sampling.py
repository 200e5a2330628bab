"""Average background color of a rectangular image region.

Images are anything :func:`numpy.asarray` turns into a pixel array: NumPy
arrays, PIL images, decoded video frames.  Supported layouts are grey
``(H, W)`` and ``(H, W, 1)``, RGB ``(H, W, 3)`` and RGBA ``(H, W, 4)``.
Unsigned integer images are scaled by the maximum of their dtype and signed
integer images are rejected. Floating-point images are assumed to already be
normalized to ``[0, 1]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from txa.color.color import Color


class ImageFormatError(ValueError):
    """Raised when an image array does not have a supported pixel layout."""


@dataclass(frozen=True)
class Region:
    """
    Axis-aligned rectangle in pixel coordinates, origin at the top-left.

    Attributes
    ----------
    x, y : float
        Origin of the rectangle.
    width, height : float
        Extent of the rectangle. Negative extents are allowed and describe
        the same rectangle grown from the opposite corner.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def coerce(cls, region: Union["Region", Sequence[float]]) -> "Region":
        if isinstance(region, Region):
            return region
        x, y, width, height = region
        return cls(x, y, width, height)

    def standardized(self) -> "Region":
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Region(x, y, width, height)

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def pixel_bounds(self, width: int, height: int):
        """
        Clip the region to an image of the given size.

        Returns
        -------
        tuple of int or None
            ``(x0, y0, x1, y1)`` half-open pixel bounds, or ``None`` when the
            region does not intersect the image.
        """
        region = self.standardized()
        if region.empty:
            return None
        x0 = max(int(np.floor(region.x)), 0)
        y0 = max(int(np.floor(region.y)), 0)
        x1 = min(int(np.ceil(region.x + region.width)), width)
        y1 = min(int(np.ceil(region.y + region.height)), height)
        if x1 <= x0 or y1 <= y0:
            return None
        return x0, y0, x1, y1


def _channel_scale(dtype) -> float:
    if np.issubdtype(dtype, np.integer):
        return float(np.iinfo(dtype).max)
    return 1.0


def as_pixels(image) -> Optional[np.ndarray]:
    """Return ``image`` as an ``(H, W, C)`` array, or ``None`` if it holds no pixels."""
    if image is None:
        return None
    pixels = np.asarray(image)
    if pixels.size == 0:
        return None
    if pixels.ndim == 2:
        pixels = pixels[..., np.newaxis]
    if pixels.ndim != 3 or pixels.shape[2] not in (1, 3, 4):
        raise ImageFormatError(
            "Expected an image of shape (H, W), (H, W, 1), (H, W, 3) or (H, W, 4); "
            "got {}.".format(pixels.shape))
    if pixels.dtype == np.bool_:
        pixels = pixels.astype(np.uint8) * 255
    elif np.issubdtype(pixels.dtype, np.signedinteger):
        raise ImageFormatError(
            "Signed integer images are not supported; got dtype {}.".format(pixels.dtype))
    return pixels


def average_color(image, region: Union[Region, Sequence[float]]) -> Optional[Color]:
    """
    Mean color of the pixels of ``image`` inside ``region``.

    Parameters
    ----------
    image : array-like
        Pixel data; see the module documentation for supported layouts.
    region : Region or tuple
        ``Region`` or ``(x, y, width, height)``; clipped to the image bounds.

    Returns
    -------
    Color or None
        An opaque color, or ``None`` when the image has no pixel data or the
        clipped region is empty. Pixel alpha is ignored.
    """
    pixels = as_pixels(image)
    if pixels is None:
        return None
    height, width, channels = pixels.shape
    bounds = Region.coerce(region).pixel_bounds(width, height)
    if bounds is None:
        return None
    x0, y0, x1, y1 = bounds

    window = pixels[y0:y1, x0:x1, :min(channels, 3)]
    mean = window.reshape(-1, window.shape[-1]).astype(float).mean(axis=0)
    mean /= _channel_scale(pixels.dtype)
    if mean.shape[0] == 1:
        mean = np.repeat(mean, 3)
    red, green, blue = (float(c) for c in mean)
    return Color(red, green, blue, 1.0)
