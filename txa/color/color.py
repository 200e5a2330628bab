"""Color values and the sRGB primitives used by every contrast computation.

Colors are stored as normalized floating-point channels in ``[0, 1]``.  The
module deliberately performs no range validation: callers are expected to
supply well-formed channels, and out-of-range values produce numerically
undefined (but non-raising) results.

Typical usage
-------------

>>> from txa.color import Color, composite, relative_luminance
>>> grey = Color.from_white(0.0, alpha=0.5)
>>> apparent = composite(grey, Color.from_hex('#FFFFFF'))
>>> apparent.to_hex()
'#808080'
>>> round(relative_luminance(apparent), 3)
0.214
"""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np


class ColorError(ValueError):
    """Raised when a color specification cannot be parsed."""


# Rec. 709 primaries used by the WCAG 2.0 relative luminance definition.
_LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
_LINEAR_CUTOFF = 0.03928


@dataclass(frozen=True)
class Color:
    """An sRGB color with straight (non-premultiplied) alpha.

    Attributes
    ----------
    red, green, blue : float
        Channel intensities in ``[0, 1]``.
    alpha : float
        Opacity in ``[0, 1]``. Defaults to fully opaque.
    """

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_white(cls, white: float, alpha: float = 1.0) -> "Color":
        """Build a grey level, ``0`` being black and ``1`` white."""
        return cls(white, white, white, alpha)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        """Build a color from 8-bit channel values."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional)."""
        digits = hex_color.strip().lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ColorError(f"Unsupported hex color '{hex_color}'.")
        try:
            values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ColorError(f"Unsupported hex color '{hex_color}'.") from None
        alpha = values[3] / 255.0 if len(values) == 4 else 1.0
        return cls.from_rgb255(values[0], values[1], values[2], alpha)

    @property
    def rgb(self) -> np.ndarray:
        """The color channels as an array of shape ``(3,)``; alpha is dropped."""
        return np.array([self.red, self.green, self.blue], dtype=float)

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)

    def opaque(self) -> "Color":
        return replace(self, alpha=1.0)

    def to_hex(self) -> str:
        """Return a string like ``"#3FA066"``; alpha is not encoded."""
        red, green, blue = (int(round(c * 255)) for c in (self.red, self.green, self.blue))
        return "#{:02X}{:02X}{:02X}".format(red, green, blue)


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def _as_rgb(color) -> np.ndarray:
    if isinstance(color, Color):
        return color.rgb
    return np.asarray(color, dtype=float)


def linearize(channels):
    """Undo the sRGB transfer curve on channel values in ``[0, 1]``."""
    channels = np.asarray(channels, dtype=float)
    return np.where(channels <= _LINEAR_CUTOFF,
                    channels / 12.92,
                    ((channels + 0.055) / 1.055) ** 2.4)


def relative_luminance(color):
    """
    Relative luminance of an opaque color according to WCAG 2.0.

    Parameters
    ----------
    color : Color or array-like
        A :class:`Color` (its alpha is ignored, composite translucent colors
        first) or an array of RGB triples with shape ``(..., 3)``.

    Returns
    -------
    float or np.ndarray
        Luminance in ``[0, 1]``; an array with the leading shape of ``color``
        when an array was supplied.
    """
    luminance = linearize(_as_rgb(color)) @ _LUMINANCE_WEIGHTS
    if np.ndim(luminance) == 0:
        return float(luminance)
    return luminance


def blend(foreground_rgb, alphas, background_rgb) -> np.ndarray:
    """
    Composite one RGB triple over another at each of several opacities.

    Parameters
    ----------
    foreground_rgb, background_rgb : array-like
        RGB triples of shape ``(3,)``.
    alphas : array-like
        Foreground opacities of shape ``(n,)``.

    Returns
    -------
    np.ndarray
        Opaque RGB triples of shape ``(n, 3)``.
    """
    alphas = np.atleast_1d(np.asarray(alphas, dtype=float))
    foreground_rgb = np.asarray(foreground_rgb, dtype=float)
    background_rgb = np.asarray(background_rgb, dtype=float)
    return np.outer(alphas, foreground_rgb) + np.outer(1.0 - alphas, background_rgb)


def composite(foreground: Color, background: Color) -> Color:
    """
    Alpha-blend ``foreground`` over ``background`` to get its apparent color.

    The background is treated as opaque whatever its own alpha. The result
    is always fully opaque.
    """
    red, green, blue = blend(foreground.rgb, [foreground.alpha], background.rgb)[0]
    return Color(float(red), float(green), float(blue), 1.0)
