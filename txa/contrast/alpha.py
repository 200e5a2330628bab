"""Minimum opacity of a text color that still meets a contrast threshold.

Compositing interpolates linearly between the text and background channels,
so the apparent luminance follows a smooth curve from the background's
luminance (alpha 0) to the text's own luminance (alpha 1).  For most color
pairs that curve is monotonic, but opposing channels (red text on a green
background, say) can make it dip before it recovers.  The solver therefore
scans the whole alpha range first and only then refines the first crossing
with Brent's method, rather than bisecting ``[0, 1]`` blindly.
"""

from typing import Optional

import numpy as np
from scipy.optimize import brentq

from txa.color.color import Color, blend, relative_luminance
from txa.contrast.ratio import ratio_from_luminance
from txa.contrast.standards import DEFAULT, Options, minimum_threshold
from txa.data.parameters import ContrastParameters, resolve_parameters

MIN_ALPHA_UNREACHABLE = -1.0


def contrast_margin(text_rgb, background_rgb, alphas, threshold):
    """
    Contrast ratio minus ``threshold`` for text composited at each alpha.

    Parameters
    ----------
    text_rgb, background_rgb : array-like
        Opaque RGB triples of shape ``(3,)``.
    alphas : array-like
        Text opacities of shape ``(n,)``.
    threshold : float
        Required contrast ratio.

    Returns
    -------
    np.ndarray
        Array of shape ``(n,)``; non-negative entries pass.
    """
    background_luminance = relative_luminance(background_rgb)
    luminance = relative_luminance(blend(text_rgb, alphas, background_rgb))
    return ratio_from_luminance(luminance, background_luminance) - threshold


def min_alpha(text_color: Color, background_color: Color,
              options: Options = DEFAULT,
              parameters: Optional[ContrastParameters] = None) -> float:
    """
    Smallest opacity at which ``text_color`` passes over ``background_color``.

    Only the RGB channels of ``text_color`` are used; any alpha it carries
    is ignored.

    Parameters
    ----------
    text_color : Color
        Text color whose opacity is being solved for.
    background_color : Color
        Opaque background.
    options : Options, optional
        Selects the contrast threshold (``large_font``, ``enhanced_contrast``).
    parameters : ContrastParameters, optional
        Thresholds and search settings. Defaults to the package defaults.

    Returns
    -------
    float
        The minimum passing alpha in ``(0, 1]``, accurate to
        ``parameters.alpha_tolerance`` and never below the true minimum, or
        ``MIN_ALPHA_UNREACHABLE`` (-1) when the two colors share the same RGB
        channels or when even fully opaque text fails.
    """
    parameters = resolve_parameters(parameters)
    text_rgb = text_color.rgb
    background_rgb = background_color.rgb
    if np.array_equal(text_rgb, background_rgb):
        return MIN_ALPHA_UNREACHABLE

    threshold = minimum_threshold(options, parameters)
    alphas = np.linspace(0.0, 1.0, parameters.alpha_samples)
    margins = contrast_margin(text_rgb, background_rgb, alphas, threshold)
    passing = np.flatnonzero(margins >= 0.0)
    if passing.size == 0:
        return MIN_ALPHA_UNREACHABLE
    first = passing[0]
    if first == 0:
        return float(alphas[0])

    lower, upper = alphas[first - 1], alphas[first]

    def margin(alpha):
        return float(contrast_margin(text_rgb, background_rgb, [alpha], threshold)[0])

    alpha = brentq(margin, lower, upper, xtol=parameters.alpha_tolerance)
    if margin(alpha) < 0.0:
        alpha = min(alpha + parameters.alpha_tolerance, upper)
        if margin(alpha) < 0.0:
            alpha = upper
    return float(alpha)
