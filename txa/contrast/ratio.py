from typing import Optional

import numpy as np

from txa.color.color import Color, composite, relative_luminance
from txa.contrast.standards import DEFAULT, Options, minimum_threshold
from txa.data.parameters import ContrastParameters


def ratio_from_luminance(l1, l2):
    """Contrast ratio for two luminance values; works element-wise on arrays."""
    lighter = np.maximum(l1, l2)
    darker = np.minimum(l1, l2)
    ratio = (lighter + 0.05) / (darker + 0.05)
    if np.ndim(ratio) == 0:
        return float(ratio)
    return ratio


def contrast_ratio(color_a: Color, color_b: Color) -> float:
    """
    Calculate the contrast ratio between two opaque colors according to WCAG 2.0.

    Alpha is ignored; composite translucent colors first or use
    :func:`text_contrast_ratio`.

    Returns
    -------
    float
        Contrast ratio in ``[1, 21]``, independent of argument order.
    """
    return ratio_from_luminance(relative_luminance(color_a), relative_luminance(color_b))


def text_contrast_ratio(text_color: Color, background_color: Color) -> float:
    """Contrast ratio of (possibly translucent) text as seen over a background."""
    return contrast_ratio(composite(text_color, background_color), background_color)


def text_color_passes(text_color: Color, background_color: Color,
                      options: Options = DEFAULT,
                      parameters: Optional[ContrastParameters] = None) -> bool:
    """Whether ``text_color`` over ``background_color`` meets the threshold for ``options``."""
    ratio = text_contrast_ratio(text_color, background_color)
    return ratio >= minimum_threshold(options, parameters)
