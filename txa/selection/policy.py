"""Choosing a text color for a background.

Three entry points cover the common situations:

- :func:`text_color_from_choices` picks a passing color from a palette the
  caller already has.
- :func:`text_color_on_background` synthesizes black or white text at (or
  above) a desired opacity.
- :func:`text_color_on_image` does the same for text drawn over part of an
  image, using the average color of that region as the background.
"""

import warnings
from typing import Callable, Iterable, Optional

from txa.color.color import BLACK, WHITE, Color, composite, relative_luminance
from txa.contrast.alpha import MIN_ALPHA_UNREACHABLE, min_alpha
from txa.contrast.ratio import contrast_ratio, text_contrast_ratio
from txa.contrast.standards import DEFAULT, ContrastWarning, Options, minimum_threshold
from txa.data.parameters import ContrastParameters
from txa.font.font import FontDescriptor, options_for_font
from txa.image.sampling import average_color


def text_color_from_choices(choices: Iterable[Color], background_color: Color,
                            options: Options = DEFAULT,
                            parameters: Optional[ContrastParameters] = None) -> Optional[Color]:
    """
    Pick the first acceptable text color from ``choices``.

    Parameters
    ----------
    choices : iterable of Color
        Candidate text colors, possibly translucent, in order of preference.
    background_color : Color
        Opaque background.
    options : Options, optional
        Threshold selection and lighter/darker preference.
    parameters : ContrastParameters, optional
        Thresholds; defaults to the package defaults.

    Returns
    -------
    Color or None
        With ``prefer_lighter`` the passing choice that looks lightest over the
        background, with ``prefer_darker`` the darkest, otherwise the first
        passing choice. ``None`` if nothing passes.
    """
    threshold = minimum_threshold(options, parameters)
    passing = [color for color in choices
               if text_contrast_ratio(color, background_color) >= threshold]
    if not passing:
        return None
    if options.prefers_lighter or options.prefers_darker:
        apparent = [relative_luminance(composite(color, background_color)) for color in passing]
        # max/min keep the earliest of equal candidates
        pick = max if options.prefers_lighter else min
        index = pick(range(len(passing)), key=apparent.__getitem__)
        return passing[index]
    return passing[0]


def _qualifies(minimum: float, target_text_alpha: float) -> bool:
    return minimum != MIN_ALPHA_UNREACHABLE and target_text_alpha >= minimum


def text_color_on_background(background_color: Color, target_text_alpha: float,
                             options: Options = DEFAULT,
                             parameters: Optional[ContrastParameters] = None) -> Color:
    """
    Black or white text for ``background_color``, as close to ``target_text_alpha`` as allowed.

    Parameters
    ----------
    background_color : Color
        Opaque background.
    target_text_alpha : float
        Desired text opacity in ``[0, 1]``.
    options : Options, optional
        Threshold selection and lighter (white) / darker (black) preference.
    parameters : ContrastParameters, optional
        Thresholds and search settings.

    Returns
    -------
    Color
        White or black. When the target opacity passes for both, the
        preferred one at ``target_text_alpha``, black when no preference is
        set. When it passes for only one, that one. When it passes for
        neither, the one that needs less opacity, fully opaque.

    Warns
    -----
    ContrastWarning
        When neither black nor white meets the threshold even fully opaque.
        The higher-contrast of the two is returned, fully opaque.
    """
    white_minimum = min_alpha(WHITE, background_color, options, parameters)
    black_minimum = min_alpha(BLACK, background_color, options, parameters)
    white_ok = _qualifies(white_minimum, target_text_alpha)
    black_ok = _qualifies(black_minimum, target_text_alpha)

    if white_ok and black_ok:
        # darker text is the default preference
        if options.prefers_lighter:
            return WHITE.with_alpha(float(max(target_text_alpha, white_minimum)))
        return BLACK.with_alpha(float(max(target_text_alpha, black_minimum)))
    if white_ok:
        return WHITE.with_alpha(float(max(target_text_alpha, white_minimum)))
    if black_ok:
        return BLACK.with_alpha(float(max(target_text_alpha, black_minimum)))

    reachable = [(minimum, color) for minimum, color in
                 ((white_minimum, WHITE), (black_minimum, BLACK))
                 if minimum != MIN_ALPHA_UNREACHABLE]
    if reachable:
        _, color = min(reachable, key=lambda item: item[0])
        return color.with_alpha(1.0)

    white_ratio = contrast_ratio(WHITE, background_color)
    black_ratio = contrast_ratio(BLACK, background_color)
    warnings.warn(
        "Neither white ({:.2f}:1) nor black ({:.2f}:1) text reaches {:.1f}:1 on {}.".format(
            white_ratio, black_ratio, minimum_threshold(options, parameters),
            background_color.to_hex()),
        ContrastWarning,
        stacklevel=2
    )
    return WHITE if white_ratio >= black_ratio else BLACK


def text_color_on_image(image, region, target_text_alpha: float,
                        font: Optional[FontDescriptor] = None,
                        options: Options = DEFAULT,
                        parameters: Optional[ContrastParameters] = None,
                        sampler: Callable = average_color) -> Optional[Color]:
    """
    Black or white text for the part of ``image`` covered by ``region``.

    Parameters
    ----------
    image : array-like
        Background image; see :mod:`txa.image.sampling`.
    region : Region or tuple
        Area behind the text, ``(x, y, width, height)`` in pixels.
    target_text_alpha : float
        Desired text opacity.
    font : FontDescriptor, optional
        Font of the text; large fonts relax the threshold.
    options : Options, optional
        Extra options (level, preferences) combined with the font's size class.
    parameters : ContrastParameters, optional
        Thresholds and search settings.
    sampler : callable, optional
        ``sampler(image, region) -> Color | None`` giving the background color.

    Returns
    -------
    Color or None
        ``None`` when the sampler yields no color, e.g. an empty image or a
        region outside the image.
    """
    background_color = sampler(image, region)
    if background_color is None:
        return None
    options = options_for_font(font, options, parameters)
    return text_color_on_background(background_color, target_text_alpha, options, parameters)
