from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional

from txa.contrast.standards import DEFAULT, Options
from txa.data.parameters import ContrastParameters, resolve_parameters


class FontWeight(IntEnum):
    """Font weight classes using the CSS/OpenType numbering."""
    THIN = 100
    ULTRA_LIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    HEAVY = 800
    BLACK = 900


@dataclass(frozen=True)
class FontDescriptor:
    """
    The two font metrics that matter for contrast: size and weight.

    Attributes
    ----------
    point_size : float
        Font size in points.
    weight : FontWeight
        Weight class. Semibold and heavier count as bold.
    """

    point_size: float
    weight: FontWeight = FontWeight.REGULAR

    @classmethod
    def system(cls, point_size: float, weight: FontWeight = FontWeight.REGULAR) -> "FontDescriptor":
        return cls(point_size, FontWeight(weight))

    @classmethod
    def bold_system(cls, point_size: float) -> "FontDescriptor":
        return cls(point_size, FontWeight.BOLD)

    @property
    def bold(self) -> bool:
        return self.weight >= FontWeight.SEMIBOLD

    def with_size(self, point_size: float) -> "FontDescriptor":
        return replace(self, point_size=point_size)


def is_large_font(font: Optional[FontDescriptor],
                  parameters: Optional[ContrastParameters] = None) -> bool:
    """
    Whether ``font`` counts as large text for contrast purposes.

    WCAG treats text of at least 18 points, or bold text of at least 14
    points, as large. ``None`` is never large.
    """
    if font is None:
        return False
    parameters = resolve_parameters(parameters)
    if font.point_size >= parameters.large_font_size:
        return True
    return font.bold and font.point_size >= parameters.bold_large_font_size


def options_for_font(font: Optional[FontDescriptor], options: Options = DEFAULT,
                     parameters: Optional[ContrastParameters] = None) -> Options:
    """Return ``options`` with ``large_font`` switched on when ``font`` is large."""
    if is_large_font(font, parameters):
        return replace(options, large_font=True)
    return options
