"""WCAG conformance levels, text-size classes, and the options that select them."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from txa.data.parameters import ContrastParameters, resolve_parameters


class ContrastWarning(UserWarning):
    """Issued when no candidate text color can meet the requested standard."""


@dataclass(frozen=True)
class Options:
    """Independent switches steering threshold choice and color selection.

    Attributes
    ----------
    large_font : bool
        Evaluate against the large-text thresholds.
    enhanced_contrast : bool
        Evaluate against level AAA instead of level AA.
    prefer_lighter, prefer_darker : bool
        Tie-break among passing candidates. Setting both is the same as
        setting neither.

    Options combine with ``|``, so ``LARGE_FONT | ENHANCED_CONTRAST`` selects
    the AAA large-text threshold.
    """

    large_font: bool = False
    enhanced_contrast: bool = False
    prefer_lighter: bool = False
    prefer_darker: bool = False

    def __or__(self, other):
        if not isinstance(other, Options):
            return NotImplemented
        return Options(**{f.name: getattr(self, f.name) or getattr(other, f.name)
                          for f in fields(self)})

    @property
    def prefers_lighter(self) -> bool:
        return self.prefer_lighter and not self.prefer_darker

    @property
    def prefers_darker(self) -> bool:
        return self.prefer_darker and not self.prefer_lighter


DEFAULT = Options()
LARGE_FONT = Options(large_font=True)
ENHANCED_CONTRAST = Options(enhanced_contrast=True)
PREFER_LIGHTER = Options(prefer_lighter=True)
PREFER_DARKER = Options(prefer_darker=True)


class ContrastStandard(Enum):
    AA = 'AA'
    AA_LARGE = 'AA large'
    AAA = 'AAA'
    AAA_LARGE = 'AAA large'

    @property
    def enhanced(self) -> bool:
        return self in (ContrastStandard.AAA, ContrastStandard.AAA_LARGE)

    @property
    def large(self) -> bool:
        return self in (ContrastStandard.AA_LARGE, ContrastStandard.AAA_LARGE)

    @classmethod
    def from_options(cls, options: Options) -> "ContrastStandard":
        if options.enhanced_contrast:
            return cls.AAA_LARGE if options.large_font else cls.AAA
        return cls.AA_LARGE if options.large_font else cls.AA

    def threshold(self, parameters: Optional[ContrastParameters] = None) -> float:
        """Minimum contrast ratio required by this standard."""
        return resolve_parameters(parameters).threshold(self.enhanced, self.large)


def minimum_threshold(options: Options = DEFAULT,
                      parameters: Optional[ContrastParameters] = None) -> float:
    """Minimum contrast ratio implied by ``options``.

    With the default parameters: AA 4.5 (3.0 for large text), AAA 7.0
    (4.5 for large text).
    """
    return ContrastStandard.from_options(options).threshold(parameters)


def passes_standard(ratio: float, standard: ContrastStandard,
                    parameters: Optional[ContrastParameters] = None) -> bool:
    return ratio >= standard.threshold(parameters)
