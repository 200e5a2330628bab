from typing import Optional


class ContrastParameters(object):
    """Numerical settings that steer contrast evaluation and alpha search.

    The defaults reproduce WCAG 2.0 success criteria 1.4.3 (level AA) and
    1.4.6 (level AAA).  Callers that need a house standard can build their
    own instance and pass it through the ``parameters`` keyword accepted by
    every threshold-dependent function.

    Attributes
    ----------
    aa_normal, aa_large : float
        Minimum contrast ratios at level AA for normal and large text.
    aaa_normal, aaa_large : float
        Minimum contrast ratios at level AAA for normal and large text.
    large_font_size : float
        Point size from which any font counts as large text.
    bold_large_font_size : float
        Point size from which a bold font counts as large text.
    alpha_samples : int
        Number of evenly spaced alpha values scanned before root refinement
        in :func:`~txa.contrast.alpha.min_alpha`.
    alpha_tolerance : float
        Absolute tolerance of the refined minimum alpha.
    """

    _NAMES = (
        'aa_normal',
        'aa_large',
        'aaa_normal',
        'aaa_large',
        'large_font_size',
        'bold_large_font_size',
        'alpha_samples',
        'alpha_tolerance',
    )

    def __init__(self, **overrides):
        # Contrast ratio thresholds
        self.aa_normal = 4.5
        self.aa_large = 3.0
        self.aaa_normal = 7.0
        self.aaa_large = 4.5

        # Large text classification (points)
        self.large_font_size = 18.0
        self.bold_large_font_size = 14.0

        # Minimum alpha search
        self.alpha_samples = 256
        self.alpha_tolerance = 1.0e-4

        for name, value in overrides.items():
            self.set(name, value)

    def __str__(self):
        return (
            "Contrast Parameters:\n"
            "--------------------\n"
            f"AA Normal Text: {self.aa_normal}:1\n"
            f"AA Large Text: {self.aa_large}:1\n"
            f"AAA Normal Text: {self.aaa_normal}:1\n"
            f"AAA Large Text: {self.aaa_large}:1\n"
            f"Large Font Size: {self.large_font_size} pt\n"
            f"Bold Large Font Size: {self.bold_large_font_size} pt\n"
            f"Alpha Samples: {self.alpha_samples}\n"
            f"Alpha Tolerance: {self.alpha_tolerance}"
        )

    def __repr__(self):
        return self.__str__()

    def threshold(self, enhanced: bool, large: bool) -> float:
        """Return the minimum contrast ratio for a level and text size."""
        if enhanced:
            return self.aaa_large if large else self.aaa_normal
        return self.aa_large if large else self.aa_normal

    def set(self, parameter, value):
        """Update a named parameter.

        Parameters
        ----------
        parameter : str
            One of ``{'aa_normal', 'aa_large', 'aaa_normal', 'aaa_large',
            'large_font_size', 'bold_large_font_size', 'alpha_samples',
            'alpha_tolerance'}``.
        value : float or int
            New value assigned to the corresponding attribute.
        """
        if parameter not in self._NAMES:
            raise ValueError("Invalid parameter: {}.".format(parameter))
        if parameter == 'alpha_samples':
            value = int(value)
            if value < 2:
                raise ValueError("alpha_samples must be at least 2.")
        elif parameter == 'alpha_tolerance' and value <= 0:
            raise ValueError("alpha_tolerance must be positive.")
        setattr(self, parameter, value)
        return None


DEFAULT_PARAMETERS = ContrastParameters()


def resolve_parameters(parameters: Optional[ContrastParameters] = None) -> ContrastParameters:
    return DEFAULT_PARAMETERS if parameters is None else parameters
