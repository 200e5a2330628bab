import numpy as np
import pytest

from txa.color import BLACK, WHITE, Color
from txa.contrast import (DEFAULT, ENHANCED_CONTRAST, LARGE_FONT, MIN_ALPHA_UNREACHABLE,
                          contrast_margin, minimum_threshold, min_alpha,
                          text_color_passes, text_contrast_ratio)
from txa.data import ContrastParameters

ALPHA_EPSILON = 0.01


def test_same_colors_have_no_min_alpha():
    assert min_alpha(WHITE, WHITE, DEFAULT) == -1
    assert min_alpha(Color(0.3, 0.2, 0.1, 0.4), Color(0.3, 0.2, 0.1), LARGE_FONT) == MIN_ALPHA_UNREACHABLE


def test_black_on_white_min_alpha():
    assert min_alpha(BLACK, WHITE, DEFAULT) == pytest.approx(0.54, abs=ALPHA_EPSILON)


def test_large_text_black_on_white_min_alpha():
    assert min_alpha(BLACK, WHITE, LARGE_FONT) == pytest.approx(0.42, abs=ALPHA_EPSILON)


def test_enhanced_black_on_white_min_alpha():
    assert min_alpha(BLACK, WHITE, ENHANCED_CONTRAST) == pytest.approx(0.65, abs=ALPHA_EPSILON)
    assert min_alpha(BLACK, WHITE, ENHANCED_CONTRAST | LARGE_FONT) == pytest.approx(
        min_alpha(BLACK, WHITE, DEFAULT), abs=1e-6)


def test_min_alpha_ignores_color_alpha():
    opaque = min_alpha(BLACK, WHITE, DEFAULT)
    translucent = min_alpha(Color.from_white(0.0, alpha=0.5), WHITE, DEFAULT)
    assert opaque == pytest.approx(translucent, abs=ALPHA_EPSILON)


@pytest.mark.parametrize("text, background", [
    (BLACK, WHITE),
    (WHITE, BLACK),
    (WHITE, Color(0.1, 0.2, 0.5)),
    (Color(1.0, 0.0, 0.0), Color(0.0, 1.0, 0.0)),
])
@pytest.mark.parametrize("options", [DEFAULT, LARGE_FONT])
def test_min_alpha_passes_and_is_tight(text, background, options):
    alpha = min_alpha(text, background, options)
    if alpha == MIN_ALPHA_UNREACHABLE:
        assert not text_color_passes(text.opaque(), background, options)
        return
    assert 0.0 < alpha <= 1.0
    assert text_color_passes(text.with_alpha(alpha), background, options)
    assert not text_color_passes(text.with_alpha(max(alpha - ALPHA_EPSILON, 0.0)), background, options)


def test_min_alpha_unreachable_when_opaque_text_fails():
    # Dark grey text on black cannot reach 4.5:1 at any opacity.
    text = Color.from_white(0.2)
    assert not text_color_passes(text, BLACK, DEFAULT)
    assert min_alpha(text, BLACK, DEFAULT) == MIN_ALPHA_UNREACHABLE


def test_min_alpha_finds_first_crossing():
    text = Color(1.0, 0.0, 0.0)
    background = Color(0.0, 1.0, 0.0)
    alpha = min_alpha(text, background, LARGE_FONT)
    threshold = minimum_threshold(LARGE_FONT)
    below = np.linspace(0.0, alpha, 200)[:-1]
    margins = contrast_margin(text.rgb, background.rgb, below, threshold)
    assert np.all(margins < 0.0)


def test_min_alpha_tolerance_follows_parameters():
    coarse = ContrastParameters(alpha_samples=11, alpha_tolerance=1e-2)
    alpha = min_alpha(BLACK, WHITE, DEFAULT, coarse)
    assert alpha == pytest.approx(0.535, abs=0.011)
    assert text_contrast_ratio(BLACK.with_alpha(alpha), WHITE) >= 4.5
