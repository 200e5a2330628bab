import numpy as np
import pytest

from txa.color import BLACK, WHITE, Color
from txa.contrast import LARGE_FONT, text_color_passes
from txa.font import FontDescriptor
from txa.image import ImageFormatError, Region, average_color
from txa.selection import text_color_on_background, text_color_on_image


def _solid(value, size=100, dtype=np.uint8, channels=3):
    return np.full((size, size, channels), value, dtype=dtype)


@pytest.fixture
def gray_image():
    return _solid(128)


@pytest.fixture
def white_image():
    return _solid(255)


@pytest.fixture
def black_image():
    return _solid(0)


# Average color sampling

def test_average_of_solid_image(gray_image):
    color = average_color(gray_image, Region(0, 0, 10, 10))
    assert color.rgb == pytest.approx([128 / 255.0] * 3)
    assert color.alpha == 1.0


def test_average_of_split_image():
    image = np.zeros((10, 20, 3), dtype=np.uint8)
    image[:, 10:] = 255
    assert average_color(image, (0, 0, 20, 10)).rgb == pytest.approx([0.5] * 3)
    assert average_color(image, (10, 0, 10, 10)) == WHITE
    assert average_color(image, (0, 0, 10, 10)) == BLACK


def test_region_is_clipped_to_image():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:5, :5] = 255
    # Only the top-left white quadrant lies inside the image.
    assert average_color(image, (-10, -10, 15, 15)) == WHITE


def test_negative_extent_is_standardized():
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    image[:5, :5] = 255
    assert average_color(image, (5, 5, -5, -5)) == WHITE


def test_off_image_region_gives_none(gray_image):
    assert average_color(gray_image, Region(-10, -10, 10, 10)) is None
    assert average_color(gray_image, Region(100, 0, 10, 10)) is None


def test_zero_region_gives_none(gray_image):
    assert average_color(gray_image, Region(0, 0, 0, 0)) is None


def test_empty_image_gives_none():
    assert average_color(np.zeros((0, 0, 3), dtype=np.uint8), (0, 0, 10, 10)) is None
    assert average_color(None, (0, 0, 10, 10)) is None


def test_grey_float_and_rgba_images():
    grey = np.full((4, 4), 0.25)
    assert average_color(grey, (0, 0, 4, 4)).rgb == pytest.approx([0.25] * 3)

    rgba = np.zeros((4, 4, 4), dtype=np.uint16)
    rgba[..., 0] = 65535
    rgba[..., 3] = 0
    assert average_color(rgba, (0, 0, 4, 4)) == Color(1.0, 0.0, 0.0)


def test_unsupported_layout_raises():
    with pytest.raises(ImageFormatError, match="Expected an image"):
        average_color(np.zeros((4, 4, 2)), (0, 0, 4, 4))
    with pytest.raises(ImageFormatError):
        average_color(np.zeros(16), (0, 0, 4, 4))


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32])
def test_signed_integer_image_raises(dtype):
    image = np.full((4, 4, 3), -1, dtype=dtype)
    with pytest.raises(ImageFormatError, match="Signed integer"):
        average_color(image, (0, 0, 4, 4))


def test_unsigned_integer_depths_are_normalized():
    image = np.full((4, 4, 3), 65535, dtype=np.uint16)
    assert average_color(image, (0, 0, 4, 4)) == WHITE


# Text color on a background image

def test_text_color_on_empty_background_image():
    image = np.zeros((0, 0, 4), dtype=np.uint8)
    color = text_color_on_image(image, Region(0, 0, 10, 10), 1.0, FontDescriptor.bold_system(13))
    assert color is None


def test_text_color_on_non_empty_background_image_off_region(gray_image):
    color = text_color_on_image(gray_image, Region(-10, -10, 10, 10), 1.0, FontDescriptor.bold_system(13))
    assert color is None


def test_text_color_on_non_empty_background_image_zero_rect(gray_image):
    color = text_color_on_image(gray_image, Region(0, 0, 0, 0), 1.0, FontDescriptor.bold_system(13))
    assert color is None


def test_text_color_on_non_empty_background_image(gray_image):
    color = text_color_on_image(gray_image, Region(0, 0, 10, 10), 1.0, FontDescriptor.bold_system(13))
    assert color is not None


def test_white_background_image(white_image):
    alpha = 1.0
    color = text_color_on_image(white_image, Region(0, 0, 10, 10), alpha, FontDescriptor.bold_system(13))
    # Black gives the most contrast against a fully white background image.
    assert color.red == 0
    assert color.alpha == alpha


def test_black_background_image(black_image):
    alpha = 1.0
    color = text_color_on_image(black_image, Region(0, 0, 10, 10), alpha, FontDescriptor.bold_system(13))
    # White gives the most contrast against a fully black background image.
    assert color.red == 1
    assert color.alpha == alpha


def test_large_font_relaxes_image_threshold(gray_image):
    background = average_color(gray_image, (0, 0, 10, 10))
    large = text_color_on_image(gray_image, (0, 0, 10, 10), 0.0, FontDescriptor.system(24))
    assert large == text_color_on_background(background, 0.0, LARGE_FONT)
    assert text_color_passes(large, background, LARGE_FONT)


def test_custom_sampler_is_used():
    calls = []

    def sampler(image, region):
        calls.append(region)
        return WHITE

    color = text_color_on_image(object(), (1, 2, 3, 4), 0.87, sampler=sampler)
    assert calls == [(1, 2, 3, 4)]
    assert color == BLACK.with_alpha(0.87)
