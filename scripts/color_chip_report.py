#!/usr/bin/env python3
"""
Color Chip Report for txa

This script draws random background colors and, for each one, reports the
text colors txa selects in three typical configurations:

- target alpha of 0.87, preferring light text
- target alpha of 0.87, preferring dark text
- minimally-opaque accessible text

For every chip the report shows the background hex value and the contrast
ratio reached by large and normal text.

Usage:
    python scripts/color_chip_report.py [seed]

Exit codes:
    0: Every selected text color meets its contrast threshold
    1: At least one selected text color misses its threshold
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from txa import (BLACK, WHITE, Color, FontDescriptor, MIN_ALPHA_UNREACHABLE, PREFER_DARKER,
                 PREFER_LIGHTER, min_alpha, text_color_on_background, text_color_passes,
                 text_contrast_ratio)
from txa.font import options_for_font

NUM_COLORS_PER_SECTION = 10
LARGE_FONT = FontDescriptor.system(20)
NORMAL_FONT = FontDescriptor.system(14)


def random_rgb_colors(rng, count):
    """Return ``count`` uniformly random opaque 8-bit RGB colors."""
    return [Color.from_rgb255(*channels) for channels in rng.integers(0, 256, size=(count, 3))]


def minimally_opaque_text_color(background, options):
    """White or black, whichever passes at the lower opacity, at exactly that opacity."""
    candidates = [(min_alpha(color, background, options), color) for color in (WHITE, BLACK)]
    candidates = [(alpha, color) for alpha, color in candidates if alpha != MIN_ALPHA_UNREACHABLE]
    if not candidates:
        return text_color_on_background(background, 1.0, options)
    alpha, color = min(candidates, key=lambda item: item[0])
    return color.with_alpha(alpha)


def contrast_ratio_title(prefix, text_color, background):
    ratio = text_contrast_ratio(text_color, background)
    return prefix + " {:.1f}:1".format(ratio)


def main(seed=None):
    """Build the chip sections and print the report."""
    rng = np.random.default_rng(seed)
    colors = random_rgb_colors(rng, NUM_COLORS_PER_SECTION)

    sections = [
        ("Target alpha of 0.87, prefer light text",
         lambda bg, options: text_color_on_background(bg, 0.87, options | PREFER_LIGHTER)),
        ("Target alpha of 0.87, prefer dark text",
         lambda bg, options: text_color_on_background(bg, 0.87, options | PREFER_DARKER)),
        ("Minimally-opaque accessible text",
         minimally_opaque_text_color),
    ]

    all_pass = True

    print("=" * 70)
    print("WCAG 2.0 Text Color Report")
    print("=" * 70)
    print()

    for title, choose in sections:
        print(title)
        print("-" * len(title))
        for background in colors:
            cells = [background.to_hex()]
            for prefix, font in (("Large text", LARGE_FONT), ("Normal text", NORMAL_FONT)):
                options = options_for_font(font)
                text_color = choose(background, options)
                passes = text_color_passes(text_color, background, options)
                all_pass = all_pass and passes
                status = "PASS" if passes else "FAIL"
                label = "white" if text_color.red == 1.0 else "black"
                cells.append("{} ({} @ {:.2f}, {})".format(
                    contrast_ratio_title(prefix, text_color, background),
                    label, text_color.alpha, status))
            print("  " + " | ".join(cells))
        print()

    print("=" * 70)
    if all_pass:
        print("SUCCESS: Every selected text color meets its contrast threshold.")
        print("=" * 70)
        return 0
    else:
        print("FAILURE: Some selected text colors miss their contrast threshold.")
        print("=" * 70)
        return 1


if __name__ == '__main__':
    sys.exit(main(int(sys.argv[1]) if len(sys.argv) > 1 else None))
