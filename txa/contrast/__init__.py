from txa.contrast.standards import (ContrastStandard, ContrastWarning, Options, DEFAULT,
                                    LARGE_FONT, ENHANCED_CONTRAST, PREFER_LIGHTER,
                                    PREFER_DARKER, minimum_threshold, passes_standard)
from txa.contrast.ratio import (contrast_ratio, ratio_from_luminance, text_color_passes,
                                text_contrast_ratio)
from txa.contrast.alpha import MIN_ALPHA_UNREACHABLE, contrast_margin, min_alpha
