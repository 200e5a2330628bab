__version__ = "0.1.0"

from txa.data.parameters import ContrastParameters
from txa.color.color import (Color, ColorError, WHITE, BLACK, composite,
                             relative_luminance)
from txa.contrast.standards import (ContrastStandard, ContrastWarning, Options, DEFAULT,
                                    LARGE_FONT, ENHANCED_CONTRAST, PREFER_LIGHTER,
                                    PREFER_DARKER, minimum_threshold, passes_standard)
from txa.contrast.ratio import contrast_ratio, text_color_passes, text_contrast_ratio
from txa.contrast.alpha import MIN_ALPHA_UNREACHABLE, min_alpha
from txa.font.font import FontDescriptor, FontWeight, is_large_font
from txa.image.sampling import ImageFormatError, Region, average_color
from txa.selection.policy import (text_color_from_choices, text_color_on_background,
                                  text_color_on_image)
