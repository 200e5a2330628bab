from txa.color.color import (Color, ColorError, WHITE, BLACK, blend, composite,
                             linearize, relative_luminance)
