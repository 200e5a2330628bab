from txa.selection.policy import (text_color_from_choices, text_color_on_background,
                                  text_color_on_image)
