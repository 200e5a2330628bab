from txa.font.font import FontDescriptor, FontWeight, is_large_font, options_for_font
