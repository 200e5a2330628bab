from txa.image.sampling import ImageFormatError, Region, as_pixels, average_color
