# No dependencies
HUE_360 = 360.0

# NTSC luma weights for (r, g, b)
GRAY_WEIGHTS = (0.2989, 0.587, 0.114)

DISPLAY_PRECISION = 5
CSS_ALPHA_PRECISION = 3

# Distance kept between a clamped hilite and the radial gradient's edge
HILITE_INSET = 0.1
