# Grayscale ramp from sparse to dense; index grows with luminance
RAMP = " .:-=+*#%@"

# Black/white mode glyphs
BW_LIGHT = " "
BW_DARK = "#"

EMPTY_PLACEHOLDER = "(empty image)"
