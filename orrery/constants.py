#!/usr/bin/env python3
"""
Shared constants for the solar system GIF generator (pixels and time steps).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""
import math

# Angles (radians)
DEG_90 = 0.5 * math.pi
DEG_180 = math.pi
DEG_270 = 1.5 * math.pi
DEG_360 = 2.0 * math.pi

# Generation limits
MINIMUM_OUTPUT_DIMENSION = 64  # px; smallest accepted canvas side
MAXIMUM_PLANET_SIZE = 4  # px; upper bound for random planet radius
COLORSPACE_SIZE = 0xFFFFFF  # largest 24-bit RGB value
SUN_ALIGNMENTS = ("center", "left", "right", "top", "bottom")

# Output
FRAME_PAD = 8  # digits in dumped frame file names
FRAME_FILE_PATTERN = "frame{:0" + str(FRAME_PAD) + "d}.png"

# Rendering
BACKGROUND_COLOR = (0, 0, 0)
SUN_COLOR = (255, 255, 0)
# Indexed by star brightness class, dimmest first
STAR_COLORS = (
    (0x11, 0x11, 0x00),
    (0x44, 0x44, 0x00),
    (0x88, 0x88, 0x33),
    (0xBB, 0xBB, 0x66),
    (0xFF, 0xFF, 0x99),
)
TRAIL_SEGMENT_PX = 2.0  # approximate length of one stroked trail segment

# CLI defaults
DEFAULT_STAR_DENSITY = 0.03125
DEFAULT_NUM_PLANETS = 4
DEFAULT_SUN_SIZE = 10
DEFAULT_SUN_ALIGNMENT = "center"
DEFAULT_TRAIL_FRACTION = 8.0
DEFAULT_OUTPUT_WIDTH = 640
DEFAULT_OUTPUT_HEIGHT = 640
DEFAULT_DELAY_PER_FRAME = 33  # ms
DEFAULT_TOTAL_FRAMES = 16
DEFAULT_OUTPUT_PATH = "output.gif"
