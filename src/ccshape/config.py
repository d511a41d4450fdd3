"""
config.py - Shared constants for ccshape
========================================
Raster values used by rasterization and defaults for coverage tests
and logging.
"""

import os

import numpy as np

# Single-channel 8-bit pixels
PIXEL_DTYPE = np.uint8
PIXEL_MIN = 0
PIXEL_MAX = 255

# Isolated shape images are black on white
BACKGROUND_VALUE = 255
FOREGROUND_VALUE = 0

# Coverage thresholds for filled / hollow classification
DEFAULT_FILLED_THRESHOLD = 0.9
DEFAULT_HOLLOW_THRESHOLD = 0.5

# Console output of the global logger
LOG_VERBOSE = os.environ.get("CCSHAPE_LOG_VERBOSE", "").lower() in ("1", "true", "yes")
