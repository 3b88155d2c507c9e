"""
Configuration and constants for the sheet cutting planner.
"""

# All dimensions are millimeters.
DEFAULT_SHEET_WIDTH = 2440
DEFAULT_SHEET_HEIGHT = 1220
DEFAULT_KERF = 3.175  # 1/8" table saw blade
DEFAULT_TRIM_MARGIN = 0

DEFAULT_SHEET_SIZES = {
    '4x8': (2440, 1220),
    '5x5': (1525, 1525),
    '4x10': (3050, 1220),
    '2500x1250': (2500, 1250),
    '2800x2070': (2800, 2070),
}

DEFAULT_MATERIAL = '3/4" Plywood'

# Geometric tolerance for fit tests and degenerate remainders.
EPSILON = 1e-6

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
