"""H3 grid settings and constants.

This module contains all configuration values specific to the H3
hexagon grid, including resolution limits, neighborhood radius and
boundary scaling.
"""

# H3 resolution settings
DEFAULT_H3_RESOLUTION = 8
MIN_H3_RESOLUTION = 0
MAX_H3_RESOLUTION = 15

# k-ring radius around the viewport-center cell
DEFAULT_CELL_RADIUS = 30
MIN_CELL_RADIUS = 0
MAX_CELL_RADIUS = 50

# Boundaries are shrunk toward their centroid so adjacent cells show a gap
BOUNDARY_SCALE_FACTOR = 0.99

# Longitudes outside this band flag a boundary as crossing the antimeridian
ANTIMERIDIAN_LONGITUDE_LIMIT = 90.0

# Decimal places shown on vertex coordinate labels
COORDINATE_LABEL_PRECISION = 4
