"""Application settings and constants for H3 Hexagon Map.

This module centralizes all configuration values, constants, and
settings used across the application.
"""

# Application metadata
APPLICATION_NAME = "⬡ H3 Hexagon Map"
APPLICATION_VERSION = "1.0.0"

# Map display settings (Shinjuku, Tokyo)
DEFAULT_MAP_LATITUDE = 35.68963
DEFAULT_MAP_LONGITUDE = 139.69165
DEFAULT_MAP_ZOOM = 16
MIN_MAP_ZOOM = 1
MAX_MAP_ZOOM = 22

# Palette used for hexagon outlines and fills
COLORS = ["green", "red", "blue", "purple", "orange"]

# Reported for a clicked cell that has no assigned color
NEUTRAL_COLOR = "gray"

# Named colors understood by the renderer (RGB)
NAMED_COLORS_RGB = {
    "green": (0, 128, 0),
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "purple": (128, 0, 128),
    "orange": (255, 165, 0),
    "gray": (128, 128, 128),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
}
TRANSPARENT_COLOR = "transparent"

# Polygon style
POLYGON_LINE_OPACITY = 0.5
POLYGON_FILL_OPACITY = 0.08
POLYGON_LINE_WIDTH = 2

# Label style
INDEX_LABEL_COLOR = "black"
COORDINATE_LABEL_COLOR = "blue"
LABEL_FONT_SIZE = 10

# Display toggles
DEFAULT_SHOW_FILL_COLOR = True
DEFAULT_SHOW_INDEX_LABELS = False
DEFAULT_SHOW_COORDINATE_LABELS = False

# Icon URLs
MARKER_ICON_URL = "https://cdn-icons-png.flaticon.com/512/149/149059.png"

# Tooltip background color
HEXAGON_TOOLTIP_BG = "rgba(41, 181, 232, 0.8)"
