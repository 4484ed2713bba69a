"""Data types shared by the grid, overlay and locator modules."""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from hexmap.h3_settings import DEFAULT_CELL_RADIUS
from hexmap.settings import (
    COLORS,
    DEFAULT_MAP_LATITUDE,
    DEFAULT_MAP_LONGITUDE,
    DEFAULT_MAP_ZOOM,
    DEFAULT_SHOW_COORDINATE_LABELS,
    DEFAULT_SHOW_FILL_COLOR,
    DEFAULT_SHOW_INDEX_LABELS,
    MAX_MAP_ZOOM,
    MIN_MAP_ZOOM,
    NAMED_COLORS_RGB,
)

# (longitude, latitude)
Vertex = Tuple[float, float]
Boundary = List[Vertex]
# (latitude, longitude)
LatLng = Tuple[float, float]


@dataclass(frozen=True)
class GridRecord:
    """One renderable hexagon.

    Attributes:
        cell: H3 cell identifier
        resolution: H3 resolution of the cell
        boundary: Normalized and scaled outline as (lng, lat) vertices
        color: Palette color assigned to the cell
        center: Cell center as (lat, lng), used for index labels
    """

    cell: str
    resolution: int
    boundary: Boundary
    color: str
    center: Optional[LatLng] = None


@dataclass(frozen=True)
class LocatedCell:
    """Result of resolving a clicked point to a cell."""

    cell: str
    resolution: int
    center_lat: float
    center_lng: float
    color: str


@dataclass
class DisplayConfig:
    show_fill_color: bool = DEFAULT_SHOW_FILL_COLOR
    show_index_labels: bool = DEFAULT_SHOW_INDEX_LABELS
    show_coordinate_labels: bool = DEFAULT_SHOW_COORDINATE_LABELS
    cell_radius: int = DEFAULT_CELL_RADIUS
    palette: Sequence[str] = field(default_factory=lambda: list(COLORS))
    color_seed: Optional[int] = None

    def __post_init__(self):
        if self.cell_radius < 0:
            raise ValueError(f"Cell radius must be >= 0, got {self.cell_radius}")
        if not self.palette:
            raise ValueError("Palette must contain at least one color")
        unknown = [color for color in self.palette if color not in NAMED_COLORS_RGB]
        if unknown:
            raise ValueError(f"Unknown palette colors: {unknown}")

    @classmethod
    def default(cls) -> "DisplayConfig":
        return cls()


@dataclass(frozen=True)
class Viewport:
    latitude: float = DEFAULT_MAP_LATITUDE
    longitude: float = DEFAULT_MAP_LONGITUDE
    zoom: float = DEFAULT_MAP_ZOOM

    def __post_init__(self):
        # Zoom is clamped the same way the map widget clamps it
        clamped = min(max(self.zoom, MIN_MAP_ZOOM), MAX_MAP_ZOOM)
        object.__setattr__(self, "zoom", clamped)

    @property
    def center(self) -> LatLng:
        return (self.latitude, self.longitude)
