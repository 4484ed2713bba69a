"""Lifecycle of the shapes drawn for the hexagon grid.

``OverlayManager`` is the only component that adds or removes shapes on
a render surface. Each redraw draws the new generation first and then
releases the previous one, so at most one generation stays attached.
"""

from typing import List, Sequence, Tuple

from hexmap.geometry import centroid
from hexmap.h3_settings import COORDINATE_LABEL_PRECISION
from hexmap.models import DisplayConfig, GridRecord, LatLng
from hexmap.renderer import RenderSurface
from hexmap.settings import (
    COORDINATE_LABEL_COLOR,
    INDEX_LABEL_COLOR,
    LABEL_FONT_SIZE,
    POLYGON_FILL_OPACITY,
    POLYGON_LINE_OPACITY,
    POLYGON_LINE_WIDTH,
    TRANSPARENT_COLOR,
)
from hexmap.utils import get_logger

logger = get_logger(__name__)


def format_coordinates(lat: float, lng: float, precision: int = COORDINATE_LABEL_PRECISION) -> str:
    return f"{lat:.{precision}f}, {lng:.{precision}f}"


class OverlayManager:
    """Owns the grid shapes and the click markers on one render surface.

    Args:
        surface: Render surface the shapes are drawn on
    """

    def __init__(self, surface: RenderSurface):
        self.surface = surface
        self._shapes: List[int] = []
        self._markers: List[int] = []

    @property
    def shapes(self) -> Tuple[int, ...]:
        """Handles of the current grid generation, in draw order."""
        return tuple(self._shapes)

    @property
    def markers(self) -> Tuple[int, ...]:
        return tuple(self._markers)

    def redraw(self, records: Sequence[GridRecord], config: DisplayConfig) -> None:
        """Replace the drawn grid with the given records.

        Args:
            records: Hexagons to draw
            config: Display toggles (fill, index labels, coordinate labels)
        """
        new_shapes: List[int] = []
        try:
            for record in records:
                self._draw_record(record, config, new_shapes)
        except Exception:
            # Roll back the partial generation; the previous one stays drawn
            for handle in new_shapes:
                self.surface.remove(handle)
            logger.error(f"Redraw failed after {len(new_shapes)} shapes, rolled back")
            raise

        old_shapes, self._shapes = self._shapes, new_shapes
        for handle in old_shapes:
            self.surface.remove(handle)

        logger.info(
            f"Redrew overlay: {len(records)} cells, {len(new_shapes)} shapes "
            f"({len(old_shapes)} removed)"
        )

    def add_marker(self, position: LatLng, color: str) -> int:
        """Drop a marker; markers persist across grid redraws."""
        handle = self.surface.add_marker(position, color=color)
        self._markers.append(handle)
        return handle

    def clear_markers(self) -> None:
        markers, self._markers = self._markers, []
        for handle in markers:
            self.surface.remove(handle)
        logger.info(f"Removed {len(markers)} markers")

    def _draw_record(self, record: GridRecord, config: DisplayConfig, handles: List[int]) -> None:
        """Draw one record, appending every new handle to ``handles`` as it is added."""
        if config.show_index_labels and record.center is None:
            raise ValueError(f"Index labels requested but cell {record.cell} has no center")

        fill_color = record.color if config.show_fill_color else TRANSPARENT_COLOR
        center_lng, center_lat = centroid(record.boundary)
        handles.append(
            self.surface.add_polygon(
                record.boundary,
                line_color=record.color,
                fill_color=fill_color,
                line_opacity=POLYGON_LINE_OPACITY,
                fill_opacity=POLYGON_FILL_OPACITY,
                line_width=POLYGON_LINE_WIDTH,
                properties={
                    "CELL": record.cell,
                    "RESOLUTION": record.resolution,
                    "COLOR": record.color,
                    "LATITUDE": center_lat,
                    "LONGITUDE": center_lng,
                },
            )
        )

        if config.show_index_labels:
            handles.append(
                self.surface.add_label(
                    record.center, record.cell, color=INDEX_LABEL_COLOR, size=LABEL_FONT_SIZE
                )
            )

        if config.show_coordinate_labels:
            for lng, lat in record.boundary:
                handles.append(
                    self.surface.add_label(
                        (lat, lng),
                        format_coordinates(lat, lng),
                        color=COORDINATE_LABEL_COLOR,
                        size=LABEL_FONT_SIZE,
                    )
                )
