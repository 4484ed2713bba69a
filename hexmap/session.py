"""Per-map session state for the hexagon overlay.

A ``HexagonMapSession`` bundles everything one map instance needs:
viewport, active resolutions, display settings, color assignments and
the overlay it draws on. Every setter redraws synchronously.
"""

import random
from dataclasses import replace
from typing import Iterable, List, Optional

from hexmap.colors import ColorAssignmentManager
from hexmap.grid import compute_grid, sorted_resolutions
from hexmap.h3_settings import (
    DEFAULT_H3_RESOLUTION,
    MAX_H3_RESOLUTION,
    MIN_H3_RESOLUTION,
)
from hexmap.indexer import CellIndexer, H3Indexer
from hexmap.locator import CellLocator
from hexmap.models import DisplayConfig, GridRecord, LocatedCell, Viewport
from hexmap.overlay import OverlayManager
from hexmap.renderer import RenderSurface
from hexmap.utils import get_logger

logger = get_logger(__name__)


def _validate_resolution(resolution: int) -> int:
    if not MIN_H3_RESOLUTION <= resolution <= MAX_H3_RESOLUTION:
        raise ValueError(
            f"H3 resolution must be between {MIN_H3_RESOLUTION} and "
            f"{MAX_H3_RESOLUTION}, got {resolution}"
        )
    return resolution


class HexagonMapSession:
    """Grid state and operations for one map.

    Args:
        surface: Render surface shared with the map widget
        indexer: H3 indexing adapter, defaults to ``H3Indexer``
        config: Display settings, defaults to ``DisplayConfig.default()``
        viewport: Initial map center and zoom
        resolutions: Initially active resolutions
    """

    def __init__(
        self,
        surface: RenderSurface,
        indexer: Optional[CellIndexer] = None,
        config: Optional[DisplayConfig] = None,
        viewport: Optional[Viewport] = None,
        resolutions: Iterable[int] = (DEFAULT_H3_RESOLUTION,),
    ):
        self.indexer = indexer or H3Indexer()
        self.config = config or DisplayConfig.default()
        self.viewport = viewport or Viewport()
        self.resolutions = [_validate_resolution(r) for r in sorted_resolutions(resolutions)]
        self.colors = ColorAssignmentManager(
            self.config.palette, rng=random.Random(self.config.color_seed)
        )
        self.overlay = OverlayManager(surface)
        self.locator = CellLocator(self.indexer)
        self.records: List[GridRecord] = []
        self.last_located: Optional[LocatedCell] = None

    @property
    def highest_resolution(self) -> Optional[int]:
        return max(self.resolutions) if self.resolutions else None

    @property
    def zoom_level(self) -> float:
        return self.viewport.zoom

    def draw(self) -> List[GridRecord]:
        """Recompute the grid at the viewport center and redraw it."""
        self.records = compute_grid(
            self.indexer,
            self.colors,
            self.viewport.center,
            self.resolutions,
            self.config.cell_radius,
        )
        self.overlay.redraw(self.records, self.config)
        return self.records

    def move_to(self, viewport: Viewport) -> List[GridRecord]:
        """Handle a move or zoom settle of the map."""
        self.viewport = viewport
        return self.draw()

    def set_resolutions(self, resolutions: Iterable[int]) -> List[GridRecord]:
        self.resolutions = [_validate_resolution(r) for r in sorted_resolutions(resolutions)]
        logger.info(f"Active resolutions: {self.resolutions}")
        return self.draw()

    def set_resolution(self, resolution: int) -> List[GridRecord]:
        return self.set_resolutions([resolution])

    def set_cell_radius(self, radius: int) -> List[GridRecord]:
        self.config = replace(self.config, cell_radius=radius)
        return self.draw()

    def toggle_fill_color(self, value: bool) -> List[GridRecord]:
        self.config = replace(self.config, show_fill_color=value)
        return self.draw()

    def toggle_index_labels(self, value: bool) -> List[GridRecord]:
        self.config = replace(self.config, show_index_labels=value)
        return self.draw()

    def toggle_coordinate_labels(self, value: bool) -> List[GridRecord]:
        self.config = replace(self.config, show_coordinate_labels=value)
        return self.draw()

    def handle_click(self, lat: float, lng: float) -> Optional[LocatedCell]:
        """Locate the clicked cell and mark its center.

        Args:
            lat: Clicked latitude
            lng: Clicked longitude

        Returns:
            The located cell, or None when no resolution is active
        """
        resolution = self.highest_resolution
        if resolution is None:
            logger.info("Click ignored, no active resolution")
            return None

        located = self.locator.locate(lat, lng, resolution, self.colors)
        self.overlay.add_marker((located.center_lat, located.center_lng), located.color)
        self.last_located = located
        return located

    def clear_markers(self) -> None:
        self.overlay.clear_markers()
        self.last_located = None
