"""Resolve a clicked map point to the enclosing hexagon."""

from hexmap.colors import ColorAssignmentManager
from hexmap.indexer import CellIndexer
from hexmap.models import LocatedCell
from hexmap.utils import get_logger

logger = get_logger(__name__)


class CellLocator:
    def __init__(self, indexer: CellIndexer):
        self.indexer = indexer

    def locate(
        self,
        lat: float,
        lng: float,
        resolution: int,
        colors: ColorAssignmentManager,
    ) -> LocatedCell:
        """Find the cell containing a point and its color.

        The color is looked up by the cell's own id, which only hits when
        that cell is itself a base cell of the current draw. Otherwise
        the neutral color is reported.

        Args:
            lat: Clicked latitude
            lng: Clicked longitude
            resolution: Highest active resolution
            colors: Color assignments of the current draw

        Returns:
            LocatedCell with the cell id, center and color
        """
        cell = self.indexer.cell_from_point(lat, lng, resolution)
        center_lat, center_lng = self.indexer.cell_to_center(cell)
        color = colors.neutral_color_for(cell)

        logger.info(f"Located cell {cell} at resolution {resolution} for click ({lat:.5f}, {lng:.5f})")
        return LocatedCell(
            cell=cell,
            resolution=resolution,
            center_lat=center_lat,
            center_lng=center_lng,
            color=color,
        )
