"""Hexagon grid generation around a viewport center.

For every active resolution the cell under the viewport center is
expanded to its k-ring and each cell becomes a ``GridRecord`` holding a
normalized, slightly shrunk outline and a color. With more than one
resolution active, colors are grouped by the ancestor cell at the
lowest resolution.
"""

from typing import Iterable, List

from hexmap.colors import ColorAssignmentManager
from hexmap.geometry import normalize_antimeridian, scale_boundary
from hexmap.h3_settings import BOUNDARY_SCALE_FACTOR
from hexmap.indexer import CellIndexer
from hexmap.models import GridRecord, LatLng
from hexmap.utils import get_logger

logger = get_logger(__name__)


def sorted_resolutions(resolutions: Iterable[int]) -> List[int]:
    """Deduplicate and sort resolutions ascending."""
    return sorted(set(resolutions))


def compute_grid(
    indexer: CellIndexer,
    colors: ColorAssignmentManager,
    center: LatLng,
    resolutions: Iterable[int],
    cell_radius: int,
    *,
    scale_factor: float = BOUNDARY_SCALE_FACTOR,
) -> List[GridRecord]:
    """Compute the hexagons to draw for a viewport.

    Args:
        indexer: H3 indexing adapter
        colors: Color manager; its base colors are rebuilt when more
            than one resolution is active
        center: Viewport center as (lat, lng)
        resolutions: Active resolutions, any order
        cell_radius: k-ring radius around the center cell
        scale_factor: Shrink factor applied to every outline

    Returns:
        Records ordered by resolution ascending, then by cell id
    """
    ordered = sorted_resolutions(resolutions)
    if not ordered:
        logger.info("No active resolutions, nothing to draw")
        return []

    lat, lng = center
    lowest = ordered[0]
    grouped = len(ordered) > 1

    if grouped:
        base_cell = indexer.cell_from_point(lat, lng, lowest)
        colors.build_base_colors(sorted(indexer.neighborhood(base_cell, cell_radius)))
    else:
        colors.clear()

    def ancestor_lookup(cell: str) -> str:
        return indexer.cell_to_parent(cell, lowest)

    records = []
    for resolution in ordered:
        origin = indexer.cell_from_point(lat, lng, resolution)
        cells = sorted(indexer.neighborhood(origin, cell_radius))
        for cell in cells:
            boundary = normalize_antimeridian(indexer.cell_to_boundary(cell))
            records.append(
                GridRecord(
                    cell=cell,
                    resolution=resolution,
                    boundary=scale_boundary(boundary, scale_factor),
                    color=colors.color_for(cell, grouped, ancestor_lookup),
                    center=indexer.cell_to_center(cell),
                )
            )
        logger.debug(f"Resolution {resolution}: {len(cells)} cells around {origin}")

    logger.info(
        f"Computed {len(records)} cells at resolutions {ordered} "
        f"(radius {cell_radius}) around ({lat:.5f}, {lng:.5f})"
    )
    return records
