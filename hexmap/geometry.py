"""Boundary geometry helpers.

Boundaries are sequences of (longitude, latitude) vertices, closed
implicitly from the last vertex back to the first.
"""

from typing import Sequence

from hexmap.h3_settings import ANTIMERIDIAN_LONGITUDE_LIMIT
from hexmap.models import Boundary, Vertex


def crosses_antimeridian(boundary: Sequence[Vertex]) -> bool:
    """Return True if any vertex longitude falls outside [-90, 90].

    This is a heuristic: a hexagon straddling +/-180 degrees has vertices
    on both sides of the map, which always puts some of them past 90.
    """
    return any(
        lng > ANTIMERIDIAN_LONGITUDE_LIMIT or lng < -ANTIMERIDIAN_LONGITUDE_LIMIT
        for lng, _ in boundary
    )


def normalize_antimeridian(boundary: Sequence[Vertex]) -> Boundary:
    """Shift negative longitudes into [180, 360) for antimeridian cells.

    Args:
        boundary: Cell outline as (lng, lat) vertices

    Returns:
        The outline unchanged when it stays within [-90, 90], otherwise
        a copy with every negative longitude increased by 360
    """
    if not crosses_antimeridian(boundary):
        return list(boundary)
    # lng + 360 can round to exactly 360 for tiny negatives
    return [((lng + 360.0) % 360.0 if lng < 0 else lng, lat) for lng, lat in boundary]


def centroid(boundary: Sequence[Vertex]) -> Vertex:
    """Arithmetic mean of the boundary vertices."""
    if not boundary:
        raise ValueError("Cannot compute the centroid of an empty boundary")
    total = len(boundary)
    sum_lng = sum(lng for lng, _ in boundary)
    sum_lat = sum(lat for _, lat in boundary)
    return (sum_lng / total, sum_lat / total)


def scale_boundary(boundary: Sequence[Vertex], factor: float) -> Boundary:
    """Move every vertex toward the centroid by the given factor.

    Args:
        boundary: Cell outline as (lng, lat) vertices
        factor: 1.0 keeps the outline, values below 1.0 shrink it

    Returns:
        Scaled outline with the same centroid
    """
    if factor == 1.0:
        return list(boundary)
    center_lng, center_lat = centroid(boundary)
    return [
        (
            center_lng + (lng - center_lng) * factor,
            center_lat + (lat - center_lat) * factor,
        )
        for lng, lat in boundary
    ]
