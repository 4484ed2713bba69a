"""H3 indexing adapter.

The grid, color and locator modules only talk to a ``CellIndexer``;
``H3Indexer`` fulfils it with the h3 library (v4 API). Errors raised by
h3 for invalid cells, resolutions or points are not caught here.
"""

from typing import Protocol, Set

import h3

from hexmap.models import Boundary, LatLng


class CellIndexer(Protocol):
    def cell_from_point(self, lat: float, lng: float, resolution: int) -> str: ...

    def cell_to_boundary(self, cell: str) -> Boundary: ...

    def cell_to_center(self, cell: str) -> LatLng: ...

    def cell_to_parent(self, cell: str, resolution: int) -> str: ...

    def neighborhood(self, cell: str, radius: int) -> Set[str]: ...


class H3Indexer:
    """CellIndexer backed by h3-py."""

    def cell_from_point(self, lat: float, lng: float, resolution: int) -> str:
        return h3.latlng_to_cell(lat, lng, resolution)

    def cell_to_boundary(self, cell: str) -> Boundary:
        # h3 returns (lat, lng) pairs; boundaries here are (lng, lat)
        return [(lng, lat) for lat, lng in h3.cell_to_boundary(cell)]

    def cell_to_center(self, cell: str) -> LatLng:
        lat, lng = h3.cell_to_latlng(cell)
        return (lat, lng)

    def cell_to_parent(self, cell: str, resolution: int) -> str:
        if h3.get_resolution(cell) == resolution:
            return cell
        return h3.cell_to_parent(cell, resolution)

    def neighborhood(self, cell: str, radius: int) -> Set[str]:
        return set(h3.grid_disk(cell, radius))
