"""
Unit tests for the h3-backed indexing adapter.
"""

import pytest

from hexmap.indexer import H3Indexer

TOKYO = (35.68963, 139.69165)


class TestH3Indexer:
    def test_boundary_is_lng_lat_ordered(self, indexer):
        cell = indexer.cell_from_point(*TOKYO, 8)
        boundary = indexer.cell_to_boundary(cell)

        assert len(boundary) == 6
        for lng, lat in boundary:
            assert lng == pytest.approx(TOKYO[1], abs=0.05)
            assert lat == pytest.approx(TOKYO[0], abs=0.05)

    def test_center_is_lat_lng_ordered(self, indexer):
        cell = indexer.cell_from_point(*TOKYO, 8)
        lat, lng = indexer.cell_to_center(cell)

        assert lat == pytest.approx(TOKYO[0], abs=0.01)
        assert lng == pytest.approx(TOKYO[1], abs=0.01)

    def test_parent_at_coarser_resolution_contains_child(self, indexer):
        child = indexer.cell_from_point(*TOKYO, 9)
        parent = indexer.cell_to_parent(child, 7)
        assert parent == indexer.cell_to_parent(indexer.cell_to_parent(child, 8), 7)

    def test_parent_at_own_resolution_is_identity(self, indexer):
        cell = indexer.cell_from_point(*TOKYO, 8)
        assert indexer.cell_to_parent(cell, 8) == cell

    @pytest.mark.parametrize("radius, size", [(0, 1), (1, 7), (2, 19), (10, 331)])
    def test_neighborhood_size(self, indexer, radius, size):
        cell = indexer.cell_from_point(*TOKYO, 8)
        neighborhood = indexer.neighborhood(cell, radius)

        assert isinstance(neighborhood, set)
        assert len(neighborhood) == size
        assert cell in neighborhood

    def test_invalid_resolution_raises(self):
        with pytest.raises(Exception):
            H3Indexer().cell_from_point(*TOKYO, 16)
