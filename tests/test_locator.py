"""
Unit tests for CellLocator.
"""

from hexmap.locator import CellLocator
from hexmap.settings import NEUTRAL_COLOR

TOKYO = (35.68963, 139.69165)


class TestLocate:
    def test_resolves_enclosing_cell_and_center(self, indexer, colors):
        located = CellLocator(indexer).locate(*TOKYO, 9, colors)

        assert located.cell == indexer.cell_from_point(*TOKYO, 9)
        assert (located.center_lat, located.center_lng) == indexer.cell_to_center(located.cell)
        assert located.resolution == 9

    def test_uncolored_cell_reports_neutral_color(self, indexer, colors):
        located = CellLocator(indexer).locate(*TOKYO, 9, colors)
        assert located.color == NEUTRAL_COLOR

    def test_ancestor_color_is_not_used(self, indexer, colors):
        parent = indexer.cell_from_point(*TOKYO, 7)
        colors.build_base_colors([parent])

        located = CellLocator(indexer).locate(*TOKYO, 9, colors)
        assert located.color == NEUTRAL_COLOR

    def test_assigned_cell_reports_its_color(self, indexer, colors):
        cell = indexer.cell_from_point(*TOKYO, 8)
        colors.build_base_colors([cell])

        located = CellLocator(indexer).locate(*TOKYO, 8, colors)
        assert located.color == colors.lookup(cell)
