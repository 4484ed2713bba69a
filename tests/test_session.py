"""
Integration tests for HexagonMapSession.

Each session is isolated: its own surface, colors and overlay.
"""

import pytest

from hexmap.models import DisplayConfig, Viewport
from hexmap.renderer import PydeckSurface
from hexmap.session import HexagonMapSession
from hexmap.settings import COLORS, NEUTRAL_COLOR

TOKYO = (35.68963, 139.69165)


class TestDraw:
    def test_scenario_single_resolution_radius_ten(self, make_session, indexer):
        session = make_session(resolutions={8}, cell_radius=10)
        records = session.draw()

        origin = indexer.cell_from_point(*TOKYO, 8)
        assert len(records) == len(indexer.neighborhood(origin, 10))
        assert all(record.color in COLORS for record in records)

    def test_redraw_does_not_accumulate_shapes(self, make_session, surface):
        session = make_session(resolutions=[7, 8])
        session.draw()
        once = len(session.overlay.shapes)
        session.draw()

        assert len(session.overlay.shapes) == once
        assert len(surface.shapes) == once

    def test_empty_resolutions_draw_nothing(self, make_session, surface):
        session = make_session()
        session.draw()
        records = session.set_resolutions([])

        assert records == []
        assert session.overlay.shapes == ()
        assert surface.shapes == {}
        assert session.highest_resolution is None

    def test_single_resolution_keeps_cell_set(self, make_session):
        session = make_session(resolutions=[8], cell_radius=3)
        first = {record.cell for record in session.draw()}
        second = {record.cell for record in session.draw()}
        assert first == second

    def test_multi_resolution_grouping(self, make_session, indexer):
        session = make_session(resolutions=[9, 7, 8], cell_radius=2)
        records = session.draw()

        colors_by_ancestor = {}
        for record in records:
            ancestor = indexer.cell_to_parent(record.cell, 7)
            colors_by_ancestor.setdefault(ancestor, set()).add(record.color)

        assert all(len(group) == 1 for group in colors_by_ancestor.values())

    def test_seeded_sessions_draw_identical_colors(self, make_session):
        first = make_session(resolutions=[7, 8]).draw()
        second = make_session(resolutions=[7, 8]).draw()
        assert [r.color for r in first] == [r.color for r in second]

    def test_move_to_recenters_grid(self, make_session, indexer):
        session = make_session(resolutions=[8], cell_radius=0)
        records = session.move_to(Viewport(latitude=48.8566, longitude=2.3522, zoom=12))

        assert records[0].cell == indexer.cell_from_point(48.8566, 2.3522, 8)
        assert session.zoom_level == 12


class TestSetters:
    def test_set_resolutions_sorts_and_redraws(self, make_session):
        session = make_session()
        session.set_resolutions([9, 7])

        assert session.resolutions == [7, 9]
        assert session.highest_resolution == 9
        assert {r.resolution for r in session.records} == {7, 9}

    def test_set_resolution(self, make_session):
        session = make_session(resolutions=[7, 8])
        session.set_resolution(6)
        assert session.resolutions == [6]

    def test_set_cell_radius(self, make_session):
        session = make_session(cell_radius=1)
        assert len(session.set_cell_radius(2)) == 19
        assert session.config.cell_radius == 2

    def test_toggle_index_labels_adds_center_labels(self, make_session, surface):
        session = make_session(cell_radius=1)
        session.toggle_index_labels(True)

        assert len(surface.of_kind("label")) == 7
        assert all(record.center is not None for record in session.records)

    def test_toggle_coordinate_labels(self, make_session, surface):
        session = make_session(cell_radius=0)
        session.toggle_coordinate_labels(True)
        assert len(surface.of_kind("label")) == 6

        session.toggle_coordinate_labels(False)
        assert surface.of_kind("label") == []

    def test_toggle_fill_color(self, make_session, surface):
        session = make_session(cell_radius=0)
        session.toggle_fill_color(False)
        assert surface.of_kind("polygon")[0]["fill_color"] == "transparent"

    @pytest.mark.parametrize("resolutions", [[16], [-1], [8, 20]])
    def test_invalid_resolution_rejected_before_redraw(self, make_session, surface, resolutions):
        session = make_session()
        session.draw()
        before = dict(surface.shapes)

        with pytest.raises(ValueError, match="H3 resolution"):
            session.set_resolutions(resolutions)
        assert surface.shapes == before

    def test_negative_radius_rejected(self, make_session):
        session = make_session()
        with pytest.raises(ValueError, match="Cell radius"):
            session.set_cell_radius(-1)
        assert session.config.cell_radius == 2


class TestHandleClick:
    def test_click_drops_marker_at_cell_center(self, make_session, surface, indexer):
        session = make_session(resolutions=[7, 9])
        session.draw()
        located = session.handle_click(*TOKYO)

        assert located.cell == indexer.cell_from_point(*TOKYO, 9)
        markers = surface.of_kind("marker")
        assert len(markers) == 1
        assert markers[0]["position"] == (located.center_lat, located.center_lng)
        assert session.last_located == located

    def test_uncolored_click_reports_neutral_color(self, make_session):
        session = make_session(resolutions=[7, 9])
        session.draw()
        assert session.handle_click(*TOKYO).color == NEUTRAL_COLOR

    def test_single_resolution_click_is_neutral(self, make_session):
        session = make_session(resolutions=[8])
        session.draw()
        assert session.handle_click(*TOKYO).color == NEUTRAL_COLOR

    def test_click_without_resolutions_is_ignored(self, make_session, surface):
        session = make_session(resolutions=[])
        assert session.handle_click(*TOKYO) is None
        assert surface.of_kind("marker") == []

    def test_markers_survive_redraw_until_cleared(self, make_session, surface):
        session = make_session()
        session.draw()
        session.handle_click(*TOKYO)
        session.set_cell_radius(1)
        assert len(surface.of_kind("marker")) == 1

        session.clear_markers()
        assert surface.of_kind("marker") == []
        assert session.last_located is None


class TestDrawFailure:
    def test_unknown_palette_color_rejected(self):
        with pytest.raises(ValueError, match="Unknown palette colors"):
            DisplayConfig(palette=["green", "yellow"])

    def test_failed_draw_leaves_no_orphans_on_pydeck_surface(self, indexer):
        surface = PydeckSurface()
        session = HexagonMapSession(
            surface,
            indexer=indexer,
            config=DisplayConfig(cell_radius=1, color_seed=1, show_index_labels=True),
            viewport=Viewport(latitude=TOKYO[0], longitude=TOKYO[1]),
            resolutions=[8],
        )

        def reject_label(*args, **kwargs):
            raise RuntimeError("label rejected")

        surface.add_label = reject_label
        with pytest.raises(RuntimeError, match="label rejected"):
            session.draw()
        assert len(surface) == 0

        session.set_resolutions([])
        assert session.overlay.shapes == ()
        assert len(surface) == 0
