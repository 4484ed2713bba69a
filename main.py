"""H3 Hexagon Map - Home Page.

This page overlays a multi-resolution H3 hexagon grid around the map
center. Cells of finer resolutions share the color of their ancestor at
the lowest active resolution, and clicking a hexagon drops a marker at
the center of the enclosing cell at the highest active resolution.
"""

import streamlit as st

from hexmap.h3_settings import (
    DEFAULT_CELL_RADIUS,
    DEFAULT_H3_RESOLUTION,
    MAX_CELL_RADIUS,
    MAX_H3_RESOLUTION,
    MIN_CELL_RADIUS,
    MIN_H3_RESOLUTION,
)
from hexmap.models import Viewport
from hexmap.renderer import PydeckSurface
from hexmap.selection import extract_clicked_point
from hexmap.session import HexagonMapSession
from hexmap.settings import (
    APPLICATION_NAME,
    DEFAULT_MAP_LATITUDE,
    DEFAULT_MAP_LONGITUDE,
    DEFAULT_MAP_ZOOM,
    DEFAULT_SHOW_COORDINATE_LABELS,
    DEFAULT_SHOW_FILL_COLOR,
    DEFAULT_SHOW_INDEX_LABELS,
    MAX_MAP_ZOOM,
    MIN_MAP_ZOOM,
)
from hexmap.utils import build_main_common_components, get_logger

logger = get_logger(__name__)

# Session state keys
MAP_SESSION_KEY = "hexmap_session"
MAP_SURFACE_KEY = "hexmap_surface"
RESOLUTIONS_KEY = "hexmap_resolutions"
CELL_RADIUS_KEY = "hexmap_cell_radius"
SHOW_FILL_COLOR_KEY = "hexmap_show_fill_color"
SHOW_INDEX_KEY = "hexmap_show_index"
SHOW_COORDINATES_KEY = "hexmap_show_coordinates"
LATITUDE_KEY = "hexmap_latitude"
LONGITUDE_KEY = "hexmap_longitude"
ZOOM_KEY = "hexmap_zoom"
LAST_CLICK_KEY = "hexmap_last_click"


def _ensure_session_state() -> None:
    """Initialize session state variables with defaults."""
    defaults = {
        RESOLUTIONS_KEY: [DEFAULT_H3_RESOLUTION],
        CELL_RADIUS_KEY: DEFAULT_CELL_RADIUS,
        SHOW_FILL_COLOR_KEY: DEFAULT_SHOW_FILL_COLOR,
        SHOW_INDEX_KEY: DEFAULT_SHOW_INDEX_LABELS,
        SHOW_COORDINATES_KEY: DEFAULT_SHOW_COORDINATE_LABELS,
        LATITUDE_KEY: DEFAULT_MAP_LATITUDE,
        LONGITUDE_KEY: DEFAULT_MAP_LONGITUDE,
        ZOOM_KEY: float(DEFAULT_MAP_ZOOM),
        LAST_CLICK_KEY: None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    if MAP_SESSION_KEY not in st.session_state:
        surface = PydeckSurface()
        session = HexagonMapSession(
            surface,
            resolutions=st.session_state[RESOLUTIONS_KEY],
        )
        _run_safely("initial draw", session.draw)
        st.session_state[MAP_SURFACE_KEY] = surface
        st.session_state[MAP_SESSION_KEY] = session


def _session() -> HexagonMapSession:
    return st.session_state[MAP_SESSION_KEY]


def _run_safely(description: str, action, *args) -> None:
    """Run a session operation and report failures on the page."""
    try:
        action(*args)
    except Exception as e:
        st.error(f"Failed to {description}: {e}")
        logger.error(f"Failed to {description}: {e}", exc_info=True)


def _on_resolutions_change() -> None:
    _run_safely("change resolutions", _session().set_resolutions, st.session_state[RESOLUTIONS_KEY])


def _on_cell_radius_change() -> None:
    _run_safely("change cell radius", _session().set_cell_radius, st.session_state[CELL_RADIUS_KEY])


def _on_fill_color_change() -> None:
    _run_safely("toggle fill color", _session().toggle_fill_color, st.session_state[SHOW_FILL_COLOR_KEY])


def _on_index_change() -> None:
    _run_safely("toggle index labels", _session().toggle_index_labels, st.session_state[SHOW_INDEX_KEY])


def _on_coordinates_change() -> None:
    _run_safely(
        "toggle coordinate labels",
        _session().toggle_coordinate_labels,
        st.session_state[SHOW_COORDINATES_KEY],
    )


def _on_viewport_change() -> None:
    viewport = Viewport(
        latitude=st.session_state[LATITUDE_KEY],
        longitude=st.session_state[LONGITUDE_KEY],
        zoom=st.session_state[ZOOM_KEY],
    )
    _run_safely("move the map", _session().move_to, viewport)


def _on_clear_markers() -> None:
    _session().clear_markers()
    st.session_state[LAST_CLICK_KEY] = None


def _render_controls() -> None:
    """Render sidebar controls for the grid and the viewport."""
    st.sidebar.subheader("⚙️ Grid Settings")

    st.sidebar.multiselect(
        "H3 Resolutions",
        options=list(range(MIN_H3_RESOLUTION, MAX_H3_RESOLUTION + 1)),
        help="Finer resolutions inherit the colors of the lowest selected resolution",
        key=RESOLUTIONS_KEY,
        on_change=_on_resolutions_change,
    )

    st.sidebar.slider(
        "Cell Radius",
        min_value=MIN_CELL_RADIUS,
        max_value=MAX_CELL_RADIUS,
        step=1,
        help="Rings of neighbors drawn around the cell at the map center",
        key=CELL_RADIUS_KEY,
        on_change=_on_cell_radius_change,
    )

    st.sidebar.checkbox("Show Fill Color", key=SHOW_FILL_COLOR_KEY, on_change=_on_fill_color_change)
    st.sidebar.checkbox("Show H3 Index", key=SHOW_INDEX_KEY, on_change=_on_index_change)
    st.sidebar.checkbox("Show Coordinates", key=SHOW_COORDINATES_KEY, on_change=_on_coordinates_change)

    st.sidebar.divider()
    st.sidebar.subheader("🧭 Viewport")

    st.sidebar.number_input(
        "Latitude",
        min_value=-90.0,
        max_value=90.0,
        format="%.5f",
        key=LATITUDE_KEY,
        on_change=_on_viewport_change,
    )
    st.sidebar.number_input(
        "Longitude",
        min_value=-180.0,
        max_value=180.0,
        format="%.5f",
        key=LONGITUDE_KEY,
        on_change=_on_viewport_change,
    )
    st.sidebar.slider(
        "Zoom",
        min_value=float(MIN_MAP_ZOOM),
        max_value=float(MAX_MAP_ZOOM),
        step=0.5,
        key=ZOOM_KEY,
        on_change=_on_viewport_change,
    )

    st.sidebar.button("Clear Markers", on_click=_on_clear_markers)


def _render_statistics(session: HexagonMapSession) -> None:
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Zoom Level", f"{session.zoom_level:g}")
    with col2:
        st.metric("Cells Drawn", f"{len(session.records):,}")
    with col3:
        highest = session.highest_resolution
        st.metric("Highest Resolution", "-" if highest is None else highest)


def _handle_selection(session: HexagonMapSession, selection_state) -> None:
    """Resolve a newly clicked hexagon to a cell and mark it."""
    point = extract_clicked_point(selection_state)
    if point is None or point == st.session_state[LAST_CLICK_KEY]:
        return

    st.session_state[LAST_CLICK_KEY] = point
    _run_safely("locate the clicked cell", session.handle_click, *point)
    # Redraw the deck so the new marker shows up
    st.rerun()


def _render_located_cell(session: HexagonMapSession) -> None:
    located = session.last_located
    if located is None:
        st.caption("Click a hexagon to locate the cell at the highest active resolution.")
        return

    st.info(
        f"**H3 Cell:** `{located.cell}` (resolution {located.resolution})  \n"
        f"**Center:** {located.center_lat:.6f}, {located.center_lng:.6f}  \n"
        f"**Color:** {located.color}"
    )


def build_home_page() -> None:
    """Build the home page with the hexagon map."""
    _ensure_session_state()
    _render_controls()

    session = _session()
    surface = st.session_state[MAP_SURFACE_KEY]

    st.write("Hexagons are recomputed around the map center whenever the viewport or a setting changes.")

    if not session.resolutions:
        st.warning("No H3 resolution selected. Pick at least one resolution to draw the grid.")

    _render_statistics(session)

    deck = surface.build_deck(session.viewport)
    selection_state = st.pydeck_chart(
        deck,
        use_container_width=True,
        on_select="rerun",
        selection_mode="single-object",
        key="hexagon_map",
    )
    _handle_selection(session, selection_state)
    _render_located_cell(session)


if __name__ == "__main__":
    build_main_common_components(APPLICATION_NAME)
    build_home_page()
