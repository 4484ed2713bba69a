"""Render surface for the hexagon overlay.

The overlay manager draws through a ``RenderSurface``: every polygon,
label or marker it adds gets an integer handle that it later removes.
``PydeckSurface`` keeps the live shapes and turns them into pydeck
layers for ``st.pydeck_chart``.
"""

from itertools import count
from typing import Any, Dict, List, Optional, Protocol, Sequence

import pandas as pd
import pydeck

from hexmap.models import LatLng, Vertex, Viewport
from hexmap.settings import (
    HEXAGON_TOOLTIP_BG,
    LABEL_FONT_SIZE,
    MARKER_ICON_URL,
    NAMED_COLORS_RGB,
    TRANSPARENT_COLOR,
)
from hexmap.utils import get_logger

logger = get_logger(__name__)

HEXAGON_LAYER_ID = "hexagon_layer"
LABEL_LAYER_ID = "label_layer"
MARKER_LAYER_ID = "marker_layer"


class RenderSurface(Protocol):
    def add_polygon(
        self,
        boundary: Sequence[Vertex],
        *,
        line_color: str,
        fill_color: str,
        line_opacity: float,
        fill_opacity: float,
        line_width: int,
        properties: Optional[Dict[str, Any]] = None,
    ) -> int: ...

    def add_label(self, position: LatLng, text: str, *, color: str, size: int) -> int: ...

    def add_marker(self, position: LatLng, *, color: str) -> int: ...

    def remove(self, handle: int) -> None: ...


def to_rgba(color: str, opacity: float = 1.0) -> List[int]:
    """Convert a named color to a pydeck RGBA list.

    Args:
        color: Named color or "transparent"
        opacity: Alpha in [0, 1]

    Returns:
        [R, G, B, A] with components in 0-255
    """
    if color == TRANSPARENT_COLOR:
        return [0, 0, 0, 0]
    try:
        r, g, b = NAMED_COLORS_RGB[color]
    except KeyError:
        raise ValueError(f"Unknown color: {color!r}") from None
    return [r, g, b, int(round(opacity * 255))]


class PydeckSurface:
    """RenderSurface that materializes its shapes as pydeck layers."""

    def __init__(self):
        self._handles = count(1)
        self._polygons: Dict[int, Dict[str, Any]] = {}
        self._labels: Dict[int, Dict[str, Any]] = {}
        self._markers: Dict[int, Dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._polygons) + len(self._labels) + len(self._markers)

    def add_polygon(
        self,
        boundary,
        *,
        line_color,
        fill_color,
        line_opacity,
        fill_opacity,
        line_width,
        properties=None,
    ) -> int:
        handle = next(self._handles)
        row = dict(properties or {})
        row.update(
            {
                "POLYGON": [[lng, lat] for lng, lat in boundary],
                "LINE_COLOR": to_rgba(line_color, line_opacity),
                "FILL_COLOR": to_rgba(fill_color, fill_opacity),
                "LINE_WIDTH": line_width,
            }
        )
        self._polygons[handle] = row
        return handle

    def add_label(self, position, text, *, color, size=LABEL_FONT_SIZE) -> int:
        handle = next(self._handles)
        lat, lng = position
        self._labels[handle] = {
            "TEXT": text,
            "LATITUDE": lat,
            "LONGITUDE": lng,
            "COLOR": to_rgba(color),
            "SIZE": size,
        }
        return handle

    def add_marker(self, position, *, color) -> int:
        handle = next(self._handles)
        lat, lng = position
        self._markers[handle] = {
            "LATITUDE": lat,
            "LONGITUDE": lng,
            "COLOR_NAME": color,
            "ICON_DATA": {
                "url": MARKER_ICON_URL,
                "width": 100,
                "height": 100,
                "anchorY": 100,
            },
        }
        return handle

    def remove(self, handle: int) -> None:
        for shapes in (self._polygons, self._labels, self._markers):
            if shapes.pop(handle, None) is not None:
                return
        logger.warning(f"Tried to remove unknown shape handle {handle}")

    def build_layers(self) -> List[pydeck.Layer]:
        """Build pydeck layers for the live shapes, back to front."""
        layers = []

        if self._polygons:
            df_polygons = pd.DataFrame(list(self._polygons.values()))
            layers.append(
                pydeck.Layer(
                    "PolygonLayer",
                    df_polygons,
                    get_polygon="POLYGON",
                    get_line_color="LINE_COLOR",
                    get_fill_color="FILL_COLOR",
                    get_line_width="LINE_WIDTH",
                    line_width_units="pixels",
                    stroked=True,
                    filled=True,
                    pickable=True,
                    auto_highlight=True,
                    id=HEXAGON_LAYER_ID,
                )
            )

        if self._labels:
            df_labels = pd.DataFrame(list(self._labels.values()))
            layers.append(
                pydeck.Layer(
                    "TextLayer",
                    df_labels,
                    get_position=["LONGITUDE", "LATITUDE"],
                    get_text="TEXT",
                    get_color="COLOR",
                    get_size="SIZE",
                    size_units="pixels",
                    pickable=False,
                    id=LABEL_LAYER_ID,
                )
            )

        if self._markers:
            df_markers = pd.DataFrame(list(self._markers.values()))
            layers.append(
                pydeck.Layer(
                    "IconLayer",
                    df_markers,
                    get_position=["LONGITUDE", "LATITUDE"],
                    get_icon="ICON_DATA",
                    get_size=4,
                    size_scale=8,
                    size_min_pixels=12,
                    size_max_pixels=32,
                    pickable=False,
                    id=MARKER_LAYER_ID,
                )
            )

        return layers

    def build_deck(self, viewport: Viewport) -> pydeck.Deck:
        """Build a pydeck.Deck showing the live shapes.

        Args:
            viewport: Map center and zoom

        Returns:
            Configured pydeck.Deck instance
        """
        view_state = pydeck.ViewState(
            latitude=viewport.latitude,
            longitude=viewport.longitude,
            zoom=viewport.zoom,
            pitch=0,
            bearing=0,
        )

        tooltip = {
            "html": "<b>H3 Cell:</b> {CELL}<br/><b>Resolution:</b> {RESOLUTION}",
            "style": {"backgroundColor": HEXAGON_TOOLTIP_BG, "color": "white"},
        }

        layers = self.build_layers()
        logger.debug(f"Built deck with {len(layers)} layers and {len(self)} shapes")
        return pydeck.Deck(initial_view_state=view_state, layers=layers, tooltip=tooltip)
