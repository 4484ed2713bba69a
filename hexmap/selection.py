"""Click handling utilities for the pydeck hexagon map.

This module turns the selection state returned by
``st.pydeck_chart(on_select="rerun")`` into a clicked map point.
"""

from typing import Any, Dict, Optional, Tuple

from hexmap.renderer import HEXAGON_LAYER_ID


def extract_clicked_point(
    selection_state: Any,
    layer_order: tuple = (HEXAGON_LAYER_ID,)
) -> Optional[Tuple[float, float]]:
    """Extract the clicked point from pydeck selection state.

    Args:
        selection_state: Selection state from pydeck chart
        layer_order: Tuple of layer IDs to check in order of priority

    Returns:
        (latitude, longitude) of the selected hexagon or None
    """
    if not selection_state:
        return None

    selection = None
    if isinstance(selection_state, dict):
        selection = selection_state.get("selection", selection_state)
    else:
        selection = getattr(selection_state, "selection", None)

    if not selection:
        return None

    objects_by_layer = selection.get("objects")
    if not isinstance(objects_by_layer, dict):
        return None

    for layer_id in layer_order:
        layer_objects = objects_by_layer.get(layer_id)
        if not layer_objects:
            continue
        first_entry = layer_objects[0]
        raw_object = first_entry.get("object", first_entry)
        point = to_point(raw_object)
        if point:
            return point

    return None


def to_point(raw_object: Dict[str, Any]) -> Optional[Tuple[float, float]]:
    """Read (latitude, longitude) from a picked hexagon row.

    Args:
        raw_object: Raw feature object from pydeck

    Returns:
        Tuple of floats or None if the coordinates are missing
    """
    if not raw_object:
        return None

    lat = get_field(raw_object, "LATITUDE", "latitude", "lat")
    lng = get_field(raw_object, "LONGITUDE", "longitude", "lng", "lon")
    if lat is None or lng is None:
        return None

    try:
        return float(lat), float(lng)
    except (TypeError, ValueError):
        return None


def get_field(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first value found from multiple candidate keys.

    Args:
        data: Dictionary to search
        *keys: Keys to try in order

    Returns:
        Value of first matching key or None
    """
    for key in keys:
        if key in data:
            return data[key]
    return None
