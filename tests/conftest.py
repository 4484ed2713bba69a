"""Shared fixtures for the hexagon map tests."""

import random
import sys
from pathlib import Path

import pytest

# Add parent directory to path to import hexmap without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexmap.colors import ColorAssignmentManager
from hexmap.indexer import H3Indexer
from hexmap.models import DisplayConfig, Viewport
from hexmap.session import HexagonMapSession
from hexmap.settings import COLORS


TOKYO = (35.68963, 139.69165)


class RecordingSurface:
    """Render surface that keeps shapes in memory and counts calls."""

    def __init__(self):
        self._next = 0
        self.shapes = {}
        self.removed = []

    def _add(self, kind, **payload):
        self._next += 1
        self.shapes[self._next] = {"kind": kind, **payload}
        return self._next

    def add_polygon(self, boundary, *, line_color, fill_color, line_opacity,
                    fill_opacity, line_width, properties=None):
        return self._add(
            "polygon",
            boundary=list(boundary),
            line_color=line_color,
            fill_color=fill_color,
            properties=dict(properties or {}),
        )

    def add_label(self, position, text, *, color, size):
        return self._add("label", position=position, text=text, color=color)

    def add_marker(self, position, *, color):
        return self._add("marker", position=position, color=color)

    def remove(self, handle):
        del self.shapes[handle]
        self.removed.append(handle)

    def of_kind(self, kind):
        return [shape for shape in self.shapes.values() if shape["kind"] == kind]


@pytest.fixture
def indexer():
    return H3Indexer()


@pytest.fixture
def colors():
    return ColorAssignmentManager(COLORS, rng=random.Random(7))


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_session(surface, indexer):
    def _make(resolutions=(8,), cell_radius=2, **config_overrides):
        config = DisplayConfig(cell_radius=cell_radius, color_seed=42, **config_overrides)
        return HexagonMapSession(
            surface,
            indexer=indexer,
            config=config,
            viewport=Viewport(latitude=TOKYO[0], longitude=TOKYO[1]),
            resolutions=resolutions,
        )
    return _make
