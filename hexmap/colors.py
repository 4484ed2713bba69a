"""Color assignment for hexagon cells.

Cells at the lowest active resolution ("base" cells) each get a random
palette color. Finer cells inherit the color of their base ancestor, so
a multi-resolution grid shows the same color groups at every level.
"""

import random
from typing import Callable, Dict, Iterable, Optional, Sequence

from hexmap.settings import NEUTRAL_COLOR
from hexmap.utils import get_logger

logger = get_logger(__name__)


class ColorAssignmentManager:
    """Remembers one color per base cell for the current draw pass.

    Args:
        palette: Colors to sample from
        rng: Random generator; pass a seeded ``random.Random`` for
            reproducible colors
    """

    def __init__(self, palette: Sequence[str], rng: Optional[random.Random] = None):
        if not palette:
            raise ValueError("Palette must contain at least one color")
        self.palette = list(palette)
        self.rng = rng or random.Random()
        self._base_colors: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._base_colors)

    def __contains__(self, cell: str) -> bool:
        return cell in self._base_colors

    def random_color(self) -> str:
        """Sample a palette color uniformly, with replacement."""
        return self.rng.choice(self.palette)

    def clear(self) -> None:
        self._base_colors.clear()

    def build_base_colors(self, base_cells: Iterable[str]) -> None:
        """Replace all assignments with a fresh color for each base cell."""
        self.clear()
        for cell in base_cells:
            if cell not in self._base_colors:
                self._base_colors[cell] = self.random_color()
        logger.debug(f"Assigned colors to {len(self._base_colors)} base cells")

    def lookup(self, cell: str) -> Optional[str]:
        """Return the color assigned to exactly this cell, if any."""
        return self._base_colors.get(cell)

    def resolve(self, cell: str, default: Optional[str] = None) -> str:
        """Return the assigned color or fall back.

        Args:
            cell: Cell to look up
            default: Fallback color; when None a fresh random color is used

        Returns:
            Assigned color, ``default``, or a random palette color
        """
        color = self.lookup(cell)
        if color is not None:
            return color
        if default is not None:
            logger.debug(f"No color assigned to {cell}, using {default}")
            return default
        logger.debug(f"No color assigned to {cell}, sampling a random color")
        return self.random_color()

    def color_for(
        self,
        cell: str,
        grouped: bool,
        ancestor_lookup: Callable[[str], str],
    ) -> str:
        """Pick the render color of a cell.

        Args:
            cell: Cell being drawn
            grouped: True when more than one resolution is active
            ancestor_lookup: Maps a cell to its ancestor at the lowest
                active resolution

        Returns:
            The ancestor's color when grouped, otherwise a random color
        """
        if not grouped:
            return self.random_color()
        return self.resolve(ancestor_lookup(cell))

    def neutral_color_for(self, cell: str) -> str:
        return self.resolve(cell, default=NEUTRAL_COLOR)
