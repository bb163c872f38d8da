from __future__ import annotations
import logging
from typing import Iterable

import numpy as np

from ..models.extent import RowExtent
from ..models.polygon import Polygon

logger = logging.getLogger(__name__)


class PolygonService:
    """
    Turns per-row extents into a closed polygon and measures it.
    """

    @staticmethod
    def to_plot_coords(col, row, height: int):
        """Storage (col, row), 0-based top-left → plot (x, y), 1-based bottom-left."""
        return col + 1, height - row

    @staticmethod
    def to_storage_coords(x, y, height: int):
        return x - 1, height - y

    def assemble(self, extents: Iterable[RowExtent], height: int) -> Polygon:
        """
        Walk down the left extents (top to bottom), then back up the right
        extents (bottom to top).  Simplicity is not validated here.
        """
        ordered = sorted(extents, key=lambda e: e.row)
        if not ordered:
            return Polygon()

        left = [self.to_plot_coords(e.min_x, e.row, height) for e in ordered]
        right = [self.to_plot_coords(e.max_x, e.row, height) for e in reversed(ordered)]
        return Polygon(np.array(left + right, dtype=float))

    @staticmethod
    def signed_area(polygon: Polygon) -> float:
        """
        Shoelace sum / 2: positive for counter-clockwise vertex order.
        """
        if polygon.is_degenerate:
            return 0.0
        x, y = polygon.vertices[:, 0], polygon.vertices[:, 1]
        return float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y) / 2.0)

    def area(self, polygon: Polygon) -> float:
        """Absolute shoelace area; fewer than three vertices measure 0."""
        if polygon.is_degenerate:
            logger.debug("Degenerate polygon with %d vertex(es), area 0", len(polygon))
            return 0.0
        return abs(self.signed_area(polygon))
