from __future__ import annotations
import logging
from typing import List

import numpy as np

from ..models.extent import RowExtent, ScanlineExtents

logger = logging.getLogger(__name__)

MIN_POINTS_PER_ROW = 2


class ScanlineService:
    """
    Per-row nearest-extent heuristic.

    Each processed row contributes its leftmost/rightmost boundary pixel,
    and the leftmost/rightmost interior pixel lying strictly between those
    two.  A row with fewer than two qualifying pixels is skipped for that
    class only; it never aborts the scan.
    """

    @staticmethod
    def rows_to_scan(boundary_mask: np.ndarray, jump: int) -> List[int]:
        """
        Every *jump*-th row from the first row holding a boundary pixel,
        plus the last such row so the bottom edge is never sampled away.
        """
        if jump < 1:
            raise ValueError(f"jump must be >= 1, got {jump}")
        occupied = np.flatnonzero(boundary_mask.any(axis=1))
        if len(occupied) == 0:
            return []
        first, last = int(occupied[0]), int(occupied[-1])
        rows = list(range(first, last + 1, jump))
        if rows[-1] != last:
            rows.append(last)
        return rows

    @staticmethod
    def row_extent(xs: np.ndarray, row: int) -> RowExtent | None:
        if len(xs) < MIN_POINTS_PER_ROW:
            return None
        return RowExtent(row=row, min_x=int(xs[0]), max_x=int(xs[-1]))

    def extract(self, boundary_mask: np.ndarray, interior_mask: np.ndarray, jump: int = 1) -> ScanlineExtents:
        if boundary_mask.shape != interior_mask.shape:
            raise ValueError(
                f"Mask shapes differ: {boundary_mask.shape} vs {interior_mask.shape}"
            )

        rows = self.rows_to_scan(boundary_mask, jump)
        boundary: List[RowExtent] = []
        interior: List[RowExtent] = []

        for row in rows:
            # flatnonzero returns ascending columns
            red_xs = np.flatnonzero(boundary_mask[row])
            red = self.row_extent(red_xs, row)
            if red is None:
                logger.debug("Row %d: %d boundary pixel(s), skipped", row, len(red_xs))
                continue
            boundary.append(red)

            grey_xs = np.flatnonzero(interior_mask[row])
            grey_xs = grey_xs[(grey_xs > red.min_x) & (grey_xs < red.max_x)]
            grey = self.row_extent(grey_xs, row)
            if grey is None:
                continue
            interior.append(grey)

        logger.debug("Scanned %d row(s): %d boundary extent(s), %d interior extent(s)",
                     len(rows), len(boundary), len(interior))
        return ScanlineExtents(boundary=boundary, interior=interior, rows_scanned=len(rows))
