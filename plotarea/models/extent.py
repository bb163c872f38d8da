from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RowExtent:
    """Leftmost / rightmost pixel of one class on one image row (storage coords)."""
    row: int
    min_x: int
    max_x: int


@dataclass
class ScanlineExtents:
    """Per-row extents for the boundary and interior classes, top-to-bottom."""
    boundary: List[RowExtent]
    interior: List[RowExtent]
    rows_scanned: int = 0
