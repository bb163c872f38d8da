from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from .polygon import Polygon
from .region import Region


@dataclass
class AreaEstimate:
    """
    Data object containing both computed areas (pixel^2) and the polygons
    they were measured from, for optional diagnostic rendering.
    """
    boundary_area: float
    interior_area: float | None  # None when no interior polygon could be formed
    boundary_polygon: Polygon
    interior_polygon: Polygon
    region: Region
    boundary_rows: int
    interior_rows: int
    path: Path | None = None

    @property
    def has_interior(self) -> bool:
        return not self.interior_polygon.is_degenerate

    @property
    def interior_fraction(self) -> float | None:
        if self.interior_area is None:
            return None
        if self.boundary_area <= 0:
            return 0.0
        return self.interior_area / self.boundary_area


@dataclass
class MeasurementRecord:
    """One row of a batch report. Failed images carry no areas."""
    file: str
    status: str  # "ok" or "failed"
    boundary_area: float | None = None
    interior_area: float | None = None
    interior_fraction: float | None = None
    boundary_rows: int | None = None
    interior_rows: int | None = None
    reason: str = ""

    @classmethod
    def from_estimate(cls, estimate: AreaEstimate) -> "MeasurementRecord":
        return cls(
            file=str(estimate.path) if estimate.path else "",
            status="ok",
            boundary_area=estimate.boundary_area,
            interior_area=estimate.interior_area,
            interior_fraction=estimate.interior_fraction,
            boundary_rows=estimate.boundary_rows,
            interior_rows=estimate.interior_rows,
            reason="" if estimate.has_interior else "no interior polygon",
        )

    @classmethod
    def failed(cls, file: str, reason: str) -> "MeasurementRecord":
        return cls(file=file, status="failed", reason=reason)
