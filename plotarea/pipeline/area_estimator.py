from __future__ import annotations
import logging

from ..models.area_config import AreaConfig
from ..models.area_estimate import AreaEstimate
from ..models.errors import InsufficientRowsError
from ..models.image import Image
from ..services.classification_service import ClassificationService
from ..services.cropping_service import CroppingService
from ..services.polygon_service import PolygonService
from ..services.scanline_service import ScanlineService

logger = logging.getLogger(__name__)

MIN_POLYGON_ROWS = 3


def estimate_areas(
    img: Image,
    config: AreaConfig | None = None,
    *,
    cropping_service: CroppingService | None = None,
    scanline_service: ScanlineService | None = None,
    polygon_service: PolygonService | None = None,
) -> AreaEstimate:
    """
    For one decoded image:
        • locate the region marker on the source pixels and build a cropped working copy
        • classify boundary / interior pixels on the working copy only
        • take per-row extents, assemble both polygons, measure them
    Raises EmptyRegionError when no marker is found and InsufficientRowsError
    when fewer than three rows carry a boundary extent.
    """
    config = config or AreaConfig()
    classification_service = ClassificationService(config.thresholds)
    cropping_service = cropping_service or CroppingService()
    scanline_service = scanline_service or ScanlineService()
    polygon_service = polygon_service or PolygonService()

    # 1. Region marker from the untouched source
    marker = classification_service.region_marker_mask(img)
    region = cropping_service.find_region(marker, config.slack, path=img.path)

    # 2. Cropped working copy, then boundary / interior masks from it
    working = cropping_service.crop_to_region(img, region)
    masks = classification_service.classify(working)

    # 3. Scanline extents
    extents = scanline_service.extract(masks.boundary, masks.interior, config.jump)
    if len(extents.boundary) < MIN_POLYGON_ROWS:
        raise InsufficientRowsError(len(extents.boundary), img.path)

    # 4. Polygons and areas
    boundary_polygon = polygon_service.assemble(extents.boundary, img.height)
    boundary_area = polygon_service.area(boundary_polygon)

    if len(extents.interior) < MIN_POLYGON_ROWS:
        logger.warning("%s: only %d interior row(s), no interior area",
                       img.path or "<memory>", len(extents.interior))
        interior_polygon = polygon_service.assemble([], img.height)
        interior_area = None
    else:
        interior_polygon = polygon_service.assemble(extents.interior, img.height)
        interior_area = polygon_service.area(interior_polygon)

    if config.check_simple and not boundary_polygon.is_simple():
        logger.warning("%s: boundary polygon self-intersects, area may be biased",
                       img.path or "<memory>")

    logger.info("%s: boundary=%.1f px² (%d rows) interior=%s (%d rows)",
                img.path or "<memory>", boundary_area, len(extents.boundary),
                "none" if interior_area is None else f"{interior_area:.1f} px²",
                len(extents.interior))

    return AreaEstimate(
        boundary_area=boundary_area,
        interior_area=interior_area,
        boundary_polygon=boundary_polygon,
        interior_polygon=interior_polygon,
        region=region,
        boundary_rows=len(extents.boundary),
        interior_rows=len(extents.interior),
        path=img.path,
    )
