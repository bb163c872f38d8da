from __future__ import annotations
from pathlib import Path
from typing import Tuple, Union
import logging

import cv2
import numpy as np

from ..models.area_estimate import AreaEstimate
from ..models.image import Image
from ..models.polygon import Polygon
from .image_service import ImageService
from .polygon_service import PolygonService

logger = logging.getLogger(__name__)

# RGB, since pixels stay in RGB order throughout
BOUNDARY_COLOR: Tuple[int, int, int] = (0, 0, 255)
INTERIOR_COLOR: Tuple[int, int, int] = (255, 0, 255)
REGION_COLOR: Tuple[int, int, int] = (0, 200, 0)


class RenderingService:
    """
    Diagnostic overlays of the reconstructed polygons.  Purely visual:
    nothing here feeds back into the measured areas.
    """

    def __init__(self, thickness: int = 1):
        self.thickness = thickness
        self.image_service = ImageService()
        self.polygon_service = PolygonService()

    @staticmethod
    def _to_uint8(img: Image) -> np.ndarray:
        return (np.clip(img.pixels, 0.0, 1.0) * 255).round().astype(np.uint8)

    def _polygon_points(self, polygon: Polygon, height: int) -> np.ndarray:
        cols, rows = self.polygon_service.to_storage_coords(
            polygon.vertices[:, 0], polygon.vertices[:, 1], height
        )
        return np.column_stack([cols, rows]).round().astype(np.int32).reshape(-1, 1, 2)

    def render(self, img: Image, estimate: AreaEstimate) -> np.ndarray:
        """
        Returns a new uint8 RGB array: *img* with the region rectangle and
        both polygons drawn on top.
        """
        canvas = np.ascontiguousarray(self._to_uint8(img))
        height = img.height

        region = estimate.region
        cv2.rectangle(canvas, (region.xmin, region.ymin), (region.xmax, region.ymax),
                      REGION_COLOR, self.thickness)

        for polygon, color in ((estimate.boundary_polygon, BOUNDARY_COLOR),
                               (estimate.interior_polygon, INTERIOR_COLOR)):
            if polygon.is_degenerate:
                continue
            pts = self._polygon_points(polygon, height)
            cv2.polylines(canvas, [pts], isClosed=True, color=color, thickness=self.thickness)

        return canvas

    def save(self, canvas: np.ndarray, path: Union[str, Path]) -> None:
        self.image_service.save(canvas, path)
        logger.info("Saved diagnostic render → %s", path)
