import logging

import numpy as np

from ..models.errors import EmptyRegionError
from ..models.image import Image
from ..models.region import Region
from ..repositories.mask_repository import MaskRepository
from .image_service import ImageService

logger = logging.getLogger(__name__)


class CroppingService:
    def __init__(self):
        self.image_service = ImageService()
        self.mask_repository = MaskRepository()

    def find_region(self, marker_mask: np.ndarray, slack: int, path=None) -> Region:
        """
        Bounding box of the region-marker pixels, padded by *slack* on every
        side and clamped to the image.
        """
        if slack < 0:
            raise ValueError(f"slack must be >= 0, got {slack}")

        coords = self.mask_repository.retrieve_coordinates(marker_mask)
        if len(coords) == 0:
            raise EmptyRegionError("No region-marker pixels found", path)

        height_img, width_img = marker_mask.shape[:2]
        left, top = coords.min(axis=0)
        right, bottom = coords.max(axis=0)

        # Calculate new bounds
        bound_l = int(max(0, left - slack))
        bound_r = int(min(width_img - 1, right + slack))
        bound_t = int(max(0, top - slack))
        bound_b = int(min(height_img - 1, bottom + slack))

        region = Region(xmin=bound_l, xmax=bound_r, ymin=bound_t, ymax=bound_b)
        logger.debug("Region from %d marker pixel(s): %s", len(coords), region)
        return region

    def crop_to_region(self, img: Image, region: Region) -> Image:
        """Working copy of *img* with everything outside *region* whitened."""
        return self.image_service.masked_copy(img, region, fill=1.0)
