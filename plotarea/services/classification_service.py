from __future__ import annotations
import logging

import numpy as np

from ..models.class_masks import ClassMasks
from ..models.image import Image
from ..models.thresholds import ClassThresholds
from ..repositories.mask_repository import MaskRepository

logger = logging.getLogger(__name__)


class ClassificationService:
    """
    Maps an image to its region-marker, boundary and interior masks.

    The region mask is read from the source image; boundary and interior
    masks are only ever read from a cropped working copy, so nothing
    outside the region of interest can leak into them.
    """

    def __init__(self, thresholds: ClassThresholds | None = None):
        self.thresholds = thresholds or ClassThresholds()
        self.repo = MaskRepository()

    def region_marker_mask(self, img: Image) -> np.ndarray:
        return self.repo.retrieve_mask(img.pixels, self.thresholds.region_marker)

    def boundary_mask(self, img: Image) -> np.ndarray:
        return self.repo.retrieve_mask(img.pixels, self.thresholds.boundary)

    def interior_mask(self, img: Image) -> np.ndarray:
        return self.repo.retrieve_mask(img.pixels, self.thresholds.interior)

    def classify(self, img: Image) -> ClassMasks:
        """
        Classify every pixel of *img*.  For a cropped working copy the
        region mask is omitted, since the marker has already been consumed.
        """
        boundary = self.boundary_mask(img)
        interior = self.interior_mask(img)
        region = None if img.is_cropped else self.region_marker_mask(img)

        overlap = int(np.count_nonzero(boundary & interior))
        if overlap:
            logger.warning("%d pixel(s) classified as both boundary and interior", overlap)

        logger.debug("Classified %s: boundary=%d interior=%d",
                     img.path or "<memory>", int(boundary.sum()), int(interior.sum()))
        return ClassMasks(boundary=boundary, interior=interior, region=region)
