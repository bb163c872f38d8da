from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np

from .region import Region


@dataclass
class Image:
    """
    Simple data object: RGB pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W, 3), float64, RGB order, values in [0, 1].
    path: Path | None = None # Source of the image.
    region: Region | None = None # Set only on working copies produced by cropping.

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def is_cropped(self) -> bool:
        return self.region is not None
