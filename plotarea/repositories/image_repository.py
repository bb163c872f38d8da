from pathlib import Path
from typing import Union, Iterable, List
import logging
import os

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_EXTS = ".png,.jpg,.jpeg,.bmp,.tif,.tiff"


class ImageRepository:
    """
    Handles file I/O and pixel conversion for Image entities.
    """
    def __init__(self):
        self.VALID_EXTS = {
            ext.strip().lower()
            for ext in os.getenv("VALID_IMAGE_EXTENSIONS", DEFAULT_EXTS).split(",")
            if ext.strip()
        }

    @staticmethod
    def normalise(pixels: np.ndarray) -> np.ndarray:
        """
        Bring any (H, W, C) array to float64 RGB in [0, 1].
        Integer arrays are scaled by their dtype maximum; an alpha channel is dropped.
        """
        arr = np.asarray(pixels)
        if arr.ndim == 2:
            arr = np.repeat(arr[:, :, None], 3, axis=2)
        if arr.ndim != 3 or arr.shape[2] < 3:
            raise ValueError(f"Expected an (H, W, 3) pixel array, got shape {arr.shape}")
        arr = arr[:, :, :3]
        if np.issubdtype(arr.dtype, np.integer):
            return arr.astype(np.float64) / np.iinfo(arr.dtype).max
        return np.clip(arr.astype(np.float64), 0.0, 1.0)

    @classmethod
    def create_image(cls, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        pixels = cls.normalise(pixels)
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    @classmethod
    def load(cls, path: Union[str, Path]) -> Image:
        path = Path(path)
        # ANYDEPTH keeps 16-bit PNGs at full precision
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR | cv2.IMREAD_ANYDEPTH)

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = arr_bgr[:, :, ::-1]
        return Image(pixels=cls.normalise(arr), path=path)

    @staticmethod
    def save(pixels: np.ndarray, path: Union[str, Path]) -> None:
        """Write a uint8 RGB array (or a [0, 1] float array) to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if pixels.dtype != np.uint8:
            pixels = (np.clip(pixels, 0.0, 1.0) * 255).round().astype(np.uint8)
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(path)

    def iter_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> List[Path]:
        """Sorted image paths under *folder* matching the allowed extensions."""
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        paths = []
        for p in sorted(folder.glob(pattern)):
            if not p.is_file():
                continue
            if p.suffix.lower() not in allowed:
                logger.debug("Skipping due to extension: %s", p)
                continue
            paths.append(p)
        return paths

