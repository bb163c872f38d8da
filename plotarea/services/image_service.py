from pathlib import Path
from typing import Iterable, List, Union

import numpy as np

from ..models.image import Image
from ..models.region import Region
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O helpers and working-copy construction.  No classification logic."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def list_gallery(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> List[Path]:
        return self.image_repository.iter_paths(folder, recursive=recursive, exts=exts)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    def masked_copy(self, img: Image, region: Region, fill: float = 1.0) -> Image:
        """
        Return a new Image whose pixels outside *region* are set to *fill*
        (white by default).  The source image is left untouched.
        """
        height_img, width_img = self.get_image_dimensions(img)
        if region.xmin < 0 or region.ymin < 0 or region.xmax >= width_img or region.ymax >= height_img:
            raise ValueError(f"Region {region} lies outside a {width_img}x{height_img} image")

        new_pixels = np.full_like(img.pixels, fill)
        new_pixels[region.ymin:region.ymax + 1, region.xmin:region.xmax + 1] = \
            img.pixels[region.ymin:region.ymax + 1, region.xmin:region.xmax + 1]
        return Image(pixels=new_pixels, path=img.path, region=region)

    def save(self, pixels: np.ndarray, path: Union[str, Path]) -> None:
        self.image_repository.save(pixels, path)
