from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class ClassMasks:
    """
    Boolean masks (H, W) produced by pixel classification.
    `region` is None when the masks were taken from an already cropped image.
    """
    boundary: np.ndarray
    interior: np.ndarray
    region: np.ndarray | None = None
