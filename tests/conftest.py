import numpy as np
import pytest

from plotarea.models.image import Image

from .helpers import make_map


@pytest.fixture
def property_map() -> Image:
    """20x20 map: green pixel at (1, 1), red ring 5..15, grey block 8..12."""
    return Image(pixels=make_map())


@pytest.fixture
def unit_square():
    return np.array([(0, 0), (1, 0), (1, 1), (0, 1)], dtype=float)
