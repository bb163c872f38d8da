import numpy as np
import pytest

from plotarea.models.image import Image
from plotarea.models.region import Region
from plotarea.models.thresholds import ChannelRange, ClassThresholds
from plotarea.services.classification_service import ClassificationService

from .helpers import GREEN, GREY, RED, WHITE


def swatch(*colors):
    return Image(pixels=np.array([colors], dtype=float))


def test_default_classes():
    img = swatch(GREEN, RED, GREY, WHITE, (0.5, 0.5, 0.5))
    service = ClassificationService()

    np.testing.assert_array_equal(service.region_marker_mask(img)[0], [1, 0, 0, 0, 0])
    masks = service.classify(img)
    np.testing.assert_array_equal(masks.boundary[0], [0, 1, 0, 0, 0])
    np.testing.assert_array_equal(masks.interior[0], [0, 0, 1, 0, 0])
    np.testing.assert_array_equal(masks.region[0], [1, 0, 0, 0, 0])


def test_threshold_edges_are_exclusive():
    # exactly on a bound is outside the open interval
    img = swatch((0.95, 0.0, 0.0), (0.80, 0.80, 0.80), (0.95, 0.90, 0.90))
    masks = ClassificationService().classify(img)
    assert not masks.boundary.any()
    assert not masks.interior.any()


def test_at_most_one_class_per_pixel(property_map):
    service = ClassificationService()
    masks = service.classify(property_map)
    total = masks.boundary.astype(int) + masks.interior.astype(int) + masks.region.astype(int)
    assert total.max() == 1


def test_classification_does_not_touch_pixels(property_map):
    before = property_map.pixels.copy()
    ClassificationService().classify(property_map)
    np.testing.assert_array_equal(property_map.pixels, before)


def test_cropped_copy_has_no_region_mask(property_map):
    cropped = Image(pixels=property_map.pixels.copy(), region=Region(0, 19, 0, 19))
    assert ClassificationService().classify(cropped).region is None


def test_custom_thresholds():
    darker_red = (0.85, 0.02, 0.02)
    img = swatch(darker_red)
    assert not ClassificationService().classify(img).boundary.any()

    relaxed = ClassThresholds.from_scalars(boundary_r_min=0.8)
    assert ClassificationService(relaxed).classify(img).boundary.all()


def test_thresholds_from_env(monkeypatch):
    monkeypatch.setenv("INTERIOR_MIN", "0.5")
    monkeypatch.setenv("INTERIOR_MAX", "0.7")
    thresholds = ClassThresholds.from_env()
    assert thresholds.interior.r == ChannelRange(0.5, 0.7)

    overridden = ClassThresholds.from_env(interior_max=0.75)
    assert overridden.interior.g == ChannelRange(0.5, 0.75)


def test_default_thresholds_match_scalar_defaults():
    assert ClassThresholds() == ClassThresholds.from_scalars()


def test_empty_channel_range_rejected():
    with pytest.raises(ValueError):
        ChannelRange(0.9, 0.1)
