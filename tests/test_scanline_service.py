import numpy as np
import pytest

from plotarea.models.extent import RowExtent
from plotarea.services.scanline_service import ScanlineService


def ring_mask(size=20, lo=5, hi=15):
    mask = np.zeros((size, size), dtype=bool)
    mask[lo, lo:hi + 1] = True
    mask[hi, lo:hi + 1] = True
    mask[lo:hi + 1, lo] = True
    mask[lo:hi + 1, hi] = True
    return mask


def block_mask(size=20, lo=8, hi=12):
    mask = np.zeros((size, size), dtype=bool)
    mask[lo:hi + 1, lo:hi + 1] = True
    return mask


@pytest.fixture
def service():
    return ScanlineService()


def test_ring_and_block_extents(service):
    out = service.extract(ring_mask(), block_mask(), jump=1)
    assert out.boundary == [RowExtent(r, 5, 15) for r in range(5, 16)]
    assert out.interior == [RowExtent(r, 8, 12) for r in range(8, 13)]
    assert out.rows_scanned == 11


def test_single_pixel_rows_are_skipped(service):
    boundary = ring_mask()
    boundary[7, :] = False
    boundary[7, 5] = True  # one point only on this row
    out = service.extract(boundary, np.zeros_like(boundary), jump=1)
    assert 7 not in [e.row for e in out.boundary]
    assert len(out.boundary) == 10


def test_interior_outside_boundary_span_is_ignored(service):
    interior = np.zeros((20, 20), dtype=bool)
    interior[9, 1:4] = True      # left of the red line
    interior[9, 16:19] = True    # right of it
    interior[10, 5] = True       # on the red pixel itself, not strictly inside
    interior[10, 9] = True
    interior[10, 11] = True
    out = service.extract(ring_mask(), interior, jump=1)
    assert out.interior == [RowExtent(10, 9, 11)]


def test_interior_strictly_within_boundary(service):
    out = service.extract(ring_mask(), block_mask(lo=3, hi=17), jump=1)
    by_row = {e.row: e for e in out.boundary}
    for grey in out.interior:
        red = by_row[grey.row]
        assert red.min_x < grey.min_x <= grey.max_x < red.max_x


def test_boundary_and_interior_are_decoupled(service):
    out = service.extract(ring_mask(), np.zeros((20, 20), dtype=bool), jump=1)
    assert len(out.boundary) == 11
    assert out.interior == []


def test_empty_boundary_mask(service):
    empty = np.zeros((20, 20), dtype=bool)
    out = service.extract(empty, block_mask(), jump=1)
    assert out.boundary == [] and out.interior == [] and out.rows_scanned == 0


def test_rows_to_scan_keeps_last_boundary_row(service):
    assert service.rows_to_scan(ring_mask(), 3) == [5, 8, 11, 14, 15]
    assert service.rows_to_scan(ring_mask(), 5) == [5, 10, 15]


def test_larger_jump_never_adds_rows(service):
    boundary = ring_mask(size=60, lo=4, hi=53)
    counts = [len(service.extract(boundary, np.zeros_like(boundary), jump=j).boundary)
              for j in range(1, 12)]
    assert all(a >= b for a, b in zip(counts, counts[1:]))


@pytest.mark.parametrize("jump", [0, -2])
def test_invalid_jump(service, jump):
    with pytest.raises(ValueError):
        service.extract(ring_mask(), block_mask(), jump=jump)


def test_mismatched_masks(service):
    with pytest.raises(ValueError):
        service.extract(ring_mask(20), block_mask(30), jump=1)


def test_extraction_is_deterministic(service):
    a = service.extract(ring_mask(), block_mask(), jump=2)
    b = service.extract(ring_mask(), block_mask(), jump=2)
    assert a == b
