import numpy as np
import pytest

from plotarea.models.extent import RowExtent
from plotarea.models.polygon import Polygon
from plotarea.services.polygon_service import PolygonService


@pytest.fixture
def service():
    return PolygonService()


def test_unit_square_area_is_exactly_one(service, unit_square):
    assert service.area(Polygon(unit_square)) == 1.0


def test_reversing_vertices_flips_sign_only(service):
    poly = Polygon([(0, 0), (4, 0), (5, 3), (1, 4)])
    rev = poly.reversed()
    assert service.signed_area(poly) == pytest.approx(-service.signed_area(rev))
    assert service.area(poly) == pytest.approx(service.area(rev))


def test_translation_does_not_change_area(service):
    poly = Polygon([(0, 0), (6, 0), (6, 2), (3, 5), (0, 2)])
    moved = poly.translated(123.5, -40.25)
    assert service.area(moved) == pytest.approx(service.area(poly))


def test_concave_polygon_area(service):
    # L-shape: 2x2 square minus a 1x1 corner
    poly = Polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])
    assert service.area(poly) == pytest.approx(3.0)


@pytest.mark.parametrize("vertices", [[], [(0, 0)], [(0, 0), (3, 3)]])
def test_degenerate_polygon_measures_zero(service, vertices):
    assert service.area(Polygon(vertices)) == 0.0


def test_assemble_walks_left_down_then_right_up(service):
    extents = [RowExtent(row=2, min_x=1, max_x=7), RowExtent(row=4, min_x=2, max_x=8)]
    poly = service.assemble(extents, height=10)
    expected = [(2, 8), (3, 6), (9, 6), (8, 8)]
    np.testing.assert_array_equal(poly.vertices, np.array(expected, dtype=float))


def test_assemble_sorts_rows(service):
    shuffled = [RowExtent(4, 2, 8), RowExtent(2, 1, 7), RowExtent(3, 1, 7)]
    ordered = sorted(shuffled, key=lambda e: e.row)
    np.testing.assert_array_equal(service.assemble(shuffled, 10).vertices,
                                  service.assemble(ordered, 10).vertices)


def test_assemble_rectangle_area(service):
    extents = [RowExtent(row=r, min_x=5, max_x=15) for r in range(5, 16)]
    assert service.area(service.assemble(extents, height=20)) == pytest.approx(100.0)


def test_assemble_empty_gives_degenerate_polygon(service):
    assert service.assemble([], height=10).is_degenerate


def test_plot_coordinate_round_trip(service):
    x, y = service.to_plot_coords(3, 0, height=20)
    assert (x, y) == (4, 20)
    assert service.to_storage_coords(x, y, height=20) == (3, 0)


def test_is_simple_detects_bow_tie():
    assert Polygon([(0, 0), (2, 0), (2, 2), (1, 3), (0, 2)]).is_simple()
    assert not Polygon([(0, 0), (2, 2), (2, 0), (0, 2)]).is_simple()
