"""Tests for the core geometry types and polygon utilities."""

import pytest

from massing_roofs.models.geometry import (
    BBox,
    Footprint,
    FootprintError,
    Point2D,
    Point3D,
    to_point2d,
)
from massing_roofs.utils.polygon_utils import (
    ensure_ccw,
    is_clockwise,
    polygon_area,
    polygon_area_centroid,
    polygon_signed_area,
)
from massing_roofs.utils.math_utils import clamp, inverse_lerp, normalize_angle

from conftest import L_SHAPE, RECTANGLE, SQUARE, as_points


class TestPoints:

    def test_lerp_and_at_z(self):
        p = Point2D(0.0, 0.0).lerp(Point2D(10.0, 4.0), 0.25)
        assert p == Point2D(2.5, 1.0)
        assert p.at_z(3.0) == Point3D(2.5, 1.0, 3.0)

    def test_point3d_to_2d(self):
        assert Point3D(1.0, 2.0, 3.0).to_2d() == Point2D(1.0, 2.0)
        assert Point3D(1.0, 2.0, 3.0).to_tuple() == (1.0, 2.0, 3.0)

    def test_to_point2d_drops_vertical_coordinate(self):
        assert to_point2d((1, 2, 99)) == Point2D(1.0, 2.0)
        assert to_point2d(Point3D(1.0, 2.0, 5.0)) == Point2D(1.0, 2.0)

    def test_to_point2d_rejects_bad_values(self):
        with pytest.raises(FootprintError):
            to_point2d((1.0,))
        with pytest.raises(FootprintError):
            to_point2d(("a", "b"))
        with pytest.raises(FootprintError):
            to_point2d((float('nan'), 0.0))


class TestBBox:

    def test_from_points(self):
        bbox = BBox.from_points(as_points(RECTANGLE))
        assert (bbox.min_x, bbox.min_y, bbox.max_x, bbox.max_y) == (0.0, 0.0, 10.0, 4.0)
        assert bbox.width == 10.0
        assert bbox.height == 4.0


class TestFootprint:

    def test_fewer_than_three_points(self):
        with pytest.raises(FootprintError):
            Footprint.from_points([(0, 0), (1, 0)])

    def test_collinear_points(self):
        with pytest.raises(FootprintError):
            Footprint.from_points([(0, 0), (1, 0), (2, 0), (3, 0)])

    def test_footprint_error_is_value_error(self):
        with pytest.raises(ValueError):
            Footprint.from_points([])

    def test_closing_vertex_dropped(self):
        fp = Footprint.from_points(SQUARE + [SQUARE[0]])
        assert len(fp.ring) == 4

    def test_winding_preserved(self):
        cw = Footprint.from_points(list(reversed(SQUARE)))
        assert cw.ring == tuple(as_points(list(reversed(SQUARE))))
        assert polygon_signed_area(cw.ring) == pytest.approx(-16.0)

    def test_existing_footprint_passes_through(self):
        fp = Footprint.from_points(SQUARE)
        assert Footprint.from_points(fp) is fp


class TestPolygonUtils:

    def test_area(self):
        assert polygon_area(as_points(L_SHAPE)) == pytest.approx(20.0)
        assert polygon_area(as_points(list(reversed(SQUARE)))) == pytest.approx(16.0)

    def test_ensure_ccw_returns_copy(self):
        ring = as_points(list(reversed(SQUARE)))
        assert is_clockwise(ring)
        result = ensure_ccw(ring)
        assert not is_clockwise(result)
        assert result is not ring

        ccw = as_points(SQUARE)
        assert ensure_ccw(ccw) == ccw
        assert ensure_ccw(ccw) is not ccw

    def test_area_centroid_of_l_shape(self):
        centroid = polygon_area_centroid(as_points(L_SHAPE))
        assert centroid.x == pytest.approx(2.2)
        assert centroid.y == pytest.approx(2.2)


class TestMathUtils:

    def test_clamp(self):
        assert clamp(-1.0, 0.0, 1.0) == 0.0
        assert clamp(2.0, 0.0, 1.0) == 1.0
        assert clamp(0.5, 0.0, 1.0) == 0.5

    def test_inverse_lerp(self):
        assert inverse_lerp(-2.0, 2.0, 0.0) == pytest.approx(0.5)
        assert inverse_lerp(1.0, 1.0, 5.0) == 0.0

    def test_normalize_angle(self):
        assert normalize_angle(-90.0) == 270.0
        assert normalize_angle(720.0) == 0.0
