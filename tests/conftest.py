"""Shared footprint fixtures."""

import pytest

from massing_roofs.models.geometry import Point2D
from massing_roofs.models.roof import RoofParams


SQUARE = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
RECTANGLE = [(0.0, 0.0), (10.0, 0.0), (10.0, 4.0), (0.0, 4.0)]
# Concave L-shape, CCW; vertex mean (8/3, 8/3), area centroid (2.2, 2.2)
L_SHAPE = [(0.0, 0.0), (6.0, 0.0), (6.0, 2.0), (2.0, 2.0), (2.0, 6.0), (0.0, 6.0)]


def as_points(coords):
    return [Point2D(x, y) for x, y in coords]


@pytest.fixture
def square():
    """4 x 4 axis-aligned square, CCW."""
    return as_points(SQUARE)


@pytest.fixture
def square_cw():
    return as_points(list(reversed(SQUARE)))


@pytest.fixture
def rectangle():
    """10 x 4 rectangle elongated along X, CCW."""
    return as_points(RECTANGLE)


@pytest.fixture
def rectangle_cw():
    return as_points(list(reversed(RECTANGLE)))


@pytest.fixture
def l_shape():
    return as_points(L_SHAPE)


@pytest.fixture
def params():
    """wall_height=3, pitch=30, rotation=0."""
    return RoofParams(wall_height=3.0, roof_pitch=30.0, roof_rotation=0.0)
