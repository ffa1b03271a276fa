"""
Ridge line helpers for Massing Roofs Generator.

Stateless functions shared by the ridged roof builders (gabled, half-hip,
hipped):
- projecting a point onto the ridge line (infinite) or segment (clamped)
- classifying which side of the ridge a point lies on
- locating where a footprint edge crosses the ridge line

The ridge line passes through the footprint centroid with direction
(cos(ridge_angle), sin(ridge_angle)). Distances "across" the ridge are
measured along the left-hand perpendicular (-sin, cos).
"""

from enum import Enum
from typing import Tuple
import math

from ..models.geometry import Point2D, Point3D
from ..config import RIDGE_CROSSING_EPSILON, RIDGE_SEGMENT_EPSILON
from ..utils.math_utils import clamp


class RidgeSide(Enum):
    """Side of the ridge line a point lies on."""
    NEGATIVE = -1
    POSITIVE = 1


def ridge_direction(ridge_angle: float) -> Tuple[float, float]:
    """Unit vector along the ridge."""
    return (math.cos(ridge_angle), math.sin(ridge_angle))


def ridge_perpendicular(ridge_angle: float) -> Tuple[float, float]:
    """Unit vector across the ridge (ridge direction rotated +90 degrees)."""
    return (-math.sin(ridge_angle), math.cos(ridge_angle))


def signed_ridge_distance(
    point: Point2D,
    centroid: Point2D,
    ridge_angle: float
) -> float:
    """
    Signed perpendicular distance from the ridge line.

    Positive on the left of the ridge direction.
    """
    px, py = ridge_perpendicular(ridge_angle)
    return (point.x - centroid.x) * px + (point.y - centroid.y) * py


def project_to_ridge_line(
    point: Point2D,
    centroid: Point2D,
    ridge_angle: float,
    ridge_z: float
) -> Point3D:
    """
    Orthogonal projection of a point onto the infinite ridge line.

    Args:
        point: Footprint point
        centroid: Point the ridge passes through
        ridge_angle: Ridge direction in radians
        ridge_z: Elevation of the returned point

    Returns:
        Projected point at ridge elevation
    """
    dx, dy = ridge_direction(ridge_angle)
    along = (point.x - centroid.x) * dx + (point.y - centroid.y) * dy

    return Point3D(
        centroid.x + dx * along,
        centroid.y + dy * along,
        ridge_z
    )


def project_to_ridge_segment(
    point: Point2D,
    start: Point2D,
    end: Point2D,
    ridge_z: float
) -> Point3D:
    """
    Nearest point on the ridge segment start -> end.

    A segment shorter than RIDGE_SEGMENT_EPSILON is treated as the
    single point ``start``.

    Args:
        point: Footprint point
        start, end: Ridge segment endpoints
        ridge_z: Elevation of the returned point

    Returns:
        Clamped projection at ridge elevation
    """
    seg_x = end.x - start.x
    seg_y = end.y - start.y
    seg_len_sq = seg_x * seg_x + seg_y * seg_y

    if seg_len_sq < RIDGE_SEGMENT_EPSILON * RIDGE_SEGMENT_EPSILON:
        return Point3D(start.x, start.y, ridge_z)

    t = ((point.x - start.x) * seg_x + (point.y - start.y) * seg_y) / seg_len_sq
    t = clamp(t, 0.0, 1.0)

    return Point3D(start.x + seg_x * t, start.y + seg_y * t, ridge_z)


def get_ridge_side(
    point: Point2D,
    centroid: Point2D,
    ridge_angle: float
) -> RidgeSide:
    """
    Classify which side of the ridge line a point lies on.

    Points exactly on the line classify as POSITIVE.
    """
    if signed_ridge_distance(point, centroid, ridge_angle) < 0:
        return RidgeSide.NEGATIVE
    return RidgeSide.POSITIVE


def ridge_crossing_parameter(
    p1: Point2D,
    p2: Point2D,
    centroid: Point2D,
    ridge_angle: float
) -> float:
    """
    Parameter t in which p1 + t * (p2 - p1) lies on the ridge line.

    Meant for edges whose endpoints are on opposite sides, where t falls
    in [0, 1]. The result is not clamped. When the two signed distances
    are closer than RIDGE_CROSSING_EPSILON, returns 0.5.
    """
    d1 = signed_ridge_distance(p1, centroid, ridge_angle)
    d2 = signed_ridge_distance(p2, centroid, ridge_angle)

    if abs(d2 - d1) < RIDGE_CROSSING_EPSILON:
        return 0.5
    return d1 / (d1 - d2)


def find_ridge_crossing(
    p1: Point2D,
    p2: Point2D,
    centroid: Point2D,
    ridge_angle: float,
    ridge_z: float
) -> Point3D:
    """
    Point where edge p1 -> p2 crosses the ridge line, at ridge elevation.
    """
    t = ridge_crossing_parameter(p1, p2, centroid, ridge_angle)
    return p1.lerp(p2, t).at_z(ridge_z)
