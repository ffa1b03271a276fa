"""
Footprint analysis for Massing Roofs Generator.

Derives the quantities every roof builder starts from:
- centroid (vertex mean)
- axis-aligned bounding box
- ridge axis and ridge angle (longer bbox axis plus user rotation)
- width (across the ridge) and length (along the ridge)

Also converts a horizontal span and a pitch angle into a roof rise.

CENTROID NOTE: the centroid is the arithmetic mean of the vertices, not
the area-weighted polygon centroid. The two agree for regular and most
convex shapes; for irregular or concave footprints (or footprints with
many vertices bunched on one side) the vertex mean is pulled toward the
dense side. Roof apexes and ridges follow the vertex mean.
"""

from typing import Iterable, List, Tuple
import math

from ..models.geometry import BBox, Footprint, Point2D, Point3D, PointLike
from ..models.roof import PolygonAnalysis, RidgeAxis
from ..utils.math_utils import normalize_angle
from ..utils.polygon_utils import ensure_ccw


def footprint_ring(points: Iterable[PointLike]) -> List[Point2D]:
    """
    Validated, counter-clockwise working copy of a footprint.

    Builders emit faces in this order so roof faces wind upward and
    gable faces wind outward whatever the caller's winding.

    Raises:
        FootprintError: If the footprint is degenerate
    """
    return ensure_ccw(Footprint.from_points(points).ring)


def vertex_centroid(points: Iterable[Point2D]) -> Point2D:
    """
    Arithmetic mean of the vertices.

    Args:
        points: Footprint vertices (at least one)

    Returns:
        Mean point
    """
    pts = list(points)
    n = len(pts)
    cx = sum(p.x for p in pts) / n
    cy = sum(p.y for p in pts) / n
    return Point2D(cx, cy)


def analyze_polygon(
    points: Iterable[PointLike],
    rotation_deg: float = 0.0
) -> PolygonAnalysis:
    """
    Analyze a footprint for roof construction.

    The ridge runs along the longer bounding-box axis (X on ties).
    Its base angle is 0 for X and pi/2 for Y; the rotation offset
    is added on top.

    Args:
        points: Footprint, or point-like values accepted by Footprint
        rotation_deg: Ridge rotation offset in degrees

    Returns:
        PolygonAnalysis

    Raises:
        FootprintError: If the footprint is degenerate
    """
    footprint = Footprint.from_points(points)
    ring = footprint.ring

    centroid = vertex_centroid(ring)
    bbox = BBox.from_points(ring)

    x_span = bbox.width
    y_span = bbox.height

    ridge_axis = RidgeAxis.X if x_span >= y_span else RidgeAxis.Y

    base_angle = 0.0 if ridge_axis == RidgeAxis.X else math.pi / 2
    ridge_angle = base_angle + math.radians(normalize_angle(rotation_deg))

    if ridge_axis == RidgeAxis.X:
        width, length = y_span, x_span
    else:
        width, length = x_span, y_span

    return PolygonAnalysis(
        centroid=centroid,
        bbox=bbox,
        ridge_axis=ridge_axis,
        ridge_angle=ridge_angle,
        width=width,
        length=length,
    )


def calculate_roof_height(span: float, pitch_deg: float) -> float:
    """
    Roof rise over half a span at the given pitch.

    height = (span / 2) * tan(pitch)

    Args:
        span: Horizontal span in meters (each archetype picks its own)
        pitch_deg: Pitch in degrees

    Returns:
        Vertical rise in meters (0 at pitch 0)
    """
    return (span / 2.0) * math.tan(math.radians(pitch_deg))


def get_ridge_line(
    analysis: PolygonAnalysis,
    wall_height: float,
    roof_height: float
) -> Tuple[Point3D, Point3D]:
    """
    Unrotated ridge line across the bounding box.

    Runs through the centroid along the ridge axis, from one side of the
    bounding box to the other, at ridge elevation. Rotation is ignored.

    Args:
        analysis: Footprint analysis
        wall_height: Eave elevation
        roof_height: Rise from eave to ridge

    Returns:
        (start, end) ridge endpoints
    """
    centroid = analysis.centroid
    bbox = analysis.bbox
    ridge_z = wall_height + roof_height

    if analysis.ridge_axis == RidgeAxis.X:
        return (
            Point3D(bbox.min_x, centroid.y, ridge_z),
            Point3D(bbox.max_x, centroid.y, ridge_z),
        )

    return (
        Point3D(centroid.x, bbox.min_y, ridge_z),
        Point3D(centroid.x, bbox.max_y, ridge_z),
    )
