"""
Hipped roof generator for Massing Roofs Generator.

Generates hipped roofs for arbitrary footprints by sloping every edge
up to a shortened ridge segment centred on the centroid:
- Edges whose ends project onto different ridge points become slope
  quads (edge + two ridge points)
- Edges whose ends both clamp to the same ridge end become triangular
  hips (edge + one ridge point)

Special case:
- Nearly square footprints (length / width below HIPPED_ASPECT_THRESHOLD)
  would get a ridge of (almost) zero length; they are built as a tented
  roof with a single apex instead

The ridge segment has half-length (length - width) / 2, which makes the
hip faces rise at roughly the same pitch as the long slopes on a
rectangle.
"""

from typing import Iterable, List, Optional
import logging
import math

from ..models.geometry import Point2D, PointLike
from ..models.mesh import MeshData, RoofMeshResult
from ..models.roof import RoofParams
from ..processing.footprint import (
    analyze_polygon,
    calculate_roof_height,
    footprint_ring,
)
from ..processing.ridge import project_to_ridge_segment
from ..config import HIPPED_ASPECT_THRESHOLD, RIDGE_POINT_EPSILON
from .roof_tented import generate_tented_roof

logger = logging.getLogger(__name__)


def generate_hipped_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate hipped roof mesh.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters

    Returns:
        RoofMeshResult with roof geometry only (hips replace gables)
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring, params.roof_rotation)

    aspect_ratio = analysis.aspect_ratio
    if aspect_ratio is None or aspect_ratio < HIPPED_ASPECT_THRESHOLD:
        logger.debug(
            f"Hipped roof: aspect ratio {aspect_ratio} below "
            f"{HIPPED_ASPECT_THRESHOLD}, building pyramidal roof"
        )
        return generate_tented_roof(ring, params)

    roof_height = calculate_roof_height(analysis.width, params.roof_pitch)
    ridge_z = params.wall_height + roof_height

    centroid = analysis.centroid
    dx = math.cos(analysis.ridge_angle)
    dy = math.sin(analysis.ridge_angle)

    ridge_half_length = (analysis.length - analysis.width) / 2.0
    ridge_start = Point2D(
        centroid.x - dx * ridge_half_length,
        centroid.y - dy * ridge_half_length
    )
    ridge_end = Point2D(
        centroid.x + dx * ridge_half_length,
        centroid.y + dy * ridge_half_length
    )

    logger.debug(
        f"Hipped roof: aspect={aspect_ratio:.2f}, "
        f"ridge_half_length={ridge_half_length:.3f}, ridge_z={ridge_z:.3f}"
    )

    mesh = _build_hipped_faces(
        ring, params.wall_height, ridge_start, ridge_end, ridge_z
    )
    return RoofMeshResult(roof_mesh=mesh)


def _build_hipped_faces(
    ring: List[Point2D],
    eave_z: float,
    ridge_start: Point2D,
    ridge_end: Point2D,
    ridge_z: float
) -> MeshData:
    """
    Slope quads and hip triangles for every footprint edge.

    Args:
        ring: Footprint vertices (CCW)
        eave_z: Eave elevation
        ridge_start, ridge_end: Ridge segment endpoints
        ridge_z: Ridge elevation

    Returns:
        MeshData named "roof"
    """
    mesh = MeshData(name="roof")
    n = len(ring)

    for i in range(n):
        p1 = ring[i]
        p2 = ring[(i + 1) % n]

        ridge1 = project_to_ridge_segment(p1, ridge_start, ridge_end, ridge_z)
        ridge2 = project_to_ridge_segment(p2, ridge_start, ridge_end, ridge_z)

        if ridge1.distance_to(ridge2) < RIDGE_POINT_EPSILON:
            # Hip end: both corners run up to the same ridge point
            mesh.add_triangle_points(p1.at_z(eave_z), p2.at_z(eave_z), ridge1)
        else:
            mesh.add_quad_points(
                p1.at_z(eave_z), p2.at_z(eave_z), ridge2, ridge1
            )

    return mesh
