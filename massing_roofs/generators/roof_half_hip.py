"""
Half-hip (jerkinhead) roof generator for Massing Roofs Generator.

A gabled roof whose gable tops are clipped into small hips:
- Slope edges (both ends on one side of the ridge) are built exactly as
  for a gabled roof
- Gable edges (crossing the ridge) are split at the clip elevation
  wall_height + roof_height * (1 - HALF_HIP_CLIP_RATIO):
    * a vertical trapezoid from the edge up to the two clip points
      (gable mesh)
    * a hip triangle from the clip points up to the ridge crossing
      (roof mesh)

Clip points sit (1 - clip ratio) of the way from each footprint vertex
toward its projection on the ridge line.
"""

from typing import Iterable, List, Optional, Tuple
import logging

from ..models.geometry import Point2D, Point3D, PointLike
from ..models.mesh import MeshData, RoofMeshResult
from ..models.roof import RoofParams, PolygonAnalysis
from ..processing.footprint import (
    analyze_polygon,
    calculate_roof_height,
    footprint_ring,
)
from ..processing.ridge import (
    find_ridge_crossing,
    get_ridge_side,
    project_to_ridge_line,
)
from ..config import HALF_HIP_CLIP_RATIO

logger = logging.getLogger(__name__)


def generate_half_hip_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate half-hip roof mesh.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters

    Returns:
        RoofMeshResult with slopes and hip triangles in roof_mesh and the
        clipped gable trapezoids in gable_mesh (None if no edge crosses
        the ridge)
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring, params.roof_rotation)

    roof_height = calculate_roof_height(analysis.width, params.roof_pitch)
    ridge_z = params.wall_height + roof_height
    clip_z = params.wall_height + roof_height * (1.0 - HALF_HIP_CLIP_RATIO)

    logger.debug(
        f"Half-hip roof: ridge_z={ridge_z:.3f}, clip_z={clip_z:.3f}"
    )

    roof_mesh, gable_mesh = _build_half_hip_faces(
        ring, analysis, params.wall_height, ridge_z, clip_z
    )

    return RoofMeshResult(
        roof_mesh=roof_mesh,
        gable_mesh=gable_mesh if not gable_mesh.is_empty() else None,
    )


def clip_point(
    point: Point2D,
    analysis: PolygonAnalysis,
    clip_z: float
) -> Point3D:
    """
    Point partway from a footprint vertex toward the ridge, at clip level.

    Args:
        point: Footprint vertex
        analysis: Footprint analysis (centroid and ridge angle)
        clip_z: Clip elevation

    Returns:
        Vertex moved (1 - HALF_HIP_CLIP_RATIO) toward its ridge projection
    """
    ridge = project_to_ridge_line(
        point, analysis.centroid, analysis.ridge_angle, clip_z
    )
    return point.lerp(ridge.to_2d(), 1.0 - HALF_HIP_CLIP_RATIO).at_z(clip_z)


def _build_half_hip_faces(
    ring: List[Point2D],
    analysis: PolygonAnalysis,
    eave_z: float,
    ridge_z: float,
    clip_z: float
) -> Tuple[MeshData, MeshData]:
    roof_mesh = MeshData(name="roof")
    gable_mesh = MeshData(name="gable")

    centroid = analysis.centroid
    ridge_angle = analysis.ridge_angle
    n = len(ring)

    for i in range(n):
        p1 = ring[i]
        p2 = ring[(i + 1) % n]

        side1 = get_ridge_side(p1, centroid, ridge_angle)
        side2 = get_ridge_side(p2, centroid, ridge_angle)

        base1 = p1.at_z(eave_z)
        base2 = p2.at_z(eave_z)

        if side1 == side2:
            ridge1 = project_to_ridge_line(p1, centroid, ridge_angle, ridge_z)
            ridge2 = project_to_ridge_line(p2, centroid, ridge_angle, ridge_z)
            roof_mesh.add_quad_points(base1, base2, ridge2, ridge1)
            continue

        clip1 = clip_point(p1, analysis, clip_z)
        clip2 = clip_point(p2, analysis, clip_z)
        crossing = find_ridge_crossing(p1, p2, centroid, ridge_angle, ridge_z)

        # Lower gable wall
        gable_mesh.add_quad_points(base1, base2, clip2, clip1)
        # Upper hip
        roof_mesh.add_triangle_points(clip1, clip2, crossing)

    return roof_mesh, gable_mesh
