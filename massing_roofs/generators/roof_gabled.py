"""
Gabled roof generator for Massing Roofs Generator.

Generates two-slope gabled roofs for arbitrary footprints:
- The ridge is the infinite line through the centroid along the ridge
  angle, at wall_height + height(width, pitch)
- Edges with both ends on the same side of the ridge are slope edges:
  a quad from the edge up to the ridge projections of its ends
- Edges that cross the ridge are gable edges: a vertical triangle from
  the edge up to the point where it crosses the ridge

Slope quads go in the roof mesh, gable triangles in a separate gable
mesh so they can be treated as wall surfaces.
"""

from typing import Iterable, List, Optional, Tuple
import logging

from ..models.geometry import Point2D, PointLike
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

logger = logging.getLogger(__name__)


def generate_gabled_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate gabled roof mesh.

    For a rectangle this gives 2 slope quads and 2 gable triangles.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters

    Returns:
        RoofMeshResult with slopes in roof_mesh and gable triangles in
        gable_mesh (None if no edge crosses the ridge)
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring, params.roof_rotation)

    roof_height = calculate_roof_height(analysis.width, params.roof_pitch)
    ridge_z = params.wall_height + roof_height

    logger.debug(
        f"Gabled roof: width={analysis.width:.3f}, length={analysis.length:.3f}, "
        f"ridge_z={ridge_z:.3f}"
    )

    roof_mesh, gable_mesh = _build_gabled_faces(
        ring, analysis, params.wall_height, ridge_z
    )

    return RoofMeshResult(
        roof_mesh=roof_mesh,
        gable_mesh=gable_mesh if not gable_mesh.is_empty() else None,
    )


def _build_gabled_faces(
    ring: List[Point2D],
    analysis: PolygonAnalysis,
    eave_z: float,
    ridge_z: float
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

        if side1 == side2:
            ridge1 = project_to_ridge_line(p1, centroid, ridge_angle, ridge_z)
            ridge2 = project_to_ridge_line(p2, centroid, ridge_angle, ridge_z)
            roof_mesh.add_quad_points(
                p1.at_z(eave_z), p2.at_z(eave_z), ridge2, ridge1
            )
        else:
            crossing = find_ridge_crossing(
                p1, p2, centroid, ridge_angle, ridge_z
            )
            gable_mesh.add_triangle_points(
                p1.at_z(eave_z), p2.at_z(eave_z), crossing
            )

    return roof_mesh, gable_mesh
