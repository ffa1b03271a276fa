"""
Tented (pyramidal) roof generator for Massing Roofs Generator.

Every footprint edge becomes one triangle rising to a single apex above
the centroid. Works for any footprint shape.

Rotation has no effect on this roof type: the apex always sits over the
centroid and the rise only depends on the footprint spans.
"""

from typing import Iterable, List, Optional
import logging

from ..models.geometry import Point2D, PointLike
from ..models.mesh import MeshData, RoofMeshResult
from ..models.roof import RoofParams
from ..processing.footprint import (
    analyze_polygon,
    calculate_roof_height,
    footprint_ring,
)

logger = logging.getLogger(__name__)


def generate_tented_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate tented (pyramidal) roof mesh.

    Apex elevation = wall_height + height(min(width, length), pitch).

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters (rotation is ignored)

    Returns:
        RoofMeshResult with N triangles for an N-vertex footprint
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring)

    # Smaller dimension drives the rise
    min_dimension = min(analysis.width, analysis.length)
    roof_height = calculate_roof_height(min_dimension, params.roof_pitch)
    peak_z = params.wall_height + roof_height

    logger.debug(
        f"Tented roof: span={min_dimension:.3f}, pitch={params.roof_pitch:.1f}, "
        f"peak_z={peak_z:.3f}"
    )

    mesh = build_pyramid(ring, params.wall_height, analysis.centroid, peak_z)
    return RoofMeshResult(roof_mesh=mesh)


def build_pyramid(
    ring: List[Point2D],
    eave_z: float,
    apex: Point2D,
    apex_z: float
) -> MeshData:
    """
    One triangle per edge, from the edge at eave height to the apex.

    Args:
        ring: Footprint vertices (CCW)
        eave_z: Eave elevation
        apex: Apex position in plan
        apex_z: Apex elevation

    Returns:
        MeshData named "roof"
    """
    mesh = MeshData(name="roof")
    peak = apex.at_z(apex_z)
    n = len(ring)

    for i in range(n):
        p1 = ring[i]
        p2 = ring[(i + 1) % n]
        mesh.add_triangle_points(p1.at_z(eave_z), p2.at_z(eave_z), peak)

    return mesh
