"""
Flat roof generator for Massing Roofs Generator.

Generates a flat roof surface at eave height by triangulating the
footprint. Falls back gracefully to a centroid fan on triangulation
failure.
"""

from typing import Iterable, List, Optional
import logging

from ..models.geometry import Point2D, PointLike
from ..models.mesh import MeshData, RoofMeshResult
from ..models.roof import RoofParams
from ..processing.footprint import footprint_ring, vertex_centroid
from ..utils.triangulation import triangulate_ring, TriangulationError

logger = logging.getLogger(__name__)


def generate_flat_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate flat roof mesh for a footprint.

    The footprint is triangulated in place (ear clipping, n - 2
    triangles for n vertices) and every vertex is set to wall height.
    Pitch and rotation are ignored.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters (defaults if None)

    Returns:
        RoofMeshResult with roof geometry only

    Raises:
        FootprintError: If the footprint is degenerate
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    mesh = MeshData(name="roof")

    try:
        _generate_simple_roof(mesh, ring, params.wall_height)
    except TriangulationError as e:
        logger.warning(f"Flat roof: triangulation failed: {e}. Using centroid fan.")
        # Last resort: try a fan triangulation from centroid
        mesh = MeshData(name="roof")
        _generate_fan_roof(mesh, ring, params.wall_height)

    logger.debug(
        f"Flat roof: {len(ring)} vertices -> {mesh.triangle_count()} triangles "
        f"at z={params.wall_height:.3f}"
    )

    return RoofMeshResult(roof_mesh=mesh)


def _generate_simple_roof(
    mesh: MeshData,
    ring: List[Point2D],
    roof_z: float
) -> None:
    """
    Generate triangulated roof surface for a simple polygon.

    Args:
        mesh: MeshData to add to
        ring: Footprint vertices
        roof_z: Roof elevation
    """
    triangles = triangulate_ring(ring)

    vertex_indices = [mesh.add_vertex(p.x, p.y, roof_z) for p in ring]

    for a, b, c in triangles:
        mesh.add_triangle(vertex_indices[a], vertex_indices[b], vertex_indices[c])


def _generate_fan_roof(
    mesh: MeshData,
    ring: List[Point2D],
    roof_z: float
) -> None:
    """
    Generate fan triangulation from centroid (fallback).

    This works for convex polygons and is a last resort for
    when ear clipping fails.

    Args:
        mesh: MeshData to add to
        ring: Footprint vertices (CCW)
        roof_z: Roof elevation
    """
    n = len(ring)
    center = vertex_centroid(ring)

    center_idx = mesh.add_vertex(center.x, center.y, roof_z)
    vertex_indices = [mesh.add_vertex(p.x, p.y, roof_z) for p in ring]

    for i in range(n):
        j = (i + 1) % n
        mesh.add_triangle(center_idx, vertex_indices[i], vertex_indices[j])
