"""
Mansard roof generator for Massing Roofs Generator.

Double-slope roof: a steep lower section rising to a break level, then a
gentle upper section converging on a single peak above the centroid.

Heights:
- lower = height(width * MANSARD_LOWER_SPAN_RATIO, MANSARD_LOWER_PITCH)
- upper = height(width * MANSARD_UPPER_SPAN_RATIO, MANSARD_UPPER_PITCH)
- break elevation = wall_height + lower * MANSARD_BREAK_RATIO
- peak elevation = wall_height + lower + upper

The break-level polygon is the footprint shrunk toward the centroid by
MANSARD_INSET_RATIO. Both pitches are fixed; the user pitch and the
rotation have no effect.
"""

from typing import Iterable, List, Optional
import logging

from ..models.geometry import Point2D, Point3D, PointLike
from ..models.mesh import MeshData, RoofMeshResult
from ..models.roof import RoofParams
from ..processing.footprint import (
    analyze_polygon,
    calculate_roof_height,
    footprint_ring,
)
from ..config import (
    MANSARD_LOWER_PITCH,
    MANSARD_UPPER_PITCH,
    MANSARD_BREAK_RATIO,
    MANSARD_INSET_RATIO,
    MANSARD_LOWER_SPAN_RATIO,
    MANSARD_UPPER_SPAN_RATIO,
)

logger = logging.getLogger(__name__)


def generate_mansard_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate mansard roof mesh.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters (only wall_height is used)

    Returns:
        RoofMeshResult with N lower quads and N upper triangles
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring)

    lower_height = calculate_roof_height(
        analysis.width * MANSARD_LOWER_SPAN_RATIO, MANSARD_LOWER_PITCH
    )
    upper_height = calculate_roof_height(
        analysis.width * MANSARD_UPPER_SPAN_RATIO, MANSARD_UPPER_PITCH
    )

    eave_z = params.wall_height
    break_z = eave_z + lower_height * MANSARD_BREAK_RATIO
    peak_z = eave_z + lower_height + upper_height

    centroid = analysis.centroid
    break_ring = [p.lerp(centroid, MANSARD_INSET_RATIO) for p in ring]
    peak = centroid.at_z(peak_z)

    logger.debug(
        f"Mansard roof: break_z={break_z:.3f}, peak_z={peak_z:.3f}"
    )

    mesh = MeshData(name="roof")
    _add_lower_section(mesh, ring, break_ring, eave_z, break_z)
    _add_upper_section(mesh, break_ring, break_z, peak)

    return RoofMeshResult(roof_mesh=mesh)


def _add_lower_section(
    mesh: MeshData,
    ring: List[Point2D],
    break_ring: List[Point2D],
    eave_z: float,
    break_z: float
) -> None:
    """Steep quads from each footprint edge to its inset edge."""
    n = len(ring)
    for i in range(n):
        j = (i + 1) % n
        mesh.add_quad_points(
            ring[i].at_z(eave_z),
            ring[j].at_z(eave_z),
            break_ring[j].at_z(break_z),
            break_ring[i].at_z(break_z),
        )


def _add_upper_section(
    mesh: MeshData,
    break_ring: List[Point2D],
    break_z: float,
    peak: Point3D
) -> None:
    n = len(break_ring)
    for i in range(n):
        j = (i + 1) % n
        mesh.add_triangle_points(
            break_ring[i].at_z(break_z),
            break_ring[j].at_z(break_z),
            peak,
        )
