"""
Pitched (single slope, "shed") roof generator for Massing Roofs Generator.

Builds one continuous tilted plane over the footprint:
1. The slope runs perpendicular to the ridge angle (rotation applies)
2. Each vertex is lifted in proportion to its position along the slope,
   from wall height on the low side to wall height + rise on the high side
3. The surface is a fan from the centroid to every footprint edge
4. Edges whose ends sit at different heights get a vertical side wall
   (gable mesh) closing the gap between wall top and roof

The rise uses twice the footprint width as span: a single slope covers
the full width instead of the half-width each side of a ridge covers.
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
from ..utils.math_utils import inverse_lerp
from ..config import PITCHED_SPAN_FACTOR, GABLE_HEIGHT_EPSILON

logger = logging.getLogger(__name__)


def generate_pitched_roof(
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Generate single-slope roof mesh.

    Args:
        points: Footprint vertices (any winding)
        params: Roof parameters

    Returns:
        RoofMeshResult; gable_mesh holds the side walls (None when the
        roof is level, e.g. at zero pitch)
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    analysis = analyze_polygon(ring, params.roof_rotation)
    roof_height = calculate_roof_height(
        analysis.width * PITCHED_SPAN_FACTOR, params.roof_pitch
    )

    centroid = analysis.centroid
    eave_z = params.wall_height

    # Points further along the slope direction are higher
    slope_angle = analysis.ridge_angle + math.pi / 2
    slope_x = math.cos(slope_angle)
    slope_y = math.sin(slope_angle)

    def slope_distance(p: Point2D) -> float:
        return (p.x - centroid.x) * slope_x + (p.y - centroid.y) * slope_y

    distances = [slope_distance(p) for p in ring]
    min_dist = min(distances)
    max_dist = max(distances)

    heights = [
        eave_z + inverse_lerp(min_dist, max_dist, d) * roof_height
        for d in distances
    ]

    logger.debug(
        f"Pitched roof: span={analysis.width * PITCHED_SPAN_FACTOR:.3f}, "
        f"rise={roof_height:.3f}, slope_angle={math.degrees(slope_angle):.1f}"
    )

    roof_mesh = _build_slope_surface(ring, heights, centroid)
    gable_mesh = _build_side_walls(ring, heights, eave_z)

    return RoofMeshResult(
        roof_mesh=roof_mesh,
        gable_mesh=gable_mesh if not gable_mesh.is_empty() else None,
    )


def _build_slope_surface(
    ring: List[Point2D],
    heights: List[float],
    centroid: Point2D
) -> MeshData:
    """
    Fan from the centroid to every edge of the lifted footprint.

    The centroid is lifted to the mean vertex height.
    """
    mesh = MeshData(name="roof")
    n = len(ring)

    center_z = sum(heights) / n
    center_idx = mesh.add_vertex(centroid.x, centroid.y, center_z)

    vertex_indices = [
        mesh.add_vertex(p.x, p.y, z) for p, z in zip(ring, heights)
    ]

    for i in range(n):
        j = (i + 1) % n
        mesh.add_triangle(center_idx, vertex_indices[i], vertex_indices[j])

    return mesh


def _build_side_walls(
    ring: List[Point2D],
    heights: List[float],
    eave_z: float
) -> MeshData:
    """
    Vertical quads between wall top and roof for sloping edges.

    Edges whose end heights differ by at most GABLE_HEIGHT_EPSILON are
    skipped (they would only produce slivers).
    """
    mesh = MeshData(name="gable")
    n = len(ring)

    for i in range(n):
        j = (i + 1) % n
        p1, p2 = ring[i], ring[j]
        h1, h2 = heights[i], heights[j]

        if abs(h1 - h2) <= GABLE_HEIGHT_EPSILON:
            continue

        mesh.add_quad_points(
            p1.at_z(eave_z),
            p2.at_z(eave_z),
            p2.at_z(h2),
            p1.at_z(h1),
        )

    return mesh
