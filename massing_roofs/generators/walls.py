"""
Wall mesh generator for Massing Roofs Generator.

Extrudes the footprint into vertical wall faces from base_z up to the
eave (wall_height), one quad per footprint edge. The roof builders seat
on the top edge of these walls.
"""

from typing import Iterable, List
import logging

from ..models.geometry import Point2D, PointLike
from ..models.mesh import MeshData
from ..processing.footprint import footprint_ring

logger = logging.getLogger(__name__)

# Edges shorter than this produce no wall quad
MIN_WALL_EDGE_LENGTH = 1e-6


def generate_walls(
    points: Iterable[PointLike],
    wall_height: float,
    base_z: float = 0.0
) -> MeshData:
    """
    Generate wall mesh for a footprint.

    Args:
        points: Footprint vertices (any winding)
        wall_height: Wall top (eave) elevation
        base_z: Wall bottom elevation

    Returns:
        MeshData named "walls", faces pointing outward. Empty if
        wall_height <= base_z.

    Raises:
        FootprintError: If the footprint is degenerate
    """
    ring = footprint_ring(points)
    mesh = MeshData(name="walls")

    if wall_height <= base_z:
        logger.debug(
            f"Walls: top {wall_height:.3f} not above base {base_z:.3f}, skipping"
        )
        return mesh

    _generate_ring_walls(mesh, ring, base_z, wall_height)
    return mesh


def _generate_ring_walls(
    mesh: MeshData,
    ring: List[Point2D],
    floor_z: float,
    top_z: float
) -> None:
    """
    Generate wall quads for a CCW ring.

    Quads are emitted bottom-left, bottom-right, top-right, top-left so
    normals face outward.
    """
    n = len(ring)

    for i in range(n):
        p0 = ring[i]
        p1 = ring[(i + 1) % n]

        if p0.distance_to(p1) < MIN_WALL_EDGE_LENGTH:
            continue

        bl = mesh.add_vertex(p0.x, p0.y, floor_z)
        br = mesh.add_vertex(p1.x, p1.y, floor_z)
        tr = mesh.add_vertex(p1.x, p1.y, top_z)
        tl = mesh.add_vertex(p0.x, p0.y, top_z)

        mesh.add_quad(bl, br, tr, tl)
