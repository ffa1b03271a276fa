"""
Building generator orchestrator for Massing Roofs Generator.

Combines wall extrusion and roof generation for one footprint and
collects the statistics reported by the CLI.
"""

from typing import Iterable, Optional, List, Union
from dataclasses import dataclass, field
import logging

from ..models.geometry import PointLike
from ..models.mesh import MeshData, RoofMeshResult, merge_meshes
from ..models.roof import RoofType, RoofParams
from ..processing.footprint import analyze_polygon, footprint_ring
from .walls import generate_walls
from .roof_factory import create_roof_geometry

logger = logging.getLogger(__name__)


@dataclass
class BuildingGeneratorResult:
    """Result of building generation."""
    walls: Optional[MeshData]
    roof: RoofMeshResult
    actual_roof_type: RoofType
    stats: dict = field(default_factory=dict)

    def meshes(self) -> List[MeshData]:
        """Walls (when generated), roof, then gable mesh (when present)."""
        result = []
        if self.walls is not None and not self.walls.is_empty():
            result.append(self.walls)
        result.extend(self.roof.meshes())
        return result

    def merged(self, name: str = "building") -> MeshData:
        """All meshes combined into one."""
        return merge_meshes(self.meshes(), name=name)


def generate_building(
    points: Iterable[PointLike],
    roof_type: Union[RoofType, str, None] = None,
    params: Optional[RoofParams] = None,
    include_walls: bool = True
) -> BuildingGeneratorResult:
    """
    Generate complete building mesh (walls + roof).

    Args:
        points: Footprint vertices (any winding)
        roof_type: RoofType or tag string (unknown/None -> flat)
        params: Roof parameters (defaults if None)
        include_walls: Extrude walls from z=0 to wall_height

    Returns:
        BuildingGeneratorResult with meshes and stats

    Raises:
        FootprintError: If the footprint is degenerate
    """
    if params is None:
        params = RoofParams()

    ring = footprint_ring(points)
    actual_roof_type = RoofType.from_tag(roof_type)

    walls = None
    if include_walls:
        walls = generate_walls(ring, params.wall_height)

    roof = create_roof_geometry(actual_roof_type, ring, params)

    result = BuildingGeneratorResult(
        walls=walls,
        roof=roof,
        actual_roof_type=actual_roof_type,
    )
    result.stats = _collect_stats(result, ring, params)

    logger.info(
        f"Generated {actual_roof_type.value} building: "
        f"{result.stats['vertex_count']} vertices, "
        f"{result.stats['face_count']} faces"
    )

    return result


def _collect_stats(
    result: BuildingGeneratorResult,
    ring,
    params: RoofParams
) -> dict:
    analysis = analyze_polygon(ring, params.roof_rotation)
    meshes = result.meshes()

    roof_bounds = result.roof.roof_mesh.compute_bounds()
    roof_top_z = roof_bounds[1][2] if roof_bounds else params.wall_height

    return {
        'vertex_count': sum(m.vertex_count() for m in meshes),
        'face_count': sum(m.triangle_count() for m in meshes),
        'roof_faces': result.roof.roof_mesh.triangle_count(),
        'gable_faces': (
            result.roof.gable_mesh.triangle_count()
            if result.roof.gable_mesh is not None else 0
        ),
        'wall_faces': (
            result.walls.triangle_count() if result.walls is not None else 0
        ),
        'roof_type': result.actual_roof_type.value,
        'wall_height': params.wall_height,
        'roof_top_z': roof_top_z,
        'footprint_vertices': len(ring),
        'width': analysis.width,
        'length': analysis.length,
    }
