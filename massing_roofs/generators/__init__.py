"""
Mesh generators for Massing Roofs Generator.

Contains the seven roof builders (flat, pitched, tented, hipped, gabled,
half-hip, mansard), the roof factory that dispatches on the archetype
tag, the wall generator, and the building generator that combines them.
"""

from .walls import generate_walls
from .roof_flat import generate_flat_roof
from .roof_pitched import generate_pitched_roof
from .roof_tented import generate_tented_roof, build_pyramid
from .roof_hipped import generate_hipped_roof
from .roof_gabled import generate_gabled_roof
from .roof_half_hip import generate_half_hip_roof
from .roof_mansard import generate_mansard_roof
from .roof_factory import create_roof_geometry, ROOF_GENERATORS
from .building_generator import generate_building, BuildingGeneratorResult

__all__ = [
    'generate_walls',
    'generate_flat_roof',
    'generate_pitched_roof',
    'generate_tented_roof',
    'build_pyramid',
    'generate_hipped_roof',
    'generate_gabled_roof',
    'generate_half_hip_roof',
    'generate_mansard_roof',
    'create_roof_geometry',
    'ROOF_GENERATORS',
    'generate_building',
    'BuildingGeneratorResult',
]
