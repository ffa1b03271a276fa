"""
Roof geometry factory for Massing Roofs Generator.

Dispatches an archetype tag to the matching roof builder. Every
RoofType has an entry; unrecognized tags resolve to FLAT through
RoofType.from_tag.
"""

from typing import Callable, Dict, Iterable, Optional, Union
import logging

from ..models.geometry import PointLike
from ..models.mesh import RoofMeshResult
from ..models.roof import RoofType, RoofParams
from .roof_flat import generate_flat_roof
from .roof_pitched import generate_pitched_roof
from .roof_tented import generate_tented_roof
from .roof_hipped import generate_hipped_roof
from .roof_gabled import generate_gabled_roof
from .roof_half_hip import generate_half_hip_roof
from .roof_mansard import generate_mansard_roof

logger = logging.getLogger(__name__)

RoofBuilder = Callable[..., RoofMeshResult]

ROOF_GENERATORS: Dict[RoofType, RoofBuilder] = {
    RoofType.FLAT: generate_flat_roof,
    RoofType.PITCHED: generate_pitched_roof,
    RoofType.TENTED: generate_tented_roof,
    RoofType.HIPPED: generate_hipped_roof,
    RoofType.GABLED: generate_gabled_roof,
    RoofType.HALF_HIP: generate_half_hip_roof,
    RoofType.MANSARD: generate_mansard_roof,
}


def create_roof_geometry(
    roof_type: Union[RoofType, str, None],
    points: Iterable[PointLike],
    params: Optional[RoofParams] = None
) -> RoofMeshResult:
    """
    Build the roof for a footprint.

    Args:
        roof_type: RoofType or tag string (unknown/None -> flat)
        points: Footprint vertices (any winding)
        params: Roof parameters (defaults if None)

    Returns:
        RoofMeshResult from the selected builder

    Raises:
        FootprintError: If the footprint is degenerate
    """
    resolved = RoofType.from_tag(roof_type)
    builder = ROOF_GENERATORS[resolved]

    logger.debug(f"Building {resolved.value} roof")
    return builder(points, params)
