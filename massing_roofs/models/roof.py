"""
Roof data model for Massing Roofs Generator.

Provides the RoofType enum (the archetype tag), RoofParams (the numeric
inputs shared by every builder) and PolygonAnalysis (the derived,
per-call description of a footprint that builders work from).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import logging
import math

from .geometry import BBox, Point2D
from ..config import DEFAULT_WALL_HEIGHT, DEFAULT_ROOF_PITCH, DEFAULT_ROOF_ROTATION

logger = logging.getLogger(__name__)


class RoofType(Enum):
    """Roof archetype."""
    FLAT = "flat"
    PITCHED = "pitched"
    TENTED = "tented"
    HIPPED = "hipped"
    GABLED = "gabled"
    HALF_HIP = "half-hip"
    MANSARD = "mansard"

    @property
    def label(self) -> str:
        """Human readable name."""
        return _ROOF_TYPE_LABELS[self]

    @classmethod
    def from_tag(cls, tag: Union['RoofType', str, None]) -> 'RoofType':
        """
        Resolve an archetype tag.

        Matching is case-insensitive and treats '_' like '-', so
        'HALF_HIP' and 'half-hip' are equivalent. Unknown tags and None
        resolve to FLAT.

        Args:
            tag: RoofType, tag string, or None

        Returns:
            Matching RoofType
        """
        if isinstance(tag, cls):
            return tag
        if not tag:
            return cls.FLAT

        normalized = str(tag).lower().strip().replace('_', '-')
        for roof_type in cls:
            if roof_type.value == normalized:
                return roof_type

        logger.warning(f"Unknown roof type '{tag}', using flat roof")
        return cls.FLAT


_ROOF_TYPE_LABELS = {
    RoofType.FLAT: 'Flat',
    RoofType.PITCHED: 'Pitched',
    RoofType.TENTED: 'Tented (Pyramidal)',
    RoofType.HIPPED: 'Hipped',
    RoofType.HALF_HIP: 'Half-Hip',
    RoofType.GABLED: 'Gabled',
    RoofType.MANSARD: 'Mansard',
}


class RidgeAxis(Enum):
    """Horizontal axis the unrotated ridge runs along."""
    X = "x"
    Y = "y"


@dataclass(frozen=True)
class RoofParams:
    """
    Numeric roof parameters.

    Attributes:
        wall_height: Eave elevation (>= 0)
        roof_pitch: Slope angle in degrees, in [0, 90)
        roof_rotation: Ridge rotation offset in degrees (0-360)
    """
    wall_height: float = DEFAULT_WALL_HEIGHT
    roof_pitch: float = DEFAULT_ROOF_PITCH
    roof_rotation: float = DEFAULT_ROOF_ROTATION

    def __post_init__(self):
        """Validate parameter values."""
        for name in ('wall_height', 'roof_pitch', 'roof_rotation'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) \
                    or not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value!r}")

        if self.wall_height < 0:
            raise ValueError("wall_height must be non-negative")

        if not (0.0 <= self.roof_pitch < 90.0):
            raise ValueError("roof_pitch must be in [0, 90) degrees")


@dataclass(frozen=True)
class PolygonAnalysis:
    """
    Derived description of a footprint.

    Recomputed on every builder call, never cached.

    Attributes:
        centroid: Arithmetic mean of the vertices (not area-weighted)
        bbox: Axis-aligned bounding box
        ridge_axis: Axis with the larger bbox span (ties -> X)
        ridge_angle: Ridge direction in radians, rotation included
        width: Bbox span perpendicular to the ridge axis
        length: Bbox span along the ridge axis
    """
    centroid: Point2D
    bbox: BBox
    ridge_axis: RidgeAxis
    ridge_angle: float
    width: float
    length: float

    @property
    def aspect_ratio(self) -> Optional[float]:
        """length / width, or None when width is zero."""
        if self.width <= 0:
            return None
        return self.length / self.width
