"""
Configuration constants for Massing Roofs Generator.

Contains all tunable parameters for roof generation, including
archetype design constants, numeric tolerances, default values,
and export settings.
"""

from dataclasses import dataclass
from typing import Optional
import math


# =============================================================================
# ROOF DEFAULTS
# =============================================================================

# Archetype used when none is given (unknown tags also resolve to flat)
DEFAULT_ROOF_TYPE = "flat"

# Roof pitch (degrees) and ridge rotation (degrees)
DEFAULT_ROOF_PITCH = 30.0
DEFAULT_ROOF_ROTATION = 0.0

# Eave elevation (meters)
DEFAULT_WALL_HEIGHT = 3.0

# =============================================================================
# ARCHETYPE DESIGN CONSTANTS
# =============================================================================

# Pitched (shed) roof: single slope runs over twice the half-width
# that a ridged roof would use
PITCHED_SPAN_FACTOR = 2.0

# Hipped roof: below this length/width ratio the footprint is treated
# as nearly square and a pyramidal roof is built instead of a ridge
HIPPED_ASPECT_THRESHOLD = 1.3

# Half-hip (jerkinhead): fraction of roof height clipped off the gable
HALF_HIP_CLIP_RATIO = 0.3

# Mansard: steep lower section, gentle upper section
MANSARD_LOWER_PITCH = 70.0
MANSARD_UPPER_PITCH = 30.0

# Fraction of the lower section height where the slope breaks
MANSARD_BREAK_RATIO = 0.5

# How far break-level vertices move toward the centroid (0 = none, 1 = all)
MANSARD_INSET_RATIO = 0.15

# Fractions of the footprint width used as the span of each section
MANSARD_LOWER_SPAN_RATIO = 0.3
MANSARD_UPPER_SPAN_RATIO = 0.2

# =============================================================================
# NUMERIC TOLERANCES
# =============================================================================

# Below this |d2 - d1| the ridge crossing falls back to the edge midpoint
RIDGE_CROSSING_EPSILON = 1e-4

# Clamped ridge points closer than this are treated as one (hip end)
RIDGE_POINT_EPSILON = 1e-3

# Hipped ridge segments shorter than this collapse to a single point
RIDGE_SEGMENT_EPSILON = 1e-3

# Pitched roof: edges whose end elevations differ by less get no side wall
GABLE_HEIGHT_EPSILON = 1e-3

# =============================================================================
# EXPORT SETTINGS
# =============================================================================

# OBJ export precision (decimal places)
OBJ_VERTEX_PRECISION = 6

# Export roof, gable and wall meshes as separate 'g' groups
OBJ_EXPORT_GROUPS = False


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Runtime configuration for a CLI generation run.

    Values given here override the ones stored in the footprint file.
    None means "use the file value, else the module default".
    """

    footprint_path: str = ""
    output_dir: str = "./output"

    roof_type: Optional[str] = None
    wall_height: Optional[float] = None
    roof_pitch: Optional[float] = None
    roof_rotation: Optional[float] = None

    include_walls: bool = True
    export_groups: bool = OBJ_EXPORT_GROUPS

    verbose: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if self.wall_height is not None and self.wall_height < 0:
            raise ValueError("wall_height must be non-negative")

        if self.roof_pitch is not None and not (0.0 <= self.roof_pitch < 90.0):
            raise ValueError("roof_pitch must be in [0, 90) degrees")

        for name in ('wall_height', 'roof_pitch', 'roof_rotation'):
            value = getattr(self, name)
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite")
