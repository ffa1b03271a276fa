"""
Utility functions for Massing Roofs Generator.
"""

from .math_utils import (
    clamp,
    normalize_angle,
    inverse_lerp,
)
from .polygon_utils import (
    polygon_signed_area,
    polygon_area,
    polygon_area_centroid,
    is_clockwise,
    ensure_ccw,
)

__all__ = [
    'clamp',
    'normalize_angle',
    'inverse_lerp',
    'polygon_signed_area',
    'polygon_area',
    'polygon_area_centroid',
    'is_clockwise',
    'ensure_ccw',
]
