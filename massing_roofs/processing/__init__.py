"""
Processing modules for Massing Roofs Generator.

Contains footprint analysis (centroid, ridge axis, spans, roof height)
and the ridge line helpers shared by the ridged roof builders.
"""

from .footprint import (
    analyze_polygon,
    calculate_roof_height,
    get_ridge_line,
    footprint_ring,
    vertex_centroid,
)
from .ridge import (
    RidgeSide,
    project_to_ridge_line,
    project_to_ridge_segment,
    get_ridge_side,
    signed_ridge_distance,
    ridge_crossing_parameter,
    find_ridge_crossing,
)

__all__ = [
    'analyze_polygon',
    'calculate_roof_height',
    'get_ridge_line',
    'footprint_ring',
    'vertex_centroid',
    'RidgeSide',
    'project_to_ridge_line',
    'project_to_ridge_segment',
    'get_ridge_side',
    'signed_ridge_distance',
    'ridge_crossing_parameter',
    'find_ridge_crossing',
]
