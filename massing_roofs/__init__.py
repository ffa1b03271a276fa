"""
Massing Roofs Generator

Turns a building footprint (a simple polygon in plan) plus wall height,
roof pitch and ridge rotation into a triangulated 3D roof for seven
archetypes: flat, pitched, tented, hipped, gabled, half-hip and mansard.

Can be used as:
- Library: create_roof_geometry(roof_type, points, RoofParams(...))
- CLI tool: python -m massing_roofs.main --footprint house.json
"""

__version__ = "0.1.0"
__author__ = "Massing Roofs Team"

from .models.geometry import Point2D, Point3D, Footprint, FootprintError
from .models.mesh import MeshData, RoofMeshResult
from .models.roof import RoofType, RoofParams, PolygonAnalysis
from .processing.footprint import analyze_polygon, calculate_roof_height
from .generators.roof_factory import create_roof_geometry
from .generators.building_generator import generate_building

__all__ = [
    '__version__',
    'Point2D',
    'Point3D',
    'Footprint',
    'FootprintError',
    'MeshData',
    'RoofMeshResult',
    'RoofType',
    'RoofParams',
    'PolygonAnalysis',
    'analyze_polygon',
    'calculate_roof_height',
    'create_roof_geometry',
    'generate_building',
]
