"""
Data models for Massing Roofs Generator.
"""

from .geometry import Point2D, Point3D, PointLike, BBox, Footprint, FootprintError
from .roof import RoofType, RoofParams, PolygonAnalysis, RidgeAxis
from .mesh import MeshData, RoofMeshResult, merge_meshes

__all__ = [
    'Point2D', 'Point3D', 'PointLike', 'BBox', 'Footprint', 'FootprintError',
    'RoofType', 'RoofParams', 'PolygonAnalysis', 'RidgeAxis',
    'MeshData', 'RoofMeshResult', 'merge_meshes',
]
