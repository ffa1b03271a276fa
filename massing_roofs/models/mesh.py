"""
Mesh data model for Massing Roofs Generator.

Provides MeshData for representing generated roof, gable and wall
geometry, and RoofMeshResult, the descriptor every roof builder returns.

Faces are triangles stored as 0-based vertex index triples, the layout
renderers consume directly. The OBJ exporter converts to 1-based indices
on write.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional
import math

from .geometry import Point3D


Vertex = Tuple[float, float, float]
Triangle = Tuple[int, int, int]


@dataclass
class MeshData:
    """
    Generated mesh data (positions + triangle indices).

    Attributes:
        vertices: List of (x, y, z) vertex positions
        faces: List of triangles as 0-based vertex index triples
        name: Optional label used for grouping in export

    Note on vertex sharing:
        Roof builders emit fresh vertices for every face they add, so
        flat-shaded normals can be derived per face from its winding.
        Counter-clockwise winding seen from outside = outward normal.
    """
    vertices: List[Vertex] = field(default_factory=list)
    faces: List[Triangle] = field(default_factory=list)
    name: Optional[str] = None

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.vertices)

    def triangle_count(self) -> int:
        """Get number of triangles."""
        return len(self.faces)

    def add_vertex(self, x: float, y: float, z: float) -> int:
        """
        Add a vertex and return its 0-based index.

        Args:
            x, y, z: Vertex coordinates

        Returns:
            0-based index of the new vertex
        """
        self.vertices.append((x, y, z))
        return len(self.vertices) - 1

    def add_point(self, p: Point3D) -> int:
        """Add a Point3D as a vertex and return its index."""
        return self.add_vertex(p.x, p.y, p.z)

    def add_triangle(self, v1: int, v2: int, v3: int) -> None:
        """
        Add a triangle face.

        Args:
            v1, v2, v3: Vertex indices (0-based, CCW for outward normal)
        """
        self.faces.append((v1, v2, v3))

    def add_quad(self, v1: int, v2: int, v3: int, v4: int) -> None:
        """
        Add a quad face (will be triangulated).

        Splits quad into two triangles: (v1, v2, v3) and (v1, v3, v4)

        Args:
            v1, v2, v3, v4: Vertex indices (0-based, CCW order)
        """
        self.faces.append((v1, v2, v3))
        self.faces.append((v1, v3, v4))

    def add_triangle_points(self, a: Point3D, b: Point3D, c: Point3D) -> None:
        """Append three new vertices and the triangle joining them."""
        i = self.add_point(a)
        self.add_point(b)
        self.add_point(c)
        self.add_triangle(i, i + 1, i + 2)

    def add_quad_points(
        self, a: Point3D, b: Point3D, c: Point3D, d: Point3D
    ) -> None:
        """Append four new vertices and the two triangles of quad abcd."""
        i = self.add_point(a)
        self.add_point(b)
        self.add_point(c)
        self.add_point(d)
        self.add_quad(i, i + 1, i + 2, i + 3)

    def flat_positions(self) -> List[float]:
        """Vertex positions flattened to [x0, y0, z0, x1, ...]."""
        return [c for v in self.vertices for c in v]

    def flat_indices(self) -> List[int]:
        """Triangle indices flattened to [a0, b0, c0, a1, ...]."""
        return [i for f in self.faces for i in f]

    def face_normals(self) -> List[Vertex]:
        """
        Unit normal of every face, derived from its winding.

        Degenerate (zero-area) faces yield (0, 0, 0).
        """
        normals = []
        for a, b, c in self.faces:
            ax, ay, az = self.vertices[a]
            bx, by, bz = self.vertices[b]
            cx, cy, cz = self.vertices[c]
            ux, uy, uz = bx - ax, by - ay, bz - az
            vx, vy, vz = cx - ax, cy - ay, cz - az
            nx = uy * vz - uz * vy
            ny = uz * vx - ux * vz
            nz = ux * vy - uy * vx
            length = math.sqrt(nx * nx + ny * ny + nz * nz)
            if length < 1e-12:
                normals.append((0.0, 0.0, 0.0))
            else:
                normals.append((nx / length, ny / length, nz / length))
        return normals

    def merge(self, other: 'MeshData') -> None:
        """
        Merge another mesh into this one.

        Vertices and faces are appended with indices adjusted.

        Args:
            other: MeshData to merge into this one
        """
        if not other.vertices:
            return

        vertex_offset = len(self.vertices)
        self.vertices.extend(other.vertices)

        for a, b, c in other.faces:
            self.faces.append((a + vertex_offset, b + vertex_offset, c + vertex_offset))

    def is_empty(self) -> bool:
        """Check if mesh has no geometry."""
        return len(self.vertices) == 0

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.vertices:
            errors.append("Mesh has no vertices")
            return errors

        max_idx = len(self.vertices) - 1

        for i, face in enumerate(self.faces):
            if len(face) != 3:
                errors.append(f"Face {i} is not a triangle")

            for idx in face:
                if idx < 0 or idx > max_idx:
                    errors.append(
                        f"Face {i} has invalid vertex index {idx} "
                        f"(valid range: 0-{max_idx})"
                    )

        return errors

    def compute_bounds(self) -> Optional[Tuple[Vertex, Vertex]]:
        """
        Compute bounding box of the mesh.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z)) or None if empty
        """
        if not self.vertices:
            return None

        xs = [v[0] for v in self.vertices]
        ys = [v[1] for v in self.vertices]
        zs = [v[2] for v in self.vertices]

        return (
            (min(xs), min(ys), min(zs)),
            (max(xs), max(ys), max(zs))
        )

    def __repr__(self) -> str:
        return f"MeshData(vertices={len(self.vertices)}, faces={len(self.faces)})"


@dataclass
class RoofMeshResult:
    """
    Output of a roof builder.

    Attributes:
        roof_mesh: Sloped (or flat) roof surface
        gable_mesh: Vertical end walls under the roof, for the archetypes
            that have them (pitched, gabled, half-hip); None otherwise
    """
    roof_mesh: MeshData
    gable_mesh: Optional[MeshData] = None

    def meshes(self) -> List[MeshData]:
        """Roof mesh followed by the gable mesh when present."""
        if self.gable_mesh is None:
            return [self.roof_mesh]
        return [self.roof_mesh, self.gable_mesh]


def merge_meshes(meshes: List[MeshData], name: Optional[str] = None) -> MeshData:
    """
    Merge multiple meshes into one.

    Args:
        meshes: List of MeshData to merge
        name: Label for the merged mesh

    Returns:
        Single merged MeshData
    """
    result = MeshData(name=name)

    for mesh in meshes:
        result.merge(mesh)

    return result
