"""
OBJ mesh exporter for Massing Roofs Generator.

Exports MeshData to Wavefront OBJ format:
- Z up, footprint in the XY plane
- 1-based face indices (MeshData is 0-based)
- Optional 'g' groups named after each mesh (walls, roof, gable)
"""

import os
from typing import List, Optional, Tuple
from dataclasses import dataclass
import logging

from ..models.mesh import MeshData, RoofMeshResult
from ..config import OBJ_VERTEX_PRECISION, OBJ_EXPORT_GROUPS

logger = logging.getLogger(__name__)


@dataclass
class ExportStats:
    """Statistics from OBJ export."""
    total_vertices: int = 0
    total_faces: int = 0
    total_groups: int = 0
    file_size_bytes: int = 0


def write_obj_string(
    meshes: List[MeshData],
    use_groups: bool = OBJ_EXPORT_GROUPS,
    comment: Optional[str] = None
) -> str:
    """
    Format meshes as OBJ text.

    Args:
        meshes: MeshData objects to write, in order
        use_groups: If True, start a 'g' group per named mesh
        comment: Optional comment line for the header

    Returns:
        OBJ file contents
    """
    text, _ = _format_obj(meshes, use_groups, comment)
    return text


def export_obj(
    meshes: List[MeshData],
    filepath: str,
    use_groups: bool = OBJ_EXPORT_GROUPS,
    comment: Optional[str] = None
) -> ExportStats:
    """
    Export multiple meshes to a single OBJ file.

    Empty meshes are skipped.

    Args:
        meshes: List of MeshData objects to export
        filepath: Output file path (.obj)
        use_groups: If True, create 'g' groups per mesh name
        comment: Optional comment to include in file header

    Returns:
        ExportStats with export statistics
    """
    text, stats = _format_obj(meshes, use_groups, comment)

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(text)

    stats.file_size_bytes = os.path.getsize(filepath)

    logger.info(
        f"Exported OBJ: {stats.total_vertices} vertices, "
        f"{stats.total_faces} faces, {stats.total_groups} groups -> {filepath}"
    )

    return stats


def export_roof_result(
    result: RoofMeshResult,
    filepath: str,
    comment: Optional[str] = None
) -> ExportStats:
    """
    Export a roof builder result with roof and gable as separate groups.

    Args:
        result: RoofMeshResult from any roof builder
        filepath: Output file path (.obj)
        comment: Optional header comment

    Returns:
        ExportStats
    """
    return export_obj(result.meshes(), filepath, use_groups=True, comment=comment)


def _format_obj(
    meshes: List[MeshData],
    use_groups: bool,
    comment: Optional[str]
) -> Tuple[str, ExportStats]:
    stats = ExportStats()
    body: List[str] = []
    vertex_offset = 0
    precision = OBJ_VERTEX_PRECISION

    for index, mesh in enumerate(meshes):
        if not mesh.vertices or not mesh.faces:
            continue

        if use_groups:
            body.append(f"\ng {mesh.name or f'mesh_{index}'}")
            stats.total_groups += 1

        for x, y, z in mesh.vertices:
            body.append(f"v {x:.{precision}f} {y:.{precision}f} {z:.{precision}f}")

        # OBJ indices are 1-based and global across the file
        for a, b, c in mesh.faces:
            body.append(
                f"f {a + vertex_offset + 1} {b + vertex_offset + 1} "
                f"{c + vertex_offset + 1}"
            )

        vertex_offset += len(mesh.vertices)
        stats.total_vertices += len(mesh.vertices)
        stats.total_faces += len(mesh.faces)

    header = [
        "# Massing Roofs Generator OBJ Export",
        f"# Vertices: {stats.total_vertices}",
        f"# Faces: {stats.total_faces}",
    ]
    if comment:
        header.append(f"# {comment}")

    return "\n".join(header + body) + "\n", stats


def validate_obj_file(filepath: str) -> List[str]:
    """
    Validate an OBJ file for common issues.

    Args:
        filepath: Path to OBJ file

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if not os.path.exists(filepath):
        errors.append(f"File does not exist: {filepath}")
        return errors

    vertex_count = 0
    face_count = 0
    max_vertex_ref = 0

    with open(filepath, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, 1):
            parts = line.split()

            if not parts or parts[0].startswith('#'):
                continue

            if parts[0] == 'v':
                vertex_count += 1
                if len(parts) < 4:
                    errors.append(f"Line {line_num}: Vertex has < 3 coordinates")

            elif parts[0] == 'f':
                face_count += 1
                if len(parts) < 4:
                    errors.append(f"Line {line_num}: Face has < 3 vertices")

                for part in parts[1:]:
                    idx_str = part.split('/')[0]
                    try:
                        idx = int(idx_str)
                    except ValueError:
                        errors.append(
                            f"Line {line_num}: Invalid vertex index '{idx_str}'"
                        )
                        continue

                    if idx == 0:
                        errors.append(f"Line {line_num}: Vertex index 0 is invalid")
                    max_vertex_ref = max(max_vertex_ref, idx)

    if max_vertex_ref > vertex_count:
        errors.append(
            f"Face references vertex {max_vertex_ref} but only {vertex_count} vertices exist"
        )

    if vertex_count == 0:
        errors.append("File contains no vertices")

    if face_count == 0:
        errors.append("File contains no faces")

    return errors
