"""Tests for Wavefront OBJ export."""

from massing_roofs.generators.roof_gabled import generate_gabled_roof
from massing_roofs.io.obj_exporter import (
    export_obj,
    export_roof_result,
    validate_obj_file,
    write_obj_string,
)
from massing_roofs.models.mesh import MeshData


def _lines(text, prefix):
    return [line for line in text.splitlines() if line.startswith(prefix)]


class TestWriteObjString:

    def test_header_counts(self, square, params):
        result = generate_gabled_roof(square, params)
        text = write_obj_string(result.meshes())
        lines = text.splitlines()

        assert lines[0] == "# Massing Roofs Generator OBJ Export"
        assert lines[1] == "# Vertices: 14"
        assert lines[2] == "# Faces: 6"

    def test_face_indices_are_one_based_and_global(self, square, params):
        result = generate_gabled_roof(square, params)
        text = write_obj_string(result.meshes())
        faces = [tuple(int(i) for i in line.split()[1:]) for line in _lines(text, "f ")]

        assert faces[0] == (1, 2, 3)
        # First gable triangle follows the 8 roof vertices
        assert faces[4] == (9, 10, 11)
        assert max(max(f) for f in faces) == len(_lines(text, "v "))
        assert min(min(f) for f in faces) == 1

    def test_groups(self, square, params):
        result = generate_gabled_roof(square, params)
        text = write_obj_string(result.meshes(), use_groups=True)
        assert _lines(text, "g ") == ["g roof", "g gable"]

    def test_no_groups(self, square, params):
        result = generate_gabled_roof(square, params)
        assert _lines(write_obj_string(result.meshes(), use_groups=False), "g ") == []

    def test_unnamed_mesh_group(self):
        mesh = MeshData()
        mesh.add_vertex(0.0, 0.0, 0.0)
        mesh.add_vertex(1.0, 0.0, 0.0)
        mesh.add_vertex(0.0, 1.0, 0.0)
        mesh.add_triangle(0, 1, 2)
        text = write_obj_string([MeshData(name="empty"), mesh], use_groups=True)
        assert _lines(text, "g ") == ["g mesh_1"]

    def test_vertex_precision(self):
        mesh = MeshData()
        mesh.add_vertex(1.0 / 3.0, 0.0, 2.0)
        mesh.add_vertex(1.0, 0.0, 2.0)
        mesh.add_vertex(0.0, 1.0, 2.0)
        mesh.add_triangle(0, 1, 2)
        text = write_obj_string([mesh])
        assert _lines(text, "v ")[0] == "v 0.333333 0.000000 2.000000"

    def test_comment(self, square, params):
        result = generate_gabled_roof(square, params)
        text = write_obj_string(result.meshes(), comment="test house")
        assert "# test house" in text.splitlines()


class TestExportObj:

    def test_export_and_validate(self, tmp_path, rectangle, params):
        result = generate_gabled_roof(rectangle, params)
        path = str(tmp_path / "out" / "roof.obj")

        stats = export_obj(result.meshes(), path, use_groups=True)

        assert stats.total_vertices == result.roof_mesh.vertex_count() + result.gable_mesh.vertex_count()
        assert stats.total_faces == result.roof_mesh.triangle_count() + result.gable_mesh.triangle_count()
        assert stats.total_groups == 2
        assert stats.file_size_bytes > 0
        assert validate_obj_file(path) == []

    def test_export_roof_result_uses_groups(self, tmp_path, square, params):
        path = tmp_path / "roof.obj"
        stats = export_roof_result(generate_gabled_roof(square, params), str(path))
        assert stats.total_groups == 2
        assert "g gable" in path.read_text()


class TestValidateObjFile:

    def test_missing_file(self, tmp_path):
        errors = validate_obj_file(str(tmp_path / "missing.obj"))
        assert len(errors) == 1
        assert "does not exist" in errors[0]

    def test_bad_references(self, tmp_path):
        path = tmp_path / "bad.obj"
        path.write_text("v 0 0 0\nv 1 0 0\nf 1 2 5\nf 0 1 2\n")
        errors = validate_obj_file(str(path))
        assert any("Vertex index 0" in e for e in errors)
        assert any("references vertex 5" in e for e in errors)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.obj"
        path.write_text("# nothing\n")
        errors = validate_obj_file(str(path))
        assert "File contains no vertices" in errors
        assert "File contains no faces" in errors
