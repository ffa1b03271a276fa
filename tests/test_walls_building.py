"""Tests for wall extrusion and the building orchestrator."""

import pytest

from massing_roofs.generators.building_generator import generate_building
from massing_roofs.generators.walls import generate_walls
from massing_roofs.models.geometry import FootprintError
from massing_roofs.models.roof import RoofParams, RoofType
from massing_roofs.processing.footprint import calculate_roof_height


def _face_centers(mesh):
    centers = []
    for face in mesh.faces:
        pts = [mesh.vertices[i] for i in face]
        centers.append(tuple(sum(c) / 3.0 for c in zip(*pts)))
    return centers


class TestWalls:

    @pytest.mark.parametrize("fixture", ["square", "square_cw"])
    def test_square_walls(self, request, fixture):
        mesh = generate_walls(request.getfixturevalue(fixture), 3.0)
        assert mesh.name == "walls"
        assert mesh.triangle_count() == 8
        assert mesh.compute_bounds() == ((0.0, 0.0, 0.0), (4.0, 4.0, 3.0))

    @pytest.mark.parametrize("fixture", ["square", "square_cw"])
    def test_normals_face_outward(self, request, fixture):
        mesh = generate_walls(request.getfixturevalue(fixture), 3.0)
        for normal, center in zip(mesh.face_normals(), _face_centers(mesh)):
            outward = (center[0] - 2.0) * normal[0] + (center[1] - 2.0) * normal[1]
            assert outward > 0
            assert normal[2] == pytest.approx(0.0)

    def test_base_offset(self, square):
        mesh = generate_walls(square, 5.0, base_z=2.0)
        zs = {v[2] for v in mesh.vertices}
        assert zs == {2.0, 5.0}

    @pytest.mark.parametrize("height", [0.0, -1.0])
    def test_no_height_gives_empty_mesh(self, square, height):
        mesh = generate_walls(square, height)
        assert mesh.is_empty()

    def test_concave_footprint(self, l_shape):
        mesh = generate_walls(l_shape, 3.0)
        assert mesh.triangle_count() == 12
        assert mesh.validate() == []


class TestGenerateBuilding:

    def test_gabled_square(self, square, params):
        result = generate_building(square, "gabled", params)
        stats = result.stats

        assert result.actual_roof_type == RoofType.GABLED
        assert stats['wall_faces'] == 8
        assert stats['roof_faces'] == 4
        assert stats['gable_faces'] == 2
        assert stats['face_count'] == 14
        assert stats['roof_type'] == "gabled"
        assert stats['footprint_vertices'] == 4
        assert stats['roof_top_z'] == pytest.approx(3.0 + calculate_roof_height(4.0, 30.0))

    def test_mesh_order(self, square, params):
        result = generate_building(square, RoofType.GABLED, params)
        assert [m.name for m in result.meshes()] == ["walls", "roof", "gable"]

    def test_without_walls(self, rectangle, params):
        result = generate_building(rectangle, "hipped", params, include_walls=False)
        assert result.walls is None
        assert result.stats['wall_faces'] == 0
        assert [m.name for m in result.meshes()] == ["roof"]

    def test_merged_counts(self, rectangle, params):
        result = generate_building(rectangle, "mansard", params)
        merged = result.merged()

        assert merged.name == "building"
        assert merged.vertex_count() == result.stats['vertex_count']
        assert merged.triangle_count() == result.stats['face_count']
        assert merged.validate() == []

    def test_unknown_type_falls_back_to_flat(self, square):
        result = generate_building(square, "onion-dome")
        assert result.actual_roof_type == RoofType.FLAT
        assert result.stats['roof_top_z'] == RoofParams().wall_height

    def test_zero_wall_height_skips_walls(self, square):
        result = generate_building(square, "tented", RoofParams(wall_height=0.0))
        assert [m.name for m in result.meshes()] == ["roof"]

    def test_degenerate_footprint(self):
        with pytest.raises(FootprintError):
            generate_building([(0, 0), (1, 0), (2, 0)], "gabled")
