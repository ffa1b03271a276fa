"""Tests for the pipeline runner and command line entry point."""

import json
import logging
import pytest

from massing_roofs import __version__
from massing_roofs.config import PipelineConfig
from massing_roofs.main import main, run_pipeline


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def house_file(tmp_path):
    path = tmp_path / "house.json"
    path.write_text(json.dumps({
        "points": [[0, 0], [10, 0], [10, 4], [0, 4]],
        "roof_type": "hipped",
        "wall_height": 3.0,
        "roof_pitch": 30,
    }))
    return str(path)


class TestRunPipeline:

    def test_memory_mode(self, house_file):
        result = run_pipeline(PipelineConfig(footprint_path=house_file), output_mode="memory")

        assert result.success
        assert result.obj_path is None
        assert result.report.name == "house"
        assert result.report.version == __version__
        assert result.report.actual_roof_type == "hipped"
        assert result.building.stats['wall_faces'] == 8

    def test_options_override_file(self, house_file):
        config = PipelineConfig(
            footprint_path=house_file,
            roof_type="gabled",
            wall_height=5.0,
            include_walls=False,
        )
        result = run_pipeline(config, output_mode="memory")

        assert result.report.actual_roof_type == "gabled"
        assert result.report.config_used['wall_height'] == 5.0
        assert result.report.config_used['roof_pitch'] == 30.0
        assert result.building.walls is None

    def test_unknown_roof_type_warns(self, house_file):
        config = PipelineConfig(footprint_path=house_file, roof_type="pagoda")
        result = run_pipeline(config, output_mode="memory")

        assert result.success
        assert result.report.actual_roof_type == "flat"
        assert any("pagoda" in w for w in result.report.warnings)

    def test_tag_spelling_does_not_warn(self, house_file):
        config = PipelineConfig(footprint_path=house_file, roof_type="HALF_HIP")
        result = run_pipeline(config, output_mode="memory")
        assert result.report.actual_roof_type == "half-hip"
        assert result.report.warnings == []

    def test_missing_file(self, tmp_path):
        config = PipelineConfig(footprint_path=str(tmp_path / "missing.json"))
        result = run_pipeline(config, output_mode="memory")

        assert not result.success
        assert result.building is None
        assert "Failed to load footprint" in result.report.errors[0]

    def test_invalid_parameters_from_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({
            "points": [[0, 0], [4, 0], [4, 4]],
            "wall_height": -2,
        }))
        result = run_pipeline(PipelineConfig(footprint_path=str(path)), output_mode="memory")

        assert not result.success
        assert "Invalid roof parameters" in result.report.errors[0]

    def test_pitch_from_file_out_of_range(self, tmp_path):
        path = tmp_path / "steep.json"
        path.write_text(json.dumps({
            "points": [[0, 0], [10, 0], [10, 4], [0, 4]],
            "roof_type": "gabled",
            "roof_pitch": 95,
        }))
        result = run_pipeline(PipelineConfig(footprint_path=str(path)), output_mode="memory")

        assert not result.success
        assert result.building is None
        assert "roof_pitch" in result.report.errors[0]

    def test_file_mode_writes_outputs(self, house_file, tmp_path):
        out = tmp_path / "out"
        config = PipelineConfig(footprint_path=house_file, output_dir=str(out), export_groups=True)
        result = run_pipeline(config)

        assert result.success
        assert (out / "house.obj").exists()
        report = json.loads((out / "house_report.json").read_text())
        assert report['success'] is True
        assert report['stats']['roof_type'] == "hipped"
        assert "g walls" in (out / "house.obj").read_text()

    @pytest.mark.parametrize("name,stem", [
        ("../../escape", "escape"),
        ("..", "house"),
    ])
    def test_outputs_stay_in_output_dir(self, tmp_path, name, stem):
        path = tmp_path / "house.json"
        path.write_text(json.dumps({
            "name": name,
            "points": [[0, 0], [4, 0], [4, 4], [0, 4]],
        }))
        out = tmp_path / "nested" / "out"
        result = run_pipeline(PipelineConfig(footprint_path=str(path), output_dir=str(out)))

        assert result.success
        assert result.obj_path == str(out / f"{stem}.obj")
        assert (out / f"{stem}.obj").exists()
        assert (out / f"{stem}_report.json").exists()
        assert not list(tmp_path.glob("*.obj"))


class TestPipelineConfig:

    @pytest.mark.parametrize("kwargs", [
        {"wall_height": -1.0},
        {"roof_pitch": 95.0},
        {"roof_pitch": -5.0},
        {"roof_rotation": float('nan')},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            PipelineConfig(footprint_path="x.json", **kwargs)


class TestMain:

    def test_success(self, house_file, tmp_path, capsys):
        out = tmp_path / "cli"
        code = main([
            "--footprint", house_file,
            "--roof-type", "mansard",
            "--pitch", "40",
            "--output-dir", str(out),
            "--groups",
            "--no-log-file",
        ])

        assert code == 0
        assert "Success" in capsys.readouterr().out
        report = json.loads((out / "house_report.json").read_text())
        assert report['actual_roof_type'] == "mansard"
        assert report['config_used']['roof_pitch'] == 40.0
        assert not (out / "house.log").exists()

    def test_log_file(self, house_file, tmp_path):
        out = tmp_path / "cli"
        assert main(["--footprint", house_file, "--output-dir", str(out)]) == 0
        assert (out / "house.log").exists()

    def test_bad_footprint(self, tmp_path, capsys):
        path = tmp_path / "line.json"
        path.write_text(json.dumps({"points": [[0, 0], [1, 1], [2, 2]]}))
        code = main(["--footprint", str(path), "--output-dir", str(tmp_path), "--no-log-file"])

        assert code == 1
        assert "Pipeline failed" in capsys.readouterr().out

    def test_invalid_option(self, house_file, tmp_path):
        code = main([
            "--footprint", house_file,
            "--pitch", "120",
            "--output-dir", str(tmp_path),
            "--no-log-file",
        ])
        assert code == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out
