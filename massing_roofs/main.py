"""
Massing Roofs Generator - Main CLI

Generates a 3D massing model (walls + roof) from a footprint file.

Usage:
    python -m massing_roofs.main --footprint <file.json> [--roof-type <type>]

Example:
    python -m massing_roofs.main --footprint house.json --roof-type hipped --pitch 35
"""

import argparse
import json
import logging
import os
import sys
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
from pathlib import Path

from . import __version__
from .config import (
    PipelineConfig,
    DEFAULT_ROOF_TYPE,
    DEFAULT_WALL_HEIGHT,
    DEFAULT_ROOF_PITCH,
    DEFAULT_ROOF_ROTATION,
)
from .io.footprint_loader import load_footprint_file
from .io.obj_exporter import export_obj, validate_obj_file
from .generators.building_generator import generate_building, BuildingGeneratorResult
from .models.geometry import FootprintError
from .models.roof import RoofType, RoofParams


@dataclass
class PipelineReport:
    """Report from pipeline run."""
    name: str
    version: str
    success: bool
    requested_roof_type: Optional[str] = None
    actual_roof_type: Optional[str] = None
    stats: Dict[str, Any] = field(default_factory=dict)
    output_files: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    config_used: Dict[str, Any] = field(default_factory=dict)
    processing_time_ms: int = 0


@dataclass
class PipelineResult:
    """
    Complete result of pipeline execution.

    Supports two output modes:
    - 'file': Writes OBJ and report files to disk (CLI mode)
    - 'memory': Returns the generated building only

    Attributes:
        success: Whether pipeline completed without errors
        report: Statistics and metadata
        obj_path: Path to the OBJ file (file mode only)
        building: Generated building (None if generation failed)
    """
    success: bool
    report: PipelineReport
    obj_path: Optional[str] = None
    building: Optional[BuildingGeneratorResult] = None


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging to console and optionally to file.

    Args:
        verbose: If True, use DEBUG level; otherwise INFO
        log_file: Optional path to log file. If provided, logs will be written to file.
    """
    level = logging.DEBUG if verbose else logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def _output_stem(name: str, fallback: str) -> str:
    """Bare file name for outputs; directory parts in the footprint name are dropped."""
    stem = Path(name).name
    if stem in ('', '.', '..'):
        return fallback
    return stem


def _pick(*values):
    """First value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def run_pipeline(
    config: PipelineConfig,
    output_mode: str = "file"
) -> PipelineResult:
    """
    Run the complete generation pipeline for one footprint.

    Steps:
    1. Load the footprint file
    2. Resolve roof settings (CLI option > file value > default)
    3. Generate walls and roof
    4. Export OBJ (file mode)
    5. Write the JSON report (file mode)

    Args:
        config: Pipeline configuration
        output_mode: "file" to write outputs (default), "memory" to only
            return the generated building

    Returns:
        PipelineResult with report and, on success, the building
    """
    logger = logging.getLogger(__name__)

    start_time = time.time()
    name = Path(config.footprint_path).stem or "building"
    report = PipelineReport(name=name, version=__version__, success=False)

    # Step 1: Load footprint
    logger.info(f"Loading footprint from {config.footprint_path}")
    try:
        spec = load_footprint_file(config.footprint_path)
    except (FileNotFoundError, FootprintError) as e:
        report.errors.append(f"Failed to load footprint: {e}")
        return PipelineResult(success=False, report=report)

    report.name = spec.name
    stem = _output_stem(spec.name, name)

    # Step 2: Resolve settings
    requested_roof = _pick(config.roof_type, spec.roof_type, DEFAULT_ROOF_TYPE)
    report.requested_roof_type = requested_roof

    try:
        params = RoofParams(
            wall_height=_pick(config.wall_height, spec.wall_height, DEFAULT_WALL_HEIGHT),
            roof_pitch=_pick(config.roof_pitch, spec.roof_pitch, DEFAULT_ROOF_PITCH),
            roof_rotation=_pick(config.roof_rotation, spec.roof_rotation, DEFAULT_ROOF_ROTATION),
        )
    except ValueError as e:
        report.errors.append(f"Invalid roof parameters: {e}")
        return PipelineResult(success=False, report=report)

    roof_type = RoofType.from_tag(requested_roof)
    if roof_type.value != str(requested_roof).lower().strip().replace('_', '-'):
        report.warnings.append(
            f"Unknown roof type '{requested_roof}', using {roof_type.value}"
        )

    report.config_used = {
        'roof_type': roof_type.value,
        'wall_height': params.wall_height,
        'roof_pitch': params.roof_pitch,
        'roof_rotation': params.roof_rotation,
        'include_walls': config.include_walls,
        'export_groups': config.export_groups,
    }

    # Step 3: Generate geometry
    logger.info(
        f"Generating {roof_type.label} roof: wall_height={params.wall_height}, "
        f"pitch={params.roof_pitch}, rotation={params.roof_rotation}"
    )
    building = generate_building(
        spec.points,
        roof_type,
        params,
        include_walls=config.include_walls,
    )
    report.actual_roof_type = building.actual_roof_type.value
    report.stats = dict(building.stats)

    obj_path = None

    if output_mode == "file":
        os.makedirs(config.output_dir, exist_ok=True)

        # Step 4: Export OBJ
        obj_path = os.path.join(config.output_dir, f"{stem}.obj")
        try:
            export_obj(
                building.meshes(),
                obj_path,
                use_groups=config.export_groups,
                comment=f"{spec.name} - {roof_type.label} roof"
            )
            report.output_files.append(obj_path)

            obj_errors = validate_obj_file(obj_path)
            if obj_errors:
                report.warnings.extend([f"OBJ: {e}" for e in obj_errors])
        except OSError as e:
            report.errors.append(f"Failed to export OBJ: {e}")

    report.processing_time_ms = int((time.time() - start_time) * 1000)
    report.success = len(report.errors) == 0

    # Step 5: Save report
    if output_mode == "file":
        report_path = os.path.join(config.output_dir, f"{stem}_report.json")
        report.output_files.append(report_path)
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(asdict(report), f, indent=2)
        logger.info(f"Report saved to {report_path}")

    logger.info(f"Pipeline completed in {report.processing_time_ms}ms")

    return PipelineResult(
        success=report.success,
        report=report,
        obj_path=obj_path,
        building=building,
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description='Massing Roofs Generator - Generate 3D building massing with roofs'
    )

    parser.add_argument(
        '--footprint',
        required=True,
        help='Footprint JSON file (points + optional roof settings)'
    )

    parser.add_argument(
        '--roof-type',
        default=None,
        help='Roof archetype: ' + ', '.join(t.value for t in RoofType) +
             f' (default: from file, else {DEFAULT_ROOF_TYPE})'
    )

    parser.add_argument(
        '--wall-height',
        type=float,
        default=None,
        help=f'Eave elevation in meters (default: from file, else {DEFAULT_WALL_HEIGHT})'
    )

    parser.add_argument(
        '--pitch',
        type=float,
        default=None,
        help=f'Roof pitch in degrees (default: from file, else {DEFAULT_ROOF_PITCH})'
    )

    parser.add_argument(
        '--rotation',
        type=float,
        default=None,
        help=f'Ridge rotation in degrees (default: from file, else {DEFAULT_ROOF_ROTATION})'
    )

    parser.add_argument(
        '--output-dir',
        default='./output',
        help='Output directory for generated files (default: ./output)'
    )

    parser.add_argument(
        '--no-walls',
        action='store_true',
        help='Export the roof only'
    )

    parser.add_argument(
        '--groups',
        action='store_true',
        help='Write walls, roof and gables as separate OBJ groups'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--no-log-file',
        action='store_true',
        help='Disable log file output (only console)'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Create output directory early so we can put log file there
    os.makedirs(args.output_dir, exist_ok=True)

    log_file = None
    if not args.no_log_file:
        log_file = os.path.join(args.output_dir, f"{Path(args.footprint).stem}.log")

    setup_logging(args.verbose, log_file)

    try:
        config = PipelineConfig(
            footprint_path=args.footprint,
            output_dir=args.output_dir,
            roof_type=args.roof_type,
            wall_height=args.wall_height,
            roof_pitch=args.pitch,
            roof_rotation=args.rotation,
            include_walls=not args.no_walls,
            export_groups=args.groups,
            verbose=args.verbose,
        )
    except ValueError as e:
        print(f"Invalid option: {e}")
        return 1

    result = run_pipeline(config, output_mode="file")
    report = result.report

    if result.success:
        print(f"\nSuccess! Generated '{report.name}'")
        print(f"Roof: {report.actual_roof_type} (requested: {report.requested_roof_type})")
        print(f"Mesh: {report.stats.get('vertex_count')} vertices, "
              f"{report.stats.get('face_count')} faces")
        print(f"Roof top: {report.stats.get('roof_top_z', 0.0):.3f} m")
        for warning in report.warnings:
            print(f"Warning: {warning}")
        print(f"Output files: {', '.join(report.output_files)}")
        if log_file:
            print(f"Log file: {log_file}")
        return 0

    print(f"\nPipeline failed with errors:")
    for error in report.errors:
        print(f"  - {error}")
    if log_file:
        print(f"See log file for details: {log_file}")
    return 1


if __name__ == '__main__':
    sys.exit(main())
