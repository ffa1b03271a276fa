"""
Footprint file loader for Massing Roofs Generator.

Reads a building footprint and its roof settings from a JSON document:

    {
        "name": "house",
        "points": [[0, 0], [10, 0], [10, 4], [0, 4]],
        "roof_type": "gabled",
        "wall_height": 3.0,
        "roof_pitch": 30,
        "roof_rotation": 0
    }

Only "points" is required. Points may carry a third (vertical)
coordinate, which is ignored. camelCase keys (wallHeight, roofPitch,
roofRotation, roofType) are accepted as well.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import json
import logging

from ..models.geometry import Footprint, FootprintError, Point2D

logger = logging.getLogger(__name__)


@dataclass
class FootprintSpec:
    """
    Footprint plus optional roof settings loaded from file.

    Settings left as None fall back to the CLI options or config defaults.

    Attributes:
        name: Building name (defaults to the file stem)
        points: Footprint vertices
        roof_type: Archetype tag
        wall_height: Eave elevation
        roof_pitch: Pitch in degrees
        roof_rotation: Ridge rotation in degrees
    """
    name: str
    points: List[Point2D]
    roof_type: Optional[str] = None
    wall_height: Optional[float] = None
    roof_pitch: Optional[float] = None
    roof_rotation: Optional[float] = None


_KEY_MAP = {
    'name': 'name',
    'points': 'points',
    'footprint': 'points',
    'roof_type': 'roof_type',
    'rooftype': 'roof_type',
    'wall_height': 'wall_height',
    'wallheight': 'wall_height',
    'roof_pitch': 'roof_pitch',
    'roofpitch': 'roof_pitch',
    'pitch': 'roof_pitch',
    'roof_rotation': 'roof_rotation',
    'roofrotation': 'roof_rotation',
    'rotation': 'roof_rotation',
}

_NUMERIC_FIELDS = ('wall_height', 'roof_pitch', 'roof_rotation')


def load_footprint_file(filepath: str) -> FootprintSpec:
    """
    Load a footprint JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        FootprintSpec instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        FootprintError: If the document is malformed or the footprint
            is degenerate
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Footprint file not found: {filepath}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise FootprintError(f"Invalid JSON in {filepath}: {e}") from e

    spec = parse_footprint_document(document, default_name=path.stem)
    logger.info(f"Loaded footprint '{spec.name}' with {len(spec.points)} vertices")
    return spec


def parse_footprint_document(document, default_name: str = "building") -> FootprintSpec:
    """
    Build a FootprintSpec from an already decoded JSON value.

    A bare list is read as the point list.

    Raises:
        FootprintError: If the document is malformed
    """
    if isinstance(document, list):
        document = {'points': document}
    if not isinstance(document, dict):
        raise FootprintError("Footprint document must be an object or a point list")

    values = {}
    for key, value in document.items():
        normalized = _KEY_MAP.get(str(key).lower())
        if normalized is not None:
            values[normalized] = value

    if 'points' not in values:
        raise FootprintError("Footprint document has no 'points'")

    raw_points = values['points']
    if not isinstance(raw_points, list):
        raise FootprintError("'points' must be a list of coordinate pairs")

    footprint = Footprint.from_points(raw_points)

    for name in _NUMERIC_FIELDS:
        if values.get(name) is None:
            continue
        if isinstance(values[name], bool):
            raise FootprintError(f"Invalid value for '{name}': {values[name]!r}")
        try:
            values[name] = float(values[name])
        except (TypeError, ValueError) as e:
            raise FootprintError(f"Invalid value for '{name}': {values[name]!r}") from e

    roof_type = values.get('roof_type')

    return FootprintSpec(
        name=str(values.get('name') or default_name),
        points=list(footprint.ring),
        roof_type=str(roof_type) if roof_type is not None else None,
        wall_height=values.get('wall_height'),
        roof_pitch=values.get('roof_pitch'),
        roof_rotation=values.get('roof_rotation'),
    )
