"""
Input/Output modules for Massing Roofs Generator.
"""

from .footprint_loader import (
    FootprintSpec,
    load_footprint_file,
    parse_footprint_document,
)
from .obj_exporter import (
    ExportStats,
    export_obj,
    export_roof_result,
    write_obj_string,
    validate_obj_file,
)

__all__ = [
    # Footprint input
    'FootprintSpec',
    'load_footprint_file',
    'parse_footprint_document',
    # OBJ export
    'ExportStats',
    'export_obj',
    'export_roof_result',
    'write_obj_string',
    'validate_obj_file',
]
