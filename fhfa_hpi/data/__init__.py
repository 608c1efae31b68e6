"""Data processing module for FHFA HPI tables."""

from .geo_level import detect_geo_level, is_geo_level
from .parsing import ParsedRow, find_data_start, parse_row, build_dataset
from .schemas import export_schema, validate_export
from .export import iter_records, to_frame, save
from .loaders import data_url, fetch, read_grid, load, load_many

__all__ = [
    "detect_geo_level",
    "is_geo_level",
    "ParsedRow",
    "find_data_start",
    "parse_row",
    "build_dataset",
    "export_schema",
    "validate_export",
    "iter_records",
    "to_frame",
    "save",
    "data_url",
    "fetch",
    "read_grid",
    "load",
    "load_many"
]
