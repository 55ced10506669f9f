"""I/O modules for reading AIS logs and writing navigation fixes."""
from .reader import LogFormat, validate_paths, aggregate_lines
from .writer import write_fixes, generate_vessel_catalog

__all__ = [
    "LogFormat",
    "validate_paths",
    "aggregate_lines",
    "write_fixes",
    "generate_vessel_catalog",
]
