"""Reader for AIS navigation logs exported by PAMGuard."""
from .config import PipelineConfig, load_config
from .exceptions import DataQualityFault, FormatError
from .pipeline import NavLogPipeline, read_ais
from .schema import NavigationFix, empty_fixes_frame, split_by_vessel, to_fixes

__version__ = "1.0.0"

__all__ = [
    "PipelineConfig",
    "load_config",
    "DataQualityFault",
    "FormatError",
    "NavLogPipeline",
    "read_ais",
    "NavigationFix",
    "empty_fixes_frame",
    "split_by_vessel",
    "to_fixes",
]
