"""cl_image_tools - Image file statistics and preset-size resizing."""

from .common.errors import (
    ArgumentCountError,
    DecodeError,
    EncodeOrWriteError,
    ImageToolsError,
    InvalidSizeLabel,
    MetadataUnavailable,
    NotFound,
    UnsupportedExtension,
)
from .plugins.image_resize import Dimensions, ResizeResult, SizeLabel, resize, resolve
from .plugins.image_resize.algo import derive_output_path
from .plugins.image_stats import ImageStatsRecord, display, format_stats, gather_stats

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "DecodeError",
    "Dimensions",
    "EncodeOrWriteError",
    "ImageStatsRecord",
    "ImageToolsError",
    "InvalidSizeLabel",
    "MetadataUnavailable",
    "NotFound",
    "ResizeResult",
    "SizeLabel",
    "UnsupportedExtension",
    "__version__",
    "derive_output_path",
    "display",
    "format_stats",
    "gather_stats",
    "resize",
    "resolve",
]
