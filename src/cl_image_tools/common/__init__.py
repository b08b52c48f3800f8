"""Shared building blocks: error taxonomy and implementation settings."""

from .errors import (
    ArgumentCountError,
    DecodeError,
    EncodeOrWriteError,
    ImageToolsError,
    InvalidSizeLabel,
    MetadataUnavailable,
    NotFound,
    UnsupportedExtension,
)
from .settings import Settings, settings

__all__ = [
    "ArgumentCountError",
    "DecodeError",
    "EncodeOrWriteError",
    "ImageToolsError",
    "InvalidSizeLabel",
    "MetadataUnavailable",
    "NotFound",
    "Settings",
    "UnsupportedExtension",
    "settings",
]
