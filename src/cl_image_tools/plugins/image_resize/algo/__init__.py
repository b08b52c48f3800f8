"""Image resize algorithms."""

from .image_resize import image_resize
from .output_namer import derive_output_path

__all__ = ["derive_output_path", "image_resize"]
