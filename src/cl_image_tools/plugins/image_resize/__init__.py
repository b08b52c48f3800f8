"""Image resize plugin."""

from .schema import Dimensions, ResizeResult, SizeLabel, resolve
from .task import resize

__all__ = ["Dimensions", "ResizeResult", "SizeLabel", "resize", "resolve"]
