"""Image file statistics plugin."""

from .schema import ImageStatsRecord
from .task import display, format_stats, gather_stats

__all__ = ["ImageStatsRecord", "display", "format_stats", "gather_stats"]
