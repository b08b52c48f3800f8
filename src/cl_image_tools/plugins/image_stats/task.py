"""Gather and display filesystem statistics for an image file."""

import os
from pathlib import Path

from loguru import logger

from ...common.errors import MetadataUnavailable, NotFound
from ...utils.timestamp import formatUTC, fromStatTime
from .schema import ImageStatsRecord

RULE = "=" * 96


def _created_time(stat: os.stat_result) -> float:
    # st_birthtime is missing on most Linux builds; st_ctime is the closest
    # available value there (inode change time).
    birthtime: float | None = getattr(stat, "st_birthtime", None)
    if birthtime is None:
        return stat.st_ctime
    return birthtime


def gather_stats(path: str | Path) -> ImageStatsRecord:
    """Read size and timestamps for ``path`` from filesystem metadata.

    Raises:
        NotFound: path does not exist
        MetadataUnavailable: metadata could not be read (permissions, I/O errors)
    """
    file_path = Path(path)
    try:
        stat = file_path.stat()
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        raise NotFound(path) from e
    except OSError as e:
        raise MetadataUnavailable(path, e.strerror or str(e)) from e

    logger.debug(f"stat({path}): size={stat.st_size} mtime={stat.st_mtime}")
    return ImageStatsRecord.from_values(
        name=str(path),
        size_bytes=stat.st_size,
        created_at=fromStatTime(_created_time(stat)),
        modified_at=fromStatTime(stat.st_mtime),
    )


def format_stats(record: ImageStatsRecord) -> str:
    lines = [
        "",
        RULE,
        "Image Stats",
        RULE,
        f"Image: {record.name}, Size: {record.size_bytes} bytes",
        f"Created: {formatUTC(record.created_at)}",
        f"Modified: {formatUTC(record.modified_at)}",
    ]
    return "\n".join(lines)


def display(record: ImageStatsRecord) -> None:
    print(format_stats(record))
