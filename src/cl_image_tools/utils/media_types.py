from enum import StrEnum
from pathlib import Path

import magic


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str) -> "MediaType":
        if file_type.startswith("image"):
            return MediaType.IMAGE
        elif file_type.startswith("video"):
            return MediaType.VIDEO
        elif file_type.startswith("audio"):
            return MediaType.AUDIO
        elif file_type.startswith("text"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


# libmagic only needs the leading bytes to identify image containers
SNIFF_BYTES = 8192


def determine_mime(data: bytes) -> str:
    mime = magic.Magic(mime=True)
    file_type = mime.from_buffer(data)
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


def determine_media_type(path: str | Path) -> tuple[MediaType, str]:
    """Sniff a file's content and return its media type and MIME string."""
    with open(path, "rb") as f:
        head = f.read(SNIFF_BYTES)
    file_type = determine_mime(head)
    return MediaType.from_mime(file_type), file_type
