"""Error taxonomy for cl_image_tools.

Core functions raise these; only the CLI entry point turns them into
messages and exit codes.
"""

from pathlib import Path
from typing_extensions import override


class ImageToolsError(Exception):
    """Base class for every failure reported to the user."""

    def __init__(self, message: str = "An unknown image tools error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class ArgumentCountError(ImageToolsError):
    """A command received the wrong number of positional arguments."""

    def __init__(self, command: str, expected: int, received: int):
        self.command: str = command
        self.expected: int = expected
        self.received: int = received
        super().__init__(
            f"invalid number of arguments for '{command}': "
            f"expected {expected}, got {received}"
        )


class InvalidSizeLabel(ImageToolsError):
    def __init__(self, label: str):
        self.label: str = label
        super().__init__(f"{label} is not a valid image size")


class NotFound(ImageToolsError):
    def __init__(self, path: str | Path):
        self.path: str = str(path)
        super().__init__(f"{self.path} file does not exist")


class UnsupportedExtension(ImageToolsError):
    def __init__(self, path: str | Path, extension: str):
        self.path: str = str(path)
        self.extension: str = extension
        super().__init__(f"{self.path} must be a non-empty file name ending in .{extension}")


class DecodeError(ImageToolsError):
    """The input could not be decoded as an image."""

    def __init__(self, path: str | Path, reason: str):
        self.path: str = str(path)
        super().__init__(f"failed to decode image {self.path}: {reason}")


class EncodeOrWriteError(ImageToolsError):
    """The resized image could not be encoded or written."""

    def __init__(self, path: str | Path, reason: str):
        self.path: str = str(path)
        super().__init__(f"failed to save image {self.path}: {reason}")


class MetadataUnavailable(ImageToolsError):
    """Filesystem metadata could not be read for an existing path."""

    def __init__(self, path: str | Path, reason: str):
        self.path: str = str(path)
        super().__init__(f"Error generating image stats for {self.path}: {reason}")
