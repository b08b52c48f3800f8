"""Resize task: validate, name, decode, resample and save one image."""

import time
from pathlib import Path

from loguru import logger

from ...common.errors import DecodeError, NotFound
from ...utils.media_types import MediaType, determine_media_type
from ...utils.profiling import elapsed_ms
from .algo.image_resize import image_resize
from .algo.output_namer import derive_output_path
from .schema import ResizeResult, SizeLabel, resolve


def resize(input_path: str | Path, label: str | SizeLabel) -> ResizeResult:
    """Resize ``input_path`` to the preset size ``label``.

    The result is written beside the input as ``<stem>_<label>.png``.

    Raises:
        InvalidSizeLabel: label is not small, medium or large
        NotFound: input_path does not exist
        UnsupportedExtension: input file name does not end in .png
        DecodeError: input cannot be read or is not a decodable image
        EncodeOrWriteError: the output could not be written
    """
    size = SizeLabel.parse(label)
    dimensions = resolve(size)
    logger.debug(f"Resolved size {size} to {dimensions.width}x{dimensions.height}")

    input_file = Path(input_path)
    try:
        _ = input_file.stat()
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        raise NotFound(input_path) from e
    except OSError as e:
        raise DecodeError(input_path, e.strerror or str(e)) from e

    output_path = derive_output_path(input_path, size)

    try:
        media_type, mime = determine_media_type(input_file)
    except OSError as e:
        raise DecodeError(input_path, str(e)) from e
    logger.debug(f"Detected {mime} for {input_path}")
    if media_type != MediaType.IMAGE:
        raise DecodeError(input_path, f"unsupported media type: {mime}")

    start_time = time.perf_counter()
    output = image_resize(
        input_path=input_file,
        output_path=output_path,
        width=dimensions.width,
        height=dimensions.height,
    )

    return ResizeResult(
        input_path=str(input_path),
        output_path=output,
        size=size,
        dimensions=dimensions,
        elapsed_ms=elapsed_ms(start_time),
    )
