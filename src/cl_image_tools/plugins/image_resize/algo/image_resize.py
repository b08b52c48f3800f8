"""Pure image resize computation logic (single file)."""

from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ....common.errors import DecodeError, EncodeOrWriteError
from ....common.settings import settings
from ....utils.profiling import timed

# Pillow falls back to NEAREST for these modes whatever filter is requested
_FILTER_MODES = {"1": "L", "P": "RGB", "PA": "RGBA"}


def _filterable(img: Image.Image) -> Image.Image:
    target = _FILTER_MODES.get(img.mode)
    if target is None:
        return img
    if img.mode == "P" and "transparency" in img.info:
        target = "RGBA"
    return img.convert(target)


@timed
def image_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: int,
    height: int,
) -> str:
    """
    Resize a single image to an exact size and write it as PNG.

    Framework-agnostic, single-responsibility function. The aspect ratio is
    not preserved.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        width: Target width
        height: Target height

    Returns:
        Output file path as string

    Raises:
        DecodeError: If Pillow cannot identify or load the input
        EncodeOrWriteError: If Pillow fails to encode or write the output
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    try:
        with Image.open(input_path) as img:
            img.load()
            logger.debug(f"Decoded {input_path} ({img.format}, {img.mode}, {img.size})")
            resized = _filterable(img).resize((width, height), settings.resample)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(input_path, str(e)) from e

    # PNG has no CMYK mode
    if resized.mode == "CMYK":
        resized = resized.convert("RGB")

    try:
        resized.save(output_path, format=settings.output_format)
    except (OSError, ValueError) as e:
        raise EncodeOrWriteError(output_path, str(e)) from e

    return str(output_path)
