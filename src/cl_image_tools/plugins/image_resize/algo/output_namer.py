"""Output file naming for resized images."""

from pathlib import Path

from loguru import logger

from ....common.errors import UnsupportedExtension
from ....common.settings import settings
from ..schema import SizeLabel


def derive_output_path(input_path: str | Path, label: SizeLabel) -> str:
    """
    Build the output path for a resized image.

    ``photos/cat.png`` with ``small`` becomes ``photos/cat_small.png``; a
    bare ``cat.png`` becomes ``cat_small.png``. Only the fixed output
    extension is recognised on input.

    Raises:
        UnsupportedExtension: If the file name does not end in ``.png`` or
            has nothing before the extension
    """
    path = Path(input_path)
    suffix = f".{settings.output_extension}"

    # Path.suffix treats ".png" as a dotfile with no suffix, so check the name
    if not path.name.endswith(suffix) or len(path.name) == len(suffix):
        raise UnsupportedExtension(input_path, settings.output_extension)

    stem = path.name[: -len(suffix)]
    output = path.with_name(f"{stem}_{label}{suffix}")
    logger.debug(f"Derived output path {output} from {input_path}")
    return str(output)
