"""Test configuration and fixtures for cl_image_tools.

This module provides:
- Function-scoped fixtures that build sample images with Pillow in tmp_path
- A loguru reset so handlers added by the CLI do not outlive a test
"""

from pathlib import Path

import pytest
from loguru import logger
from PIL import Image, ImageDraw


def _draw_sample(width: int, height: int) -> Image.Image:
    img = Image.new("RGB", (width, height), color=(73, 109, 137))
    draw = ImageDraw.Draw(img)

    for i in range(0, width, 50):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=2)
    for i in range(0, height, 50):
        draw.line([(0, i), (width, i)], fill=(255, 255, 255), width=2)

    draw.ellipse(
        [width // 3, height // 3, 2 * width // 3, 2 * height // 3],
        fill=(200, 100, 100),
    )
    return img


# ============================================================================
# Logging
# ============================================================================


@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any sinks a test installed (they may point at captured streams)."""
    yield
    logger.remove()


# ============================================================================
# Sample Media Fixtures
# ============================================================================


@pytest.fixture
def png_image(tmp_path: Path) -> Path:
    """640x480 RGB PNG."""
    output_path = tmp_path / "photo.png"
    _draw_sample(640, 480).save(output_path, "PNG")
    return output_path


@pytest.fixture
def rgba_png_image(tmp_path: Path) -> Path:
    """300x300 PNG with an alpha channel."""
    output_path = tmp_path / "overlay.png"
    img = _draw_sample(300, 300).convert("RGBA")
    img.putalpha(128)
    img.save(output_path, "PNG")
    return output_path


@pytest.fixture
def palette_png_image(tmp_path: Path) -> Path:
    """64x16 two-colour palette PNG of 1px black and white stripes."""
    output_path = tmp_path / "stripes.png"
    img = Image.new("P", (64, 16), 0)
    img.putpalette([0, 0, 0, 255, 255, 255])
    draw = ImageDraw.Draw(img)
    for x in range(0, 64, 2):
        draw.line([(x, 0), (x, 15)], fill=1)
    img.save(output_path, "PNG")
    return output_path


@pytest.fixture
def jpeg_image(tmp_path: Path) -> Path:
    """800x600 JPEG with a .jpg name."""
    output_path = tmp_path / "synthetic.jpg"
    _draw_sample(800, 600).save(output_path, "JPEG", quality=85)
    return output_path


@pytest.fixture
def jpeg_named_png(tmp_path: Path) -> Path:
    """JPEG data stored under a .png name."""
    output_path = tmp_path / "mislabelled.png"
    _draw_sample(320, 240).save(output_path, "JPEG", quality=85)
    return output_path


@pytest.fixture
def text_named_png(tmp_path: Path) -> Path:
    output_path = tmp_path / "notes.png"
    _ = output_path.write_text("this is not an image\n", encoding="utf-8")
    return output_path


@pytest.fixture
def truncated_png(tmp_path: Path, png_image: Path) -> Path:
    """A PNG cut off after its header chunks."""
    output_path = tmp_path / "truncated.png"
    _ = output_path.write_bytes(png_image.read_bytes()[:200])
    return output_path
