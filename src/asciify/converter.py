import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciify.background import replace_background
from asciify.charsets import ASCII_RAMP
from asciify.loader import load_image
from asciify.renderer import OUTPUT_DIR, output_path_for, render_lines, save_png
from asciify.resize import resize_to_fit

log = logging.getLogger(__name__)

# Glyph cells are about twice as tall as wide, so only every other row is kept
ROW_STEP = 2


def brightness_grid(image: Image.Image) -> np.ndarray:
    """Per-pixel brightness (0-255) of every ROW_STEP-th row.

    Channels are widened to 16 bits before averaging and narrowed afterwards,
    so the result can sit one step above a plain 8-bit mean.
    """
    arr = np.asarray(image.convert("RGB"), dtype=np.uint32)[::ROW_STEP]
    wide = arr * 0x101
    return (wide.sum(axis=2) // 3) >> 8


def ramp_index(brightness):
    """Ramp position for a brightness value or array of values (0-255)."""
    return (np.asarray(brightness) / 255.0 * (len(ASCII_RAMP) - 1)).astype(np.intp)


def char_for_brightness(brightness: int) -> str:
    return ASCII_RAMP[int(ramp_index(brightness))]


def image_to_lines(image: Image.Image) -> list[str]:
    """Map each sampled pixel to a ramp character, one string per sampled row."""
    gray = brightness_grid(image)
    indices = ramp_index(gray)
    char_arr = np.array(list(ASCII_RAMP))
    lines = ["".join(row) for row in char_arr[indices]]
    log.debug("Mapped %dx%d image to %d lines", image.width, image.height, len(lines))
    return lines


def _prepare(image: Image.Image) -> Image.Image:
    return resize_to_fit(replace_background(image))


def image_to_ascii(image: Image.Image | str | Path) -> str:
    """Run the preprocessing pipeline and return the character grid as text."""
    if not isinstance(image, Image.Image):
        image = load_image(image)
    return "\n".join(image_to_lines(_prepare(image)))


def convert_image(path: str | Path, output_dir: str | Path = OUTPUT_DIR) -> Path:
    """Convert the image at path to rendered ASCII art and return the PNG path written."""
    path = Path(path)
    image = load_image(path)
    lines = image_to_lines(_prepare(image))
    canvas = render_lines(lines)
    return save_png(canvas, output_path_for(path, output_dir))
