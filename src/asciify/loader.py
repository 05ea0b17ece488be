import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciify.errors import DecodeError

log = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("PNG", "JPEG", "GIF")

# Pillow keeps 16-bit grayscale PNGs in these modes
_WIDE_MODES = {"I", "I;16", "I;16B", "I;16L"}


def _narrow(image: Image.Image) -> Image.Image:
    """Drop the low byte of 16-bit samples so every channel is 0-255."""
    arr = np.asarray(image).astype(np.int64) >> 8
    return Image.fromarray(arr.clip(0, 255).astype(np.uint8))


def load_image(path: str | Path) -> Image.Image:
    """Decode a PNG, JPEG or GIF file into an RGBA image.

    Raises OSError if the file cannot be opened and DecodeError if the data is
    not a supported format or fails to decode.
    """
    path = Path(path)
    with path.open("rb") as f:
        try:
            image = Image.open(f, formats=SUPPORTED_FORMATS)
            image.load()
        except UnidentifiedImageError as e:
            raise DecodeError(f"Unsupported image format: {path}") from e
        except Image.DecompressionBombError as e:
            raise DecodeError(f"Image too large to decode: {path}: {e}") from e
        except (OSError, SyntaxError, ValueError) as e:
            raise DecodeError(f"Corrupt image data in {path}: {e}") from e

    log.debug("Decoded %s: %s %dx%d mode=%s", path, image.format, image.width, image.height, image.mode)

    if image.mode in _WIDE_MODES:
        image = _narrow(image)
    return image.convert("RGBA")
