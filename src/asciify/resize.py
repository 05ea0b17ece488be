import logging

from PIL import Image

log = logging.getLogger(__name__)

MAX_SIZE = 164


def fit_dimensions(width: int, height: int, max_size: int = MAX_SIZE) -> tuple[int, int]:
    """Scale (width, height) so the longer side equals max_size, keeping aspect ratio.

    The shorter side is truncated, but never below one pixel.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Cannot fit an image of size {width}x{height}")
    if width > height:
        return max_size, max(1, height * max_size // width)
    return max(1, width * max_size // height), max_size


def resize_to_fit(image: Image.Image, max_size: int = MAX_SIZE) -> Image.Image:
    size = fit_dimensions(image.width, image.height, max_size)
    log.debug("Resizing %dx%d to %dx%d", image.width, image.height, *size)
    return image.resize(size, Image.LANCZOS)
