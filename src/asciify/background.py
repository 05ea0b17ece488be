import logging

import numpy as np
from PIL import Image

log = logging.getLogger(__name__)

WHITE_THRESHOLD_BASE = 255
WHITE_THRESHOLD = 240
BACKGROUND_GRAY = (128, 128, 128, 255)


def _premultiplied_rgb(arr: np.ndarray) -> np.ndarray:
    """Scale RGB by alpha the way a 16-bit premultiplied colour model reports it, back in 8-bit.

    Opaque pixels come back unchanged; fully transparent ones become black.
    """
    rgb = arr[:, :, :3].astype(np.uint64) * 0x101
    alpha = arr[:, :, 3:4].astype(np.uint64) * 0x101
    return (rgb * alpha // 0xFFFF) >> 8


def _near_white(rgb: np.ndarray) -> np.ndarray:
    rgb = rgb.astype(np.float64)
    dist = np.sqrt(((255.0 - rgb) ** 2).sum(axis=2))
    return dist < (WHITE_THRESHOLD_BASE - WHITE_THRESHOLD)


def background_mask(image: Image.Image) -> np.ndarray:
    """Boolean (height, width) mask of pixels within the white threshold."""
    return _near_white(_premultiplied_rgb(np.asarray(image.convert("RGBA"))))


def replace_background(image: Image.Image) -> Image.Image:
    """Replace near-white pixels with opaque mid gray; copy the rest as opaque RGBA."""
    arr = np.asarray(image.convert("RGBA"))
    out = np.empty(arr.shape, dtype=np.uint8)
    out[:, :, :3] = _premultiplied_rgb(arr)
    out[:, :, 3] = 255

    mask = _near_white(out[:, :, :3])
    out[mask] = BACKGROUND_GRAY
    log.debug("Replaced %d of %d pixels with background gray", int(mask.sum()), mask.size)
    return Image.fromarray(out)
