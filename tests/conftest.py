import struct
import zlib

import pytest
from PIL import Image


def solid(size, colour, mode="RGB"):
    return Image.new(mode, size, colour)


@pytest.fixture
def image_file(tmp_path):
    """Factory that saves a solid-colour image and returns its path."""

    def _make(name="foo.png", size=(200, 100), colour=(255, 255, 255), mode="RGB", format=None):
        path = tmp_path / name
        solid(size, colour, mode).save(path, format=format)
        return path

    return _make


def png_chunk(kind, data=b""):
    body = kind + data
    return struct.pack(">I", len(data)) + body + struct.pack(">I", zlib.crc32(body))


@pytest.fixture
def oversized_png(tmp_path):
    """A 20000x10000 PNG header with no pixel data behind it."""
    ihdr = struct.pack(">IIBBBBB", 20000, 10000, 8, 2, 0, 0, 0)
    path = tmp_path / "big.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n" + png_chunk(b"IHDR", ihdr) + png_chunk(b"IDAT") + png_chunk(b"IEND"))
    return path
