import io
import logging
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from asciify.errors import EncodeError

log = logging.getLogger(__name__)

# Fixed glyph cell of the bitmap face, in pixels
CELL_WIDTH = 7
CELL_HEIGHT = 13
# Glyphs sit on the bottom edge of their cell
BASELINE_GLYPH = "M"

OUTPUT_DIR = Path("output")
OUTPUT_PREFIX = "ascii-"


def font_baseline(font) -> int:
    """Rows from the drawing origin down to the baseline, measured from the ink of BASELINE_GLYPH."""
    img = Image.new("L", (CELL_WIDTH * 2, CELL_HEIGHT * 2), 0)
    ImageDraw.Draw(img).text((0, 0), BASELINE_GLYPH, fill=255, font=font)
    return img.getbbox()[3]


def render_lines(lines: list[str]) -> Image.Image:
    """Draw a character grid in black on a white canvas, one fixed cell per character."""
    if not lines or not lines[0]:
        raise ValueError("Cannot render an empty character grid")

    width = len(lines[0]) * CELL_WIDTH
    height = len(lines) * CELL_HEIGHT
    canvas = Image.new("RGBA", (width, height), (255, 255, 255, 255))
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default_imagefont()
    baseline = font_baseline(font)

    for row, line in enumerate(lines):
        top = (row + 1) * CELL_HEIGHT - baseline
        for col, char in enumerate(line):
            draw.text((col * CELL_WIDTH, top), char, fill=(0, 0, 0, 255), font=font)

    log.debug("Rendered %d lines onto a %dx%d canvas", len(lines), width, height)
    return canvas


def available_path(path: Path) -> Path:
    """Return path, or the first free 'name-N.ext' sibling if it already exists."""
    if not path.exists():
        return path
    i = 1
    while True:
        candidate = path.with_name(f"{path.stem}-{i}{path.suffix}")
        if not candidate.exists():
            return candidate
        i += 1


def output_path_for(input_path: str | Path, output_dir: str | Path = OUTPUT_DIR) -> Path:
    name = OUTPUT_PREFIX + Path(input_path).name
    return available_path(Path(output_dir) / name)


def save_png(image: Image.Image, path: str | Path) -> Path:
    """Encode image as PNG and write it to path, creating the parent directory.

    The file keeps whatever extension path has; the content is always PNG.
    """
    path = Path(path)
    buf = io.BytesIO()
    try:
        image.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode PNG: {e}") from e

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        f.write(buf.getvalue())
    log.debug("Wrote %d bytes to %s", buf.tell(), path)
    return path
