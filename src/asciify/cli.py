import argparse
import logging
import sys

from asciify.converter import convert_image
from asciify.errors import AsciifyError

log = logging.getLogger("asciify")


def setup_logging(level: int = logging.WARNING) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    log.handlers[:] = [handler]
    log.setLevel(level)
    log.propagate = False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art into a PNG under output/")
    parser.add_argument("image", help="Path to input image (PNG, JPEG or GIF)")
    args = parser.parse_args(argv)

    setup_logging()

    try:
        output_path = convert_image(args.image)
    except (OSError, AsciifyError) as e:
        log.error("%s", e)
        sys.exit(1)

    print(f"ASCII image saved to {output_path}")
    return 0
