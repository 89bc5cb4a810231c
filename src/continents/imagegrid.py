"""Convert a bitmap into a one-character-per-tile text grid.

Blue-dominant pixels become water ('W'); every other pixel becomes
generic land ('L').
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)

WATER_CHAR = "W"
LAND_CHAR = "L"

# Blue must beat both red and green by more than this to count as water
BLUE_MARGIN = 10


def classify_pixels(rgb: NDArray[np.uint8]) -> NDArray[np.bool_]:
    """Water mask for an (height, width, 3) RGB array."""
    channels = rgb.astype(np.int32)
    red, green, blue = channels[..., 0], channels[..., 1], channels[..., 2]
    return (blue > red + BLUE_MARGIN) & (blue > green + BLUE_MARGIN)


def image_to_grid_text(image: Image.Image) -> str:
    """Render an image as rows of tile characters.

    Args:
        image: Any Pillow image; converted to RGB first.

    Returns:
        One line per image row, each newline terminated, one character
        per pixel.
    """
    rgb = np.asarray(image.convert("RGB"), dtype=np.uint8)
    water = classify_pixels(rgb)
    chars = np.where(water, WATER_CHAR, LAND_CHAR)
    return "".join("".join(row) + "\n" for row in chars)


def _grab_clipboard() -> Image.Image:
    from PIL import ImageGrab

    content = ImageGrab.grabclipboard()
    if not isinstance(content, Image.Image):
        raise ValueError("Clipboard does not contain a valid image")
    return content


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the image preprocessor."""
    parser = argparse.ArgumentParser(
        description="Convert an image into a W/L tile grid"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("image", nargs="?", type=str, help="Input image path")
    source.add_argument(
        "--clipboard", action="store_true", help="Read the image from the clipboard"
    )
    parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output file (default: stdout)"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.clipboard:
            image = _grab_clipboard()
        else:
            image = Image.open(args.image)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = image_to_grid_text(image)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Wrote {image.width}x{image.height} grid to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
