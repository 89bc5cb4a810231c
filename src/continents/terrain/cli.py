"""Command-line interface for map generation."""

import argparse
import logging
import sys
import time
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for map generation."""
    parser = argparse.ArgumentParser(
        description="Generate a two-continent strategy game map"
    )
    parser.add_argument(
        "--map-size",
        type=str,
        default="MAPSIZE_STANDARD",
        help="Map size key (default: MAPSIZE_STANDARD)",
    )
    parser.add_argument(
        "--map-sizes",
        type=str,
        default=None,
        help="TOML map size table (default: bundled table)",
    )
    parser.add_argument(
        "--seed", type=int, default=12345, help="Random seed (default: 12345)"
    )
    parser.add_argument(
        "--strategy",
        choices=["shape_overlay", "two_pass"],
        default=None,
        help="Landmass strategy (default: drawn from the seed)",
    )
    parser.add_argument("--width", type=int, default=None, help="Override map width")
    parser.add_argument("--height", type=int, default=None, help="Override map height")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Save the map as .npz (optional)",
    )
    parser.add_argument(
        "--dump",
        type=str,
        default=None,
        help="Write a text dump of the terrain (optional)",
    )
    parser.add_argument(
        "--debug-images",
        type=str,
        default=None,
        help="Directory to save debug images (optional)",
    )
    parser.add_argument(
        "--print", dest="print_map", action="store_true", help="Print the terrain dump"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Import here to avoid slow startup for --help
    from ..exceptions import MapGenerationError
    from ..map_sizes import load_map_sizes
    from .config import GenerationConfig
    from .generator import generate_map
    from .persistence import save_grid

    config = GenerationConfig(
        seed=args.seed,
        map_size=args.map_size,
        width=args.width,
        height=args.height,
        strategy=args.strategy,
        dump_path=args.dump,
        debug_output_dir=args.debug_images,
    )
    map_sizes = load_map_sizes(Path(args.map_sizes)) if args.map_sizes else None

    start_time = time.time()
    try:
        result = generate_map(config, map_sizes)
    except MapGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    gen_time = time.time() - start_time

    print(
        f"Generated {result.grid.width}x{result.grid.height} map "
        f"({result.strategy.value}) in {gen_time:.2f}s"
    )

    if args.print_map:
        print(result.grid.to_text(), end="")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_grid(output_path, result.grid, result.regions, result.metadata())
        print(f"Saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
