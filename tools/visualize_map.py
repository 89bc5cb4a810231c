#!/usr/bin/env python3
"""Generate a 1-pixel-per-tile image of a saved map with terrain stats.

Usage:
    python tools/visualize_map.py [MAP_PATH] [OUTPUT_PATH] [SCALE]

Arguments:
    MAP_PATH: Path to the .npz map file (default: map.npz)
    OUTPUT_PATH: Path for output image (default: map.png)
    SCALE: Pixels per tile (default: 1)
"""

import sys
from pathlib import Path

import numpy as np
from PIL import Image

from continents.terrain.persistence import load_grid
from continents.terrain.regions import forced_ocean_mask
from continents.terrain_types import PlotTag, TerrainKind

# Colors for each terrain kind (RGB)
KIND_COLORS = {
    TerrainKind.OCEAN: (20, 60, 140),      # Dark blue
    TerrainKind.COAST: (60, 130, 180),     # Light blue
    TerrainKind.FLAT: (60, 150, 60),       # Green
    TerrainKind.HILL: (140, 100, 60),      # Brown
    TerrainKind.MOUNTAIN: (100, 100, 100), # Gray
}

# Gap band and edge ocean are drawn darker so the region bounds show
FORCED_OCEAN_SHADE = 0.6


def generate_terrain_image(kinds: np.ndarray, scale: int = 1) -> Image.Image:
    """Render terrain kinds as an RGB image, northern row at the top.

    Args:
        kinds: Terrain code array (height x width, uint8).
        scale: Pixels per tile.

    Returns:
        PIL Image with terrain visualization.
    """
    palette = np.full((256, 3), (255, 0, 255), dtype=np.uint8)  # Magenta for unknown
    for kind, color in KIND_COLORS.items():
        palette[kind.code] = color

    rgb = palette[np.flipud(kinds)]
    img = Image.fromarray(rgb)
    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)
    return img


def shade_forced_ocean(img: Image.Image, forced: np.ndarray, scale: int = 1) -> Image.Image:
    """Darken cells that lie outside both continent regions."""
    rgb = np.asarray(img).astype(np.float32)
    mask = np.repeat(np.repeat(np.flipud(forced), scale, axis=0), scale, axis=1)
    rgb[mask] *= FORCED_OCEAN_SHADE
    return Image.fromarray(rgb.astype(np.uint8))


def compute_terrain_stats(kinds: np.ndarray, tags: np.ndarray) -> dict:
    """Compute statistics about terrain kinds and side tags."""
    height, width = kinds.shape
    total = height * width

    stats = {
        "dimensions": {"width": width, "height": height, "total_tiles": total},
        "terrain": {},
    }
    for kind in TerrainKind:
        count = int(np.sum(kinds == kind.code))
        stats["terrain"][kind.value] = {
            "count": count,
            "percentage": round(100 * count / total, 2),
        }

    water_count = stats["terrain"]["ocean"]["count"] + stats["terrain"]["coast"]["count"]
    land_count = total - water_count
    stats["summary"] = {
        "water_tiles": water_count,
        "land_tiles": land_count,
        "land_percentage": round(100 * land_count / total, 2),
        "west_land": int(np.sum((tags & int(PlotTag.WEST_LANDMASS)) != 0)),
        "east_land": int(np.sum((tags & int(PlotTag.EAST_LANDMASS)) != 0)),
    }
    return stats


def print_stats(terrain_stats: dict, metadata: dict) -> None:
    """Print formatted statistics."""
    dims = terrain_stats["dimensions"]
    print(f"\n{'='*60}")
    print("MAP STATISTICS")
    print(f"{'='*60}")

    if metadata:
        print("\nMetadata:")
        print(f"  Map size: {metadata.get('map_size', 'unknown')}")
        print(f"  Seed: {metadata.get('seed', 'unknown')}")
        print(f"  Strategy: {metadata.get('strategy', 'unknown')}")
        print(
            f"  Players: {metadata.get('players_west', '?')} west, "
            f"{metadata.get('players_east', '?')} east"
        )
        print(f"  Saved: {metadata.get('saved_at', 'unknown')}")

    print("\nDimensions:")
    print(f"  Size: {dims['width']} x {dims['height']} ({dims['total_tiles']:,} tiles)")

    summary = terrain_stats["summary"]
    print("\nLand/Water:")
    print(f"  Land:  {summary['land_tiles']:>8,} tiles ({summary['land_percentage']:.1f}%)")
    print(f"  Water: {summary['water_tiles']:>8,} tiles ({100 - summary['land_percentage']:.1f}%)")
    print(f"  West continent: {summary['west_land']:,} land tiles")
    print(f"  East continent: {summary['east_land']:,} land tiles")

    print("\nTerrain Breakdown:")
    for name, data in terrain_stats["terrain"].items():
        if data["count"] > 0:
            print(f"  {name:10} {data['count']:>8,} tiles ({data['percentage']:>5.1f}%)")

    print(f"\n{'='*60}\n")


def main():
    map_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("map.npz")
    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("map.png")
    scale = int(sys.argv[3]) if len(sys.argv) > 3 else 1

    print(f"Loading map from: {map_path}")

    try:
        grid, (west, east), metadata = load_grid(map_path)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print("\nHint: Generate a map first:")
        print("  continents-generate --map-size MAPSIZE_STANDARD -o map.npz")
        sys.exit(1)

    print_stats(compute_terrain_stats(grid.kinds, grid.tags), metadata)

    print("Generating image...")
    img = generate_terrain_image(grid.kinds, scale)
    img.save(output_path)
    print(f"Saved terrain image to: {output_path}")

    regions_path = output_path.with_stem(output_path.stem + "_regions")
    forced = forced_ocean_mask(grid.width, grid.height, west, east)
    shade_forced_ocean(img, forced, scale).save(regions_path)
    print(f"Saved region overlay to: {regions_path}")


if __name__ == "__main__":
    main()
