"""Tests for map persistence."""

import json

import numpy as np
import pytest

from continents.terrain.grid import TerrainGrid
from continents.terrain.persistence import FORMAT_VERSION, load_grid, save_grid
from continents.terrain_types import COAST, FLAT, PlotTag


@pytest.fixture
def saved_map(tmp_path, small_regions):
    grid = TerrainGrid(64, 40)
    grid.kinds[10:20, 10:20] = FLAT
    grid.kinds[9, 10:20] = COAST
    grid.tags[10:20, 10:20] = int(PlotTag.LANDMASS | PlotTag.WEST_LANDMASS)
    path = tmp_path / "map.npz"
    save_grid(path, grid, small_regions, {"seed": 99, "strategy": "two_pass"})
    return path, grid


class TestSaveLoad:
    def test_round_trip(self, saved_map, small_regions) -> None:
        path, grid = saved_map
        loaded, regions, metadata = load_grid(path)

        assert loaded == grid
        assert regions == small_regions
        assert metadata["seed"] == 99
        assert metadata["strategy"] == "two_pass"
        assert metadata["version"] == FORMAT_VERSION
        assert metadata["width"] == 64
        assert metadata["height"] == 40
        assert "saved_at" in metadata

    def test_loaded_arrays_are_uint8(self, saved_map) -> None:
        path, _ = saved_map
        loaded, _, _ = load_grid(path)
        assert loaded.kinds.dtype == np.uint8
        assert loaded.tags.dtype == np.uint8

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "nope.npz")

    def test_missing_kinds(self, tmp_path) -> None:
        path = tmp_path / "bad.npz"
        np.savez_compressed(path, tags=np.zeros((4, 4), dtype=np.uint8))
        with pytest.raises(ValueError, match="kinds"):
            load_grid(path)

    def test_missing_regions(self, tmp_path) -> None:
        path = tmp_path / "bad.npz"
        header = json.dumps({"version": FORMAT_VERSION}).encode("utf-8")
        np.savez_compressed(
            path,
            kinds=np.zeros((4, 4), dtype=np.uint8),
            metadata=np.frombuffer(header, dtype=np.uint8),
        )
        with pytest.raises(ValueError, match="regions"):
            load_grid(path)
