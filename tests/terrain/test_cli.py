"""Tests for the map generation command line."""

from continents.terrain.cli import main
from continents.terrain.persistence import load_grid


class TestCli:
    def test_generate_and_save(self, tmp_path, capsys) -> None:
        output = tmp_path / "map.npz"
        code = main(
            ["--map-size", "MAPSIZE_TINY", "--seed", "1", "--strategy", "two_pass", "-o", str(output)]
        )
        assert code == 0
        assert output.exists()

        grid, _, metadata = load_grid(output)
        assert (grid.width, grid.height) == (60, 38)
        assert metadata["seed"] == 1
        assert "Saved to" in capsys.readouterr().out

    def test_print_map(self, capsys) -> None:
        code = main(["--map-size", "MAPSIZE_TINY", "--seed", "2", "--print"])
        assert code == 0
        out = capsys.readouterr().out
        rows = [line for line in out.splitlines() if line and set(line) <= set("~-FHM")]
        assert len(rows) == 38

    def test_dump(self, tmp_path) -> None:
        dump = tmp_path / "terrain.txt"
        assert main(["--map-size", "MAPSIZE_TINY", "--dump", str(dump)]) == 0
        assert len(dump.read_text(encoding="utf-8").splitlines()) == 38

    def test_unknown_map_size(self, capsys) -> None:
        assert main(["--map-size", "MAPSIZE_NOPE"]) == 1
        assert "MAPSIZE_NOPE" in capsys.readouterr().err

    def test_custom_table(self, tmp_path) -> None:
        table = tmp_path / "sizes.toml"
        table.write_text(
            "[MAPSIZE_TEST]\n"
            "width = 40\n"
            "height = 30\n"
            "players_landmass1 = 1\n"
            "players_landmass2 = 1\n"
            "start_sector_rows = 1\n"
            "start_sector_cols = 1\n"
        )
        assert main(["--map-sizes", str(table), "--map-size", "MAPSIZE_TEST"]) == 0
