"""
Tests for the command-line entry point.
"""

import logging
import shutil

import pytest

from gridpath.core.exceptions import InvalidInputError
from gridpath.main import (create_grid_from_config, fit_config_to_dimensions, main, parse_cell,
                           run_search)


def test_parse_cell():
    assert parse_cell("3,4") == (3, 4)


@pytest.mark.parametrize("value", ["3", "a,b", "1,2,3"])
def test_parse_cell_invalid(value):
    import argparse
    with pytest.raises(argparse.ArgumentTypeError):
        parse_cell(value)


def test_create_grid_from_overrides():
    grid = create_grid_from_config({
        "rows": 3,
        "cols": 4,
        "default_cost": 2,
        "costs": [{"row": 1, "col": 1, "cost": 9}],
    })
    assert (grid.rows, grid.cols) == (3, 4)
    assert grid.node(1, 1).cost == 9
    assert grid.node(0, 0).cost == 2


def test_create_grid_from_cost_file(tmp_path):
    path = tmp_path / "costs.csv"
    path.write_text("1,1,1\n1,50,1\n")
    grid = create_grid_from_config({"rows": 9, "cost_file": str(path)})
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.node(1, 1).cost == 50


@pytest.mark.parametrize("algorithm", ["bfs", "ucs"])
def test_run_search_with_shipped_configs(config_dir, algorithm, capsys):
    search, path = run_search(algorithm, str(config_dir), visualize=False)
    assert path is not None
    assert search.path_nodes()[0].data == (3, 3)
    assert search.path_nodes()[-1].data == (0, 0)
    assert "Path found" in capsys.readouterr().out


def test_ucs_avoids_expensive_cells_in_shipped_grid(config_dir):
    search, _ = run_search("ucs", str(config_dir), visualize=False)
    cells = [node.data for node in search.path_nodes()]
    assert (1, 1) not in cells
    assert (1, 2) not in cells


def test_run_search_saves_plot(config_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    run_search("bfs", str(config_dir), visualize=False, save=True)
    assert (tmp_path / "outputs" / "bfs" / "path_plot.png").exists()


def test_run_search_unknown_algorithm(config_dir):
    with pytest.raises(InvalidInputError):
        run_search("astar", str(config_dir), visualize=False)


def test_main_cli(config_dir, capsys):
    main(["--algorithm", "ucs", "--config-dir", str(config_dir),
          "--start", "0,0", "--goal", "4,4", "--no-viz"])
    out = capsys.readouterr().out
    assert "(0, 0) -> " in out
    assert out.rstrip().endswith("(4, 4)")


def test_main_cli_cell_outside_grid(config_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "bfs", "--config-dir", str(config_dir),
              "--goal", "9,9", "--no-viz"])
    assert excinfo.value.code == 1
    assert "outside" in capsys.readouterr().err


def test_main_cli_missing_config_dir(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "bfs", "--config-dir", str(tmp_path), "--no-viz"])
    assert excinfo.value.code == 1


def test_fit_config_drops_cells_outside_dimensions(caplog):
    config = {
        "rows": 3,
        "cols": 3,
        "costs": [{"row": 1, "col": 1, "cost": 9}, {"row": 3, "col": 1, "cost": 20}],
        "start": {"row": 3, "col": 3},
        "goal": {"row": 0, "col": 0},
    }
    with caplog.at_level(logging.WARNING, logger="gridpath.main"):
        fitted = fit_config_to_dimensions(config)
    assert fitted["costs"] == [{"row": 1, "col": 1, "cost": 9}]
    assert fitted["start"] is None
    assert fitted["goal"] == {"row": 0, "col": 0}
    assert "(3, 1)" in caplog.text
    assert "start" in caplog.text
    # The input is left untouched
    assert len(config["costs"]) == 2


def test_fit_config_keeps_explicit_endpoints():
    config = {"rows": 2, "goal": {"row": 5, "col": 5}}
    assert fit_config_to_dimensions(config, keep={"goal"})["goal"] == {"row": 5, "col": 5}


def test_main_cli_smaller_grid(config_dir, capsys, caplog):
    with caplog.at_level(logging.WARNING, logger="gridpath.main"):
        main(["--algorithm", "bfs", "--config-dir", str(config_dir),
              "--rows", "3", "--cols", "3", "--start", "0,0", "--goal", "2,2", "--no-viz"])
    out = capsys.readouterr().out
    assert "Grid: 3x3" in out
    assert out.rstrip().endswith("(2, 2)")
    assert "(3, 1)" in caplog.text


def test_smaller_grid_keeps_costs_inside_it(config_dir):
    search, path = run_search("ucs", str(config_dir),
                              overrides={"rows": 3, "cols": 3,
                                         "start": {"row": 0, "col": 0},
                                         "goal": {"row": 2, "col": 2}},
                              visualize=False)
    # Down the left column, then across into the cost-5 corner
    assert path[-1].cost == 8.0
    assert (1, 1) not in [node.data for node in search.path_nodes()]


def test_smaller_grid_falls_back_to_default_start(config_dir):
    # The configured start (3, 3) does not fit; (0, 0) is used and the goal is (0, 0)
    search, path = run_search("bfs", str(config_dir), overrides={"rows": 3, "cols": 3},
                              visualize=False)
    assert [node.data for node in search.path_nodes()] == [(0, 0)]


def test_main_cli_explicit_start_outside_smaller_grid(config_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "bfs", "--config-dir", str(config_dir),
              "--rows", "3", "--cols", "3", "--start", "4,4", "--no-viz"])
    assert excinfo.value.code == 1
    assert "outside" in capsys.readouterr().err


def test_main_cli_malformed_config(config_dir, tmp_path, capsys):
    shutil.copy(config_dir / "bfs.yaml", tmp_path / "bfs.yaml")
    (tmp_path / "grid.yaml").write_text("grid: [rows: 5\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "bfs", "--config-dir", str(tmp_path), "--no-viz"])
    assert excinfo.value.code == 1
    assert "Error parsing YAML" in capsys.readouterr().err
