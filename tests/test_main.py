import logging

import pytest
import yaml

from taxisearch import main as driver
from taxisearch.env import Grid
from taxisearch.search import BreadthFirstSearch, DepthFirstSearch, UniformCostSearch

EXAMPLE = [
    [0, 0, 0],
    [0, 1, 0],
    [5, 0, 6],
]


def _example_grid() -> Grid:
    return Grid(EXAMPLE, landmarks={"init": (0, 0)})


@pytest.mark.parametrize(
    "selector, expected",
    [(1, BreadthFirstSearch), (4, BreadthFirstSearch), (2, UniformCostSearch), ("2", UniformCostSearch), ("dfs", DepthFirstSearch)],
)
def test_build_strategy_dispatch(selector, expected):
    assert isinstance(driver.build_strategy(selector), expected)


@pytest.mark.parametrize("selector", [0, 3, 5, "astar"])
def test_unknown_strategy_builds_no_environment(selector, monkeypatch, caplog):
    def _fail(*args, **kwargs):
        raise AssertionError("environment must not be built")

    monkeypatch.setattr(driver.Environment, "from_start", _fail)
    assert driver.run_search(selector, _example_grid()) is None
    assert "Unknown strategy" in caplog.text


def test_missing_init_skips_search(caplog):
    assert driver.run_search(1, Grid(EXAMPLE)) is None
    assert "no 'init' landmark" in caplog.text


def test_run_search_returns_bfs_result(caplog):
    caplog.set_level(logging.INFO, logger="taxisearch")
    result = driver.run_search(1, _example_grid())
    assert result is not None and result.solution_found
    assert len(result.path) == 5
    assert "solution=True" in caplog.text


def test_build_ucs_reads_nested_config():
    cfg = {"search": {"ucs": {"single_iteration": False, "cell_costs": {3: 4, "4": 7}}}}
    strategy = driver.build_ucs(cfg)
    assert strategy.config.single_iteration is False
    assert strategy.config.cell_costs == {3: 4.0, 4: 7.0}


def _write_inputs(tmp_path, strategy):
    grid_path = tmp_path / "map.txt"
    grid_path.write_text("2 0 0\n0 1 0\n5 0 6\n", encoding="utf-8")
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml.safe_dump({"grid": str(grid_path), "strategy": strategy}), encoding="utf-8")
    return cfg_path


def test_main_runs_configured_strategy(tmp_path, monkeypatch):
    monkeypatch.delenv(driver.GRID_ENV_VAR, raising=False)
    cfg_path = _write_inputs(tmp_path, 1)
    assert driver.main(["--config", str(cfg_path)]) == 0
    assert driver.main(["--config", str(cfg_path), "--strategy", "3"]) == 1


def test_main_grid_from_environment(tmp_path, monkeypatch):
    grid_path = tmp_path / "env_map.txt"
    grid_path.write_text("2 5 6\n", encoding="utf-8")
    monkeypatch.setenv(driver.GRID_ENV_VAR, str(grid_path))
    assert driver.main(["--config", str(tmp_path / "absent.yaml")]) == 0


def test_main_reports_load_failure(tmp_path, monkeypatch, caplog):
    monkeypatch.delenv(driver.GRID_ENV_VAR, raising=False)
    assert driver.main(["--config", str(tmp_path / "absent.yaml"), "--grid", str(tmp_path / "nope.txt")]) == 1
    assert "Failed to load grid" in caplog.text


@pytest.mark.parametrize("selector", [1.9, True, None, "1.5"])
def test_non_integer_codes_are_unknown(selector, caplog):
    assert driver.build_strategy(selector) is None
    assert "Unknown strategy" in caplog.text


def test_null_search_section_uses_defaults():
    cfg = {"search": None}
    assert driver.build_bfs(cfg).max_expansions is None
    assert driver.build_ucs(cfg).config.single_iteration is True
    assert driver.build_dfs(cfg).config.placeholder is True


def test_main_rejects_malformed_config(tmp_path, monkeypatch, caplog):
    monkeypatch.delenv(driver.GRID_ENV_VAR, raising=False)
    cfg_path = tmp_path / "broken.yaml"
    cfg_path.write_text("grid: [unclosed\n", encoding="utf-8")
    assert driver.main(["--config", str(cfg_path)]) == 1
    assert "Failed to parse config" in caplog.text
