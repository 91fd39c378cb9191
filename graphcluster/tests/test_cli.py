"""Tests for configuration loading and the command-line interface."""

import pytest

from graphcluster.cli import load_graph, main, parse_params
from graphcluster.core.random import get_seed
from graphcluster.config.schema import (
    ClusteringConfig,
    load_config,
    to_clustering_config,
    validate_config,
)


@pytest.fixture
def edges_file(tmp_path):
    path = tmp_path / "edges.tsv"
    path.write_text("a\tb\na\tc\na\tc\nd\te\n")
    return path


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("clustering:\n  name: mcl\n  params:\n    e: 3\n    r: 1.5\n")

    config = load_config(str(path))
    assert validate_config(config) == []
    assert to_clustering_config(config) == ClusteringConfig(name="mcl", params={"e": "3", "r": "1.5"})


def test_validate_config():
    assert validate_config({}) == ["Missing 'clustering' section"]
    assert validate_config({"clustering": {}}) == ["Missing 'clustering.name'"]
    assert validate_config({"clustering": {"name": "cw", "params": [1]}}) == [
        "'clustering.params' must be a mapping"
    ]


def test_boolean_params_are_lowercased():
    config = {"clustering": {"name": "spectral", "params": {"k": 2, "normalized": False}}}
    assert to_clustering_config(config).params == {"k": "2", "normalized": "false"}


def test_parse_params():
    assert parse_params(["mode=log", "seed=1"]) == {"mode": "log", "seed": "1"}
    assert parse_params(None) == {}
    with pytest.raises(ValueError):
        parse_params(["mode"])


def test_load_graph_keeps_parallel_edges(edges_file):
    graph = load_graph(str(edges_file))
    assert set(graph.nodes()) == {"a", "b", "c", "d", "e"}
    assert graph.number_of_edges("a", "c") == 2
    assert graph["a"]["b"][0]["weight"] == 1.0


def test_load_graph_weights(tmp_path):
    path = tmp_path / "weighted.tsv"
    path.write_text("x\ty\t2.5\n")
    graph = load_graph(str(path), directed=True)
    assert graph.is_directed()
    assert graph["x"]["y"][0]["weight"] == 2.5


def test_run_components(edges_file, capsys):
    assert main(["run", str(edges_file), "-a", "components"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["0\t3\ta, b, c", "1\t2\td, e"]


def test_run_from_config(edges_file, tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("clustering:\n  name: singleton\n")
    assert main(["run", str(edges_file), "-c", str(config)]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 5


def test_run_unknown_algorithm(edges_file, capsys):
    assert main(["run", str(edges_file), "-a", "bogus"]) == 1
    assert "Unknown algorithm" in capsys.readouterr().err


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "spectral" in out
    assert "components" in out


def test_run_with_seed(edges_file, capsys, restore_seed):
    assert main(["run", str(edges_file), "-a", "cw", "--seed", "5"]) == 0
    assert get_seed() == 5
    lines = capsys.readouterr().out.strip().splitlines()
    assert sorted(line.split("\t")[2] for line in lines) == ["a, b, c", "d, e"]
