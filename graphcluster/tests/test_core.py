"""Tests for the component registry and global seed handling."""

import networkx as nx
import pytest

from graphcluster.clustering import ChineseWhispers
from graphcluster.core.random import get_rng, get_seed, set_seed
from graphcluster.core.registry import Registry, get_registry
from graphcluster.points import KMeansClusterer


def test_registry_names_are_case_insensitive():
    registry = Registry("test")
    registry.register("Foo", factory=lambda value: value * 2)

    assert "foo" in registry
    assert "FOO" in registry
    assert registry.list() == ["foo"]
    assert registry.create("fOo", value=3) == 6


def test_registry_unknown_name():
    registry = Registry("test")
    with pytest.raises(KeyError, match="test registry"):
        registry.get("missing")


def test_get_registry_returns_shared_instance():
    assert get_registry("algorithms") is get_registry("algorithms")
    assert "spectral" in get_registry("algorithms")
    assert "top" in get_registry("weightings")


def test_unseeded_algorithms_follow_global_seed(restore_seed):
    set_seed(5)
    assert get_seed() == 5
    assert ChineseWhispers(nx.path_graph(3)).seed == 5
    assert KMeansClusterer(2).random_state == 5


def test_explicit_seed_wins(restore_seed):
    set_seed(5)
    assert ChineseWhispers(nx.path_graph(3), seed=9).seed == 9
    assert KMeansClusterer(2, random_state=9).random_state == 9


def test_get_rng_is_reproducible(restore_seed):
    set_seed(11)
    assert get_rng().integers(1000) == get_rng(11).integers(1000)
