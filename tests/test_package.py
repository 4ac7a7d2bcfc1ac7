"""Checks for the top-level public API."""

import bfsgraph
from bfsgraph import DistanceMap, PathTail, shortest_path, shortest_paths


def test_version():
    assert isinstance(bfsgraph.__version__, str)


def test_public_api_exported():
    for name in bfsgraph.__all__:
        assert hasattr(bfsgraph, name)


def test_readme_example():
    graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": [], "E": []}
    edges = graph.__getitem__

    path = shortest_path("A", "D", edges)
    assert isinstance(path, PathTail)
    assert list(path) == ["B", "D"]

    paths = shortest_paths("A", edges)
    assert isinstance(paths, DistanceMap)
    assert paths.to_dict() == {"A": [], "B": ["B"], "C": ["C"], "D": ["B", "D"]}
