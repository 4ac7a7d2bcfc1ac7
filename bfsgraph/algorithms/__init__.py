"""Breadth-first traversal over implicitly defined graphs."""

from __future__ import annotations

from bfsgraph.algorithms.bfs import shortest_path, shortest_paths
from bfsgraph.algorithms.keys import DistanceMap, NodeKey, make_key_func

__all__ = [
    "shortest_path",
    "shortest_paths",
    "DistanceMap",
    "NodeKey",
    "make_key_func",
]
