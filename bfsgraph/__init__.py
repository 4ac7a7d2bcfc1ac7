"""bfsgraph: shortest paths over implicitly defined graphs.

Graphs are described by an *edges function* returning the outgoing
neighbours of a node, so nothing has to be stored up front. Paths are
counted in edges and found with a breadth-first search that shares path
prefixes between nodes instead of copying them.

Primary API:
    shortest_path() - Path from a start node to one target node
    shortest_paths() - Paths from a start node to every reachable node
    PathTail - Immutable, prefix-sharing path sequence
    DistanceMap - Read-only node -> path mapping returned by shortest_paths()

Example:
    from bfsgraph import shortest_path, shortest_paths

    graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}

    shortest_path("A", "D", graph.__getitem__)   # PathTail(['B', 'D'])
    shortest_paths("A", graph.__getitem__)       # {'A': [], 'B': ['B'], ...}
"""

from __future__ import annotations

from bfsgraph import logging
from bfsgraph._version import __version__
from bfsgraph.algorithms.bfs import shortest_path, shortest_paths
from bfsgraph.algorithms.keys import DistanceMap
from bfsgraph.config import TRAVERSAL_CONFIG, TraversalConfig
from bfsgraph.paths.tail import PathTail

__all__ = [
    # Version
    "__version__",
    # Search
    "shortest_path",
    "shortest_paths",
    # Results
    "PathTail",
    "DistanceMap",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Utilities
    "logging",
]
