"""NetworkX interoperability helpers.

Stored NetworkX graphs can be searched by turning them into an edges
function, and search results can be turned back into a NetworkX tree for
inspection or drawing.

Example:
    >>> import networkx as nx
    >>> from bfsgraph import shortest_paths
    >>> from bfsgraph.lib.nx import successors, shortest_path_tree
    >>>
    >>> G = nx.DiGraph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
    >>> paths = shortest_paths("A", successors(G))
    >>> list(paths["D"])
    ['B', 'D']
    >>> tree = shortest_path_tree(paths, "A")
    >>> sorted(tree.edges)
    [('A', 'B'), ('A', 'C'), ('B', 'D')]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, Iterable, Mapping, Sequence, Union

import networkx as nx

from bfsgraph.types import EdgesFunc

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def successors(G: NxGraph) -> EdgesFunc:
    """Return an edges function backed by a NetworkX graph.

    Directed graphs yield ``G.successors(node)``; undirected graphs yield
    ``G.neighbors(node)``. Parallel edges of multigraphs collapse to a
    single neighbour. Nodes missing from ``G`` have no neighbours.

    Args:
        G: Any NetworkX graph.

    Returns:
        Callable mapping a node to an iterator of neighbours, in adjacency order.
    """
    adjacency = G.successors if G.is_directed() else G.neighbors

    def edges(node: Hashable) -> Iterable[Hashable]:
        if node not in G:
            return ()
        return adjacency(node)

    return edges


def shortest_path_tree(
    paths: Mapping[Hashable, Sequence[Hashable]], start: Hashable
) -> nx.DiGraph:
    """Build the breadth-first tree described by a set of shortest paths.

    Every node in ``paths`` becomes a tree node with a ``depth`` attribute
    equal to its path length. Each non-start node gets one incoming edge from
    the node before it on its path (``start`` for depth-1 nodes).

    Args:
        paths: Mapping of node to path, e.g. the result of ``shortest_paths``.
        start: The node the paths were computed from.

    Returns:
        A ``networkx.DiGraph`` rooted at ``start``.
    """
    tree = nx.DiGraph()
    tree.add_node(start, depth=0)
    for node, path in paths.items():
        if len(path) == 0:
            continue
        parent = path[-2] if len(path) > 1 else start
        tree.add_node(node, depth=len(path))
        tree.add_edge(parent, node)
    return tree
