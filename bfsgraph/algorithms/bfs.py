"""Breadth-first shortest paths over implicitly defined graphs.

The graph is never materialized: ``edges(node)`` is called lazily, at most
once per discovered node, and its result is consumed in order. Paths are
counted in edges; among equal-length paths the first one discovered wins,
which depends only on the order ``edges`` yields neighbours.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, Hashable, Optional, Tuple

from bfsgraph.algorithms.keys import DistanceMap, make_key_func
from bfsgraph.config import TRAVERSAL_CONFIG
from bfsgraph.logging import get_logger
from bfsgraph.paths.tail import PathTail
from bfsgraph.types import EdgesFunc, EqualsFunc, HashFunc, Node

logger = get_logger(__name__)

# Marks all-targets mode so that any value, None included, can be compared.
_NO_TARGET: Any = object()


def shortest_path(
    start: Node,
    target: Node,
    edges: EdgesFunc,
    *,
    equals: Optional[EqualsFunc] = None,
    hash_func: Optional[HashFunc] = None,
) -> Optional[PathTail[Node]]:
    """
    Return the shortest path from ``start`` to ``target``.

    The path excludes ``start`` and ends with ``target``. If ``start`` equals
    ``target`` an empty path is returned and ``edges`` is never called.

    ``start``, ``target`` and every value yielded by ``edges`` must not be
    None; with assertions enabled a violation raises ``AssertionError``,
    under ``python -O`` the result is undefined.

    Args:
        start: Node the search begins from.
        target: Node to reach.
        edges: Returns the outgoing neighbours of a node.
        equals: Optional node equality, used instead of ``==``.
        hash_func: Optional node hash, used instead of ``hash``. Supply it
            together with ``equals``.

    Returns:
        The path as a ``PathTail``, or None when ``target`` is unreachable.
        Use :func:`shortest_paths` to inspect reachability explicitly.
    """
    assert target is not None, "`target` cannot be None"
    distances = _shortest_paths(
        start, edges, target=target, equals=equals, hash_func=hash_func
    )
    return distances.get(target)


def shortest_paths(
    start: Node,
    edges: EdgesFunc,
    *,
    equals: Optional[EqualsFunc] = None,
    hash_func: Optional[HashFunc] = None,
) -> DistanceMap[Node]:
    """
    Return the shortest paths from ``start`` to every reachable node.

    The result always contains ``start`` mapped to an empty path. Unreachable
    nodes are absent. ``edges`` must describe a finite reachable set, or the
    call never returns.

    Args:
        start: Node the search begins from.
        edges: Returns the outgoing neighbours of a node.
        equals: Optional node equality, used instead of ``==``.
        hash_func: Optional node hash, used instead of ``hash``. Supply it
            together with ``equals``.

    Returns:
        Read-only mapping of node to ``PathTail``; lookups honour ``equals``.
    """
    return _shortest_paths(start, edges, equals=equals, hash_func=hash_func)


def _shortest_paths(
    start: Node,
    edges: EdgesFunc,
    *,
    target: Any = _NO_TARGET,
    equals: Optional[EqualsFunc] = None,
    hash_func: Optional[HashFunc] = None,
) -> DistanceMap[Node]:
    assert start is not None, "`start` cannot be None"
    assert edges is not None, "`edges` cannot be None"

    key_func = make_key_func(equals, hash_func)
    start_key = key_func(start)
    start_path: PathTail[Node] = PathTail.empty()
    # key -> (first-discovered node, path)
    entries: Dict[Hashable, Tuple[Node, PathTail[Node]]] = {
        start_key: (start, start_path)
    }

    single = target is not _NO_TARGET
    target_key = key_func(target) if single else None
    if single and start_key == target_key:
        return DistanceMap(key_func, entries)

    debug = logger.isEnabledFor(logging.DEBUG)
    to_visit: Deque[Tuple[Node, PathTail[Node]]] = deque([(start, start_path)])

    while to_visit:
        current, current_path = to_visit.popleft()

        for edge in edges(current):
            assert edge is not None, "`edges` cannot return None values."
            key = key_func(edge)
            if key in entries:
                continue

            edge_path = current_path.append(edge)
            entries[key] = (edge, edge_path)
            if single and key == target_key:
                if debug:
                    logger.debug(
                        "BFS from %r reached %r at depth %d (%d nodes discovered)",
                        start,
                        edge,
                        edge_path.length,
                        len(entries),
                    )
                return DistanceMap(key_func, entries)

            to_visit.append((edge, edge_path))
            if debug and TRAVERSAL_CONFIG.should_report(len(entries)):
                logger.debug(
                    "BFS from %r: %d nodes discovered, %d queued",
                    start,
                    len(entries),
                    len(to_visit),
                )

    if debug:
        logger.debug(
            "BFS from %r finished: %d reachable nodes%s",
            start,
            len(entries),
            " (target not reached)" if single else "",
        )
    return DistanceMap(key_func, entries)
