"""Shared type aliases for implicit-graph traversal.

A graph is never stored: it is described by an *edges function* that maps a
node to an iterable of its outgoing neighbours. Node equality and hashing
default to the node's own ``__eq__``/``__hash__`` and may be replaced by a
caller-supplied pair of functions.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

#: Opaque caller-defined node type.
Node = TypeVar("Node")

#: Maps a node to its outgoing neighbours, in the order they should be explored.
EdgesFunc = Callable[[Node], Iterable[Node]]

#: Custom node equality. Must agree with the paired ``HashFunc``.
EqualsFunc = Callable[[Node, Node], bool]

#: Custom node hash. Equal nodes must produce equal hashes.
HashFunc = Callable[[Node], int]
