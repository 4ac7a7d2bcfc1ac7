"""Pluggable node equality and the Distance Map built on top of it.

Python dicts compare keys with ``__eq__`` and ``__hash__``. When a caller
supplies its own ``equals``/``hash_func`` pair, nodes are wrapped in
``NodeKey`` so the dict honours the custom relation instead.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from bfsgraph.paths.tail import PathTail
from bfsgraph.types import EqualsFunc, HashFunc

T = TypeVar("T")

KeyFunc = Callable[[Any], Hashable]


class NodeKey:
    """Dict key that delegates comparison to a caller-supplied ``equals``."""

    __slots__ = ("node", "_hash", "_equals")

    def __init__(self, node: Any, equals: EqualsFunc, hash_func: HashFunc) -> None:
        self.node = node
        self._hash = hash_func(node)
        self._equals = equals

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeKey):
            return NotImplemented
        return bool(self._equals(self.node, other.node))

    def __repr__(self) -> str:
        return f"NodeKey({self.node!r})"


def _identity(node: Any) -> Any:
    return node


def make_key_func(
    equals: Optional[EqualsFunc] = None,
    hash_func: Optional[HashFunc] = None,
) -> KeyFunc:
    """
    Return the function that turns a node into its dict key.

    With neither ``equals`` nor ``hash_func`` the node is its own key. If only
    one of the pair is given, the other falls back to the node's own
    ``==``/``hash``; keeping the two consistent is the caller's job.
    """
    if equals is None and hash_func is None:
        return _identity

    eq = equals if equals is not None else operator.eq
    hf = hash_func if hash_func is not None else hash

    def key_func(node: Any) -> NodeKey:
        return NodeKey(node, eq, hf)

    return key_func


class DistanceMap(Mapping, Generic[T]):
    """Read-only mapping from each discovered node to its shortest path.

    Keys are the first-discovered representation of each node. Lookups go
    through the same key function used during traversal, so a custom
    equality relation applies to ``[]``, ``in`` and ``get`` as well.
    """

    __slots__ = ("_key_func", "_entries")

    def __init__(
        self,
        key_func: KeyFunc = _identity,
        entries: Optional[Dict[Hashable, Tuple[T, PathTail[T]]]] = None,
    ) -> None:
        """
        Args:
            key_func: Turns a node into its dict key.
            entries: Pre-built ``{key: (node, path)}`` contents, keyed by
                ``key_func``.
        """
        self._key_func = key_func
        self._entries: Dict[Hashable, Tuple[T, PathTail[T]]] = (
            entries if entries is not None else {}
        )

    @property
    def key_func(self) -> KeyFunc:
        return self._key_func

    def __getitem__(self, node: T) -> PathTail[T]:
        return self._entries[self._key_func(node)][1]

    def __contains__(self, node: object) -> bool:
        return self._key_func(node) in self._entries

    def __iter__(self) -> Iterator[T]:
        for node, _ in self._entries.values():
            yield node

    def __len__(self) -> int:
        return len(self._entries)

    def to_dict(self) -> Dict[T, List[T]]:
        """Return a plain ``{node: [path nodes]}`` snapshot.

        The result is keyed by the nodes themselves and therefore uses their
        own ``==``/``hash`` rather than any custom relation.
        """
        return {node: list(path) for node, path in self._entries.values()}

    def __repr__(self) -> str:
        body = ", ".join(
            f"{node!r}: {list(path)!r}" for node, path in self._entries.values()
        )
        return f"DistanceMap({{{body}}})"
