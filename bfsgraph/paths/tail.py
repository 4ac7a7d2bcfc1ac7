"""Persistent, prefix-sharing path accumulator.

``PathTail`` is a cons-style chain: each instance holds the newest node of a
path and a reference to the path it extends. Appending is O(1) and never
copies, so every path discovered by a breadth-first search shares storage
with the path of its parent node.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class PathTail(Sequence[T]):
    """Immutable sequence of nodes visited after the start node.

    Attributes:
        value: The most recently appended node (None for the empty path).
        prev: The path this one extends (None for the empty path).
        length: Number of nodes in the path, derived from ``prev`` so
            ``len()`` is O(1).

    Note that the first element access or iteration is O(n) in time and space:
    the chain is walked once into a flat tuple, which is then cached and
    reused by every later read.
    """

    value: Optional[T] = None
    prev: Optional["PathTail[T]"] = None
    length: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.prev is None:
            if self.value is not None:
                raise ValueError("A non-empty PathTail requires a predecessor path")
            return
        object.__setattr__(self, "length", self.prev.length + 1)

    @classmethod
    def empty(cls) -> "PathTail[T]":
        """Return a path with no steps, used for the start node."""
        return cls()

    def append(self, value: T) -> "PathTail[T]":
        """Return a new path with ``value`` added; ``self`` is left untouched."""
        return PathTail(value, self)

    @property
    def last(self) -> Optional[T]:
        """Return the newest node without materializing the path."""
        return self.value

    @cached_property
    def values(self) -> Tuple[T, ...]:
        """
        Return the nodes from oldest to newest.

        The predecessor chain is walked iteratively into a buffer sized by
        ``length`` so long paths cannot exhaust the call stack.
        """
        buffer: list = [None] * self.length
        node: PathTail[T] = self
        for i in range(self.length):
            buffer[i] = node.value
            node = node.prev  # type: ignore[assignment]
        buffer.reverse()
        return tuple(buffer)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.values)

    def __contains__(self, item: object) -> bool:
        return item in self.values

    def __getitem__(self, idx: Union[int, slice]) -> Union[T, Tuple[T, ...]]:
        return self.values[idx]

    def __repr__(self) -> str:
        return f"PathTail({list(self.values)!r})"
