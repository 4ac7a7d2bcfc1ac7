"""Path primitives for breadth-first search results.

- ``PathTail`` is an immutable, prefix-sharing node sequence with O(1)
  append and length, materialized into a flat tuple on first read.
"""

from __future__ import annotations

from bfsgraph.paths.tail import PathTail

__all__ = ["PathTail"]
