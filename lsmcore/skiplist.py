"""An ordered set of keys kept in a skip list.

Writes need external synchronisation. Readers may run concurrently with a
single writer: a node is fully initialised before it is linked in, and nodes
are never removed.
"""

from __future__ import annotations

import random
from typing import Any, Callable, Iterator, Optional

__all__ = ["SkipList", "SkipListIterator"]

_MAX_HEIGHT = 12
_BRANCHING = 4
_DEFAULT_SEED = 0xDEADBEEF

Compare = Callable[[Any, Any], int]


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class _Node:
    __slots__ = ("key", "next")

    def __init__(self, key: Any, height: int) -> None:
        self.key = key
        self.next: list[Optional[_Node]] = [None] * height


class SkipList:
    """A sorted collection of unique keys ordered by a three-way comparator."""

    def __init__(self, compare: Optional[Compare] = None, seed: int = _DEFAULT_SEED) -> None:
        self._compare: Compare = compare if compare is not None else _natural_compare
        self._head = _Node(None, _MAX_HEIGHT)
        self._max_height = 1
        self._rnd = random.Random(seed)

    def _random_height(self) -> int:
        height = 1
        while height < _MAX_HEIGHT and self._rnd.randrange(_BRANCHING) == 0:
            height += 1
        return height

    def _key_is_after_node(self, key: Any, node: Optional[_Node]) -> bool:
        # A missing node sorts after every key.
        return node is not None and self._compare(node.key, key) < 0

    def _find_greater_or_equal(
        self, key: Any, prev: Optional[list[_Node]] = None
    ) -> Optional[_Node]:
        x = self._head
        level = self._max_height - 1
        while True:
            nxt = x.next[level]
            if self._key_is_after_node(key, nxt):
                x = nxt  # type: ignore[assignment]
            else:
                if prev is not None:
                    prev[level] = x
                if level == 0:
                    return nxt
                level -= 1

    def _find_less_than(self, key: Any) -> _Node:
        x = self._head
        level = self._max_height - 1
        while True:
            nxt = x.next[level]
            if nxt is None or self._compare(nxt.key, key) >= 0:
                if level == 0:
                    return x
                level -= 1
            else:
                x = nxt

    def _find_last(self) -> _Node:
        x = self._head
        level = self._max_height - 1
        while True:
            nxt = x.next[level]
            if nxt is None:
                if level == 0:
                    return x
                level -= 1
            else:
                x = nxt

    def insert(self, key: Any) -> None:
        """Add ``key``; raise ValueError if an equal key is already present."""
        prev: list[_Node] = [self._head] * _MAX_HEIGHT
        x = self._find_greater_or_equal(key, prev)
        if x is not None and self._compare(key, x.key) == 0:
            raise ValueError(f"duplicate key: {key!r}")

        height = self._random_height()
        if height > self._max_height:
            for level in range(self._max_height, height):
                prev[level] = self._head
            # Readers that see the new height before the links below simply
            # find None at the head and drop a level.
            self._max_height = height

        node = _Node(key, height)
        for level in range(height):
            node.next[level] = prev[level].next[level]
            prev[level].next[level] = node

    def contains(self, key: Any) -> bool:
        """Return True if an entry equal to ``key`` is present."""
        x = self._find_greater_or_equal(key)
        return x is not None and self._compare(key, x.key) == 0

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next[0]
        while node is not None:
            yield node.key
            node = node.next[0]

    def iterator(self) -> "SkipListIterator":
        """Return a positionable iterator, initially not valid."""
        return SkipListIterator(self)


class SkipListIterator:
    """A cursor over a SkipList that can seek and move in both directions."""

    def __init__(self, skiplist: SkipList) -> None:
        self._list = skiplist
        self._node: Optional[_Node] = None

    def valid(self) -> bool:
        """Return True if positioned at an entry."""
        return self._node is not None

    def _require_valid(self) -> _Node:
        if self._node is None:
            raise LookupError("iterator is not positioned at an entry")
        return self._node

    def key(self) -> Any:
        """Return the key at the current position."""
        return self._require_valid().key

    def next(self) -> None:
        """Advance to the following entry."""
        self._node = self._require_valid().next[0]

    def prev(self) -> None:
        """Step back to the preceding entry."""
        node = self._list._find_less_than(self._require_valid().key)
        self._node = None if node is self._list._head else node

    def seek(self, target: Any) -> None:
        """Move to the first entry whose key is >= ``target``."""
        self._node = self._list._find_greater_or_equal(target)

    def seek_to_first(self) -> None:
        """Move to the first entry; not valid if the list is empty."""
        self._node = self._list._head.next[0]

    def seek_to_last(self) -> None:
        """Move to the last entry; not valid if the list is empty."""
        node = self._list._find_last()
        self._node = None if node is self._list._head else node