"""Snapshots of a database, kept in creation order."""

from __future__ import annotations

from typing import Iterator, Optional

__all__ = ["Snapshot", "SnapshotList"]


class Snapshot:
    """A handle on the database state as of one sequence number."""

    __slots__ = ("sequence", "_prev", "_next", "_owner")

    def __init__(self, sequence: int = 0) -> None:
        self.sequence = sequence
        self._prev: Snapshot = self
        self._next: Snapshot = self
        self._owner: Optional[SnapshotList] = None

    def __repr__(self) -> str:
        return f"Snapshot(sequence={self.sequence})"


class SnapshotList:
    """Live snapshots, oldest first, with constant-time removal."""

    def __init__(self) -> None:
        # Dummy head of a circular doubly-linked list.
        self._head = Snapshot()
        self._count = 0

    def empty(self) -> bool:
        """Return True if no snapshot is live."""
        return self._head._next is self._head

    def oldest(self) -> Snapshot:
        """Return the earliest created live snapshot."""
        if self.empty():
            raise IndexError("snapshot list is empty")
        return self._head._next

    def newest(self) -> Snapshot:
        """Return the most recently created live snapshot."""
        if self.empty():
            raise IndexError("snapshot list is empty")
        return self._head._prev

    def new(self, sequence: int) -> Snapshot:
        """Create a snapshot for ``sequence`` and append it as the newest."""
        snapshot = Snapshot(sequence)
        snapshot._owner = self
        snapshot._next = self._head
        snapshot._prev = self._head._prev
        snapshot._prev._next = snapshot
        snapshot._next._prev = snapshot
        self._count += 1
        return snapshot

    def delete(self, snapshot: Snapshot) -> None:
        """Remove ``snapshot``; raise ValueError if it is not in this list."""
        if snapshot._owner is not self:
            raise ValueError("snapshot does not belong to this list")
        snapshot._prev._next = snapshot._next
        snapshot._next._prev = snapshot._prev
        snapshot._prev = snapshot._next = snapshot
        snapshot._owner = None
        self._count -= 1

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Snapshot]:
        node = self._head._next
        while node is not self._head:
            nxt = node._next
            yield node
            node = nxt