# lsmcore

In-memory building blocks for a log-structured key-value store, in pure
Python with no dependencies.

- `lsmcore.skiplist`: an ordered `SkipList` of unique keys, ordered by a
  three-way compare function, with a `SkipListIterator` that can seek, step
  forward and step back.
- `lsmcore.snapshot`: a `SnapshotList` that keeps live `Snapshot` objects in
  creation order, so the oldest and newest sequence numbers are always at hand.
- `lsmcore.log_format`: the `RecordType` enum and the `BLOCK_SIZE`,
  `HEADER_SIZE` and `MAX_RECORD_TYPE` constants of the write-ahead log format.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Skip list

```python
from lsmcore.skiplist import SkipList

def compare(a, b):
    return (a > b) - (a < b)

items = SkipList(compare, seed=0xDEADBEEF)
for key in (30, 10, 20):
    items.insert(key)

assert 20 in items
assert items.contains(10)
assert list(items) == [10, 20, 30]

it = items.iterator()
assert not it.valid()
it.seek(15)
assert it.valid() and it.key() == 20
it.prev()
assert it.key() == 10
it.seek_to_last()
assert it.key() == 30
it.next()
assert not it.valid()
```

`compare` may be left out, in which case keys are compared with `<` and `>`.
`seed` fixes the random choice of node heights; it has a default.

Inserting a key that compares equal to one already present raises
`ValueError`. A freshly created iterator is not positioned; call `seek`,
`seek_to_first` or `seek_to_last` first. Calling `key`, `next` or `prev` on an
iterator that is not positioned raises `LookupError`.

## Snapshots

```python
from lsmcore.snapshot import SnapshotList

snapshots = SnapshotList()
first = snapshots.new(5)
second = snapshots.new(9)

assert snapshots.oldest() is first
assert snapshots.newest() is second
assert len(snapshots) == 2
assert [s.sequence for s in snapshots] == [5, 9]

snapshots.delete(first)
assert snapshots.oldest().sequence == 9
```

`oldest()` and `newest()` raise `IndexError` on an empty list (check with
`empty()`), and deleting a snapshot that does not belong to the list raises
`ValueError`.

## What this package does not do

There is no database here: no memtable, no table files, no log reader or
writer, and nothing is stored on disk. `lsmcore.log_format` only describes the
record layout; it does not read or write log files.