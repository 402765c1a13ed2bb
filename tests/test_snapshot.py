import pytest

from lsmcore.snapshot import SnapshotList


def test_new_list_is_empty():
    snapshots = SnapshotList()
    assert snapshots.empty()
    assert len(snapshots) == 0
    assert list(snapshots) == []


def test_oldest_and_newest_on_empty_raise():
    snapshots = SnapshotList()
    with pytest.raises(IndexError):
        snapshots.oldest()
    with pytest.raises(IndexError):
        snapshots.newest()


def test_new_keeps_creation_order():
    snapshots = SnapshotList()
    created = [snapshots.new(seq) for seq in (10, 20, 30)]
    assert not snapshots.empty()
    assert len(snapshots) == 3
    assert snapshots.oldest() is created[0]
    assert snapshots.newest() is created[-1]
    assert [s.sequence for s in snapshots] == [10, 20, 30]


def test_delete_middle_and_ends():
    snapshots = SnapshotList()
    a = snapshots.new(1)
    b = snapshots.new(2)
    c = snapshots.new(3)

    snapshots.delete(b)
    assert list(snapshots) == [a, c]

    snapshots.delete(a)
    assert snapshots.oldest() is c
    assert snapshots.newest() is c

    snapshots.delete(c)
    assert snapshots.empty()
    assert len(snapshots) == 0


def test_delete_foreign_snapshot_raises():
    first = SnapshotList()
    second = SnapshotList()
    snapshot = first.new(5)
    with pytest.raises(ValueError):
        second.delete(snapshot)
    assert list(first) == [snapshot]


def test_delete_twice_raises():
    snapshots = SnapshotList()
    snapshot = snapshots.new(5)
    snapshots.delete(snapshot)
    with pytest.raises(ValueError):
        snapshots.delete(snapshot)
    assert snapshots.empty()


def test_iteration_allows_deleting_current():
    snapshots = SnapshotList()
    for seq in range(6):
        snapshots.new(seq)
    for snapshot in snapshots:
        if snapshot.sequence % 2 == 0:
            snapshots.delete(snapshot)
    assert [s.sequence for s in snapshots] == [1, 3, 5]
    assert len(snapshots) == 3