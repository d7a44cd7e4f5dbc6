import pytest

from dsalgo.cursor_list import CursorList


@pytest.fixture
def filled():
    items = CursorList(10)
    for value in (5.0, 10.0, 15.0):
        assert items.insert(value)
    return items


def test_insert_puts_new_values_in_front(filled):
    assert list(filled) == [15.0, 10.0, 5.0]
    assert len(filled) == 3


def test_find_present_and_absent(filled):
    index = filled.find(10.0)
    assert index is not None
    assert 0 <= index < filled.capacity
    assert filled.find(20.0) is None


def test_duplicate_insert_is_ignored(filled):
    assert filled.insert(10.0) is True
    assert len(filled) == 3


def test_insert_after(filled):
    assert filled.insert_after(10.0, 12.0)
    assert filled.insert_after(15.0, 18.0)
    assert list(filled) == [15.0, 18.0, 10.0, 12.0, 5.0]


def test_insert_after_missing_old_fails(filled):
    assert filled.insert_after(99.0, 1.0) is False
    assert filled.find(1.0) is None


def test_remove(filled):
    filled.insert_after(10.0, 12.0)
    filled.insert_after(15.0, 18.0)
    assert filled.remove(10.0)
    assert filled.remove(5.0)
    assert filled.remove(20.0) is False
    assert filled.find(12.0) is not None
    assert filled.find(18.0) is not None
    assert list(filled) == [15.0, 18.0, 12.0]


def test_full_list_rejects_new_values():
    items = CursorList(2)
    assert items.insert(1.0)
    assert items.insert(2.0)
    assert items.insert(3.0) is False
    assert items.insert_after(1.0, 3.0) is False
    assert items.insert(2.0) is True
    assert len(items) == 2


def test_removed_cell_is_reused(filled):
    freed = filled.find(10.0)
    assert filled.remove(10.0)
    filled.insert(7.0)
    assert filled.find(7.0) == freed


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CursorList(0)