import pytest

from structkit.doubly_linked import DoublyLinkedList


def _check_links(lst):
    assert list(reversed(lst)) == list(reversed(list(lst)))
    assert len(lst) == len(list(lst))


def test_init_and_iterate():
    lst = DoublyLinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    _check_links(lst)


def test_insert_beginning_and_end():
    lst = DoublyLinkedList()
    lst.insert_end(2)
    lst.insert_beginning(1)
    lst.insert_end(3)
    assert list(lst) == [1, 2, 3]
    _check_links(lst)


def test_insert_before_and_after():
    lst = DoublyLinkedList([10, 30])
    lst.insert_before(5, 10)
    lst.insert_after(20, 10)
    lst.insert_after(40, 30)
    assert list(lst) == [5, 10, 20, 30, 40]
    _check_links(lst)


def test_insert_with_missing_key():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(KeyError):
        lst.insert_before(0, 7)
    with pytest.raises(KeyError):
        lst.insert_after(0, 7)
    assert list(lst) == [1, 2]


def test_delete_beginning_and_end():
    lst = DoublyLinkedList([1, 2, 3])
    assert lst.delete_beginning() == 1
    assert lst.delete_end() == 3
    assert list(lst) == [2]
    assert lst.delete_end() == 2
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.delete_beginning()
    with pytest.raises(IndexError):
        lst.delete_end()


def test_delete_by_key():
    lst = DoublyLinkedList([4, 5, 6, 5])
    assert lst.delete(5) == 5
    assert list(lst) == [4, 6, 5]
    _check_links(lst)
    with pytest.raises(KeyError):
        lst.delete(99)


def test_delete_from_empty():
    with pytest.raises(IndexError):
        DoublyLinkedList().delete(1)


def test_reverse():
    items = [3, 1, 4, 1, 5]
    lst = DoublyLinkedList(items)
    lst.reverse()
    assert list(lst) == items[::-1]
    assert list(reversed(lst)) == items
    lst.insert_end(9)
    assert list(lst)[-1] == 9


def test_reverse_empty():
    lst = DoublyLinkedList()
    lst.reverse()
    assert list(lst) == []


def test_str_format():
    assert str(DoublyLinkedList([1, 2])) == "start:     1 ->     2 -> :end"
    assert str(DoublyLinkedList()) == "start: :end"