import pytest

from ftkit.linkedlist import LinkedList, Node


def _walk(lst):
    node = lst.head
    while node is not None:
        yield node
        node = node.next


def test_build_and_iterate():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert lst.head is None
    assert list(lst) == []


def test_node_defaults():
    node = Node("x")
    assert node.content == "x"
    assert node.nbr == 0
    assert node.index == 0
    assert node.next is None
    assert node.prev is None


def test_push_front():
    lst = LinkedList(["b", "c"])
    node = Node("a")
    lst.push_front(node)
    assert lst.head is node
    assert list(lst) == ["a", "b", "c"]


def test_push_front_none_is_ignored():
    lst = LinkedList([1, 2])
    lst.push_front(None)
    assert list(lst) == [1, 2]


def test_push_back_into_empty_sets_head():
    lst = LinkedList()
    node = Node(7)
    lst.push_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1, 2])
    node = Node(3)
    lst.push_back(node)
    assert list(lst) == [1, 2, 3]
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList(["x", "y", "z"])
    assert lst.last().content == "z"
    assert lst.last().next is None


def test_remove_middle_calls_delete():
    lst = LinkedList(["a", "b", "c"])
    middle = lst.head.next
    deleted = []
    lst.remove(middle, deleted.append)
    assert deleted == ["b"]
    assert list(lst) == ["a", "c"]
    assert middle.next is None


def test_remove_head():
    lst = LinkedList(["a", "b"])
    lst.remove(lst.head)
    assert list(lst) == ["b"]


def test_remove_foreign_node_raises():
    lst = LinkedList(["a"])
    with pytest.raises(ValueError):
        lst.remove(Node("a"))
    assert list(lst) == ["a"]


def test_remove_keeps_prev_links_consistent():
    lst = LinkedList([1, 2, 3])
    lst.link_prev()
    lst.remove(lst.head.next)
    assert lst.head.next.prev is lst.head


def test_clear_deletes_in_order():
    lst = LinkedList([1, 2, 3])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_link_prev():
    lst = LinkedList(["a", "b", "c", "d"])
    lst.link_prev()
    nodes = list(_walk(lst))
    assert nodes[0].prev is None
    for before, after in zip(nodes, nodes[1:]):
        assert after.prev is before


def test_len_matches_iteration():
    contents = list(range(10))
    lst = LinkedList(contents)
    assert len(lst) == len(contents)
    assert list(lst) == contents