import pytest

from solong.linked import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert items.last() is None
    assert list(items) == []


def test_push_back_keeps_order():
    items = LinkedList()
    for value in ("a", "b", "c"):
        items.push_back(value)
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_reverses_order():
    items = LinkedList()
    for value in (1, 2, 3):
        items.push_front(value)
    assert list(items) == [3, 2, 1]


def test_last_is_the_most_recent_push_back():
    items = LinkedList([1, 2])
    node = items.push_back(3)
    assert items.last() is node
    assert node.content == 3
    assert node.next is None


def test_push_front_links_to_old_head():
    items = LinkedList(["x"])
    old_head = items.head
    node = items.push_front("y")
    assert items.head is node
    assert node.next is old_head


def test_push_front_on_empty_list_is_also_last():
    items = LinkedList()
    node = items.push_front("only")
    assert items.last() is node
    assert len(items) == 1


def test_mixed_pushes():
    items = LinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]


@pytest.mark.parametrize("values", [[], [0], list(range(10))])
def test_length_matches_iteration(values):
    items = LinkedList(values)
    assert len(items) == len(values)
    assert list(items) == values


def test_node_defaults():
    node = Node("content")
    assert node.next is None
    assert node.content == "content"