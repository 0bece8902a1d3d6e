import pytest

from libft.lists import LinkedList, Node


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert ll.last() is None
    assert list(ll) == []


def test_init_keeps_order():
    ll = LinkedList([1, 2, 3])
    assert list(ll) == [1, 2, 3]
    assert len(ll) == 3


def test_add_front():
    ll = LinkedList(["b"])
    node = ll.add_front("a")
    assert ll.head is node
    assert list(ll) == ["a", "b"]


def test_add_back_and_last():
    ll = LinkedList(["a"])
    node = ll.add_back("z")
    assert ll.last() is node
    assert node.content == "z"
    assert list(ll) == ["a", "z"]


def test_add_back_on_empty_sets_head():
    ll = LinkedList()
    node = ll.add_back(5)
    assert ll.head is node
    assert ll.last() is node


def test_node_links():
    second = Node(2)
    first = Node(1, second)
    assert first.next is second
    assert second.next is None


def test_clear_calls_delete_in_order():
    ll = LinkedList([1, 2, 3])
    seen = []
    ll.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(ll) == 0
    assert ll.head is None


def test_clear_without_delete_empties():
    ll = LinkedList("abc")
    ll.clear()
    assert list(ll) == []


def test_for_each_visits_all():
    ll = LinkedList([1, 2, 3])
    seen = []
    ll.for_each(seen.append)
    assert seen == list(ll)


def test_map_builds_new_list():
    ll = LinkedList(["a", "b"])
    mapped = ll.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(ll) == ["a", "b"]
    assert mapped.head is not ll.head


def test_map_cleans_up_on_error():
    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    deleted = []
    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0