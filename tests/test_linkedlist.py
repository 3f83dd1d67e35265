import pytest

from minitalk.linkedlist import LinkedList, Node


def test_init_keeps_order():
    assert list(LinkedList(["1", "2", "3"])) == ["1", "2", "3"]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList(["b"])
    node = lst.push_front("a")
    assert list(lst) == ["a", "b"]
    assert lst.head is node


def test_push_back_appends_to_empty_and_nonempty():
    lst = LinkedList()
    lst.push_back("x")
    lst.push_back("y")
    assert list(lst) == ["x", "y"]


def test_last_is_tail_node():
    lst = LinkedList(["1", "2"])
    expected = lst.push_back("3")
    assert lst.last() is expected
    assert lst.last().content == "3"


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    assert len(lst) == len(list(lst))
    lst.push_front(-1)
    assert len(lst) == len(list(range(5))) + 1


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["a", "b", "c"]).for_each(seen.append)
    assert seen == ["a", "b", "c"]


def test_map_returns_new_list_leaving_original():
    original = LinkedList(["a", "b"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(original) == ["a", "b"]
    assert mapped is not original


def test_clear_calls_on_delete_for_each_value():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_callback_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_map_propagates_errors():
    def boom(_):
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


def test_node_defaults_to_no_next():
    node = Node("v")
    assert node.next is None
    assert node.content == "v"