import pytest

from solong.libft.linked import (
    Node,
    lstadd_back,
    lstadd_front,
    lstclear,
    lstdelone,
    lstiter,
    lstlast,
    lstnew,
    lstsize,
)


def _build(*items):
    head = None
    for item in items:
        head = lstadd_back(head, lstnew(item))
    return head


def test_lstnew_holds_content_and_is_detached():
    node = lstnew("hello")
    assert node.content == "hello"
    assert node.next is None


def test_add_back_keeps_order():
    head = lstnew("a")
    head = lstadd_back(head, lstnew("b"))
    head = lstadd_back(head, lstnew("c"))
    assert list(head) == ["a", "b", "c"]


def test_add_back_to_empty_returns_node():
    node = lstnew(1)
    assert lstadd_back(None, node) is node


def test_add_front_becomes_head():
    head = _build("hello2", "hello3")
    head = lstadd_front(head, lstnew("hello1"))
    assert list(head) == ["hello1", "hello2", "hello3"]


def test_add_front_to_empty():
    node = lstnew(7)
    head = lstadd_front(None, node)
    assert head is node
    assert list(head) == [7]


@pytest.mark.parametrize("items", [(), (1,), (1, 2, 3, 4)])
def test_size_matches_item_count(items):
    assert lstsize(_build(*items)) == len(items)


def test_last_of_empty_is_none():
    assert lstlast(None) is None


def test_last_is_final_node():
    head = _build(1, 2, 3)
    last = lstlast(head)
    assert last.content == 3
    assert last.next is None


def test_iter_visits_all_in_order():
    seen = []
    lstiter(_build("x", "y", "z"), seen.append)
    assert seen == ["x", "y", "z"]


def test_iter_on_empty_calls_nothing():
    seen = []
    lstiter(None, seen.append)
    assert seen == []


def test_clear_hands_every_content_to_delete():
    deleted = []
    result = lstclear(_build(1, 2, 3), deleted.append)
    assert result is None
    assert deleted == [1, 2, 3]


def test_delone_deletes_only_that_content():
    head = _build("a", "b")
    deleted = []
    second = head.next
    lstdelone(head, deleted.append)
    assert deleted == ["a"]
    assert head.content is None
    assert second.content == "b"


def test_node_iter_from_middle():
    head = _build(1, 2, 3)
    assert list(head.next) == [2, 3]
    assert isinstance(head, Node)