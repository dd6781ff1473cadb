"""A minimal singly linked list whose helpers return the new head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    content: Any = None
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the content of this node and of every node after it."""
        for node in _nodes(self):
            yield node.content


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def lstnew(content: Any) -> Node:
    """Return a detached node holding ``content``."""
    return Node(content)


def lstadd_front(head: Optional[Node], node: Node) -> Node:
    """Put ``node`` before ``head`` and return it as the new head."""
    node.next = head
    return node


def lstlast(head: Optional[Node]) -> Optional[Node]:
    """Return the last node of the list, or None for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lstadd_back(head: Optional[Node], node: Node) -> Node:
    """Append ``node`` after the last node and return the head of the list."""
    last = lstlast(head)
    if last is None:
        return node
    last.next = node
    return head


def lstsize(head: Optional[Node]) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def lstiter(head: Optional[Node], f: Callable[[Any], Any]) -> None:
    """Call ``f`` on the content of every node, front to back."""
    for node in _nodes(head):
        f(node.content)


def lstdelone(node: Node, delete: Callable[[Any], Any]) -> None:
    """Hand the content of ``node`` to ``delete`` and unlink the node."""
    delete(node.content)
    node.content = None
    node.next = None


def lstclear(head: Optional[Node], delete: Callable[[Any], Any]) -> None:
    """Release every node of the list, handing each content to ``delete``.

    Returns None, which is the new (empty) head.
    """
    node = head
    while node is not None:
        following = node.next
        lstdelone(node, delete)
        node = following
    return None