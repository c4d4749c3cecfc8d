"""A singly linked list of nodes, with an optional backward link."""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list element: a payload, two integer slots and the links."""

    content: Any = None
    nbr: int = 0
    index: int = 0
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A chain of ``Node`` objects starting at ``head``.

    Iterating yields the nodes' contents from front to back. Backward links
    (``prev``) are only filled in by ``link_prev``.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for content in contents:
            node = Node(content)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def push_front(self, node: Optional[Node]) -> None:
        """Insert ``node`` before the current head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the last node, or make it the head of an empty list."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove(self, node: Node, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Unlink ``node`` from the list and pass its content to ``delete``.

        Raises ``ValueError`` if the node is not part of this list.
        """
        before: Optional[Node] = None
        for current in self._nodes():
            if current is node:
                break
            before = current
        else:
            raise ValueError("node is not in the list")
        if before is None:
            self.head = node.next
        else:
            before.next = node.next
        if node.next is not None and node.next.prev is node:
            node.next.prev = before
        node.next = None
        node.prev = None
        if delete is not None:
            delete(node.content)

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` front to back."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
            node.prev = None
        self.head = None

    def link_prev(self) -> None:
        """Point each node's ``prev`` at the node before it."""
        for node in self._nodes():
            if node.next is not None:
                node.next.prev = node