"""A singly linked list whose nodes are added and removed at the front."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list; iteration runs from the front to the back."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        tail: Optional[Node] = None
        for item in items or ():
            node = Node(item)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node
            self._size += 1

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> None:
        """Put ``content`` in a new node at the front of the list."""
        self._head = Node(content, self._head)
        self._size += 1

    def pop_front(self, on_delete: Optional[Callable[[Any], object]] = None) -> Any:
        """Remove the front node and return its content.

        ``on_delete`` is called with the content before it is returned.
        Raises IndexError if the list is empty.
        """
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        if on_delete is not None:
            on_delete(node.content)
        return node.content

    def clear(self, on_delete: Optional[Callable[[Any], object]] = None) -> None:
        """Remove every node, front first, calling ``on_delete`` on each content."""
        while self._head is not None:
            self.pop_front(on_delete)

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on every content, front to back."""
        for node in self._nodes():
            f(node.content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f`` applied to every content, in order."""
        return LinkedList(f(content) for content in self)

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"