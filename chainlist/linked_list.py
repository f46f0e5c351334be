"""A singly linked list of integers."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from chainlist.node import Node


class LinkedList:
    """Singly linked list of integers, kept as a chain of nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.value

    def __getitem__(self, position: int) -> int:
        return self.node_at(position).value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        return "<LISTA>\n" + "".join(str(node) for node in self._nodes())

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        last = None
        for last in self._nodes():
            pass
        return last

    def node_at(self, position: int) -> Node:
        """Return the node at a zero-based position."""
        if position < 0:
            raise IndexError("position out of range")
        for index, node in enumerate(self._nodes()):
            if index == position:
                return node
        raise IndexError("position out of range")

    def insert_first(self, value: int) -> None:
        self._head = Node(value, self._head)

    def append(self, value: int) -> None:
        last = self.tail
        if last is None:
            self.insert_first(value)
        else:
            last.next = Node(value)

    def insert(self, position: int, value: int) -> None:
        """Insert a value so that it ends up at the given position."""
        if position < 0:
            raise IndexError("cannot insert at a negative position")
        if position > len(self):
            raise IndexError("cannot insert at a position that does not exist")
        if position == 0:
            self.insert_first(value)
            return
        previous = self.node_at(position - 1)
        previous.next = Node(value, previous.next)

    def first(self) -> int:
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.value

    def last(self) -> int:
        last = self.tail
        if last is None:
            raise IndexError("list is empty")
        return last.value

    def pop_first(self) -> int:
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        return removed.value

    def pop_last(self) -> int:
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            value = self._head.value
            self._head = None
            return value
        current = self._head
        while current.next.next is not None:
            current = current.next
        value = current.next.value
        current.next = None
        return value

    def pop(self, position: int) -> int:
        """Remove and return the value at a zero-based position."""
        if position < 0 or position >= len(self):
            raise IndexError("position out of range")
        if position == 0:
            return self.pop_first()
        previous = self.node_at(position - 1)
        removed = previous.next
        previous.next = removed.next
        return removed.value

    def clear(self) -> None:
        self._head = None

    def sort(self) -> None:
        """Sort the values in place, ascending, keeping the nodes."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def sorted_copy(self) -> LinkedList:
        result = self.copy()
        result.sort()
        return result

    def copy(self) -> LinkedList:
        return LinkedList(self)

    def find(self, value: int) -> int:
        """Return the position of the first occurrence of value, or -1."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return -1

    def insert_sorted(self, value: int) -> None:
        """Insert a value before the first element not smaller than it."""
        if self._head is None or self._head.value >= value:
            self.insert_first(value)
            return
        current = self._head
        while current.next is not None and current.next.value < value:
            current = current.next
        current.next = Node(value, current.next)