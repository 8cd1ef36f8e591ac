"""An unrolled linked list: a doubly linked chain of small arrays of integers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

MIN_NODE_CAPACITY = 4


class _Node:
    __slots__ = ("items", "next", "prev")

    def __init__(self, items: Optional[list[int]] = None) -> None:
        self.items: list[int] = items if items is not None else []
        self.next: Optional[_Node] = None
        self.prev: Optional[_Node] = None


class UnrolledLinkedList:
    """A list of integers stored in linked nodes of at most ``node_capacity`` elements.

    A full node is split in half on insertion; after a removal a node is
    merged with a neighbour whenever both fit into one node.
    """

    def __init__(self, node_capacity: int) -> None:
        if node_capacity < MIN_NODE_CAPACITY:
            raise ValueError(
                f"node capacity must be at least {MIN_NODE_CAPACITY}, got {node_capacity}"
            )
        self._capacity = node_capacity
        self._first = _Node()
        self._last = self._first
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node]:
        node: Optional[_Node] = self._first
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield from node.items

    def __contains__(self, value: object) -> bool:
        return self.search(value) != -1

    def __getitem__(self, index: int) -> int:
        self._check_index(index, self._size - 1)
        node, offset = self._find(index)
        return node.items[index - offset]

    def is_empty(self) -> bool:
        return self._size == 0

    def append(self, value: int) -> None:
        self._insert(self._last, len(self._last.items), value)

    def remove(self, value: int) -> bool:
        """Remove the first occurrence of ``value``; return whether one was found."""
        for node in self._nodes():
            try:
                position = node.items.index(value)
            except ValueError:
                continue
            self._remove(node, position)
            return True
        return False

    def clear(self) -> None:
        self._first = _Node()
        self._last = self._first
        self._size = 0

    def set(self, index: int, value: int) -> int:
        """Replace the element at ``index`` and return the one it held before."""
        self._check_index(index, self._size - 1)
        node, offset = self._find(index)
        old = node.items[index - offset]
        node.items[index - offset] = value
        return old

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` before position ``index``; ``index`` may equal the length."""
        self._check_index(index, self._size)
        node, offset = self._find(index)
        self._insert(node, index - offset, value)

    def pop(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        self._check_index(index, self._size - 1)
        node, offset = self._find(index)
        return self._remove(node, index - offset)

    def search(self, value: object) -> int:
        """Return the index of the first occurrence of ``value``, or -1."""
        offset = 0
        for node in self._nodes():
            try:
                return offset + node.items.index(value)
            except ValueError:
                offset += len(node.items)
        return -1

    @staticmethod
    def _check_index(index: int, highest: int) -> None:
        if not isinstance(index, int):
            raise TypeError(f"list indices must be integers, not {type(index).__name__}")
        if index < 0 or index > highest:
            raise IndexError("index out of bounds")

    def _find(self, index: int) -> tuple[_Node, int]:
        """Return the node holding position ``index`` and the index of its first element."""
        if self._size - index > index:
            node, offset = self._first, 0
            while index >= offset + len(node.items) and node.next is not None:
                offset += len(node.items)
                node = node.next
        else:
            node = self._last
            offset = self._size - len(node.items)
            while offset > index and node.prev is not None:
                node = node.prev
                offset -= len(node.items)
        return node, offset

    def _insert(self, node: _Node, position: int, value: int) -> None:
        if len(node.items) == self._capacity:
            keep = self._capacity - self._capacity // 2
            new_node = _Node(node.items[keep:])
            del node.items[keep:]
            new_node.next = node.next
            new_node.prev = node
            if node.next is not None:
                node.next.prev = new_node
            node.next = new_node
            if node is self._last:
                self._last = new_node
            if position > keep:
                node = new_node
                position -= keep
        node.items.insert(position, value)
        self._size += 1

    def _remove(self, node: _Node, position: int) -> int:
        value = node.items.pop(position)
        if node.next is not None and len(node.next.items) + len(node.items) <= self._capacity:
            self._merge_with_next(node)
        elif node.prev is not None and len(node.prev.items) + len(node.items) <= self._capacity:
            self._merge_with_next(node.prev)
        self._size -= 1
        return value

    def _merge_with_next(self, node: _Node) -> None:
        following = node.next
        assert following is not None
        node.items.extend(following.items)
        node.next = following.next
        if following.next is not None:
            following.next.prev = node
        if following is self._last:
            self._last = node