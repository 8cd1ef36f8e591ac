"""Splitting a circular linked list into two halves."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


def _build_circle(values: Iterable[Any]) -> Optional[_Node]:
    head: Optional[_Node] = None
    tail: Optional[_Node] = None
    for value in values:
        node = _Node(value)
        if head is None or tail is None:
            head = node
        else:
            tail.next = node
            node.next = head
        tail = node
    return head


def _walk(head: Optional[_Node]) -> Iterator[Any]:
    if head is None:
        return
    node = head
    while True:
        yield node.value
        node = node.next
        if node is head:
            break


def split_circular(values: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    """Split a circular list built from ``values`` into two circular halves.

    The first half takes the extra element when the length is odd. Each half
    is returned as a list, starting from its head.
    """
    head = _build_circle(values)
    if head is None:
        return [], []

    slow = fast = head
    while fast.next is not head and fast.next.next is not head:
        fast = fast.next.next
        slow = slow.next
    if fast.next.next is head:
        fast = fast.next

    second_head = slow.next if head.next is not head else None
    fast.next = slow.next
    slow.next = head
    return list(_walk(head)), list(_walk(second_head))