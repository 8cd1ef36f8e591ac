"""A stack built on a chain of singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.stack.array_stack import StackEmptyError


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedListStack:
    """An unbounded stack of arbitrary values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: Optional[_Node] = None
        self._length = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        self._top = _Node(value, self._top)
        self._length += 1

    def peek(self) -> Any:
        if self._top is None:
            raise StackEmptyError()
        return self._top.value

    def pop(self) -> Any:
        value = self.peek()
        self._top = self._top.next
        self._length -= 1
        return value

    def __str__(self) -> str:
        if self._top is None:
            return "[]"
        return "[" + "".join(f" {value} " for value in self) + "]"