"""Array-backed stacks: a fixed-capacity stack and a growable one."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DEFAULT_CAPACITY = 10
DEFAULT_DYNAMIC_CAPACITY = 16
MAX_DYNAMIC_CAPACITY = 1 << 15


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""

    def __init__(self, message: str = "stack is empty") -> None:
        super().__init__(message)


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has no room left."""

    def __init__(self, message: str = "stack is full") -> None:
        super().__init__(message)


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


def _format(items: Iterable[int]) -> str:
    return "[" + " , ".join(str(item) for item in items) + "]"


class FixedSizeArrayStack:
    """A stack of integers that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        """The largest number of elements the stack can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackFullError()
        self._items.append(value)

    def top(self) -> int:
        if not self._items:
            raise StackEmptyError()
        return self._items[-1]

    def pop(self) -> int:
        if not self._items:
            raise StackEmptyError()
        return self._items.pop()

    def __str__(self) -> str:
        return _format(self._items)


class DynamicArrayStack:
    """A stack of integers whose capacity doubles when full and halves when sparse."""

    def __init__(self, capacity: int = DEFAULT_DYNAMIC_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        """The number of slots currently reserved for elements."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: int) -> None:
        if len(self._items) == self._capacity:
            self._expand()
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackEmptyError()
        value = self._items.pop()
        if len(self._items) <= self._capacity // 4:
            self._capacity = max(self._capacity >> 1, DEFAULT_DYNAMIC_CAPACITY)
        return value

    def top(self) -> int:
        if not self._items:
            raise StackEmptyError()
        return self._items[-1]

    def clear(self) -> None:
        """Drop every element; the reserved capacity is kept."""
        self._items.clear()

    def __str__(self) -> str:
        return _format(self._items)

    def _expand(self) -> None:
        new_capacity = min(self._capacity << 1, MAX_DYNAMIC_CAPACITY)
        if new_capacity <= len(self._items):
            raise StackFullError()
        self._capacity = new_capacity