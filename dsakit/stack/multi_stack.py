"""Several stacks sharing storage: two stacks in one array, and a set of stacks."""

from __future__ import annotations

from dsakit.stack.array_stack import FixedSizeArrayStack, StackEmptyError, StackFullError


class InvalidStackIdError(LookupError):
    """Raised when a stack is addressed by an identifier that does not exist."""

    def __init__(self, message: str = "invalid stack id") -> None:
        super().__init__(message)


class TwoStackWithOneArray:
    """Two stacks, numbered 1 and 2, growing towards each other in ``size`` slots."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._stacks: dict[int, list[int]] = {1: [], 2: []}

    def _stack(self, stack_id: int) -> list[int]:
        try:
            return self._stacks[stack_id]
        except KeyError:
            raise InvalidStackIdError() from None

    def push(self, stack_id: int, value: int) -> None:
        if sum(len(items) for items in self._stacks.values()) == self._size:
            raise StackFullError()
        self._stack(stack_id).append(value)

    def pop(self, stack_id: int) -> int:
        items = self._stack(stack_id)
        if not items:
            raise StackEmptyError()
        return items.pop()

    def peek(self, stack_id: int) -> int:
        items = self._stack(stack_id)
        if not items:
            raise StackEmptyError()
        return items[-1]

    def is_empty(self, stack_id: int) -> bool:
        """Stack 1 is checked for id 1; any other id checks stack 2."""
        return not self._stacks[1 if stack_id == 1 else 2]


class StackSet:
    """A stack made of fixed-capacity stacks; a new one starts when the last fills up."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._stacks: list[FixedSizeArrayStack] = [FixedSizeArrayStack(capacity)]

    @property
    def stack_count(self) -> int:
        """The number of underlying stacks in use."""
        return len(self._stacks)

    def push(self, value: int) -> None:
        last = self._stacks[-1]
        if last.is_full():
            last = FixedSizeArrayStack(self._capacity)
            self._stacks.append(last)
        last.push(value)

    def pop(self) -> int:
        last = self._stacks[-1]
        value = last.pop()
        if last.is_empty() and len(self._stacks) > 1:
            self._stacks.pop()
        return value

    def pop_from(self, n: int) -> int:
        """Pop from the ``n``-th underlying stack, counted from 0."""
        if not 0 <= n < len(self._stacks):
            raise InvalidStackIdError()
        stack = self._stacks[n]
        value = stack.pop()
        if stack.is_empty() and len(self._stacks) > 1:
            del self._stacks[n]
        return value