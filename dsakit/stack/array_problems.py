"""Problems on sequences of integers that are solved with a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from dsakit.stack.linked_stack import LinkedListStack


def sort_stack(values: Iterable[int]) -> LinkedListStack:
    """Sort ``values`` using only stack operations.

    The first value is the top of the input stack. The returned stack holds
    the values in ascending order from bottom to top, so popping it yields
    them from largest to smallest.
    """
    pending = LinkedListStack(reversed(list(values)))
    result = LinkedListStack()
    while not pending.is_empty():
        current = pending.pop()
        while not result.is_empty() and result.peek() > current:
            pending.push(result.pop())
        result.push(current)
    return result


def find_spans(values: Sequence[int]) -> list[int]:
    """Return the span of every element of ``values``.

    The span of an element is the number of consecutive elements ending at
    it, itself included, that are not greater than it.
    """
    indices = LinkedListStack()
    spans: list[int] = []
    for index, value in enumerate(values):
        while not indices.is_empty() and value >= values[indices.peek()]:
            indices.pop()
        previous = -1 if indices.is_empty() else indices.peek()
        spans.append(index - previous)
        indices.push(index)
    return spans


def minimum(values: Iterable[int]) -> int:
    """Return the smallest of ``values``, tracked with an auxiliary min stack.

    Raises ValueError if ``values`` is empty.
    """
    minimums = LinkedListStack()
    for value in values:
        if minimums.is_empty() or minimums.peek() > value:
            minimums.push(value)
    if minimums.is_empty():
        raise ValueError("minimum of an empty sequence")
    return minimums.peek()


def largest_histogram_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram of unit-width bars."""
    indices = LinkedListStack()
    best = 0

    def close_top(position: int) -> int:
        height = heights[indices.pop()]
        width = position if indices.is_empty() else position - indices.peek() - 1
        return height * width

    position = 0
    while position < len(heights):
        if indices.is_empty() or heights[position] >= heights[indices.peek()]:
            indices.push(position)
            position += 1
        else:
            best = max(best, close_top(position))
    while not indices.is_empty():
        best = max(best, close_top(position))
    return best


def _insert_at_bottom(stack: LinkedListStack, item: Any) -> None:
    if stack.is_empty():
        stack.push(item)
        return
    top = stack.pop()
    _insert_at_bottom(stack, item)
    stack.push(top)


def reverse_stack(stack: LinkedListStack) -> None:
    """Reverse ``stack`` in place using only push and pop."""
    if stack.is_empty():
        return
    top = stack.pop()
    reverse_stack(stack)
    _insert_at_bottom(stack, top)


def reversed_pop_order(values: Iterable[int]) -> list[int]:
    """Push ``values``, reverse the stack, and return the values in the order popped."""
    stack = LinkedListStack(values)
    reverse_stack(stack)
    result: list[int] = []
    while not stack.is_empty():
        result.append(stack.pop())
    return result