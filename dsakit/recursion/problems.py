"""Small problems solved by recursion: sortedness check and Towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if ``values`` is in non-decreasing order.

    The check recurses once per element, so it is bounded by the
    interpreter's recursion limit.
    """

    def check(length: int) -> bool:
        if length <= 1:
            return True
        if values[length - 1] < values[length - 2]:
            return False
        return check(length - 1)

    return check(len(values))


def _moves(disks: int, source: str, target: str, spare: str) -> Iterator[str]:
    if disks == 0:
        return
    yield from _moves(disks - 1, source, spare, target)
    yield f"{source} -> {target}"
    yield from _moves(disks - 1, spare, target, source)


def tower_of_hanoi(disks: int) -> list[str]:
    """Return the moves that carry ``disks`` disks from rod A to rod C using rod B.

    Each move is written as ``"<from> -> <to>"``.
    """
    if disks < 0:
        raise ValueError("the number of disks must not be negative")
    return list(_moves(disks, "A", "C", "B"))