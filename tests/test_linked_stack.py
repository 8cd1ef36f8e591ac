import pytest

from dsakit.stack.array_stack import StackEmptyError
from dsakit.stack.linked_stack import LinkedListStack

CASES = [([1, 2, 3], [3, 2, 1]), ([1, 2], [2, 1]), ([1], [1]), ([], [])]


@pytest.mark.parametrize("values, top_first", CASES)
def test_push_one_by_one_iterates_top_first(values, top_first):
    stack = LinkedListStack()
    for value in values:
        stack.push(value)
    assert list(stack) == top_first
    assert len(stack) == len(values)


@pytest.mark.parametrize("values, top_first", CASES)
def test_pop_until_empty(values, top_first):
    stack = LinkedListStack(values)
    assert [stack.pop() for _ in values] == top_first
    with pytest.raises(StackEmptyError):
        stack.pop()


@pytest.mark.parametrize("values, top_first", CASES)
def test_peek_does_not_remove(values, top_first):
    stack = LinkedListStack(values)
    if top_first:
        assert stack.peek() == top_first[0]
    else:
        with pytest.raises(StackEmptyError):
            stack.peek()
    assert len(stack) == len(values)


def test_length_and_emptiness_follow_operations():
    stack = LinkedListStack()
    history = []
    for action in ["push", "push", "pop", "pop"]:
        if action == "push":
            stack.push(len(history))
        else:
            stack.pop()
        history.append((len(stack), stack.is_empty()))
    assert history == [(1, False), (2, False), (1, False), (0, True)]


@pytest.mark.parametrize(
    "values, expected",
    [([], "[]"), ([1], "[ 1 ]"), ([1, 2, 3], "[ 3  2  1 ]")],
)
def test_str(values, expected):
    assert str(LinkedListStack(values)) == expected


def test_holds_arbitrary_values():
    stack = LinkedListStack(["(", "x"])
    assert stack.pop() == "x"
    assert stack.peek() == "("