# dsakit

A small collection of classic data structures and algorithms: stack implementations,
problems solved with stacks, an unrolled linked list, circular list splitting and a
couple of recursion exercises. It has no dependencies beyond Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stacks

`dsakit.stack.array_stack` holds two integer stacks backed by a list:

- `FixedSizeArrayStack(capacity=10)` refuses to grow past its capacity.
- `DynamicArrayStack(capacity=16)` doubles its capacity when full (up to 32768) and
  halves it, never below 16, when a pop leaves it a quarter full or less.

Both offer `push`, `pop`, `top`, `is_empty`, `len()`, iteration from bottom to top, a
`capacity` property, and a string form such as `"[1 , 2 , 3]"`.
`FixedSizeArrayStack` also has `is_full`; `DynamicArrayStack` also has `clear`.

`dsakit.stack.linked_stack.LinkedListStack` is an unbounded stack of any values built
on linked nodes. It takes an optional iterable of values to push, iterates from top to
bottom and offers `push`, `pop`, `peek`, `is_empty` and `len()`.

`dsakit.stack.multi_stack` holds:

- `TwoStackWithOneArray(size)`: stacks 1 and 2 sharing `size` slots, with
  `push(stack_id, value)`, `pop(stack_id)`, `peek(stack_id)` and `is_empty(stack_id)`.
- `StackSet(capacity)`: a stack made of fixed-size stacks, starting a new one when the
  last is full, with `push`, `pop`, `pop_from(n)` and a `stack_count` property.

```python
from dsakit.stack.array_stack import FixedSizeArrayStack, DynamicArrayStack
from dsakit.stack.linked_stack import LinkedListStack
from dsakit.stack.multi_stack import TwoStackWithOneArray, StackSet

stack = FixedSizeArrayStack(2)
stack.push(1)
stack.push(2)
stack.is_full()        # True
str(stack)             # "[1 , 2]"

dynamic = DynamicArrayStack(4)
for value in range(5):
    dynamic.push(value)
dynamic.capacity       # 8, the capacity doubled on overflow

linked = LinkedListStack([1, 2, 3])
linked.peek()          # 3
str(linked)            # "[ 3  2  1 ]"

two = TwoStackWithOneArray(10)
two.push(1, 10)
two.push(2, 20)
two.pop(2)             # 20

stacks = StackSet(3)
for value in range(1, 8):
    stacks.push(value)
stacks.stack_count     # 3
stacks.pop_from(0)     # 3
```

Reading from or popping an empty stack raises `StackEmptyError` (an `IndexError`),
pushing onto a full one raises `StackFullError` (an `OverflowError`), and a stack id
that does not exist raises `InvalidStackIdError` (a `LookupError`).

## Stack problems

```python
from dsakit.stack.expressions import (
    is_balanced, infix_to_postfix, evaluate_postfix, is_admissible, is_palindrome_with_marker,
)
from dsakit.stack.array_problems import (
    sort_stack, find_spans, minimum, largest_histogram_area, reverse_stack, reversed_pop_order,
)

is_balanced("({[]})")                 # True
infix_to_postfix("a+b*(c-d)")         # "abcd-*+"
evaluate_postfix("231*+9-")           # -4
is_admissible("SSPP")                 # True
is_palindrome_with_marker("abXba")    # True

find_spans([6, 3, 4, 5, 2])           # [1, 1, 2, 3, 1]
minimum([3, 5, 2, 1, 4])              # 1
largest_histogram_area([2, 1, 5, 6, 2, 3])  # 10
reversed_pop_order([5, 4, 3, 2, 1])   # [5, 4, 3, 2, 1]
```

`evaluate_postfix` works on single-digit operands, divides truncating towards zero and
raises `ValueError` for a malformed expression. `minimum` raises `ValueError` for an
empty input. `sort_stack` returns a `LinkedListStack` that pops from largest to
smallest, and `reverse_stack` reverses a `LinkedListStack` in place.

## Linked lists

`dsakit.linkedlist.unrolled.UnrolledLinkedList(node_capacity)` stores integers in
linked nodes of at most `node_capacity` elements (at least 4, otherwise `ValueError`).
It supports `append`, `insert(index, value)`, `pop(index)`, `remove(value)`,
`set(index, value)`, `search(value)`, `clear`, `is_empty`, indexing, `in`, `len()` and
iteration. Indices out of range raise `IndexError`.

```python
from dsakit.linkedlist.unrolled import UnrolledLinkedList
from dsakit.linkedlist.circular_split import split_circular

items = UnrolledLinkedList(4)
for value in (1, 2, 3, 5):
    items.append(value)
items.insert(3, 4)
list(items)            # [1, 2, 3, 4, 5]
items.pop(0)           # 1
3 in items             # True

split_circular([1, 2, 3])   # ([1, 2], [3])
```

## Recursion

```python
from dsakit.recursion.problems import is_sorted, tower_of_hanoi

is_sorted([1, 2, 3])   # True
tower_of_hanoi(2)      # ["A -> B", "A -> C", "B -> C"]
```

`is_sorted` recurses once per element, so very long inputs hit Python's recursion limit.