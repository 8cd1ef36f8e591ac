"""Stack-based checks and conversions on strings of symbols."""

from __future__ import annotations

_OPENING = {")": "(", "}": "{", "]": "["}
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def is_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Characters other than ``()[]{}`` are ignored.
    """
    stack: list[str] = []
    for char in text:
        if char in "({[":
            stack.append(char)
        elif char in _OPENING:
            if not stack or stack[-1] != _OPENING[char]:
                return False
            stack.pop()
    return not stack


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    Operators are ``+ - * / ^``, all left-associative, with ``^`` binding
    tightest. Characters that are neither letters, operators nor parentheses
    are ignored.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char in _PRECEDENCE:
            while stack and _PRECEDENCE.get(stack[-1], 0) >= _PRECEDENCE[char]:
                output.append(stack.pop())
            stack.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack:
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif char.isascii() and char.isalpha():
            output.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _truncating_divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


_OPERATIONS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_divide,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Division truncates towards zero. Raises ValueError for a malformed
    expression and ZeroDivisionError on division by zero.
    """
    stack: list[int] = []
    for char in expression:
        operation = _OPERATIONS.get(char)
        if operation is not None:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(operation(left, right))
        elif "0" <= char <= "9":
            stack.append(ord(char) - ord("0"))
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    if len(stack) != 1:
        raise ValueError("expression does not reduce to a single value")
    return stack[0]


def is_admissible(operations: str) -> bool:
    """Return True if no pop in ``operations`` meets an empty stack.

    ``S`` is a push; every other character is a pop. Elements left on the
    stack at the end do not make the string inadmissible.
    """
    depth = 0
    for char in operations:
        if char == "S":
            depth += 1
        elif depth == 0:
            return False
        else:
            depth -= 1
    return True


def is_palindrome_with_marker(text: str) -> bool:
    """Return True if the part after the first ``X`` mirrors the part before it.

    Each character after the marker must match the next character popped
    from the part before it. Without a marker the text is accepted.
    """
    head, marker, tail = text.partition("X")
    if not marker:
        return True
    stack = list(head)
    for char in tail:
        if not stack or stack.pop() != char:
            return False
    return True