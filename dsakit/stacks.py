"""Stacks and the expression algorithms built on them."""

from __future__ import annotations

from typing import Iterable, Iterator

from dsakit.linkedlist import Node

DEFAULT_CAPACITY = 1000

_DIGITS = "0123456789"


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""

    def __init__(self, message: str = "Stack Underflow") -> None:
        super().__init__(message)


class ArrayStack:
    """A bounded stack; pushes past the capacity are ignored."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Push ``value`` unless the stack is already full."""
        if len(self._items) < self.capacity:
            self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError()
        return self._items.pop()

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._top = Node(value, next=self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError()
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        """Yield values from the top down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _precedence(operator: str) -> int:
    if operator == "^":
        return 3
    if operator in "*/":
        return 2
    if operator in "+-":
        return 1
    return 0


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, are treated as
    left-associative.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced ')' in expression")
            stack.pop()
        else:
            while stack and _precedence(stack[-1]) >= _precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _divide(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands.

    Only the first line is read and spaces are skipped. A missing operand
    counts as 0; division truncates toward zero. Any other character pops
    two operands and pushes nothing.
    """
    stack = LinkedStack()

    def pop_or_zero() -> int:
        return stack.pop() if len(stack) else 0

    for char in expression.partition("\n")[0]:
        if char == " ":
            continue
        if char in _DIGITS:
            stack.push(int(char))
            continue
        right = pop_or_zero()
        left = pop_or_zero()
        if char == "+":
            stack.push(left + right)
        elif char == "-":
            stack.push(left - right)
        elif char == "*":
            stack.push(left * right)
        elif char == "/":
            if right == 0:
                raise ZeroDivisionError("division by zero in expression")
            stack.push(_divide(left, right))
    return pop_or_zero()