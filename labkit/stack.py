"""A last-in, first-out stack of values."""

from __future__ import annotations

import sys
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

EMPTY_STACK_ERR = "Stack is empty"


class Stack(Generic[T]):
    """A stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, element: T) -> None:
        """Put an element on top."""
        self._items.append(element)

    def pop(self) -> None:
        """Remove the top element."""
        if not self._items:
            raise IndexError(EMPTY_STACK_ERR)
        self._items.pop()

    def top(self) -> T:
        """The top element."""
        if not self._items:
            raise IndexError(EMPTY_STACK_ERR)
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def copy(self) -> Stack[T]:
        """An independent stack with the same elements."""
        duplicate: Stack[T] = Stack()
        duplicate._items = list(self._items)
        return duplicate

    def take(self) -> Stack[T]:
        """Move the elements into a new stack, leaving this one empty."""
        moved: Stack[T] = Stack()
        moved._items, self._items = self._items, []
        return moved

    def __len__(self) -> int:
        return len(self._items)


def _flag(value: bool) -> int:
    return int(value)


def _demo(title: str, first: object, second: object, out) -> None:
    stack: Stack[object] = Stack()
    out.write(f"{title}\n")
    out.write(f"Init stack: Is emtpy(result): {_flag(stack.is_empty())}\n")
    for label, action in (
        ("After stack push one element: ", lambda: stack.push(first)),
        ("After stack push two elements: ", lambda: stack.push(second)),
        ("After stack pop one element: ", stack.pop),
    ):
        action()
        out.write(
            f"{label}\tIs emtpy(result): {_flag(stack.is_empty())}"
            f"\tStack top: {stack.top()}\n"
        )
    stack.clear()
    out.write(f"After stack clear: \tIs emtpy(result): {_flag(stack.is_empty())}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Show the stack operations on integers and on strings."""
    out = sys.stdout
    _demo("Integer stack example", 1, 2, out)
    out.write("\n")
    _demo("String stack example", "abc", "def", out)
    return 0