"""Stack of student records kept as a linked list, with an interactive menu."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator, Sequence

from recordkit.single_list import Student, _EndOfInput, _make_student, _Node, _Reader

MAX_NAME_SZ = 31


class Stack:
    """Last-in, first-out store of student records."""

    def __init__(self) -> None:
        self._top: _Node | None = None

    def push(self, id: int, name: str) -> Student:
        """Put a record on top of the stack."""
        self._top = _Node(_make_student(id, name, MAX_NAME_SZ), self._top)
        return self._top.student

    def pop(self) -> Student:
        """Remove and return the top record; raise IndexError when empty."""
        if self._top is None:
            raise IndexError("no data in stack")
        student, self._top = self._top.student, self._top.next
        return student

    def clear(self) -> None:
        """Remove every record."""
        self._top = None

    def __iter__(self) -> Iterator[Student]:
        node = self._top
        while node is not None:
            yield node.student
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the push/pop menu on standard input until exit or end of input."""
    stack = Stack()
    reader = _Reader(sys.stdin)
    with contextlib.suppress(_EndOfInput):
        while True:
            print("Enter the required option\n:---- 1-push 2-pop 3-exit ----")
            choice = reader.number()
            if choice == 1:
                if reader.add(stack.push, ("enter id:", "enter name:")):
                    print("data pushed to stack")
            elif choice == 2:
                try:
                    print(f"data poped from stack\n{stack.pop()}")
                except IndexError as exc:
                    print(exc)
            else:
                break
    return 0