"""Singly linked list of student records with an interactive menu."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

MAX_NAME_SZ = 15

MENU = (
    "enter your choice:\n1 : add in begining\n2 : add in end\n3 : search by id\n"
    "4 : count\n5 : delete by id\n6 : print\n7: swap nodes\n8: reverse nodes\n"
    "9 : print,clear and exit\n**********"
)
_ADD_PROMPTS = ("enter record id to add", "enter name to add")


@dataclass(frozen=True)
class Student:
    """A student record: a numeric id and a short name."""

    id: int
    name: str

    def __str__(self) -> str:
        return f"id:{self.id} name:{self.name}"


def _make_student(id: int, name: str, limit: int = MAX_NAME_SZ) -> Student:
    if not name or len(name) > limit or any(c.isspace() for c in name):
        raise ValueError(
            f"name must be 1 to {limit} characters without whitespace: {name!r}"
        )
    return Student(int(id), name)


class _Node:
    __slots__ = ("student", "next")

    def __init__(self, student: Student, next: _Node | None = None) -> None:
        self.student = student
        self.next = next


class _EndOfInput(Exception):
    """The menu input ran out or held something other than a number."""


class _Reader:
    """Whitespace-separated words read from a text stream."""

    def __init__(self, stream: Iterable[str]) -> None:
        self._words = (word for line in stream for word in line.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise _EndOfInput from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise _EndOfInput from None

    def add(
        self,
        add: Callable[[int, str], Student],
        prompts: tuple[str, str] = _ADD_PROMPTS,
    ) -> bool:
        """Prompt for an id and a name, pass them to ``add``; report a bad name."""
        print(prompts[0])
        id = self.number()
        print(prompts[1])
        name = self.word()
        try:
            add(id, name)
        except ValueError as exc:
            print(exc)
            return False
        return True


def _print_all(records: Iterable[Student], empty: str | None = None) -> None:
    shown = False
    for student in records:
        print(student)
        shown = True
    if not shown and empty is not None:
        print(empty)


class SinglyLinkedList:
    """Student records linked in one direction from the head."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def _find(self, id: int) -> tuple[_Node | None, _Node | None]:
        prev, node = None, self._head
        while node is not None and node.student.id != id:
            prev, node = node, node.next
        return prev, node

    def _link_after(self, prev: _Node | None, node: _Node) -> None:
        if prev is None:
            self._head = node
        else:
            prev.next = node

    def add_begin(self, id: int, name: str) -> Student:
        """Insert a record in front of the first one."""
        student = _make_student(id, name)
        self._head = _Node(student, self._head)
        return student

    def add_end(self, id: int, name: str) -> Student:
        """Append a record after the last one."""
        student = _make_student(id, name)
        last = self._head
        while last is not None and last.next is not None:
            last = last.next
        self._link_after(last, _Node(student))
        return student

    def search(self, id: int) -> int | None:
        """Return the 1-based position of the first record with ``id``, or None."""
        return next(
            (pos for pos, s in enumerate(self, start=1) if s.id == id), None
        )

    def delete(self, id: int) -> bool:
        """Remove the first record with ``id``; return whether one was removed."""
        prev, node = self._find(id)
        if node is None:
            return False
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        return True

    def swap(self, id1: int, id2: int) -> None:
        """Exchange the places of the records with ids ``id1`` and ``id2``."""
        prev_x, x = self._find(id1)
        prev_y, y = self._find(id2)
        if x is None or y is None:
            raise KeyError(f"cannot swap {id1} and {id2}: id not in list")
        self._link_after(prev_x, y)
        self._link_after(prev_y, x)
        x.next, y.next = y.next, x.next

    def reverse(self) -> None:
        """Reverse the order of the records in place."""
        prev, node = None, self._head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._head = prev

    def clear(self) -> None:
        """Remove every record."""
        self._head = None

    def __iter__(self) -> Iterator[Student]:
        node = self._head
        while node is not None:
            yield node.student
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input until option 9 or end of input."""
    records = SinglyLinkedList()
    reader = _Reader(sys.stdin)
    with contextlib.suppress(_EndOfInput):
        while True:
            print(MENU)
            choice = reader.number()
            if choice in (1, 2):
                reader.add(records.add_begin if choice == 1 else records.add_end)
            elif choice == 3:
                print("enter id to search")
                id = reader.number()
                position = records.search(id)
                if position is None:
                    print(f"id:{id} is not in list")
                else:
                    print(f"id:{id} found at position:{position}")
            elif choice == 4:
                count = len(records)
                print(f"Total number of nodes:{count}" if count else "0 elements in list")
            elif choice == 5:
                print("enter id to delete")
                id = reader.number()
                if records.search(id) is None and len(records) == 0:
                    print("NO DATA")
                records.delete(id)
            elif choice == 6:
                _print_all(records)
            elif choice == 7:
                print("enter the numbers to be swapped")
                id1, id2 = reader.number(), reader.number()
                with contextlib.suppress(KeyError):
                    records.swap(id1, id2)
            elif choice == 8:
                records.reverse()
            elif choice == 9:
                _print_all(records)
                records.clear()
                break
    return 0