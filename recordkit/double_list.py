"""Doubly linked list of student records with an interactive menu."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator, Sequence

from recordkit.single_list import Student, _EndOfInput, _make_student, _print_all, _Reader

_PROMPTS = ("Enter student id", "Enter name:")


class _Link:
    __slots__ = ("student", "prev", "next")

    def __init__(self, student: Student, prev: _Link | None, next: _Link | None) -> None:
        self.student, self.prev, self.next = student, prev, next


class DoublyLinkedList:
    """Student records linked in both directions."""

    def __init__(self) -> None:
        self._head: _Link | None = None
        self._tail: _Link | None = None

    def _links(self) -> Iterator[_Link]:
        link = self._head
        while link is not None:
            yield link
            link = link.next

    def add_begin(self, id: int, name: str) -> Student:
        """Insert a record before the first one."""
        link = _Link(_make_student(id, name), None, self._head)
        if self._head is None:
            self._tail = link
        else:
            self._head.prev = link
        self._head = link
        return link.student

    def add_end(self, id: int, name: str) -> Student:
        """Append a record after the last one."""
        link = _Link(_make_student(id, name), self._tail, None)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        return link.student

    def delete(self, id: int) -> bool:
        """Remove the first record with ``id``; return whether one was removed."""
        link = next((x for x in self._links() if x.student.id == id), None)
        if link is None:
            return False
        if link.prev is None:
            self._head = link.next
        else:
            link.prev.next = link.next
        if link.next is None:
            self._tail = link.prev
        else:
            link.next.prev = link.prev
        return True

    def reverse(self) -> None:
        """Reverse the order of the records in place."""
        for link in list(self._links()):
            link.prev, link.next = link.next, link.prev
        self._head, self._tail = self._tail, self._head

    def clear(self) -> None:
        """Remove every record."""
        self._head = self._tail = None

    def __iter__(self) -> Iterator[Student]:
        return (link.student for link in self._links())

    def __reversed__(self) -> Iterator[Student]:
        link = self._tail
        while link is not None:
            yield link.student
            link = link.prev

    def __len__(self) -> int:
        return sum(1 for _ in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input until option 9 or end of input."""
    records = DoublyLinkedList()
    reader = _Reader(sys.stdin)
    with contextlib.suppress(_EndOfInput):
        while True:
            print("enter option")
            choice = reader.number()
            print(f"you entered {choice}")
            if choice in (1, 3):
                reader.add(records.add_begin if choice == 1 else records.add_end, _PROMPTS)
            elif choice == 2:
                _print_all(records, "No data")
            elif choice == 4:
                print("enter id to delete")
                id = reader.number()
                if not records.delete(id) and len(records) == 0:
                    print("no data available")
            elif choice == 5:
                if len(records) < 2:
                    print("not valid data operated")
                records.reverse()
            elif choice == 9:
                _print_all(records, "No data")
                records.clear()
                break
    return 0