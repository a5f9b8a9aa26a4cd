"""Circular singly linked list of student records with an interactive menu."""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator, Sequence

from recordkit.single_list import (
    Student,
    _EndOfInput,
    _make_student,
    _Node,
    _print_all,
    _Reader,
)


class CircularLinkedList:
    """Student records in a ring; the last node links back to the first."""

    def __init__(self) -> None:
        self._tail: _Node | None = None

    def _insert_after_tail(self, id: int, name: str) -> _Node:
        node = _Node(_make_student(id, name))
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        return node

    def add_begin(self, id: int, name: str) -> Student:
        """Insert a record before the first one."""
        return self._insert_after_tail(id, name).student

    def add_end(self, id: int, name: str) -> Student:
        """Insert a record after the last one."""
        self._tail = self._insert_after_tail(id, name)
        return self._tail.student

    def delete(self, id: int) -> bool:
        """Remove the first record with ``id``; return whether one was removed."""
        if self._tail is None:
            return False
        prev, node = self._tail, self._tail.next
        while node.student.id != id:
            if node is self._tail:
                return False
            prev, node = node, node.next
        if node is prev:
            self._tail = None
        else:
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        return True

    def clear(self) -> int:
        """Remove every record and return how many there were."""
        count = len(self)
        self._tail = None
        return count

    def __iter__(self) -> Iterator[Student]:
        if self._tail is None:
            return
        node = self._tail
        while True:
            node = node.next
            yield node.student
            if node is self._tail:
                return

    def __len__(self) -> int:
        return sum(1 for _ in self)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input until end of input."""
    records = CircularLinkedList()
    reader = _Reader(sys.stdin)
    with contextlib.suppress(_EndOfInput):
        while True:
            print("enter the option")
            choice = reader.number()
            if choice in (1, 3):
                reader.add(records.add_begin if choice == 1 else records.add_end)
            elif choice == 2:
                _print_all(records, "no data")
            elif choice == 4:
                print("enter id to be deleted:")
                id = reader.number()
                if not records.delete(id) and len(records) == 0:
                    print("no data in list,unable to delete")
            elif choice == 9:
                _print_all(records, "no data")
                count = records.clear()
                print(f"cleared node_count:{count}" if count else "no data available")
    return 0