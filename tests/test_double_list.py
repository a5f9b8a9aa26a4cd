import io
import sys

import pytest

from recordkit.double_list import DoublyLinkedList, main
from recordkit.single_list import Student


def chain(*ids):
    both_ways = DoublyLinkedList()
    for key in ids:
        both_ways.add_end(key, f"d{key}")
    return both_ways


def forward_and_back(both_ways):
    return [s.id for s in both_ways], [s.id for s in reversed(both_ways)]


def test_add_order_and_reversed_view():
    both_ways = DoublyLinkedList()
    both_ways.add_end(2, "bob")
    both_ways.add_begin(1, "alice")
    both_ways.add_end(3, "carol")
    assert list(both_ways) == [Student(1, "alice"), Student(2, "bob"), Student(3, "carol")]
    assert forward_and_back(both_ways)[1] == [3, 2, 1]


@pytest.mark.parametrize("victim", [1, 2, 3, 4])
def test_delete_keeps_both_directions(victim):
    both_ways = chain(1, 2, 3, 4)
    assert both_ways.delete(victim) is True
    remaining = [i for i in (1, 2, 3, 4) if i != victim]
    assert forward_and_back(both_ways) == (remaining, remaining[::-1])


def test_delete_only_and_missing():
    both_ways = chain(1)
    assert [both_ways.delete(9), both_ways.delete(1), both_ways.delete(1)] == [
        False,
        True,
        False,
    ]
    assert forward_and_back(both_ways) == ([], [])


def test_reverse_round_trip():
    both_ways = chain(1, 2, 3, 4)
    both_ways.reverse()
    assert forward_and_back(both_ways) == ([4, 3, 2, 1], [1, 2, 3, 4])
    both_ways.reverse()
    assert forward_and_back(both_ways)[0] == [1, 2, 3, 4]


def test_reverse_then_add():
    both_ways = chain(1, 2)
    both_ways.reverse()
    both_ways.add_end(3, "c")
    both_ways.add_begin(0, "z")
    assert forward_and_back(both_ways) == ([0, 2, 1, 3], [3, 1, 2, 0])


def test_clear_then_reuse():
    both_ways = chain(1, 2, 3)
    both_ways.clear()
    assert len(both_ways) == 0
    both_ways.add_end(5, "e")
    assert forward_and_back(both_ways) == ([5], [5])


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        DoublyLinkedList().add_end(1, "")


def test_main_session(monkeypatch, capsys):
    script = "5\n1 1 alice\n3 2 bob\n3 3 carol\n4 2\n5\n9\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(script))
    assert main() == 0
    out = capsys.readouterr().out
    assert "not valid data operated" in out
    assert "you entered 9" in out
    assert out.endswith("id:3 name:carol\nid:1 name:alice\n")