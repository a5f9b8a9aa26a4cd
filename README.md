# recordkit

In-memory containers for simple student records (an integer id and a
short name) — a singly linked list, a circular list, a doubly linked list
and a stack — each with an interactive menu command, plus three small
POSIX utilities: a careful file copy, a user-database lookup and a file
watcher.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Records

Records are `recordkit.single_list.Student` objects: frozen dataclasses
with `id` and `name`, shown as `id:<id> name:<name>`. A name must be
non-empty, contain no whitespace, and be at most 15 characters (31 for the
stack); otherwise adding it raises `ValueError`. Every `add_*` method and
`Stack.push` return the new `Student`.

All containers support `len()` and iterate front to back.

```python
from recordkit.single_list import SinglyLinkedList

records = SinglyLinkedList()
records.add_end(1, "asha")
records.add_end(2, "ravi")
records.add_begin(0, "mani")

for record in records:
    print(record)            # id:0 name:mani, ...

records.search(2)            # 3 (1-based position), or None
records.swap(0, 2)           # KeyError if either id is missing
records.reverse()
records.delete(1)            # True if a record was removed
print(len(records))
records.clear()
```

- `recordkit.single_list.SinglyLinkedList` — `add_begin`, `add_end`,
  `search`, `delete`, `swap`, `reverse`, `clear`.
- `recordkit.circular_list.CircularLinkedList` — `add_begin`, `add_end`,
  `delete`, and `clear`, which returns how many records were removed;
  iteration makes one pass around the ring.
- `recordkit.double_list.DoublyLinkedList` — `add_begin`, `add_end`,
  `delete`, `reverse`, `clear`, and `reversed()` to walk back to front.
- `recordkit.stack.Stack` — `push`, `pop` (last in, first out; raises
  `IndexError` when empty), `clear`; iteration runs from the top down.

`delete` removes the first record with the given id and returns whether
one was found.

## Utilities

- `recordkit.mycp.copy_file(source, dest)` copies a file in 4095-byte
  chunks and returns the number of bytes copied. It refuses to copy a path
  onto itself, creates or truncates the destination with mode `rw-rw-r--`
  (less the umask), and will not open the destination through a symbolic
  link. Failures raise `recordkit.errors.FatalError`.
- `recordkit.users.find_user(name)` scans the system user database and
  returns the first `pwd.struct_passwd` entry with that login name, or
  `None`; passing `None` raises `ValueError`.
- `recordkit.watch.watch(path)` starts watching a file or directory and
  returns an event stream, usable as a context manager and as an iterator
  of messages (`file modified`, `file opened`, `file created`,
  `file deleted`, and `self file deleted` when the watched path itself is
  removed). `next_message(timeout)` waits for one message and returns
  `None` on timeout; `close()` stops watching. A missing path raises
  `FileNotFoundError`. `recordkit.watch.describe_event(event)` returns the
  message for a single event, or `None` if it has none.
- `recordkit.errors` provides `UsageError` and `FatalError`;
  `report(error, stream)` flushes standard output, writes the error with a
  `Usage: ` or `Err: ` prefix to the stream (standard error by default) and
  returns the exit status 1.

## Commands

The menu commands read option numbers, ids and names as
whitespace-separated words from standard input, and stop at end of input
or at anything that is not a number where one is expected.

```
recordkit-single      # 1 add at start, 2 add at end, 3 search, 4 count, 5 delete,
                      # 6 print, 7 swap, 8 reverse, 9 print, clear and exit
recordkit-circular    # 1 add at start, 2 print, 3 add at end, 4 delete, 9 print and clear
recordkit-double      # 1 add at start, 2 print, 3 add at end, 4 delete, 5 reverse,
                      # 9 print, clear and exit
recordkit-stack       # 1 push, 2 pop, any other number exits
```

Utilities:

```
recordkit-cp old_file new_file   # copy a file; prints a usage line on wrong arguments
recordkit-getpwnam               # reads a user name from standard input and checks it exists
recordkit-watch [path]           # prints a line per event on path (default /tmp/test)
```

## What it does not do

Records live only in memory: nothing is saved between runs of a menu
command, and there is no file format for loading or storing records.
The user lookup and the file copy rely on POSIX facilities and are not
meant for Windows.