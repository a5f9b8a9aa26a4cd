"""Look up an entry of the user database by login name."""

from __future__ import annotations

import pwd
import sys
from collections.abc import Sequence

MAX_NAME_SIZ = 36


def find_user(name: str | None) -> pwd.struct_passwd | None:
    """Return the first user database entry named ``name``, or None."""
    if name is None:
        raise ValueError("name is null")
    return next((entry for entry in pwd.getpwall() if entry.pw_name == name), None)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a name from standard input and report whether it is a known user."""
    print("enter name:")
    line = sys.stdin.readline()
    words = line.split()
    name = words[0] if words else ""
    if not name or len(name) > MAX_NAME_SIZ:
        print("invalid name length")
        return 1
    entry = find_user(name)
    if entry is None:
        print(f"unable to get data for name: {name}")
        return 1
    print(f"name: {entry.pw_name} is valid")
    return 0