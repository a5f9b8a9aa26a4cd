"""Copy one file to another, refusing to copy a file onto itself."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Sequence

from recordkit.errors import FatalError, UsageError, report

MAX_FILEPATH_LEN = 255
CHUNK_SIZE = 4095
FILE_MODE = 0o664


def copy_file(source: str | os.PathLike[str], dest: str | os.PathLike[str]) -> int:
    """Copy ``source`` to ``dest`` and return the number of bytes copied.

    The destination is created or truncated with mode rw-rw-r-- (less the
    umask) and is never opened through a symbolic link.
    """
    src_path = os.fspath(source)
    dest_path = os.fspath(dest)
    if src_path[:MAX_FILEPATH_LEN] == dest_path[:MAX_FILEPATH_LEN]:
        raise FatalError(
            f"arguments are same, which lead to lost of file input: {src_path}"
        )
    try:
        src = open(src_path, "rb")
    except OSError as exc:
        raise FatalError(f"unable to open file: {src_path}") from exc
    with src:
        flags = os.O_CREAT | os.O_WRONLY | os.O_TRUNC | getattr(os, "O_NOFOLLOW", 0)
        try:
            fd = os.open(dest_path, flags, FILE_MODE)
        except OSError as exc:
            raise FatalError(f"unable to open file: {dest_path}") from exc
        with os.fdopen(fd, "wb") as dst:
            try:
                shutil.copyfileobj(src, dst, CHUNK_SIZE)
                dst.flush()
            except OSError as exc:
                raise FatalError(f"unable to write buffer: {exc}") from exc
            return dst.tell()


def main(argv: Sequence[str] | None = None) -> int:
    """Copy the file named by the first argument to the second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        return report(UsageError("mycp old_file new_file"))
    source, dest = args
    try:
        copy_file(source, dest)
    except FatalError as exc:
        return report(exc)
    print(f"my copy success for {source} to {dest}")
    return 0