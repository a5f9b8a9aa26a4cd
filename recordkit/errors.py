"""Errors that end a command, and reporting of them on standard error."""

from __future__ import annotations

import sys
from typing import TextIO

EXIT_FAILURE = 1


class UsageError(Exception):
    """The command was called with the wrong arguments."""

    prefix = "Usage: "


class FatalError(Exception):
    """An operation failed in a way the command cannot recover from."""

    prefix = "Err: "


def report(error: BaseException, stream: TextIO | None = None) -> int:
    """Write ``error`` with its prefix to ``stream`` (stderr by default).

    Standard output is flushed first so the two streams stay in order.
    Returns the exit status a command should end with.
    """
    sys.stdout.flush()
    out = sys.stderr if stream is None else stream
    prefix = getattr(error, "prefix", FatalError.prefix)
    out.write(f"{prefix}{error}\n")
    out.flush()
    return EXIT_FAILURE