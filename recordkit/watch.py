"""Watch a file or directory and describe what happens to it."""

from __future__ import annotations

import errno
import os
import queue
import sys
import time
from collections.abc import Callable, Sequence
from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

DEFAULT_PATH = "/tmp/test"
SELF_DELETED = "self file deleted"

_MESSAGES = {
    "modified": "file modified",
    "opened": "file opened",
    "created": "file created",
    "deleted": "file deleted",
}


def describe_event(event: Any) -> str | None:
    """Return the message for a file system event, or None if it has none."""
    return _MESSAGES.get(getattr(event, "event_type", None))


class _Handler(FileSystemEventHandler):
    def __init__(self, put: Callable[[FileSystemEvent], None]) -> None:
        super().__init__()
        self._put = put

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._put(event)


class _EventStream:
    """Messages describing events on a watched path, as they happen."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        target = os.path.abspath(os.fspath(path))
        if not os.path.exists(target):
            raise FileNotFoundError(errno.ENOENT, "inotify add watch failed", target)
        self._target = target
        self._only = None if os.path.isdir(target) else target
        watched = target if self._only is None else os.path.dirname(target)
        self._events: queue.Queue[FileSystemEvent] = queue.Queue()
        self._observer = Observer()
        self._observer.schedule(_Handler(self._events.put), watched, recursive=False)
        self._observer.start()

    def _message(self, event: FileSystemEvent) -> str | None:
        src = os.fsdecode(event.src_path)
        if self._only is not None and src != self._only:
            return None
        if event.event_type == "deleted" and src == self._target:
            return SELF_DELETED
        return describe_event(event)

    def next_message(self, timeout: float | None = None) -> str | None:
        """Wait for the next message; return None if ``timeout`` seconds pass."""
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return None
            try:
                event = self._events.get(timeout=remaining)
            except queue.Empty:
                return None
            message = self._message(event)
            if message is not None:
                return message

    def __iter__(self) -> _EventStream:
        return self

    def __next__(self) -> str:
        message = self.next_message()
        if message is None:
            raise StopIteration
        return message

    def close(self) -> None:
        """Stop watching."""
        if self._observer.is_alive():
            self._observer.stop()
            self._observer.join()

    def __enter__(self) -> _EventStream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def watch(path: str | os.PathLike[str]) -> _EventStream:
    """Start watching ``path``; raise FileNotFoundError if it does not exist."""
    return _EventStream(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a line for every event on the path given (default /tmp/test)."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_PATH
    try:
        stream = watch(path)
    except OSError:
        print("inotify add watch failed")
        return 1
    with stream:
        try:
            for message in stream:
                print(message, flush=True)
        except KeyboardInterrupt:
            pass
    return 0