from types import SimpleNamespace

import pytest
from watchdog.events import FileCreatedEvent, FileDeletedEvent, FileModifiedEvent

from recordkit.watch import SELF_DELETED, describe_event, main, watch


def _collect_until(stream, wanted, timeout=10.0):
    seen = []
    while True:
        message = stream.next_message(timeout=timeout)
        if message is None:
            return seen
        seen.append(message)
        if message == wanted:
            return seen


@pytest.mark.parametrize(
    "event, message",
    [
        (FileModifiedEvent("/x/a"), "file modified"),
        (FileCreatedEvent("/x/a"), "file created"),
        (FileDeletedEvent("/x/a"), "file deleted"),
        (SimpleNamespace(event_type="opened"), "file opened"),
    ],
)
def test_describe_event(event, message):
    assert describe_event(event) == message


def test_describe_event_without_message():
    assert describe_event(SimpleNamespace(event_type="closed")) is None


def test_watch_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        watch(tmp_path / "missing")


def test_watch_directory_sees_creation(tmp_path):
    with watch(tmp_path) as stream:
        (tmp_path / "new.txt").write_text("x")
        seen = _collect_until(stream, "file created")
    assert "file created" in seen


def test_watch_file_sees_self_deletion(tmp_path):
    target = tmp_path / "watched.txt"
    target.write_text("x")
    with watch(target) as stream:
        (tmp_path / "other.txt").write_text("y")
        target.unlink()
        seen = _collect_until(stream, SELF_DELETED)
    assert seen[-1] == SELF_DELETED
    assert "file created" not in seen


def test_next_message_times_out(tmp_path):
    with watch(tmp_path) as stream:
        assert stream.next_message(timeout=0.2) is None


def test_main_missing_path(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().out == "inotify add watch failed\n"