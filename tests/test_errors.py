import io

import pytest

from recordkit.errors import EXIT_FAILURE, FatalError, UsageError, report


@pytest.mark.parametrize(
    "error,expected",
    [
        (UsageError("mycp old_file new_file"), "Usage: mycp old_file new_file\n"),
        (FatalError("unable to open file: a"), "Err: unable to open file: a\n"),
    ],
)
def test_errors_are_prefixed(error, expected):
    stream = io.StringIO()
    status = report(error, stream)
    assert stream.getvalue() == expected
    assert status == EXIT_FAILURE == 1


def test_other_errors_use_fatal_prefix():
    stream = io.StringIO()
    report(RuntimeError("boom"), stream)
    assert stream.getvalue().startswith("Err: ")


def test_default_stream_is_stderr(capsys):
    report(FatalError("broken"), None)
    captured = capsys.readouterr()
    assert captured.err == "Err: broken\n"
    assert captured.out == ""