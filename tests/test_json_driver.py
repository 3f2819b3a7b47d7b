import json
import time

import pytest

from mysyslog.json_driver import driver_write, escape_json_string, format_entry
from mysyslog.levels import LogLevel, MySyslogError
from mysyslog.procinfo import get_process_name


@pytest.fixture
def fixed_time(monkeypatch):
    monkeypatch.setattr(time, "time", lambda: 1439482969.2)
    return 1439482969


def test_format_entry_example():
    line = format_entry(1439482969, 3, "example-app", "this is an error")
    assert line == (
        '{"timestamp":1439482969,"log_level":"ERROR",'
        '"process":"example-app","message":"this is an error"}\n'
    )


@pytest.mark.parametrize(
    "text",
    ['say "hi"', "back\\slash", "line1\nline2", "cr\rhere", "tab\tbed", "plain"],
)
def test_escape_roundtrip(text):
    assert json.loads('"' + escape_json_string(text) + '"') == text


def test_escape_truncates_to_buffer():
    result = escape_json_string("x" * 5000)
    assert len(result) <= 2048 - 2
    assert "x" * 5000 == "x" * len(result) + "x" * (5000 - len(result))
    assert set(result) == {"x"}


def test_escape_small_buffer_stays_valid():
    for size in range(2, 12):
        result = escape_json_string('ab"cd\\ef\ngh', size)
        assert len(result) <= size - 2
        assert not result.endswith("\\") or result.endswith("\\\\")


def test_escape_rejects_tiny_buffer():
    with pytest.raises(ValueError):
        escape_json_string("abc", 1)


def test_driver_write_produces_json(tmp_path, fixed_time):
    log = tmp_path / "app.log"
    message = 'quote " and \\ and\nnewline'
    driver_write(message, LogLevel.WARN, str(log))
    driver_write("second", LogLevel.DEBUG, str(log))
    records = [json.loads(line) for line in log.read_text().splitlines()]
    assert records[0] == {
        "timestamp": fixed_time,
        "log_level": "WARN",
        "process": get_process_name(),
        "message": message,
    }
    assert records[1]["log_level"] == "DEBUG"


def test_invalid_level(tmp_path):
    log = tmp_path / "app.log"
    with pytest.raises(MySyslogError):
        driver_write("msg", 9, str(log))
    assert not log.exists()


def test_none_arguments(tmp_path):
    with pytest.raises(MySyslogError, match="cannot be None"):
        driver_write(None, 0, str(tmp_path / "a.log"))


def test_unwritable_path(tmp_path):
    with pytest.raises(MySyslogError, match="cannot open log file"):
        driver_write("msg", 0, str(tmp_path))