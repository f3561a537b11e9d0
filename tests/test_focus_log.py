# tests/test_focus_log.py

import re
from datetime import datetime

import pytest

from focusflow.models import Session
from focusflow.utils import focus_log
from focusflow.utils.error_handler import LogFileError


def test_format_entry_shape():
    when = datetime(2026, 10, 18, 9, 30, 0)
    line = focus_log.format_entry(Session("Write spec", 0.1), when)
    assert line == f"[{when.strftime('%c')}] Write spec (0.1m)"


def test_append_creates_file_and_appends(tmp_path):
    log = tmp_path / "nested" / "focus-log.txt"
    focus_log.append_entry(log, Session("one", 25))
    focus_log.append_entry(log, Session("two", 50))
    lines = log.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"\[.+\] one \(25m\)", lines[0])
    assert re.fullmatch(r"\[.+\] two \(50m\)", lines[1])


def test_read_entries_missing_file(tmp_path):
    assert focus_log.read_entries(tmp_path / "nope.txt") is None


def test_read_entries_trims_trailing_newline(tmp_path):
    log = tmp_path / "focus-log.txt"
    log.write_text("[a] x (25m)\n[b] y (50m)\n", encoding="utf-8")
    assert focus_log.read_entries(log) == ["[a] x (25m)", "[b] y (50m)"]


def test_recent_entries_newest_first():
    lines = [f"[t{i}] task {i} (25m)" for i in range(12)]
    recent = focus_log.recent_entries(lines, 10)
    assert len(recent) == 10
    assert recent[0] == "[t11] task 11 (25m)"
    assert recent[-1] == "[t2] task 2 (25m)"


def test_recent_entries_fewer_than_limit():
    assert focus_log.recent_entries(["a", "b"], 10) == ["b", "a"]


def test_append_to_directory_raises_log_file_error(tmp_path):
    with pytest.raises(LogFileError):
        focus_log.append_entry(tmp_path, Session("x", 25))
