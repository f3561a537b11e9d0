# tests/test_history.py

from focusflow.commands.history import render_entry, show_history
from focusflow.config.config_manager import FocusConfig


def write_log(path, count):
    path.write_text(
        "".join(f"[10/{i + 1}/2026, 9:00:00 AM] Task {i + 1} (25m)\n"
                for i in range(count)),
        encoding="utf-8",
    )


def test_no_log_file_shows_notice(tmp_path, console):
    shown = show_history(FocusConfig(log_file=tmp_path / "missing.txt"), console)
    assert shown == 0
    out = console.export_text()
    assert "No history yet" in out
    assert "Go get 'em!" in out


def test_all_sessions_newest_first(tmp_path, console):
    log = tmp_path / "focus-log.txt"
    write_log(log, 3)
    shown = show_history(FocusConfig(log_file=log), console)
    assert shown == 3
    out = console.export_text()
    assert out.index("Task 3") < out.index("Task 2") < out.index("Task 1")
    assert "Last 10 Sessions" in out
    assert "Keep up the great work!" in out


def test_only_last_ten_sessions(tmp_path, console):
    log = tmp_path / "focus-log.txt"
    write_log(log, 13)
    assert show_history(FocusConfig(log_file=log), console) == 10
    out = console.export_text()
    assert "Task 13 " in out
    assert "Task 4 " in out
    assert "Task 3 " not in out
    assert out.index("Task 13 ") < out.index("Task 4 ")


def test_history_limit_from_config(tmp_path, console):
    log = tmp_path / "focus-log.txt"
    write_log(log, 5)
    assert show_history(FocusConfig(log_file=log, history_limit=2), console) == 2
    assert "Last 2 Sessions" in console.export_text()


def test_render_entry_splits_timestamp_and_details():
    row = render_entry("[10/18/2026, 9:00:00 AM] Write spec (0.1m)")
    assert row.plain == "[10/18/2026, 9:00:00 AM]  Write spec (0.1m)"
    styles = {str(span.style) for span in row.spans}
    assert "dim" in styles and "cyan" in styles


def test_render_entry_malformed_line_is_passed_through():
    assert render_entry("no delimiter here").plain == "no delimiter here]  "
