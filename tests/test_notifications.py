# tests/test_notifications.py

import random
from types import SimpleNamespace

from focusflow.utils import notifications
from focusflow.utils.error_handler import ValidationError, validate_duration, validate_task_name
from focusflow.utils.get_quotes import MOTIVATIONS, get_motivation

import pytest


def test_notify_desktop_calls_plyer(monkeypatch, console):
    calls = []
    monkeypatch.setattr(notifications, "notification",
                        SimpleNamespace(notify=lambda **kw: calls.append(kw)))
    assert notifications.notify_desktop("Focus Flow", "done", out=console)
    assert calls == [{"title": "Focus Flow", "message": "done",
                      "app_name": "Focus Flow"}]


def test_notify_desktop_failure_is_not_fatal(monkeypatch, console):
    def boom(**kw):
        raise NotImplementedError("no backend")

    monkeypatch.setattr(notifications, "notification", SimpleNamespace(notify=boom))
    assert notifications.notify_desktop("Focus Flow", "done", out=console) is False
    assert "done" in console.export_text()


def test_get_motivation_is_repeatable_with_seed():
    a = [get_motivation(random.Random(5)) for _ in range(3)]
    b = [get_motivation(random.Random(5)) for _ in range(3)]
    assert a == b
    assert set(a) <= set(MOTIVATIONS)


def test_validate_task_name():
    assert validate_task_name("  Write spec ") == "Write spec"
    with pytest.raises(ValidationError, match="Task name required"):
        validate_task_name("")


def test_validate_duration():
    assert validate_duration("0.1") == 0.1
    with pytest.raises(ValidationError):
        validate_duration(0)
    with pytest.raises(ValidationError):
        validate_duration("soon")
