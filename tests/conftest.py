# tests/conftest.py

import io
import logging

import pytest
from rich.console import Console
from rich.prompt import Prompt

import focusflow.config.config_manager as cf


@pytest.fixture(autouse=True)
def isolate_fs(tmp_path, monkeypatch):
    """
    Point the config dir at a temp location and run every test from tmp_path,
    so the default relative focus-log.txt never lands in the repo.
    """
    base = tmp_path / "focusflow_home"
    monkeypatch.setattr(cf, "BASE_DIR", base)
    monkeypatch.setattr(cf, "USER_CONFIG", base / "config.toml")
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop any handlers setup_logging attached during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def console():
    return Console(record=True, file=io.StringIO(), width=100,
                   force_terminal=False, color_system=None)


@pytest.fixture
def answers(monkeypatch):
    """
    Script the interactive prompts: append replies (or exception instances)
    to the returned list before the code under test asks.
    """
    replies = []

    def fake_ask(*args, **kwargs):
        reply = replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    monkeypatch.setattr(Prompt, "ask", fake_ask)
    return replies


class FakeNotifier:
    def __init__(self):
        self.calls = []

    def __call__(self, title, message, sound=True, out=None):
        self.calls.append((title, message, sound))
        return True


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def sleeps():
    return []
