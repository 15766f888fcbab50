"""
Pytest configuration and fixtures
"""
import os
import tempfile

# Must be set before Qt and the settings module are imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("OTP_ENTRY_HOME", tempfile.mkdtemp(prefix="otp_entry_tests_"))

import pytest

from utils.logger import logger


class FakeGroup:
    """Tracks which fake field holds focus (at most one)."""

    def __init__(self):
        self.fields = []
        self.focused = None

    def focused_index(self):
        if self.focused is None:
            return None
        return self.fields.index(self.focused)

    def values(self):
        return [f.value() for f in self.fields]


class FakeField:
    """In-memory field event source."""

    def __init__(self, group: FakeGroup, value: str = ""):
        self._group = group
        self._value = value
        self.cursor = 0
        self._input_callbacks = []
        self._key_callbacks = []
        self._paste_callbacks = []

    # outbound
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value

    def request_focus(self) -> None:
        self._group.focused = self

    def set_cursor_position(self, position: int) -> None:
        self.cursor = position

    # inbound
    def connect_input(self, callback):
        self._input_callbacks.append(callback)

    def connect_key_release(self, callback):
        self._key_callbacks.append(callback)

    def connect_paste(self, callback):
        self._paste_callbacks.append(callback)

    # event simulation
    def type_raw(self, raw: str):
        self._value = raw
        for cb in self._input_callbacks:
            cb(raw)

    def release_key(self, key: str):
        for cb in self._key_callbacks:
            cb(key)

    def paste(self, text: str):
        for cb in self._paste_callbacks:
            cb(text)

    @property
    def bound(self) -> bool:
        return bool(self._input_callbacks or self._key_callbacks or self._paste_callbacks)


@pytest.fixture
def make_group():
    """Build a FakeGroup with n fields, optionally pre-filled."""
    def _make(n: int = 6, values=None):
        group = FakeGroup()
        values = values or [""] * n
        group.fields = [FakeField(group, values[i]) for i in range(n)]
        return group
    return _make


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
