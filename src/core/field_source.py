"""
Field event source — what the OTP controller needs from a single-character box.

Anything that can report value changes, key releases and paste requests and
accept value/focus/cursor updates can be driven by FieldGroupController.
The Qt implementation is ui.components.line_edit_field.LineEditField; tests
use plain Python fakes.
"""
from typing import Callable, Protocol


# Key name delivered with key-release events for the delete-backward key
KEY_BACKSPACE = "Backspace"

TextCallback = Callable[[str], None]


class FieldEventSource(Protocol):
    """One addressable single-character text box."""

    def value(self) -> str:
        ...

    def set_value(self, value: str) -> None:
        ...

    def request_focus(self) -> None:
        ...

    def set_cursor_position(self, position: int) -> None:
        ...

    def connect_input(self, callback: TextCallback) -> None:
        """callback(raw_value) after the user edits the box."""
        ...

    def connect_key_release(self, callback: TextCallback) -> None:
        """callback(key_name) when a key is released in the box."""
        ...

    def connect_paste(self, callback: TextCallback) -> None:
        """callback(clipboard_text) instead of the default paste."""
        ...
