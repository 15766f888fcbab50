"""
OTP field group controller.

Drives a fixed row of single-character boxes as one numeric code field:
  - typing keeps one digit per box and moves focus to the next box
  - backspace (on key release) moves focus back one box
  - pasting a full code fills every box at once, or nothing at all

Handlers never raise; bad input clears the box or is ignored.
"""
from typing import List, Optional, Sequence, Tuple

from core.field_source import FieldEventSource, KEY_BACKSPACE
from utils.validators import is_digit_token
from utils.logger import logger


class FieldGroupController:
    """
    Event-reactive state machine over an ordered group of fields.

    The group is fixed at construction. With zero fields the controller
    binds nothing and stays inert.
    """

    def __init__(
        self,
        fields: Sequence[FieldEventSource],
        selector: str = "",
        paste_length: Optional[int] = None,
    ):
        self._fields: List[FieldEventSource] = list(fields)
        self._selector = selector
        self._paste_length = paste_length

        if not self._fields:
            logger.info(f"OTP fields with class '{selector}' can't be found")
            return

        for i, field in enumerate(self._fields):
            field.connect_input(lambda raw, idx=i: self.handle_input(idx, raw))
            field.connect_key_release(lambda key, idx=i: self.handle_key_release(idx, key))
            field.connect_paste(lambda text, idx=i: self.handle_paste(idx, text))

        logger.debug(f"OTP controller bound to {len(self._fields)} fields ('{selector}')")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def fields(self) -> Tuple[FieldEventSource, ...]:
        return tuple(self._fields)

    @property
    def field_count(self) -> int:
        return len(self._fields)

    @property
    def is_active(self) -> bool:
        return bool(self._fields)

    @property
    def expected_paste_length(self) -> int:
        if self._paste_length is not None:
            return self._paste_length
        return len(self._fields)

    def code(self) -> str:
        return "".join(field.value() for field in self._fields)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def handle_input(self, index: int, raw_value: str) -> None:
        """
        Decide which character survives in box ``index``.

        ``raw_value`` is the box content right after the keystroke: empty,
        one character, or two when a key was typed into an occupied box.
        """
        if not self._valid_index(index):
            return

        field = self._fields[index]
        raw_value = raw_value or ""

        to_display, previous = raw_value, ""
        if len(raw_value) > 1:
            to_display = raw_value[-1]
            previous = raw_value[-2]

        if not is_digit_token(to_display) and not previous:
            field.set_value("")
            return

        if is_digit_token(previous):
            self._focus_next(index, previous)
            return

        if is_digit_token(to_display):
            self._focus_next(index, to_display)
            return

        # Only non-digits left in the box
        field.set_value("")

    def handle_paste(self, index: int, clipboard_text: str) -> None:
        """
        Spread a pasted code over the whole group.

        ``index`` is the box the paste landed in; the code always fills
        the group from box 0. Anything but an all-digit string of the
        expected length is ignored.
        """
        if not self._fields:
            return

        text = clipboard_text or ""
        expected = self.expected_paste_length
        if len(text) != expected or len(text) > len(self._fields):
            logger.debug(f"Paste into box {index} ignored: length {len(text)}, expected {expected}")
            return
        if not is_digit_token(text):
            logger.debug(f"Paste into box {index} ignored: not all digits")
            return

        for i, char in enumerate(text):
            self._fields[i].set_value(char)

    def handle_key_release(self, index: int, key: str) -> None:
        """Move focus back one box when backspace is released."""
        if not self._valid_index(index):
            return
        if (key or "").lower() != KEY_BACKSPACE.lower():
            return
        if index == 0:
            return

        prev = self._fields[index - 1]
        prev.request_focus()
        prev.set_cursor_position(1)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _focus_next(self, index: int, value: str) -> None:
        self._fields[index].set_value(value)

        if index + 1 >= len(self._fields):
            return

        nxt = self._fields[index + 1]
        nxt.request_focus()
        # Cursor after an existing digit so the next keystroke lands behind it
        nxt.set_cursor_position(1 if nxt.value() != "" else 0)

    def _valid_index(self, index: int) -> bool:
        if 0 <= index < len(self._fields):
            return True
        logger.debug(f"Ignoring event for box {index} (group has {len(self._fields)})")
        return False
