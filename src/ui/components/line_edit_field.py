"""
QLineEdit adapter for the OTP controller.

Wraps an existing QLineEdit (built in code or loaded from a Designer .ui file)
so it satisfies core.field_source.FieldEventSource:

  - user edits (textEdited) become input events
  - the platform Paste shortcut is swallowed and becomes a paste event
  - key releases become key-release events ("Backspace" for backspace)
"""
from typing import List, Optional

from PySide6.QtWidgets import QWidget, QLineEdit
from PySide6.QtCore import QObject, QEvent, Qt, Signal
from PySide6.QtGui import QGuiApplication, QKeySequence

from core.field_source import KEY_BACKSPACE, TextCallback
from core.otp_controller import FieldGroupController
from utils.logger import logger


class LineEditField(QObject):
    """
    Field event source backed by a QLineEdit.

    The adapter is parented to the line edit, so it lives exactly as long
    as the box does.
    """

    text_input = Signal(str)        # raw box content after a user edit
    key_released = Signal(str)      # key name
    paste_requested = Signal(str)   # clipboard text

    def __init__(self, line_edit: QLineEdit):
        super().__init__(line_edit)
        self._edit = line_edit

        # Room for the old digit plus the new keystroke; the controller
        # trims back to one character.
        self._edit.setMaxLength(2)
        self._edit.setContextMenuPolicy(Qt.ContextMenuPolicy.PreventContextMenu)

        self._edit.textEdited.connect(self.text_input)
        self._edit.installEventFilter(self)

    @property
    def line_edit(self) -> QLineEdit:
        return self._edit

    # ------------------------------------------------------------------
    # FieldEventSource — outbound
    # ------------------------------------------------------------------

    def value(self) -> str:
        return self._edit.text()

    def set_value(self, value: str) -> None:
        # setText() does not emit textEdited, so this never loops back
        self._edit.setText(value)

    def request_focus(self) -> None:
        self._edit.setFocus(Qt.FocusReason.OtherFocusReason)

    def set_cursor_position(self, position: int) -> None:
        self._edit.setCursorPosition(position)

    # ------------------------------------------------------------------
    # FieldEventSource — inbound
    # ------------------------------------------------------------------

    def connect_input(self, callback: TextCallback) -> None:
        self.text_input.connect(callback)

    def connect_key_release(self, callback: TextCallback) -> None:
        self.key_released.connect(callback)

    def connect_paste(self, callback: TextCallback) -> None:
        self.paste_requested.connect(callback)

    # ------------------------------------------------------------------
    # Qt event filter
    # ------------------------------------------------------------------

    def eventFilter(self, obj, event):
        if obj is not self._edit:
            return super().eventFilter(obj, event)

        if event.type() == QEvent.Type.KeyPress:
            if event.matches(QKeySequence.StandardKey.Paste):
                self.paste_requested.emit(self._clipboard_text())
                return True

        elif event.type() == QEvent.Type.KeyRelease:
            if not event.isAutoRepeat():
                self.key_released.emit(self._key_name(event))

        return super().eventFilter(obj, event)

    def _clipboard_text(self) -> str:
        clipboard = QGuiApplication.clipboard()
        return clipboard.text() if clipboard is not None else ""

    @staticmethod
    def _key_name(event) -> str:
        if event.key() == Qt.Key.Key_Backspace:
            return KEY_BACKSPACE
        return event.text()


def has_class(widget: QWidget, class_name: str) -> bool:
    """True if the widget's ``class`` property lists class_name."""
    classes = widget.property("class")
    if not isinstance(classes, str):
        return False
    return class_name in classes.split()


def find_otp_line_edits(root: QWidget, class_name: str) -> List[QLineEdit]:
    """Return the QLineEdit descendants of root tagged with class_name, in creation order."""
    return [
        edit for edit in root.findChildren(QLineEdit)
        if has_class(edit, class_name)
    ]


def attach_otp_fields(
    root: QWidget,
    class_name: str,
    paste_length: Optional[int] = None,
) -> FieldGroupController:
    """
    Turn the boxes tagged with class_name under root into one OTP field.

    Returns the controller; it is inert when no box matches.
    """
    edits = find_otp_line_edits(root, class_name)
    fields = [LineEditField(edit) for edit in edits]
    controller = FieldGroupController(fields, selector=class_name, paste_length=paste_length)
    if fields:
        logger.debug(f"Attached OTP controller to {len(fields)} boxes under {root.objectName() or type(root).__name__}")
    return controller
