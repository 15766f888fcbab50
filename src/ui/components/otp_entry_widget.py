"""
OTP entry widget — a row of single-digit boxes driven by FieldGroupController.
"""
from typing import Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLineEdit
from PySide6.QtCore import Signal, Qt
from PySide6.QtGui import QFont

from config.settings import settings
from ui.components.line_edit_field import attach_otp_fields


class OtpEntryWidget(QWidget):
    """
    N individual single-digit boxes that behave as one code field.

    Typing, backspace and paste are handled by the attached
    FieldGroupController. Emits code_changed(str) with the joined box
    contents whenever any box changes; it does not decide when the code
    is complete.
    """

    code_changed = Signal(str)

    def __init__(
        self,
        length: Optional[int] = None,
        parent: Optional[QWidget] = None,
        field_class: Optional[str] = None,
        masked: Optional[bool] = None,
        paste_length: Optional[int] = None,
    ):
        super().__init__(parent)
        self._length = settings.OTP_LENGTH if length is None else length
        self._field_class = field_class or settings.OTP_FIELD_CLASS
        self._masked = settings.OTP_MASK_INPUT if masked is None else masked
        if paste_length is None:
            paste_length = settings.OTP_LEGACY_PASTE_LENGTH
        self._boxes = []
        self._setup_ui()
        self._controller = attach_otp_fields(self, self._field_class, paste_length=paste_length)

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        font = QFont()
        font.setPointSize(18)
        font.setBold(True)

        for i in range(self._length):
            box = QLineEdit()
            box.setObjectName(f"otp_box_{i}")
            box.setProperty("class", self._field_class)
            box.setAlignment(Qt.AlignmentFlag.AlignCenter)
            box.setFont(font)
            if self._masked:
                box.setEchoMode(QLineEdit.EchoMode.Password)
            box.setFixedSize(42, 48)
            box.setStyleSheet(
                "border: 2px solid #aaa; border-radius: 4px; background: #fafafa;"
            )
            box.textChanged.connect(self._on_text_changed)
            self._boxes.append(box)
            layout.addWidget(box)

    def _on_text_changed(self, _text: str):
        self.code_changed.emit(self.code())

    @property
    def controller(self):
        return self._controller

    @property
    def boxes(self):
        return list(self._boxes)

    def code(self) -> str:
        return "".join(b.text() for b in self._boxes)

    def clear(self):
        for box in self._boxes:
            box.clear()
        if self._boxes:
            self._boxes[0].setFocus()

    def set_enabled(self, enabled: bool):
        for box in self._boxes:
            box.setEnabled(enabled)
