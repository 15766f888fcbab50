"""
AppWindow — QMainWindow hosting the OTP entry widget.
"""
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
)
from PySide6.QtCore import Qt

from ui.components.otp_entry_widget import OtpEntryWidget
from config.settings import settings
from utils.validators import validate_otp_code
from utils.logger import logger


class AppWindow(QMainWindow):
    """Root application window."""

    def __init__(self):
        super().__init__()
        self._setup_ui()
        self._wire_signals()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle(settings.APP_TITLE)
        self.setMinimumSize(settings.MIN_WINDOW_WIDTH, settings.MIN_WINDOW_HEIGHT)
        self.resize(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(14)

        self._instruction = QLabel(
            f"Enter the {settings.OTP_LENGTH}-digit code, or paste it into any box:"
        )
        self._instruction.setWordWrap(True)
        layout.addWidget(self._instruction)

        self._otp_widget = OtpEntryWidget()
        layout.addWidget(self._otp_widget, alignment=Qt.AlignmentFlag.AlignCenter)

        self._code_label = QLabel("")
        self._code_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._code_label.setStyleSheet("color: gray; font-size: 12px;")
        layout.addWidget(self._code_label)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setFixedHeight(32)
        self._clear_btn.clicked.connect(self._on_clear_clicked)
        btn_row.addWidget(self._clear_btn)
        layout.addLayout(btn_row)

        layout.addStretch()
        self.setCentralWidget(central)

    def _wire_signals(self):
        self._otp_widget.code_changed.connect(self._on_code_changed)

    @property
    def otp_widget(self) -> OtpEntryWidget:
        return self._otp_widget

    @property
    def code_label(self) -> QLabel:
        return self._code_label

    @property
    def clear_button(self) -> QPushButton:
        return self._clear_btn

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_code_changed(self, code: str):
        valid, _ = validate_otp_code(code, settings.OTP_LENGTH)
        if valid:
            self._code_label.setText(f"Code: {code}")
            self.statusBar().showMessage("All digits entered", 3000)
        else:
            self._code_label.setText(f"Code: {code}" if code else "")

    def _on_clear_clicked(self):
        logger.debug("Clearing OTP boxes")
        self._otp_widget.clear()
        self.statusBar().clearMessage()
