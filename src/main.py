"""
Application entry point — bootstraps QApplication and AppWindow.
"""
import sys

from PySide6.QtWidgets import QApplication

from config.settings import settings
from utils.logger import logger
from ui.app_window import AppWindow


def main() -> int:
    settings.ensure_directories()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION} (PySide6 frontend)")

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(settings.APP_NAME)
    app.setApplicationVersion(settings.APP_VERSION)

    window = AppWindow()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
