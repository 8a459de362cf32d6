"""Application entry point and setup for the Ennu counting game."""

import logging
import os
import sys

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from ennu.core.locales import Locale, LocaleRepository
from ennu.ui.main_window import MainWindow
from ennu.ui.speech import SpeechAnnouncer


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def configure_application_font(app: QApplication) -> None:
    """Use the platform UI font with emoji fallbacks so item pictures render."""
    base_family = app.font().family()
    app_font = QFont(base_family)
    app_font.setFamilies(
        [
            base_family,
            "Noto Sans CJK TC",  # Linux, Traditional Chinese
            "Microsoft JhengHei",  # Windows
            "PingFang TC",  # macOS
            "Noto Color Emoji",
            "Segoe UI Emoji",
            "Apple Color Emoji",
        ]
    )
    app_font.setPointSize(12)
    app.setFont(app_font)
    QGuiApplication.setFont(app_font)
    logging.info("Application font: %s", base_family)


def initial_locale() -> Locale:
    """Starting locale from ENNU_LOCALE, defaulting to Traditional Chinese."""
    value = os.environ.get("ENNU_LOCALE", Locale.ZH_TW.value)
    try:
        return Locale(value)
    except ValueError:
        logging.warning("Unknown ENNU_LOCALE %r, using %s", value, Locale.ZH_TW.value)
        return Locale.ZH_TW


def run() -> None:
    """Initialize the application, load locale bundles, and open the game window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Ennu")
    app.setApplicationDisplayName("Ennu")

    configure_application_font(app)

    locales = LocaleRepository()
    announcer = SpeechAnnouncer(app, muted=os.environ.get("ENNU_MUTE") == "1")

    window = MainWindow(locales=locales, announcer=announcer, locale=initial_locale())
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
