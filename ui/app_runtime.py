"""GUI runtime bootstrap and wiring for the TsengCoin shell."""

import logging
import sys
from collections.abc import Sequence

from PyQt6.QtWidgets import QApplication, QMessageBox

from config import load_app_settings, save_app_settings
from core.alias_book import AliasBook
from core.app_config import AppConfig
from ui.main_window import MainWindow

logger = logging.getLogger(__name__)

ABOUT_TEXT = (
    "TsengCoin core client.\n"
    "GUI built with Qt.\n"
    "Source code at https://github.com/Dezzmeister/tsengcoin"
)


def _configure_logging(config: AppConfig):
    level = getattr(logging, config.log_level, logging.INFO)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=handlers,
    )


def _show_about(window: MainWindow):
    QMessageBox.about(window, f"About {window.config.window_title}", ABOUT_TEXT)


def _show_chat_unavailable(window: MainWindow):
    logger.info("New chat requested; chat sessions are provided by the node backend")
    QMessageBox.information(window, "New Chat", "Chat is not available in this build.")


def _wire_window(window: MainWindow, book: AliasBook, settings: dict):
    window.attach_alias_store(book.validate_and_store)
    window.attach_handlers(
        on_new_chat=lambda: _show_chat_unavailable(window),
        on_about=lambda: _show_about(window),
    )
    window.attach_ui_settings(settings, on_ui_settings_changed=save_app_settings)


def run_gui_app(argv: Sequence[str] | None = None) -> int:
    config = AppConfig.from_env()
    _configure_logging(config)
    logger.info("Starting %s", config.window_title)

    qt_argv = list(argv) if argv is not None else sys.argv
    app = QApplication(qt_argv)

    settings = load_app_settings()
    book = AliasBook(settings["aliases"], on_changed=save_app_settings)
    logger.debug("Loaded %d aliases", len(book))

    window = MainWindow(config=config)
    _wire_window(window, book, settings)
    try:
        window.open()
        return app.exec()
    finally:
        logger.info("Exiting %s", config.window_title)
