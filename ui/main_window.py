from PyQt6.QtWidgets import QMainWindow, QMenu, QMenuBar
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence
import logging

from core.app_config import AppConfig
from core.menu_model import (
    ACTION_ABOUT, ACTION_NEW_ALIAS, ACTION_NEW_CHAT, MAIN_MENU,
    MenuEntry, children_of, validate_menu,
)
from core.new_alias_form import AliasStore
from ui.new_alias_dialog import NewAliasDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level shell: a menu bar routing commands to injected handlers."""

    alias_saved = pyqtSignal(str, str)  # address, alias

    def __init__(self, config: AppConfig | None = None, validate_and_store_alias: AliasStore | None = None,
                 menu: tuple[MenuEntry, ...] = MAIN_MENU):
        super().__init__()
        self.config = config or AppConfig()
        self.setWindowTitle(self.config.window_title)
        self.resize(self.config.window_width, self.config.window_height)

        self._validate_and_store_alias = validate_and_store_alias
        self._alias_dialog: NewAliasDialog | None = None
        self._on_ui_settings_changed = None
        self._handlers = {
            ACTION_NEW_ALIAS: self.open_new_alias_dialog,
            ACTION_NEW_CHAT: None,
            ACTION_ABOUT: None,
        }

        validate_menu(menu)
        self.menu_actions: dict[str, QAction] = {}
        self.menus: dict[str, QMenu] = {}
        self._build_menu_bar(menu)

        self.alias_saved.connect(lambda _address, alias: self.statusBar().showMessage(f"Saved alias {alias}"))
        self.statusBar().showMessage("Ready")

    # ── Wiring ─────────────────────────────────────────────────────
    def attach_handlers(self, on_new_alias=None, on_new_chat=None, on_about=None):
        """Replace menu handlers; ``None`` keeps the current one."""
        if on_new_alias is not None:
            self._handlers[ACTION_NEW_ALIAS] = on_new_alias
        if on_new_chat is not None:
            self._handlers[ACTION_NEW_CHAT] = on_new_chat
        if on_about is not None:
            self._handlers[ACTION_ABOUT] = on_about

    def attach_alias_store(self, validate_and_store_alias: AliasStore):
        self._validate_and_store_alias = validate_and_store_alias

    def attach_ui_settings(self, settings: dict, on_ui_settings_changed=None):
        """Restore the last window size and report it again on close."""
        self._on_ui_settings_changed = on_ui_settings_changed
        width = settings.get("window_width") or self.config.window_width
        height = settings.get("window_height") or self.config.window_height
        self.resize(int(width), int(height))

    def open(self):
        self.show()
        self.raise_()
        self.activateWindow()

    # ── Menu bar ───────────────────────────────────────────────────
    def _build_menu_bar(self, menu: tuple[MenuEntry, ...]):
        bar: QMenuBar = self.menuBar()
        bar.clear()
        for index in children_of(menu, None):
            self._add_entry(bar, menu, index, path=())

    def _add_entry(self, container, menu, index, path):
        entry = menu[index]
        if entry.separator:
            container.addSeparator()
            return
        key = "/".join(path + (entry.label,))
        children = children_of(menu, index)
        if children:
            submenu = container.addMenu(entry.label)
            self.menus[key] = submenu
            for child in children:
                self._add_entry(submenu, menu, child, path + (entry.label,))
            return

        action = QAction(entry.label, self)
        if entry.shortcut:
            action.setShortcut(QKeySequence(entry.shortcut))
        if entry.action:
            action.triggered.connect(lambda _checked=False, name=entry.action: self.dispatch(name))
            self.menu_actions[entry.action] = action
        else:
            action.setEnabled(False)
        container.addAction(action)

    def dispatch(self, action: str):
        """Run the handler bound to ``action``; unset handlers are a no-op."""
        if self.alias_dialog is not None:
            logger.debug("Ignoring menu action %r while the alias dialog is open", action)
            return
        handler = self._handlers.get(action)
        if handler is None:
            logger.debug("No handler attached for menu action %r", action)
            return
        logger.debug("Dispatching menu action %r", action)
        try:
            handler()
        except Exception as e:
            logger.exception("Menu action %r failed", action)
            self.statusBar().showMessage(f"Action failed: {e}")

    # ── New Alias dialog ───────────────────────────────────────────
    @property
    def alias_dialog(self) -> NewAliasDialog | None:
        return self._alias_dialog

    def open_new_alias_dialog(self):
        if self._alias_dialog is not None:
            self._alias_dialog.raise_()
            self._alias_dialog.activateWindow()
            return
        if self._validate_and_store_alias is None:
            logger.warning("New alias requested but no alias store is attached")
            self.statusBar().showMessage("Alias store unavailable")
            return

        dialog = NewAliasDialog(self._validate_and_store_alias, parent=self)
        dialog.alias_saved.connect(self.alias_saved.emit)
        dialog.finished.connect(self._on_alias_dialog_finished)
        self._alias_dialog = dialog
        dialog.show()

    def _on_alias_dialog_finished(self, _result: int):
        dialog = self._alias_dialog
        self._alias_dialog = None
        if dialog is not None:
            logger.debug("Alias dialog closed (%s)", dialog.form.state.value)
            dialog.deleteLater()

    # ── Window close → persist size ───────────────────────────────
    def closeEvent(self, event):
        if self._on_ui_settings_changed:
            self._on_ui_settings_changed(
                {
                    "window_width": self.width(),
                    "window_height": self.height(),
                }
            )
        event.accept()
