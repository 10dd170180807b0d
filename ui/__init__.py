"""Public UI interfaces for app composition."""

from ui.main_window import MainWindow
from ui.new_alias_dialog import NewAliasDialog

__all__ = [
    "MainWindow",
    "NewAliasDialog",
]
