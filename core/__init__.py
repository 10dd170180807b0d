"""Public core APIs for composition roots and external integrations."""

from core.alias_book import AliasBook
from core.alias_errors import AliasValidationError, LocalValidationError, StoreError
from core.app_config import AppConfig
from core.menu_model import MAIN_MENU, MenuEntry
from core.new_alias_form import AliasDraft, DialogState, NewAliasForm

__all__ = [
    "AliasBook",
    "AliasDraft",
    "AliasValidationError",
    "AppConfig",
    "DialogState",
    "LocalValidationError",
    "MAIN_MENU",
    "MenuEntry",
    "NewAliasForm",
    "StoreError",
]
