"""Toolkit-independent state machine behind the New Alias dialog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from core.alias_errors import AliasValidationError, LocalValidationError

logger = logging.getLogger(__name__)

# validate_and_store(address, alias) -> None, raising AliasValidationError on rejection.
AliasStore = Callable[[str, str], None]


class DialogState(Enum):
    OPEN = "open"
    EDITING = "editing"
    SAVING = "saving"
    CLOSED_SAVED = "closed_saved"
    CLOSED_CANCELLED = "closed_cancelled"


_CLOSED_STATES = {DialogState.CLOSED_SAVED, DialogState.CLOSED_CANCELLED}


@dataclass
class AliasDraft:
    """Unsaved form contents; lives only while the dialog is open."""

    address_text: str = ""
    alias_text: str = ""
    status_message: str = ""


class NewAliasForm:
    """Owns the AliasDraft and drives Open → Editing → Saving → Closed."""

    def __init__(
        self,
        validate_and_store: AliasStore,
        on_closed: Optional[Callable[[DialogState], None]] = None,
    ):
        self._validate_and_store = validate_and_store
        self._on_closed = on_closed
        self._state = DialogState.OPEN
        self._draft: Optional[AliasDraft] = AliasDraft()

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def draft(self) -> Optional[AliasDraft]:
        return self._draft

    @property
    def is_open(self) -> bool:
        return self._state not in _CLOSED_STATES

    @property
    def status_message(self) -> str:
        return self._draft.status_message if self._draft else ""

    def set_address(self, text: str):
        if not self._ensure_open("edit address"):
            return
        self._draft.address_text = text or ""
        self._state = DialogState.EDITING

    def set_alias(self, text: str):
        if not self._ensure_open("edit alias"):
            return
        self._draft.alias_text = text or ""
        self._state = DialogState.EDITING

    def save(self) -> DialogState:
        if not self._ensure_open("save"):
            return self._state
        self._state = DialogState.SAVING
        address = self._draft.address_text.strip()
        alias = self._draft.alias_text.strip()
        try:
            self._check_required(address, alias)
            self._validate_and_store(address, alias)
        except AliasValidationError as e:
            logger.info("Alias not saved: %s", e.message)
            return self._back_to_editing(e.message)
        except Exception as e:
            logger.exception("Alias store failed unexpectedly")
            return self._back_to_editing(f"Could not save alias: {e}")
        logger.info("Saved alias %r for %s", alias, address)
        return self._close(DialogState.CLOSED_SAVED)

    def cancel(self) -> DialogState:
        if not self._ensure_open("cancel"):
            return self._state
        return self._close(DialogState.CLOSED_CANCELLED)

    @staticmethod
    def _check_required(address: str, alias: str):
        if not address and not alias:
            raise LocalValidationError("Address and alias are required")
        if not address:
            raise LocalValidationError("Address is required")
        if not alias:
            raise LocalValidationError("Alias is required")

    def _back_to_editing(self, message: str) -> DialogState:
        self._draft.status_message = message or "Invalid input"
        self._state = DialogState.EDITING
        return self._state

    def _close(self, state: DialogState) -> DialogState:
        self._state = state
        self._draft = None
        if self._on_closed:
            self._on_closed(state)
        return state

    def _ensure_open(self, action: str) -> bool:
        if self.is_open:
            return True
        logger.debug("Ignoring %s on closed alias form (%s)", action, self._state.value)
        return False
