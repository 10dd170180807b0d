"""In-memory address book mapping Base58Check addresses to readable aliases."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from core.addresses import b58c_to_address
from core.alias_errors import StoreError

logger = logging.getLogger(__name__)


class AliasBook:
    """Default alias-store collaborator for the New Alias dialog.

    Keys are addresses exactly as entered (trimmed); each address has at most
    one alias and each alias names at most one address.
    """

    def __init__(
        self,
        entries: Optional[Iterable[dict]] = None,
        on_changed: Optional[Callable[[dict], None]] = None,
    ):
        self._aliases: dict[str, str] = {}
        self._on_changed = on_changed
        for item in entries or []:
            address = str(item.get("address", "")).strip()
            alias = str(item.get("alias", "")).strip()
            if address and alias:
                self._aliases[address] = alias

    def __len__(self) -> int:
        return len(self._aliases)

    def validate_and_store(self, address: str, alias: str):
        address = (address or "").strip()
        alias = (alias or "").strip()
        if not alias:
            raise StoreError("Alias is required")
        try:
            b58c_to_address(address)
        except ValueError as e:
            logger.debug("Rejected address %r: %s", address, e)
            raise StoreError("Invalid address") from e

        owner = self._address_for_alias(alias)
        if owner is not None and owner != address:
            raise StoreError("alias already exists")

        previous = self._aliases.get(address)
        self._aliases[address] = alias
        if self._on_changed:
            try:
                self._on_changed(self.to_settings())
            except Exception:
                self._restore(address, previous)
                raise
        if previous and previous != alias:
            logger.info("Renamed alias %r to %r", previous, alias)

    def _restore(self, address: str, previous: Optional[str]):
        if previous is None:
            self._aliases.pop(address, None)
        else:
            self._aliases[address] = previous

    def get_name(self, address: str) -> str:
        """Alias for ``address``, or the address itself when it has none."""
        return self._aliases.get(address.strip(), address.strip())

    def get_address(self, name: str) -> str:
        """Resolve an alias to its address; bare addresses pass through once validated."""
        name = (name or "").strip()
        owner = self._address_for_alias(name)
        if owner is not None:
            return owner
        try:
            b58c_to_address(name)
        except ValueError as e:
            raise StoreError(f"Unknown alias or invalid address: {name}") from e
        return name

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._aliases.items(), key=lambda pair: (pair[1].lower(), pair[0]))

    def to_settings(self) -> dict:
        return {"aliases": [{"address": address, "alias": alias} for address, alias in self.items()]}

    def _address_for_alias(self, alias: str) -> Optional[str]:
        for address, name in self._aliases.items():
            if name == alias:
                return address
        return None
