"""Main window menu tree described as data.

Entries are kept in display order. ``parent`` is the index of the enclosing
entry in the same tuple (``None`` for top-level menus), so the tree can be
rebuilt or relabelled without juggling object references.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

ACTION_NEW_ALIAS = "new_alias"
ACTION_NEW_CHAT = "new_chat"
ACTION_ABOUT = "about"


@dataclass(frozen=True)
class MenuEntry:
    label: str = ""
    parent: Optional[int] = None
    action: Optional[str] = None
    shortcut: Optional[str] = None
    separator: bool = False


def separator(parent: Optional[int] = None) -> MenuEntry:
    return MenuEntry(parent=parent, separator=True)


MAIN_MENU: tuple[MenuEntry, ...] = (
    MenuEntry("File"),                                        # 0
    MenuEntry("New", parent=0),                               # 1
    MenuEntry("Alias", parent=1, action=ACTION_NEW_ALIAS, shortcut="Ctrl+A"),
    MenuEntry("Chat", parent=1, action=ACTION_NEW_CHAT),
    separator(),
    MenuEntry("Help"),                                        # 5
    MenuEntry("About", parent=5, action=ACTION_ABOUT),
)


def children_of(entries: Sequence[MenuEntry], index: Optional[int]) -> list[int]:
    """Indices of the direct children of ``index`` (``None`` = top level), in order."""
    return [i for i, entry in enumerate(entries) if entry.parent == index]


def is_submenu(entries: Sequence[MenuEntry], index: int) -> bool:
    return bool(children_of(entries, index))


def find_action(entries: Sequence[MenuEntry], action: str) -> int:
    for i, entry in enumerate(entries):
        if entry.action == action:
            return i
    raise KeyError(action)


def label_path(entries: Sequence[MenuEntry], index: int) -> list[str]:
    """Labels from the top-level menu down to ``index``, e.g. File/New/Alias."""
    path = []
    current: Optional[int] = index
    while current is not None:
        path.append(entries[current].label)
        current = entries[current].parent
    return list(reversed(path))


def validate_menu(entries: Sequence[MenuEntry]):
    """Raise ``ValueError`` if the tree breaks the menu invariants."""
    for i, entry in enumerate(entries):
        if entry.separator:
            if entry.label or entry.action:
                raise ValueError(f"Separator at {i} must have no label and no action")
        elif not entry.label.strip():
            raise ValueError(f"Menu entry at {i} has an empty label")

        if entry.parent is None:
            continue
        if not 0 <= entry.parent < i:
            raise ValueError(f"Menu entry {entry.label!r} at {i} has invalid parent {entry.parent}")
        parent = entries[entry.parent]
        if parent.separator:
            raise ValueError(f"Menu entry {entry.label!r} is nested under a separator")
        if parent.action:
            raise ValueError(f"Menu entry {parent.label!r} has both an action and children")
