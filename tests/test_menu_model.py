"""Tests for the declarative main menu tree."""

import unittest

from core.menu_model import (
    ACTION_ABOUT, ACTION_NEW_ALIAS, ACTION_NEW_CHAT, MAIN_MENU,
    MenuEntry, children_of, find_action, label_path, separator, validate_menu,
)


class MenuModelTests(unittest.TestCase):
    def test_main_menu_is_valid(self):
        validate_menu(MAIN_MENU)

    def test_top_level_order(self):
        top = [MAIN_MENU[i] for i in children_of(MAIN_MENU, None)]
        self.assertEqual([e.label for e in top if not e.separator], ["File", "Help"])
        self.assertTrue(top[1].separator)

    def test_leaf_paths(self):
        self.assertEqual(label_path(MAIN_MENU, find_action(MAIN_MENU, ACTION_NEW_ALIAS)), ["File", "New", "Alias"])
        self.assertEqual(label_path(MAIN_MENU, find_action(MAIN_MENU, ACTION_NEW_CHAT)), ["File", "New", "Chat"])
        self.assertEqual(label_path(MAIN_MENU, find_action(MAIN_MENU, ACTION_ABOUT)), ["Help", "About"])

    def test_new_submenu_order(self):
        new_index = children_of(MAIN_MENU, 0)[0]
        labels = [MAIN_MENU[i].label for i in children_of(MAIN_MENU, new_index)]
        self.assertEqual(labels, ["Alias", "Chat"])

    def test_separators_are_inert(self):
        for entry in MAIN_MENU:
            if entry.separator:
                self.assertEqual(entry.label, "")
                self.assertIsNone(entry.action)

    def test_find_action_unknown_raises(self):
        with self.assertRaises(KeyError):
            find_action(MAIN_MENU, "quit")

    def test_rejects_forward_parent(self):
        with self.assertRaises(ValueError):
            validate_menu((MenuEntry("File", parent=1), MenuEntry("Help")))

    def test_rejects_labelled_separator(self):
        with self.assertRaises(ValueError):
            validate_menu((MenuEntry("---", separator=True),))

    def test_rejects_child_of_separator(self):
        with self.assertRaises(ValueError):
            validate_menu((separator(), MenuEntry("Orphan", parent=0)))

    def test_rejects_action_with_children(self):
        with self.assertRaises(ValueError):
            validate_menu((MenuEntry("File", action="x"), MenuEntry("New", parent=0)))

    def test_rejects_empty_label(self):
        with self.assertRaises(ValueError):
            validate_menu((MenuEntry(" "),))


if __name__ == "__main__":
    unittest.main()
