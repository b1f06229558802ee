"""Arrow-key menus for the CLI, drawn by simple-term-menu."""

from typing import Optional

from simple_term_menu import TerminalMenu

from promptree.cli.ui.base import MenuUI
from promptree.core.menu import Level

# Shared look of every terminal menu
MENU_STYLE = {
    "menu_cursor": "> ",
    "menu_cursor_style": ("fg_cyan", "bold"),
    "menu_highlight_style": ("fg_cyan", "bold"),
    "cycle_cursor": True,
    "clear_screen": False,
}

YES_NO = ["Yes", "No"]


class RichTerminalMenu:
    """MenuUI drawing arrow-key menus in the terminal.

    q, Esc and Ctrl+C cancel a menu.
    """

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> Optional[int]:
        """Return the 0-based index of the highlighted option, or None if cancelled."""
        if not options:
            return None
        return TerminalMenu(
            options,
            title=title or None,
            cursor_index=cursor_index,
            **MENU_STYLE,
        ).show()

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question. Cancelling counts as no."""
        cursor = 0 if default else 1
        return self.select(YES_NO, title=message, cursor_index=cursor) == 0


class TerminalSelector:
    """Navigator selector backed by a terminal menu UI.

    Cancelling the menu goes back one level (and leaves the root).
    """

    def __init__(self, ui: Optional[MenuUI] = None):
        self.ui = ui or RichTerminalMenu()

    def select(self, level: Level, show: bool) -> Optional[int]:
        # The terminal menu redraws itself, `show` does not matter here
        return self.ui.select(level.labels, title=level.title or "")
