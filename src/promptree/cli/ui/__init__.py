"""UI components for the interactive CLI."""

from promptree.cli.ui.base import MenuUI
from promptree.cli.ui.menu import RichTerminalMenu, TerminalSelector
from promptree.cli.ui.panels import clear_screen, console, print_header, show_cursor

__all__ = [
    "MenuUI",
    "RichTerminalMenu",
    "TerminalSelector",
    "clear_screen",
    "console",
    "print_header",
    "show_cursor",
]
