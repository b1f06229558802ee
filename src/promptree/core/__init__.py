"""Core modules for promptree.

This package provides:
- Format: composable presentation rules and their merge
- MenuStream: the input/output stream pair
- Written, Bool, Password, Separated, Selected: promptable values
- Values: a prompting session sharing one format and stream
- Menu, Navigator: the menu tree and its state machine
"""

from promptree.core.fields import (
    Bool,
    Password,
    Promptable,
    Selected,
    Separated,
    Written,
)
from promptree.core.format import DEFAULT_FORMAT, Format, merge
from promptree.core.menu import (
    Back,
    Map,
    Menu,
    MenuEntry,
    MenuExit,
    Navigator,
    Parent,
    Quit,
)
from promptree.core.stream import MenuStream
from promptree.core.values import Values

__all__ = [
    "DEFAULT_FORMAT",
    "Back",
    "Bool",
    "Format",
    "Map",
    "Menu",
    "MenuEntry",
    "MenuExit",
    "MenuStream",
    "Navigator",
    "Parent",
    "Password",
    "Promptable",
    "Quit",
    "Selected",
    "Separated",
    "Values",
    "Written",
    "merge",
]
