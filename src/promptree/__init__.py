"""promptree - Interactive console prompts and menus."""

from importlib.metadata import version

__version__ = version("promptree")

from promptree.core import (
    Back,
    Bool,
    Format,
    Map,
    Menu,
    MenuEntry,
    MenuExit,
    MenuStream,
    Parent,
    Password,
    Quit,
    Selected,
    Separated,
    Values,
    Written,
)
from promptree.utils.exceptions import (
    CallbackError,
    EndOfInputError,
    FormatError,
    InputError,
    MenuIOError,
    PromptreeError,
)

__all__ = [
    "Back",
    "Bool",
    "CallbackError",
    "EndOfInputError",
    "Format",
    "FormatError",
    "InputError",
    "Map",
    "Menu",
    "MenuEntry",
    "MenuExit",
    "MenuIOError",
    "MenuStream",
    "Parent",
    "Password",
    "PromptreeError",
    "Quit",
    "Selected",
    "Separated",
    "Values",
    "Written",
]
