"""Custom exceptions for promptree.

This module defines a hierarchy of exceptions for different error types:
- PromptreeError: Base exception for all promptree errors
- InputError: Unusable user input (empty, unparsable, rejected)
- FormatError: Inconsistent prompt or menu configuration
- MenuIOError: Read/write failure on the prompt streams
- EndOfInputError: The input stream has no more lines
- CallbackError: A menu action or value post-processor failed

Only InputError is ever retried by the prompting engine.
"""


class PromptreeError(Exception):
    """Base exception for all promptree errors.

    All promptree-specific exceptions inherit from this class, allowing
    callers to catch all promptree errors with a single except clause.
    """

    pass


class InputError(PromptreeError, ValueError):
    """The user provided an incorrect input.

    Raised by parsers and validators, such as:
    - Empty or whitespace-only lines
    - Text that does not parse into the expected type
    - Values rejected by an `until` predicate
    - Indexes outside the list of choices
    """

    pass


class FormatError(PromptreeError):
    """Prompt or menu configuration errors.

    Raised when the configuration itself is inconsistent, such as:
    - A default choice index outside the choices
    - An empty choice list
    - A raw default value that does not parse into the expected type
    - A negative back depth
    """

    pass


class MenuIOError(PromptreeError):
    """Stream read/write errors.

    Wraps the underlying OSError, which is kept as __cause__.
    """

    pass


class EndOfInputError(MenuIOError):
    """The input stream was exhausted while a value was expected."""

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


class CallbackError(PromptreeError):
    """A user-supplied callback failed.

    Attributes:
        label: Optional name of the menu entry or prompt that owns the callback
    """

    def __init__(self, message: str, label: str | None = None):
        super().__init__(message)
        self.label = label
