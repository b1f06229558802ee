"""Promptable values: the retry-until-valid engine and its prompt kinds.

Every prompt kind renders itself with a resolved Format, reads one line,
parses it, and on an input failure either returns its default or prompts
again. Only input failures are retried; stream and configuration errors
propagate immediately.

Prompt kinds:
- Written: one value parsed from the line
- Bool: a yes/no Written
- Password: a Written read without echo on a terminal
- Separated: many values parsed from one delimited line
- Selected: one value chosen by its index in a numbered list
"""

from __future__ import annotations

import copy
import getpass
import os
from enum import Enum
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar, Union

from promptree.core.format import Format, merge
from promptree.core.stream import MenuStream
from promptree.utils.debug import debug_input, debug_prompt
from promptree.utils.exceptions import (
    CallbackError,
    EndOfInputError,
    FormatError,
    InputError,
)
from promptree.utils.parsers import parse_bool, split_values

T = TypeVar("T")

# Sentinel for "no fallback value given"
_MISSING = object()

Lookup = Callable[[str], Optional[str]]


def parse_index(text: str, count: int) -> int:
    """Parse a 1-based choice index and return it 0-based.

    Raises:
        InputError: If the text is not an integer in [1, count]
    """
    try:
        index = int(text)
    except ValueError:
        raise InputError(f"not an index: {text!r}") from None
    if not 1 <= index <= count:
        raise InputError(f"index out of range: {index}")
    return index - 1


def show_choices(
    stream: MenuStream,
    title: Optional[str],
    labels: Sequence[str],
    fmt: Format,
    default: Optional[int] = None,
    details: Sequence[str] = (),
) -> None:
    """Write a numbered list of labels followed by the input suffix.

    The title line is omitted when `title` is None. `fmt` must be resolved.
    """
    lines = []
    if title is not None:
        header = f"{fmt.prefix}{title}"
        if details:
            header += f" {fmt.left_sur}{', '.join(details)}{fmt.right_sur}"
        lines.append(header)
    for i, label in enumerate(labels, start=1):
        line = f"{i}{fmt.chip}{label}"
        if default is not None and i - 1 == default and fmt.show_default:
            line += " (default)"
        lines.append(line)
    stream.write("\n".join(lines) + "\n" + fmt.suffix)


def read_index(stream: MenuStream, count: int, fmt: Format) -> int:
    """Read a valid 0-based choice index, re-prompting with the suffix until one is given."""
    while True:
        text = stream.read_line()
        try:
            return parse_index(text, count)
        except InputError as e:
            debug_input("rejected index", input=text, error=e)
            stream.write(fmt.suffix)


class Promptable(Generic[T]):
    """Base class of the prompt kinds.

    Subclasses implement `parse` and the rendering hooks; the retry loop
    lives here.
    """

    def __init__(self, msg: str, fmt: Optional[Format] = None):
        self.msg = msg
        self.fmt = fmt

    # Rendering hooks

    def details(self, fmt: Format, optional: bool) -> list[str]:
        """Annotations displayed after the message."""
        if not self.has_default() and optional:
            return ["optional"]
        return []

    def header(self, fmt: Format, optional: bool) -> str:
        """The prefixed message with its annotations."""
        text = f"{fmt.prefix}{self.msg}"
        details = self.details(fmt, optional)
        if details:
            text += f" {fmt.left_sur}{', '.join(details)}{fmt.right_sur}"
        return text

    def show(self, stream: MenuStream, fmt: Format, optional: bool = False) -> None:
        """Render the full prompt."""
        brk = "\n" if fmt.line_brk else ""
        stream.write(f"{self.header(fmt, optional)}{brk}{fmt.suffix}")

    def show_retry(self, stream: MenuStream, fmt: Format, optional: bool = False) -> None:
        """Render the prompt again after an incorrect input."""
        self.show(stream, fmt, optional)

    # Value hooks

    def read(self, stream: MenuStream) -> str:
        """Read the raw input line."""
        return stream.read_line()

    def parse(self, text: str) -> T:
        """Turn the input line into the value, raising InputError if unusable."""
        raise NotImplementedError

    def has_default(self) -> bool:
        """Check if a default value is configured."""
        return False

    def default_value(self) -> T:
        """Return the configured default value."""
        raise FormatError(f"no default value for {self.msg!r}")

    # Entry points

    def prompt(self, stream: Optional[MenuStream] = None, fmt: Optional[Format] = None) -> T:
        """Prompt until a valid value is given, or return the default on failure.

        Args:
            stream: Stream pair to use (stdin/stdout if omitted)
            fmt: Baseline format, refined by the prompt's own format

        Returns:
            The parsed value
        """
        return self._run(stream, fmt, optional=False)

    def prompt_optional(
        self, stream: Optional[MenuStream] = None, fmt: Optional[Format] = None
    ) -> Optional[T]:
        """Like `prompt`, but an empty first line returns None."""
        return self._run(stream, fmt, optional=True)

    def prompt_or(
        self, fallback: T, stream: Optional[MenuStream] = None, fmt: Optional[Format] = None
    ) -> T:
        """Like `prompt`, but any incorrect input returns `fallback` if there is no default."""
        return self._run(stream, fmt, optional=False, fallback=fallback)

    def _run(self, stream, base_fmt, optional: bool, fallback: Any = _MISSING):
        stream = stream or MenuStream()
        fmt = merge(base_fmt, self.fmt).resolve()
        shown_optional = optional or fallback is not _MISSING
        debug_prompt("prompt", msg=self.msg, kind=type(self).__name__, optional=optional)

        self.show(stream, fmt, shown_optional)
        first = True
        while True:
            text = self.read(stream)
            if optional and first and not text:
                return None
            first = False

            try:
                return self.parse(text)
            except (ValueError, TypeError) as e:
                # InputError is a ValueError; parsers may raise either
                debug_input("rejected input", msg=self.msg, input=text, error=e)
                if self.has_default():
                    return self.default_value()
                if fallback is not _MISSING:
                    return fallback
                self.show_retry(stream, fmt, shown_optional)


class Written(Promptable[T]):
    """A value typed by the user and converted by `parser`.

    Args:
        msg: Message displayed to the user
        parser: Callable converting the stripped line (str by default)
        example: Example value shown after the message
        default: Typed value returned as-is on incorrect input
        raw_default: Text parsed with `parser` on incorrect input
        until: Predicate the parsed value must satisfy
        fmt: Format refining the baseline format
    """

    def __init__(
        self,
        msg: str,
        parser: Callable[[str], T] = str,
        *,
        example: Optional[str] = None,
        default: Optional[T] = None,
        raw_default: Optional[str] = None,
        until: Optional[Callable[[T], bool]] = None,
        fmt: Optional[Format] = None,
    ):
        super().__init__(msg, fmt)
        self.parser = parser
        self.example = example
        self.default = default
        self.raw_default = raw_default
        self.until = until

    def default_env(self, name: str, lookup: Lookup = os.environ.get) -> "Written[T]":
        """Return a copy whose raw default is read from `lookup(name)`.

        The lookup is resolved now, not when prompting. If it returns None the
        copy keeps the current default.
        """
        value = lookup(name)
        clone = copy.copy(self)
        if value is not None:
            clone.raw_default = value
            clone.default = None
        return clone

    def with_until(self, until: Callable[[T], bool]) -> "Written[T]":
        """Return a copy that only accepts values satisfying `until`."""
        clone = copy.copy(self)
        clone.until = until
        return clone

    def details(self, fmt: Format, optional: bool) -> list[str]:
        parts = []
        if self.example is not None:
            parts.append(f"example: {self.example}")
        if self.has_default():
            if fmt.show_default:
                parts.append(f"default: {self.default_text()}")
        elif optional:
            parts.append("optional")
        return parts

    def default_text(self) -> str:
        """The default value as displayed to the user."""
        if self.default is not None:
            return str(self.default)
        return str(self.raw_default)

    def convert(self, text: str) -> T:
        """Convert non-empty text with the parser."""
        return self.parser(text)

    def parse(self, text: str) -> T:
        if not text:
            raise InputError("empty input")
        value = self.convert(text)
        self.check(value)
        return value

    def check(self, value: T) -> None:
        """Run the `until` predicate on a parsed value."""
        if self.until is None:
            return
        try:
            accepted = self.until(value)
        except Exception as e:
            raise CallbackError(f"validator for {self.msg!r} failed: {e}", self.msg) from e
        if not accepted:
            raise InputError(f"value rejected: {value!r}")

    def has_default(self) -> bool:
        return self.default is not None or self.raw_default is not None

    def default_value(self) -> T:
        if self.default is not None:
            return self.default
        if self.raw_default is None:
            return super().default_value()
        try:
            return self.convert_default(self.raw_default)
        except (ValueError, TypeError) as e:
            raise FormatError(
                f"{self.raw_default!r} has been used as default value for "
                f"{self.msg!r} but is incorrect: {e}"
            ) from e

    def convert_default(self, raw: str) -> T:
        """Convert the raw default text into the value."""
        return self.convert(raw.strip())


class Bool(Written[bool]):
    """A yes/no question accepting human words like "yep" or "nah"."""

    def __init__(self, msg: str, *, basic_example: bool = False, **kwargs):
        if basic_example:
            kwargs.setdefault("example", "yes/no")
        super().__init__(msg, parse_bool, **kwargs)


class Password(Written[T]):
    """A Written value whose input is not echoed on an interactive terminal."""

    def read(self, stream: MenuStream) -> str:
        if not stream.is_interactive():
            return stream.read_line()
        try:
            return getpass.getpass("").strip()
        except EOFError:
            raise EndOfInputError() from None


class Separated(Written[list]):
    """Many values typed on one line, split on `sep`.

    Each token is parsed independently; the first invalid token fails the
    whole line.
    """

    def __init__(self, msg: str, sep: str = " ", parser: Callable[[str], Any] = str, **kwargs):
        super().__init__(msg, parser, **kwargs)
        self.sep = sep
        self.default_sep = sep

    def default_env(
        self, name: str, lookup: Lookup = os.environ.get, sep: Optional[str] = None
    ) -> "Separated":
        """Like `Written.default_env`, optionally splitting the value on `sep`."""
        clone = super().default_env(name, lookup)
        if sep is not None and clone.raw_default is not None:
            clone.default_sep = sep
        return clone

    def default_text(self) -> str:
        if self.default is not None:
            return self.sep.join(str(v) for v in self.default)
        return str(self.raw_default)

    def convert(self, text: str) -> list:
        return split_values(text, self.sep, self.parser)

    def convert_default(self, raw: str) -> list:
        return split_values(raw, self.default_sep, self.parser)


Choice = Union[tuple[str, T], str]


class Selected(Promptable[T]):
    """One value selected by its 1-based index in a numbered list.

    Args:
        msg: Message displayed above the list
        choices: Sequence of (label, value) pairs; a plain string is its own value
        default: 0-based index of the default choice
        fmt: Format refining the baseline format

    Raises:
        FormatError: If there are no choices or the default index is out of range
    """

    def __init__(
        self,
        msg: str,
        choices: Sequence[Choice],
        default: Optional[int] = None,
        fmt: Optional[Format] = None,
    ):
        super().__init__(msg, fmt)
        self.choices = [
            (choice, choice) if isinstance(choice, str) else tuple(choice)
            for choice in choices
        ]
        if not self.choices:
            raise FormatError(f"empty choices for the selectable value {msg!r}")
        if default is not None and not 0 <= default < len(self.choices):
            raise FormatError(
                f"default index {default} is out of range for {len(self.choices)} choices"
            )
        self.default = default

    @classmethod
    def from_enum(
        cls,
        msg: str,
        enum_cls: type[Enum],
        default: Union[Enum, int, None] = None,
        fmt: Optional[Format] = None,
    ) -> "Selected":
        """Build the choices from the members of an Enum, labelled by name."""
        members = list(enum_cls)
        if isinstance(default, Enum):
            default = members.index(default)
        return cls(msg, [(m.name, m) for m in members], default=default, fmt=fmt)

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.choices]

    def show(self, stream: MenuStream, fmt: Format, optional: bool = False) -> None:
        show_choices(
            stream,
            self.msg,
            self.labels,
            fmt,
            default=self.default,
            details=self.details(fmt, optional),
        )

    def show_retry(self, stream: MenuStream, fmt: Format, optional: bool = False) -> None:
        # The list stays on screen, only the input suffix is repeated
        stream.write(fmt.suffix)

    def parse(self, text: str) -> T:
        return self.choices[parse_index(text, len(self.choices))][1]

    def has_default(self) -> bool:
        return self.default is not None

    def default_value(self) -> T:
        if self.default is None:
            return super().default_value()
        return self.choices[self.default][1]
