"""Menu tree and navigator.

A menu is an immutable tree of labelled entries. Each entry carries one
action, a small tagged value holding only what its transition needs:

- Map: call a function with the stream, then stay at the current level
- Parent: descend into a nested level
- Back: go up `depth` levels
- Quit: end the session

The Navigator walks the tree with an explicit stack of ancestor levels.
Going back past the root ends the session instead of clamping to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence, Union

from promptree.core.fields import read_index, show_choices
from promptree.core.format import Format, merge
from promptree.core.stream import MenuStream
from promptree.utils.debug import debug_menu
from promptree.utils.exceptions import CallbackError, FormatError, PromptreeError


class MenuExit(Enum):
    """Why a menu session ended."""

    QUIT = "quit"
    BACK_OVERFLOW = "back_overflow"
    ONCE = "once"


@dataclass(frozen=True)
class Map:
    """Call `func(stream, *args)` and stay at the current level."""

    func: Callable[..., Any]
    args: tuple = ()


@dataclass(frozen=True)
class Parent:
    """Descend into a nested level. Its title defaults to the entry label."""

    entries: tuple[MenuEntry, ...]
    title: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "entries", as_entries(self.entries))


@dataclass(frozen=True)
class Back:
    """Go up `depth` levels. 0 stays at the current level."""

    depth: int = 1

    def __post_init__(self):
        if self.depth < 0:
            raise FormatError(f"back depth must be positive, got {self.depth}")


@dataclass(frozen=True)
class Quit:
    """End the session."""


Action = Union[Map, Parent, Back, Quit]


@dataclass(frozen=True)
class MenuEntry:
    """A labelled entry of a menu level."""

    label: str
    action: Action


EntryLike = Union[MenuEntry, tuple[str, Action]]


def as_entries(entries: Sequence[EntryLike]) -> tuple[MenuEntry, ...]:
    """Coerce (label, action) pairs into entries.

    Raises:
        FormatError: If there are no entries
    """
    result = tuple(
        entry if isinstance(entry, MenuEntry) else MenuEntry(*entry) for entry in entries
    )
    if not result:
        raise FormatError("a menu level needs at least one entry")
    return result


@dataclass(frozen=True)
class Level:
    """One node of the menu tree with its ordered entries."""

    title: Optional[str]
    entries: tuple[MenuEntry, ...] = field(default_factory=tuple)

    @property
    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]


class Selector(Protocol):
    """Strategy choosing an entry of a level.

    Allows swapping the stream prompt for a terminal backend.
    """

    def select(self, level: Level, show: bool) -> Optional[int]:
        """Return the 0-based index of the chosen entry, or None if cancelled.

        `show` is False when the level is already on screen.
        """
        ...


class StreamSelector:
    """Select entries by typing their index on the stream."""

    def __init__(self, stream: MenuStream, fmt: Format):
        self.stream = stream
        self.fmt = fmt.resolve()

    def select(self, level: Level, show: bool) -> Optional[int]:
        if show:
            show_choices(self.stream, level.title, level.labels, self.fmt)
        else:
            self.stream.write(self.fmt.suffix)
        return read_index(self.stream, len(level.entries), self.fmt)


class Navigator:
    """State machine walking a menu tree.

    State is the stack of ancestor levels plus the current level, which is
    the root while the stack is empty.
    """

    def __init__(
        self,
        root: Level,
        stream: MenuStream,
        selector: Selector,
        redisplay: bool = False,
        once: bool = False,
    ):
        self.root = root
        self.stream = stream
        self.selector = selector
        self.redisplay = redisplay
        self.once = once
        self.stack: list[Level] = []
        self.current = root
        self.exit: Optional[MenuExit] = None
        self._show = True

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def active(self) -> bool:
        return self.exit is None

    def step(self) -> bool:
        """Select and handle one entry. Returns True while the session is active."""
        if not self.active:
            return False

        index = self.selector.select(self.current, self._show)
        self._show = False

        if index is None:
            debug_menu("selection cancelled", level=self.current.title, depth=self.depth)
            self.back(1)
        else:
            self.dispatch(self.current.entries[index])
        return self.active

    def run(self) -> MenuExit:
        """Loop until a terminal state is reached."""
        while self.step():
            pass
        debug_menu("session ended", exit=self.exit.value)
        return self.exit

    def dispatch(self, entry: MenuEntry) -> None:
        """Apply the transition of the selected entry."""
        action = entry.action
        debug_menu(
            "entry selected",
            label=entry.label,
            action=type(action).__name__,
            depth=self.depth,
        )

        if isinstance(action, Map):
            self.call(entry.label, action)
            if self.once:
                self.exit = MenuExit.ONCE
            elif self.redisplay:
                self._show = True
        elif isinstance(action, Parent):
            self.stack.append(self.current)
            self.current = Level(action.title or entry.label, action.entries)
            self._show = True
        elif isinstance(action, Back):
            self.back(action.depth)
        elif isinstance(action, Quit):
            self.exit = MenuExit.QUIT
        else:
            raise FormatError(f"unknown menu action for {entry.label!r}: {action!r}")

    def back(self, depth: int) -> None:
        """Pop `depth` levels, ending the session if the stack is too shallow."""
        if depth == 0:
            return
        if depth > len(self.stack):
            self.exit = MenuExit.BACK_OVERFLOW
            return
        for _ in range(depth):
            self.current = self.stack.pop()
        self._show = True

    def call(self, label: str, action: Map) -> None:
        """Run a Map action, wrapping foreign exceptions."""
        try:
            action.func(self.stream, *action.args)
        except PromptreeError:
            raise
        except Exception as e:
            raise CallbackError(f"action {label!r} failed: {e}", label) from e


class Menu:
    """A tree of menu entries run against a stream pair.

    Args:
        entries: Root entries, as MenuEntry or (label, action) pairs
        title: Optional title displayed above the root entries
        fmt: Format refining the baseline format given to `run`
        redisplay: Reprint the level after an action instead of only the suffix
        once: End the session after the first action

    Example:
        Menu([
            ("Play", Map(play)),
            ("Settings", Parent([("Go back", Back())])),
            ("Quit", Quit()),
        ]).run()
    """

    def __init__(
        self,
        entries: Sequence[EntryLike],
        title: Optional[str] = None,
        fmt: Optional[Format] = None,
        redisplay: bool = False,
        once: bool = False,
    ):
        self.root = Level(title, as_entries(entries))
        self.fmt = fmt
        self.redisplay = redisplay
        self.once = once

    def navigator(
        self,
        stream: Optional[MenuStream] = None,
        fmt: Optional[Format] = None,
        selector: Optional[Selector] = None,
    ) -> Navigator:
        """Build a navigator positioned at the root."""
        stream = stream or MenuStream()
        if selector is None:
            selector = StreamSelector(stream, merge(fmt, self.fmt))
        return Navigator(self.root, stream, selector, self.redisplay, self.once)

    def run(
        self,
        stream: Optional[MenuStream] = None,
        fmt: Optional[Format] = None,
        selector: Optional[Selector] = None,
    ) -> MenuExit:
        """Run the menu until Quit, a Back past the root, or the first action if `once`."""
        return self.navigator(stream, fmt, selector).run()
