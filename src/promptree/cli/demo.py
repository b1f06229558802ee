"""Demo sessions shipped with the CLI."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, Optional

from promptree.core.fields import Bool, Selected, Separated, Written
from promptree.core.format import Format
from promptree.core.menu import Back, Map, Menu, Parent, Quit
from promptree.core.stream import MenuStream
from promptree.core.values import Values

# Inline prompt used when editing names inside the menu
INLINE_FORMAT = Format(line_brk=False, suffix=": ")


@dataclass
class Player:
    """State edited by the demo game menu."""

    firstname: str = "Ada"
    lastname: str = "Lovelace"

    def __str__(self) -> str:
        return f"{self.firstname} {self.lastname}"


def play(stream: MenuStream, player: Player) -> None:
    stream.writeln(f"Now playing with {player}")


def edit_name(
    stream: MenuStream,
    player: Player,
    attr: str,
    span: str,
    fmt: Optional[Format] = None,
) -> None:
    """Ask for a new first or last name, keeping the old one on an empty line."""
    stream.writeln(f"Current {span}name: {getattr(player, attr)}")
    prompt = Written(f"Enter the new {span}name", fmt=INLINE_FORMAT)
    new = prompt.prompt_optional(stream, fmt)
    if new is None:
        stream.writeln(f"The {span}name hasn't been modified.")
    else:
        setattr(player, attr, new)


def build_game_menu(
    player: Player, prompt_fmt: Optional[Format] = None, **kwargs
) -> Menu:
    """Main menu > Settings > Name, with a jump back to the main menu."""
    name_menu = Parent(
        [
            ("Edit firstname", Map(edit_name, (player, "firstname", "first", prompt_fmt))),
            ("Edit lastname", Map(edit_name, (player, "lastname", "last", prompt_fmt))),
            ("Main menu", Back(2)),
        ]
    )
    settings_menu = Parent(
        [
            ("Name", name_menu),
            ("Main menu", Back(1)),
            ("Quit", Quit()),
        ]
    )
    return Menu(
        [
            ("Play", Map(play, (player,))),
            ("Settings", settings_menu),
            ("Quit", Quit()),
        ],
        **kwargs,
    )


class LicenseType(Enum):
    MIT = "MIT License"
    GPL = "GNU General Public License v3.0"
    BSD = "BSD 3-Clause License"


@dataclass
class LicenseInfo:
    """Answers collected by the license session."""

    authors: list[str] = field(default_factory=list)
    project: Optional[str] = None
    year: int = 0
    kind: LicenseType = LicenseType.MIT
    confirmed: bool = False


def collect_license(
    values: Values, confirm: Optional[Callable[[str], bool]] = None
) -> LicenseInfo:
    """Ask every license detail through one Values session.

    The year defaults to $PROMPTREE_LICENSE_YEAR, else the current year.
    `confirm`, when given, answers the final yes/no question instead of
    a typed Bool (the CLI passes a terminal menu under --tui).
    """
    authors = values.next(Separated("Authors", ", ", example="Ada, Grace"))
    project = values.next_optional(Written("Project name"))
    year = values.next(
        Written("Year", int, default=date.today().year).default_env("PROMPTREE_LICENSE_YEAR")
    )
    kind = values.next(
        Selected.from_enum("License type", LicenseType, default=LicenseType.MIT)
    )
    if confirm is None:
        confirmed = values.next(Bool("Are you sure?", basic_example=True, raw_default="no"))
    else:
        confirmed = confirm("Are you sure?")
    return LicenseInfo(authors, project, year, kind, confirmed)
