"""Menu backend protocol."""

from typing import Optional, Protocol


class MenuUI(Protocol):
    """Terminal menu backend used by the CLI.

    `select` drives menu navigation under `--tui`, `confirm` answers
    yes/no questions of the license session.
    """

    def select(self, options: list[str], title: str = "") -> Optional[int]:
        """Return the chosen option index, or None if cancelled."""
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        """Return True for yes."""
        ...
