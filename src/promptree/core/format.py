"""Prompt formatting rules.

A Format is a set of independently overridable presentation fields. A field
left as None is unset and defers to the more general Format it is merged
over, and ultimately to DEFAULT_FORMAT.

The rendered prompt of a written value looks like this:

    <prefix><message>[ <left_sur><details><right_sur>]{line break}<suffix>

and a list of choices:

    <prefix><message>[ <left_sur><details><right_sur>]
    1<chip><label>
    2<chip><label>
    <suffix>
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class Format:
    """Presentation rules of a prompt. None means "unset"."""

    prefix: Optional[str] = None
    left_sur: Optional[str] = None
    right_sur: Optional[str] = None
    chip: Optional[str] = None
    suffix: Optional[str] = None
    line_brk: Optional[bool] = None
    show_default: Optional[bool] = None

    def merge(self, override: Optional[Format]) -> Format:
        """Return a Format where the fields set in `override` win."""
        return merge(self, override)

    def resolve(self, base: Optional[Format] = None) -> Format:
        """Fill every unset field from `base` (DEFAULT_FORMAT by default)."""
        return merge(base or DEFAULT_FORMAT, self)

    def is_set(self, name: str) -> bool:
        """Check if a field has been explicitly set."""
        return getattr(self, name) is not None


DEFAULT_FORMAT = Format(
    prefix="--> ",
    left_sur="(",
    right_sur=")",
    chip=" - ",
    suffix=">> ",
    line_brk=True,
    show_default=True,
)


def merge(base: Optional[Format], override: Optional[Format]) -> Format:
    """Merge two formats field by field.

    Each field takes `override`'s value if it was set, else `base`'s.
    Merging with an empty Format (or None) on either side is the identity.
    """
    base = base or Format()
    if override is None:
        return base
    values = {}
    for f in fields(Format):
        value = getattr(override, f.name)
        values[f.name] = value if value is not None else getattr(base, f.name)
    return Format(**values)
