"""Human-friendly value parsers.

Parsers are plain callables taking the stripped input line and returning
the typed value. They signal an unusable input by raising InputError (or
ValueError/TypeError, which the prompting engine treats the same way).
"""

from enum import Enum
from typing import Callable, TypeVar

from promptree.utils.exceptions import InputError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

TRUE_WORDS = {"y", "yes", "ye", "yep", "yeah", "yea", "yup", "true", "1"}
FALSE_WORDS = {"n", "no", "non", "nop", "nah", "nan", "nani", "false", "0"}


def parse_bool(text: str) -> bool:
    """Parse yes/no style words into a bool, ignoring case.

    Raises:
        InputError: If the word is neither a yes nor a no word
    """
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise InputError(f"not a yes/no answer: {text!r}")


def enum_parser(enum_cls: type[E]) -> Callable[[str], E]:
    """Build a parser matching an Enum member name, ignoring case."""
    members = {member.name.lower(): member for member in enum_cls}

    def parse(text: str) -> E:
        try:
            return members[text.strip().lower()]
        except KeyError:
            raise InputError(
                f"expected one of {', '.join(m.name for m in enum_cls)}"
            ) from None

    parse.__name__ = f"parse_{enum_cls.__name__.lower()}"
    return parse


def split_values(text: str, sep: str, parser: Callable[[str], T]) -> list[T]:
    """Split a line on `sep` and parse every token.

    The first empty or invalid token fails the whole line.

    Raises:
        InputError: If the line is empty or a token is rejected
    """
    if not text.strip():
        raise InputError("empty input")
    values = []
    for token in text.split(sep):
        token = token.strip()
        if not token:
            raise InputError("empty value in separated input")
        try:
            values.append(parser(token))
        except (ValueError, TypeError) as e:
            raise InputError(f"invalid value {token!r}: {e}") from e
    return values
