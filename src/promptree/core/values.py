"""Values container: a prompting session sharing one format and one stream pair."""

from typing import Any, Callable, Optional, TypeVar, Union

from promptree.core.fields import Promptable, Separated, Written
from promptree.core.format import Format
from promptree.core.stream import MenuStream
from promptree.utils.debug import debug_prompt
from promptree.utils.exceptions import CallbackError, PromptreeError

T = TypeVar("T")


class Values:
    """Sequential prompts sharing a baseline format and a stream pair.

    Every prompt issued through the container inherits its format; a
    prompt's own format is merged over it. A plain string is accepted
    wherever a prompt is expected and becomes a Written string prompt.

    Example:
        values = Values(fmt=Format(suffix=": ", line_brk=False))
        name = values.next(Written("name", example="Ada"))
        age = values.next(Written("age", int))
    """

    def __init__(
        self,
        stream: Optional[MenuStream] = None,
        fmt: Optional[Format] = None,
        title: Optional[str] = None,
    ):
        self.stream = stream or MenuStream()
        self.fmt = fmt or Format()
        self.title = title
        self._title_shown = False

    def _prepare(self, promptable: Union[Promptable, str]) -> Promptable:
        """Coerce plain strings and write the title before the first prompt."""
        if isinstance(promptable, str):
            promptable = Written(promptable)
        if self.title is not None and not self._title_shown:
            self.stream.writeln(self.title)
        self._title_shown = True
        return promptable

    def next(self, promptable: Union[Promptable[T], str]) -> T:
        """Prompt a required value."""
        return self._prepare(promptable).prompt(self.stream, self.fmt)

    def next_optional(self, promptable: Union[Promptable[T], str]) -> Optional[T]:
        """Prompt a value that the user may skip with an empty line."""
        return self._prepare(promptable).prompt_optional(self.stream, self.fmt)

    def next_or(self, promptable: Union[Promptable[T], str], fallback: T) -> T:
        """Prompt a value, returning `fallback` on incorrect input."""
        return self._prepare(promptable).prompt_or(fallback, self.stream, self.fmt)

    def many(
        self,
        promptable: Union[Separated, str],
        sep: str = " ",
        parser: Callable[[str], T] = str,
    ) -> list[T]:
        """Prompt many values typed on one line separated by `sep`.

        `sep` and `parser` only apply when a plain message is given.
        """
        if isinstance(promptable, str):
            promptable = Separated(promptable, sep, parser)
        return self.next(promptable)

    def next_map(
        self,
        promptable: Union[Promptable[T], str],
        func: Callable[[T, MenuStream], Any],
    ) -> Any:
        """Prompt a value and return `func(value, stream)`.

        Raises:
            CallbackError: If `func` raises anything but a promptree error
        """
        value = self.next(promptable)
        debug_prompt("post-processing value", func=getattr(func, "__name__", func))
        try:
            return func(value, self.stream)
        except PromptreeError:
            raise
        except Exception as e:
            raise CallbackError(f"post-processor failed: {e}") from e
