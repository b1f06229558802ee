"""Input/output stream pair used by prompts and menus."""

import io
import sys
from typing import IO, Any, Optional

from promptree.utils.exceptions import EndOfInputError, MenuIOError


def _is_binary(stream: Any) -> bool:
    """Check if a file object reads/writes bytes rather than text."""
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(stream, "mode", "")


class MenuStream:
    """One input source and one output sink for an interactive session.

    Defaults to stdin/stdout. Text and binary file objects are both accepted;
    bytes are decoded and encoded as UTF-8. Every write is flushed so the
    prompt is visible before the input is read.

    The stream is also a minimal text file object (``write``/``flush``), so
    callbacks can use ``print(..., file=stream)``.
    """

    def __init__(self, reader: Optional[IO] = None, writer: Optional[IO] = None):
        self.reader = reader if reader is not None else sys.stdin
        self.writer = writer if writer is not None else sys.stdout

    @classmethod
    def from_text(cls, text: str) -> "MenuStream":
        """Build an in-memory stream pair reading `text`."""
        return cls(io.StringIO(text), io.StringIO())

    def write(self, text: str) -> int:
        """Write text to the output and flush it.

        Raises:
            MenuIOError: If the underlying writer fails
        """
        try:
            if _is_binary(self.writer):
                self.writer.write(text.encode("utf-8"))
            else:
                self.writer.write(text)
            self.writer.flush()
        except OSError as e:
            raise MenuIOError(f"failed to write to output: {e}") from e
        return len(text)

    def writeln(self, text: str = "") -> None:
        """Write a line of text."""
        self.write(text + "\n")

    def flush(self) -> None:
        """Flush the output."""
        try:
            self.writer.flush()
        except OSError as e:
            raise MenuIOError(f"failed to flush output: {e}") from e

    def read_line(self) -> str:
        """Read one line of input, without its line ending and surrounding spaces.

        Raises:
            EndOfInputError: If the input has no more lines
            MenuIOError: If the underlying reader fails
        """
        try:
            line = self.reader.readline()
        except OSError as e:
            raise MenuIOError(f"failed to read input: {e}") from e

        if isinstance(line, bytes):
            line = line.decode("utf-8", errors="replace")
        if not line:
            raise EndOfInputError()
        return line.strip()

    def prompt(self, text: str) -> str:
        """Write `text` then read one line."""
        self.write(text)
        return self.read_line()

    def is_interactive(self) -> bool:
        """Check if the input is an interactive terminal."""
        isatty = getattr(self.reader, "isatty", None)
        try:
            return bool(isatty and isatty())
        except (OSError, ValueError):
            return False

    def output(self) -> str:
        """Return everything written to an in-memory writer."""
        value = self.writer.getvalue()
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        return value
