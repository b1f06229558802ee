"""Tests for the exception hierarchy."""

import pytest

from promptree.utils.exceptions import (
    CallbackError,
    EndOfInputError,
    FormatError,
    InputError,
    MenuIOError,
    PromptreeError,
)


@pytest.mark.parametrize(
    "exc_class", [InputError, FormatError, MenuIOError, EndOfInputError, CallbackError]
)
def test_all_inherit_from_base(exc_class):
    assert issubclass(exc_class, PromptreeError)


def test_input_error_is_value_error():
    """Parsers may raise either; the prompting engine treats them alike."""
    assert issubclass(InputError, ValueError)


def test_end_of_input_is_io_error():
    assert issubclass(EndOfInputError, MenuIOError)
    assert str(EndOfInputError()) == "unexpected end of input"


def test_callback_error_label():
    err = CallbackError("failed", "Play")

    assert str(err) == "failed"
    assert err.label == "Play"
    assert CallbackError("failed").label is None


def test_catch_all_with_base():
    with pytest.raises(PromptreeError):
        raise FormatError("bad default")
