"""Tests for values selected from a numbered list."""

from enum import Enum

import pytest

from promptree.core.fields import Selected, parse_index
from promptree.core.format import Format
from promptree.core.stream import MenuStream
from promptree.utils.exceptions import FormatError, InputError


class Kind(Enum):
    MIT = "MIT License"
    GPL = "GNU General Public License"
    BSD = "BSD License"


NUMBERS = [("one", 1), ("two", 2), ("three", 3)]


def test_select_single_choice_after_retries():
    stream = MenuStream.from_text("3\n-4\n340\n1\n")

    kind = Selected("select the type", [("mit", Kind.MIT)]).prompt(stream)

    assert kind is Kind.MIT
    assert stream.output() == "--> select the type\n1 - mit\n>> >> >> >> "


def test_from_enum():
    stream = MenuStream.from_text("2\n")

    kind = Selected.from_enum("Select the license type", Kind).prompt(stream)

    assert kind is Kind.GPL
    assert stream.output() == "--> Select the license type\n1 - MIT\n2 - GPL\n3 - BSD\n>> "


def test_from_enum_default_member():
    stream = MenuStream.from_text("0\n")

    kind = Selected.from_enum("license", Kind, default=Kind.BSD).prompt(stream)

    assert kind is Kind.BSD
    assert "3 - BSD (default)\n" in stream.output()


@pytest.mark.parametrize("k", [1, 2, 3])
def test_every_index_returns_its_value(k):
    stream = MenuStream.from_text(f"{k}\n")
    assert Selected("amount", NUMBERS).prompt(stream) == k


def test_plain_strings_are_their_own_value():
    stream = MenuStream.from_text("2\n")
    assert Selected("color", ["red", "green"]).prompt(stream) == "green"


def test_optional_selected():
    stream = MenuStream.from_text("2")

    amount = Selected("amount", NUMBERS).prompt_optional(stream)

    assert amount == 2
    assert stream.output() == "--> amount (optional)\n1 - one\n2 - two\n3 - three\n>> "


def test_optional_selected_empty_line():
    stream = MenuStream.from_text("\n")
    assert Selected("amount", NUMBERS).prompt_optional(stream) is None


def test_optional_selected_incorrect_input_loops():
    stream = MenuStream.from_text("7\n3\n")
    assert Selected("amount", NUMBERS).prompt_optional(stream) == 3


def test_default_index_on_incorrect_input():
    stream = MenuStream.from_text("nope\n")

    amount = Selected("amount", NUMBERS, default=1).prompt(stream)

    assert amount == 2
    assert stream.output() == "--> amount\n1 - one\n2 - two (default)\n3 - three\n>> "


def test_default_hidden_when_show_default_off():
    stream = MenuStream.from_text("1\n")

    Selected("amount", NUMBERS, default=1).prompt(stream, Format(show_default=False))

    assert "(default)" not in stream.output()


def test_custom_chip():
    stream = MenuStream.from_text("1\n")

    Selected("amount", NUMBERS, fmt=Format(chip=". ")).prompt(stream)

    assert "1. one\n2. two\n" in stream.output()


def test_prompt_or_fallback():
    stream = MenuStream.from_text("9\n")
    assert Selected("amount", NUMBERS).prompt_or(0, stream) == 0


def test_empty_choices_is_format_error():
    with pytest.raises(FormatError):
        Selected("amount", [])


@pytest.mark.parametrize("default", [3, 10, -1])
def test_default_out_of_range_is_format_error(default):
    with pytest.raises(FormatError):
        Selected("amount", NUMBERS, default=default)


class TestParseIndex:
    """Tests for 1-based index parsing."""

    def test_valid_index_is_zero_based(self):
        assert parse_index("1", 3) == 0
        assert parse_index("3", 3) == 2

    @pytest.mark.parametrize("text", ["0", "4", "-1", "two", ""])
    def test_invalid_index(self, text):
        with pytest.raises(InputError):
            parse_index(text, 3)
