"""Tests for the menu tree and navigator."""

import pytest

from promptree.core.format import Format
from promptree.core.menu import (
    Back,
    Level,
    Map,
    Menu,
    MenuEntry,
    MenuExit,
    Parent,
    Quit,
)
from promptree.core.stream import MenuStream
from promptree.utils.exceptions import CallbackError, EndOfInputError, FormatError

ROOT_LIST = "1 - Play\n2 - Settings\n3 - Quit\n>> "
SETTINGS_LIST = "--> Settings\n1 - Name\n2 - Go back\n>> "
NAME_LIST = "--> Name\n1 - Firstname\n2 - Lastname\n3 - Main menu\n>> "


def playing(stream):
    stream.writeln("PLAYING")


def game_menu(**kwargs) -> Menu:
    return Menu(
        [
            ("Play", Map(playing)),
            (
                "Settings",
                Parent(
                    [
                        (
                            "Name",
                            Parent(
                                [
                                    ("Firstname", Map(playing)),
                                    ("Lastname", Map(playing)),
                                    ("Main menu", Back(2)),
                                ]
                            ),
                        ),
                        ("Go back", Back()),
                    ]
                ),
            ),
            ("Quit", Quit()),
        ],
        **kwargs,
    )


class TestNavigation:
    """Tests for walking the tree."""

    def test_nested_back_then_play(self):
        stream = MenuStream.from_text("2\n1\n3\n1\n")
        navigator = game_menu().navigator(stream)

        for _ in range(4):
            assert navigator.step()

        assert navigator.depth == 0
        assert navigator.current is navigator.root
        assert stream.output() == ROOT_LIST + SETTINGS_LIST + NAME_LIST + ROOT_LIST + "PLAYING\n"

    def test_run_until_end_of_input(self):
        stream = MenuStream.from_text("2\n1\n3\n1\n")

        with pytest.raises(EndOfInputError):
            game_menu().run(stream)

        output = stream.output()
        assert output.count("1 - Play\n2 - Settings\n3 - Quit\n") == 2
        assert output.count("--> Settings\n") == 1
        assert output.count("--> Name\n") == 1
        assert output.count("PLAYING") == 1

    def test_back_one_level_redisplays_parent(self):
        stream = MenuStream.from_text("2\n2\n3\n")

        assert game_menu().run(stream) == MenuExit.QUIT
        assert stream.output() == ROOT_LIST + SETTINGS_LIST + ROOT_LIST

    def test_quit(self):
        stream = MenuStream.from_text("3\n")

        assert game_menu().run(stream) == MenuExit.QUIT
        assert stream.output() == ROOT_LIST

    def test_action_reprompts_with_suffix_only(self):
        stream = MenuStream.from_text("1\n1\n3\n")

        assert game_menu().run(stream) == MenuExit.QUIT
        assert stream.output() == ROOT_LIST + "PLAYING\n>> PLAYING\n>> "

    def test_redisplay_after_action(self):
        stream = MenuStream.from_text("1\n3\n")

        game_menu(redisplay=True).run(stream)

        assert stream.output() == ROOT_LIST + "PLAYING\n" + ROOT_LIST

    def test_once_ends_after_first_action(self):
        stream = MenuStream.from_text("2\n1\n1\n")

        assert game_menu(once=True).run(stream) == MenuExit.ONCE
        assert stream.output().endswith(NAME_LIST + "PLAYING\n")

    def test_invalid_index_reprompts_with_suffix(self):
        stream = MenuStream.from_text("9\nabc\n3\n")

        assert game_menu().run(stream) == MenuExit.QUIT
        assert stream.output() == ROOT_LIST + ">> >> "

    def test_back_zero_stays(self):
        stream = MenuStream.from_text("1\n2\n")
        menu = Menu([("Stay", Back(0)), ("Leave", Quit())])

        assert menu.run(stream) == MenuExit.QUIT
        assert stream.output() == "1 - Stay\n2 - Leave\n>> >> "

    def test_back_past_root_ends_session(self):
        stream = MenuStream.from_text("1\n")
        menu = Menu([("Leave", Back(3)), ("Quit", Quit())])

        assert menu.run(stream) == MenuExit.BACK_OVERFLOW

    def test_back_past_root_from_nested_level(self):
        stream = MenuStream.from_text("1\n1\n")
        menu = Menu([("Deep", Parent([("Out", Back(5))]))])
        navigator = menu.navigator(stream)

        assert navigator.run() == MenuExit.BACK_OVERFLOW
        assert not navigator.active
        assert not navigator.step()

    def test_title_and_format(self):
        stream = MenuStream.from_text("2\n")
        menu = Menu([("Play", Map(playing)), ("Quit", Quit())], title="Main",
                    fmt=Format(chip=". "))

        menu.run(stream, Format(prefix="## "))

        assert stream.output() == "## Main\n1. Play\n2. Quit\n>> "

    def test_parent_title_overrides_label(self):
        stream = MenuStream.from_text("1\n1\n")
        menu = Menu([("Go", Parent([("Quit", Quit())], title="Deeper"))])

        menu.run(stream)

        assert "--> Deeper\n1 - Quit\n" in stream.output()

    def test_map_args(self):
        received = []

        def record(stream, *args):
            received.append(args)

        stream = MenuStream.from_text("1\n2\n")
        Menu([("Record", Map(record, ("a", 1))), ("Quit", Quit())]).run(stream)

        assert received == [("a", 1)]

    def test_entries_as_menu_entry(self):
        stream = MenuStream.from_text("1\n")
        menu = Menu([MenuEntry("Quit", Quit())])

        assert menu.run(stream) == MenuExit.QUIT
        assert menu.root == Level(None, (MenuEntry("Quit", Quit()),))


class TestSelector:
    """Tests for custom selectors."""

    class ScriptedSelector:
        def __init__(self, choices):
            self.choices = list(choices)
            self.seen = []

        def select(self, level, show):
            self.seen.append((level.title, show))
            return self.choices.pop(0)

    def test_cancel_goes_back_one_level(self):
        selector = self.ScriptedSelector([1, None, 2])
        stream = MenuStream.from_text("")

        assert game_menu().run(stream, selector=selector) == MenuExit.QUIT
        assert selector.seen == [(None, True), ("Settings", True), (None, True)]

    def test_cancel_at_root_ends_session(self):
        selector = self.ScriptedSelector([None])

        assert game_menu().run(MenuStream.from_text(""), selector=selector) == (
            MenuExit.BACK_OVERFLOW
        )

    def test_show_false_after_action(self):
        selector = self.ScriptedSelector([0, 2])

        game_menu().run(MenuStream.from_text(""), selector=selector)

        assert selector.seen == [(None, True), (None, False)]


class TestErrors:
    """Tests for callback and configuration errors."""

    def test_callback_error_wraps_foreign_exception(self):
        def broken(stream):
            raise RuntimeError("boom")

        stream = MenuStream.from_text("1\n")

        with pytest.raises(CallbackError) as exc_info:
            Menu([("Broken", Map(broken))]).run(stream)

        assert exc_info.value.label == "Broken"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_callback_promptree_error_propagates(self):
        def broken(stream):
            raise FormatError("bad")

        with pytest.raises(FormatError):
            Menu([("Broken", Map(broken))]).run(MenuStream.from_text("1\n"))

    def test_callback_end_of_input_propagates(self):
        def read_more(stream):
            stream.read_line()

        with pytest.raises(EndOfInputError):
            Menu([("Read", Map(read_more))]).run(MenuStream.from_text("1\n"))

    def test_negative_back_depth(self):
        with pytest.raises(FormatError):
            Back(-1)

    def test_empty_menu(self):
        with pytest.raises(FormatError):
            Menu([])

    def test_empty_parent(self):
        with pytest.raises(FormatError):
            Parent([])
