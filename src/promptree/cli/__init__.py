"""CLI entry point for promptree.

Uses Typer for command routing with lazy loading for performance.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="promptree",
    help="Interactive console prompts and menus",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the demo menu if no command given."""
    if ctx.invoked_subcommand is None:
        from promptree.cli.commands import cmd_demo

        cmd_demo(None)


@app.command()
def demo(
    tui: bool = typer.Option(
        False, "--tui", "-t", help="Use arrow-key menus instead of typed indexes"
    ),
    once: bool = typer.Option(False, "--once", help="Stop after the first action"),
) -> None:
    """Run the demo game menu."""
    from promptree.cli.commands import cmd_demo

    class Args:
        def __init__(self):
            self.tui = tui
            self.once = once

    cmd_demo(Args())


@app.command()
def license(
    tui: bool = typer.Option(
        False, "--tui", "-t", help="Confirm with an arrow-key menu"
    ),
) -> None:
    """Collect license details interactively."""
    from promptree.cli.commands import cmd_license

    class Args:
        def __init__(self):
            self.tui = tui

    cmd_license(Args())


@app.command()
def status() -> None:
    """Show configuration and effective format."""
    from promptree.cli.commands import cmd_status

    cmd_status(None)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from promptree.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from promptree.cli.commands import cmd_debug_off

    cmd_debug_off(None)


# Format subcommand group
format_app = typer.Typer(help="Manage the default prompt format")
app.add_typer(format_app, name="format")


@format_app.command("set")
def format_set(key: str, value: str) -> None:
    """Set a format field (prefix, suffix, chip, line_brk, ...)."""
    from promptree.cli.commands import cmd_format_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_format_set(Args())


@format_app.command("unset")
def format_unset(key: str) -> None:
    """Remove a format field override."""
    from promptree.cli.commands import cmd_format_unset

    class Args:
        def __init__(self):
            self.key = key

    cmd_format_unset(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
