"""CLI command handlers."""

import sys
from dataclasses import fields

from promptree.utils.config import FORMAT_FIELDS, Config, get_promptree_dir
from promptree.utils.debug import debug, log_error, reload_config
from promptree.utils.exceptions import (
    CallbackError,
    EndOfInputError,
    FormatError,
    PromptreeError,
)


def run_session(func, *args):
    """Run an interactive session, turning promptree errors into exit codes.

    End of input ends the session quietly. Other library errors print a
    message and exit with status 1.
    """
    from promptree.cli.ui import console

    try:
        return func(*args)
    except EndOfInputError:
        debug("cli", "input exhausted", session=func.__name__)
        console.print()
        sys.exit(0)
    except KeyboardInterrupt:
        console.print()
        sys.exit(130)
    except CallbackError as e:
        log_error("cli", f"callback failed in {func.__name__}", e)
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except PromptreeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def cmd_status(args):
    """Show current status."""
    from promptree.cli.ui import console

    promptree_dir = get_promptree_dir()
    config = Config(promptree_dir)

    debug_on = config.get_debug()
    debug_color = "green" if debug_on else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if debug_on else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{promptree_dir}[/dim]")

    console.print("[bold]Format:[/bold]")
    configured = config.format()
    effective = configured.resolve()
    for f in fields(effective):
        value = getattr(effective, f.name)
        marker = " [cyan](custom)[/cyan]" if configured.is_set(f.name) else ""
        console.print(f"  {f.name:<13} {value!r}{marker}")


def _run_game(tui: bool, once: bool):
    from promptree.cli.demo import Player, build_game_menu
    from promptree.cli.ui import (
        TerminalSelector,
        clear_screen,
        console,
        print_header,
        show_cursor,
    )

    config = Config(get_promptree_dir())
    player = Player()
    menu = build_game_menu(player, prompt_fmt=config.format(), once=once)

    if tui:
        clear_screen()
        print_header("demo")
        try:
            exit_reason = menu.run(fmt=config.format(), selector=TerminalSelector())
        finally:
            show_cursor()
    else:
        exit_reason = menu.run(fmt=config.format())

    debug("cli", "demo finished", exit=exit_reason.value)
    console.print(f"[dim]Goodbye {player}![/dim]")


def cmd_demo(args):
    """Run the demo game menu."""
    tui = getattr(args, "tui", False)
    once = getattr(args, "once", False)
    run_session(_run_game, tui, once)


def _run_license(tui: bool):
    from rich.panel import Panel

    from promptree.cli.demo import collect_license
    from promptree.cli.ui import RichTerminalMenu, console, show_cursor
    from promptree.core.values import Values

    config = Config(get_promptree_dir())
    values = Values(fmt=config.format(), title="-- License --")
    if tui:
        try:
            info = collect_license(values, confirm=RichTerminalMenu().confirm)
        finally:
            show_cursor()
    else:
        info = collect_license(values)

    if not info.confirmed:
        console.print("[yellow]Aborted.[/yellow]")
        return

    lines = [
        f"[bold]{info.kind.value}[/bold]",
        "",
        f"Copyright (c) {info.year} {', '.join(info.authors)}",
    ]
    if info.project:
        lines.append(f"Project: [cyan]{info.project}[/cyan]")
    console.print(Panel("\n".join(lines), border_style="green", width=80))


def cmd_license(args):
    """Collect license details interactively."""
    run_session(_run_license, getattr(args, "tui", False))


def cmd_debug_on(args):
    """Enable debug mode."""
    from promptree.cli.ui import console

    config = Config(get_promptree_dir())
    config.set_debug(True)
    reload_config()
    console.print(f"[green]Debug mode enabled.[/green] Logs: {config.log_path}")


def cmd_debug_off(args):
    """Disable debug mode."""
    from promptree.cli.ui import console

    config = Config(get_promptree_dir())
    config.set_debug(False)
    reload_config()
    console.print("[yellow]Debug mode disabled.[/yellow]")


def cmd_format_set(args):
    """Set a format field override."""
    from promptree.cli.ui import console

    config = Config(get_promptree_dir())
    try:
        config.set_format_field(args.key, args.value)
    except FormatError as e:
        console.print(f"[red]Error:[/red] {e}")
        console.print(f"[dim]Fields: {', '.join(FORMAT_FIELDS)}[/dim]")
        sys.exit(1)
    console.print(f"Set [cyan]{args.key}[/cyan] = {config.format_fields[args.key]!r}")


def cmd_format_unset(args):
    """Remove a format field override."""
    from promptree.cli.ui import console

    config = Config(get_promptree_dir())
    if config.unset_format_field(args.key):
        console.print(f"Unset [cyan]{args.key}[/cyan]")
    else:
        console.print(f"[yellow]{args.key} was not set[/yellow]")
