"""Console helpers for the CLI."""

from rich.console import Console
from rich.panel import Panel

console = Console()


def clear_screen() -> None:
    """Clear terminal screen."""
    console.clear()


def show_cursor() -> None:
    """Show the cursor (terminal menus may leave it hidden)."""
    print("\033[?25h", end="", flush=True)


def print_header(subtitle: str = "") -> None:
    """Print application header panel."""
    text = "[bold cyan]promptree[/bold cyan]"
    if subtitle:
        text += f" [dim]{subtitle}[/dim]"
    console.print(Panel(text, border_style="cyan", width=min(80, console.width)))
