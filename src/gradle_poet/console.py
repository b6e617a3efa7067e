"""Shared Rich consoles for gradle-poet CLI output."""

from rich.console import Console
from rich.markup import escape

# Status messages; stdout is reserved for rendered scripts
console = Console(stderr=True)

# Headers printed between scripts on stdout
script_console = Console(highlight=False, soft_wrap=True, emoji=False)


def error(message: str, console: Console = console) -> None:
    """Print an error message in red."""
    console.print(f"[red bold]{escape(message)}[/red bold]")


def success(message: str, console: Console = console) -> None:
    """Print a success message in green."""
    console.print(f"[green]{escape(message)}[/green]")


def warning(message: str, console: Console = console) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{escape(message)}[/yellow]")
