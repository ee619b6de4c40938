"""Rich console setup and error panel output."""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from errorkit.ui.theme import ErrorkitColors, Symbols, errorkit_theme

# Errors go to stderr with the errorkit theme
console = Console(theme=errorkit_theme, stderr=True)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message in a styled panel."""
    console.print(
        Panel(
            f"[error]{Symbols.CROSS} {escape(message)}[/error]",
            title=f"[error]{escape(title)}[/error]",
            border_style=ErrorkitColors.ERROR,
            box=box.ROUNDED,
        )
    )
