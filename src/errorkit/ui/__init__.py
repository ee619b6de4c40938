"""Console output for errorkit."""

from errorkit.ui.console import console, print_error

__all__ = ["console", "print_error"]
