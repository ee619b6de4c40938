"""Theme and color definitions for errorkit console output."""

from dataclasses import dataclass

from rich.theme import Theme


@dataclass(frozen=True)
class ErrorkitColors:
    """Color palette for console output."""

    ERROR = "#e06c75"
    MUTED = "#5c6370"


# Rich theme for console styling
errorkit_theme = Theme(
    {
        "error": f"bold {ErrorkitColors.ERROR}",
        "muted": f"{ErrorkitColors.MUTED}",
    }
)


class Symbols:
    """Unicode symbols for console output."""

    CROSS = "✗"
