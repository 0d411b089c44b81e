"""Rich Console factory and theme for tankctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TANK_THEME = Theme(
    {
        "tank.ok": "bold green",
        "tank.error": "bold red",
        "tank.warning": "bold yellow",
        "tank.op": "bold cyan",
        "tank.key": "dim",
        "tank.value": "bold",
        "tank.dims": "bold blue",
        "tank.deviation": "magenta",
        "tank.rating.low": "red",
        "tank.rating.good": "yellow",
        "tank.rating.excellent": "green",
    }
)

_RATING_STYLES: dict[str, str] = {
    "low": "tank.rating.low",
    "good": "tank.rating.good",
    "excellent": "tank.rating.excellent",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TANK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_rating(rating: str) -> str:
    """Return the Rich style name for an oxygen exchange rating."""
    return _RATING_STYLES.get(rating, "")
