"""Coloured status lines printed to the terminal."""

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _print(symbol: str, message: str, style: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text(f"{symbol} {message}", style=style))


def warn(message: str) -> None:
    """Print a red warning line."""
    _print("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _print("✓" if no_emoji() else "✅", message, "green")