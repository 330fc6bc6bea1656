"""Coloured status lines printed while checking exercises."""

from __future__ import annotations

import os
import sys

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return False when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _emit(symbol: str, message: str, style: str) -> str:
    line = f"{symbol} {message}"
    console = Console(file=sys.stdout, highlight=False, soft_wrap=True)
    console.print(Text(line, style=style))
    return line


def warn(message: str) -> str:
    """Print a red warning line and return its plain text."""
    return _emit("⚠️ " if use_emoji() else "!", message, "red")


def success(message: str) -> str:
    """Print a green success line and return its plain text."""
    return _emit("✅" if use_emoji() else "✓", message, "green")