"""
Utilities module for the tracker.

Provides the rich console helpers used for terminal output, identifier and
timestamp generation, and the small bar renderer used in status lines.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def new_id() -> str:
    """Returns a fresh unique identifier."""
    return uuid.uuid4().hex


def now_ms() -> int:
    """Returns the current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    # An empty pool (e.g. mp_max == 0) renders as an empty bar.
    if maximum <= 0:
        filled = 0
    else:
        filled = int((max(0, min(current, maximum)) / maximum) * length)
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
