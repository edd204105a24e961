"""Shared Rich console for CLI output.

Human-readable messages go to stderr; stdout is reserved for the JSON
document a host runtime consumes.
"""

import json
import os
from functools import wraps
from typing import Any

from rich.console import Console
from rich.markup import escape

_error_console = Console(stderr=True)


def _should_print() -> bool:
    """Check if console output is enabled."""
    return os.environ.get("LOG_CONSOLE_ENABLED", "true").lower() == "true"


def _console_output(func):
    """Decorator to check if console output is enabled."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        if _should_print():
            return func(*args, **kwargs)

    return wrapper


@_console_output
def print_success(message: str):
    """Print success message."""
    _error_console.print(f"[green]{escape(message)}[/green]")


@_console_output
def print_error(message: str):
    """Print error message."""
    _error_console.print(f"[red]{escape(message)}[/red]")


@_console_output
def print_warning(message: str):
    """Print warning message."""
    _error_console.print(f"[yellow]{escape(message)}[/yellow]")


def print_json(data: dict[str, Any]):
    """Print JSON data to stdout (always outputs, ignores LOG_CONSOLE_ENABLED)."""
    print(json.dumps(data, indent=2, default=str))
