"""Rich console output utilities for wsdlc-batch.

Messages are prefixed with the tool tag so they stand out in build logs.
Colors respect the NO_COLOR environment variable and the --no-color flag.
"""

from __future__ import annotations

import os
from types import TracebackType
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.traceback import Traceback

PREFIX = "[WsdlcIterator]"

# Rich automatically respects NO_COLOR, but we also support --no-color flag
_force_no_color = os.environ.get("NO_COLOR") is not None


def create_console(no_color: bool = False) -> Console:
    """Create a Rich Console instance with appropriate color settings.

    Args:
        no_color: If True, disable colored output. Also respects NO_COLOR env var.

    Returns:
        Configured Console instance.
    """
    force_terminal = None
    if no_color or _force_no_color:
        force_terminal = False
    return Console(
        force_terminal=force_terminal,
        no_color=no_color or _force_no_color,
        highlight=False,
        soft_wrap=True,
    )


# Default console instance
console = create_console()


def _tag(message: str) -> str:
    return f"{escape(PREFIX)}    {escape(message)}"


def info(message: str, **kwargs: Any) -> None:
    """Print a progress message.

    Example:
        >>> info("Beginning run of multiple calls to wsdlc")
        [WsdlcIterator]    Beginning run of multiple calls to wsdlc
    """
    console.print(_tag(message), **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with green checkmark."""
    console.print(f"[green]✓[/green] {_tag(message)}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with red marker.

    Example:
        >>> error("Input jardir 'out' does not exist or is not a directory")
        ✗ [WsdlcIterator]    ###  Input jardir 'out' does not exist or is not a directory
    """
    console.print(f"[red]✗[/red] {_tag('###  ' + message)}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print a warning message with yellow triangle."""
    console.print(f"[yellow]⚠[/yellow] {_tag(message)}", **kwargs)


def plain(message: str, **kwargs: Any) -> None:
    """Print text without prefix or markup processing."""
    console.print(message, markup=False, **kwargs)


def print_exception(exc: BaseException) -> None:
    """Print the full traceback of an exception, including chained causes."""
    tb: TracebackType | None = exc.__traceback__
    console.print(Traceback.from_exception(type(exc), exc, tb, show_locals=False))


def set_no_color(no_color: bool) -> None:
    """Update the global console to enable/disable colors.

    Args:
        no_color: If True, disable colored output.
    """
    global console
    console = create_console(no_color=no_color)
