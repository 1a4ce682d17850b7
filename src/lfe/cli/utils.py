"""
CLI utility helpers: stdout lines and error reporting on a stderr console.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from lfe.core.errors import LfeError
from lfe.core.logging import get_logger

err_console = Console(stderr=True)

logger = get_logger(__name__)


def echo_lines(lines) -> int:
    """Write plain lines to stdout, returning how many were written."""
    count = 0
    for line in lines:
        typer.echo(line)
        count += 1
    return count


def fail(error: LfeError) -> typer.Exit:
    """Report ``error`` on stderr and return the exit to raise."""
    logger.debug("command_failed", **error.to_dict())
    err_console.print(f"[bold red]ERROR:[/bold red] {escape(error.message)}")
    return typer.Exit(code=1)
