"""Validate and normalize command implementations."""

from __future__ import annotations

import structlog
from rich.console import Console
from rich.markup import escape

from ulidkit.normalize import normalize
from ulidkit.ulid import Ulid

console = Console(highlight=False)
err_console = Console(stderr=True)
logger = structlog.get_logger()


def run_validate(values: list[str]) -> None:
    """Report whether each value parses as a ULID.

    Exits with status 1 if any value is invalid.
    """
    invalid = 0
    for value in values:
        if Ulid.is_valid(value):
            console.print(f"[green]✓[/green] {escape(value)}")
        else:
            invalid += 1
            console.print(f"[red]✗[/red] {escape(value)}")

    logger.debug("validated ulids", total=len(values), invalid=invalid)
    if invalid:
        raise SystemExit(1)


def run_normalize(text: str) -> None:
    """Print the normalized form of ``text``."""
    normalized = normalize(text)
    if normalized is None:
        err_console.print("[red]✗[/red] Nothing to normalize (input is blank)")
        raise SystemExit(1)
    console.print(normalized, markup=False)
