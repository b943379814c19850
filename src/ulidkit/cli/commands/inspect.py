"""Inspect command implementation."""

from __future__ import annotations

import json
from typing import Any

import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ulidkit.errors import UlidError
from ulidkit.ulid import Ulid

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


def describe(ulid: Ulid) -> dict[str, Any]:
    """Return the components of a Ulid as a JSON-compatible dict."""
    try:
        iso = ulid.datetime.isoformat(timespec="milliseconds")
    except OverflowError:
        iso = None
    return {
        "ulid": str(ulid),
        "timestamp": ulid.timestamp,
        "datetime": iso,
        "randomness": ulid.randomness.hex(),
        "bytes": ulid.hex,
        "int": int(ulid),
    }


def show_ulid(*, value: str, from_hex: bool, json_output: bool) -> None:
    """Execute inspect command.

    Args:
        value: ULID text, or 32 hex characters when ``from_hex`` is set.
        from_hex: Interpret ``value`` as the hex form of the 16 bytes.
        json_output: Print a JSON object instead of a table.
    """
    try:
        ulid = Ulid.from_hex(value) if from_hex else Ulid.parse(value)
    except UlidError as err:
        err_console.print(f"[red]✗[/red] Cannot parse {escape(repr(value))}: {escape(str(err))}")
        raise SystemExit(1) from None

    logger.debug("parsed ulid", value=value, ulid=str(ulid))
    details = describe(ulid)

    if json_output:
        console.print_json(json.dumps(details))
        return

    table = Table(title="ULID")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, field_value in details.items():
        table.add_row(field, "-" if field_value is None else str(field_value))
    console.print(table)
