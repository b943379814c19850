"""Generate command implementation."""

from __future__ import annotations

import structlog
from rich.console import Console

from ulidkit.cli.config import OutputFormat, get_config
from ulidkit.errors import UlidError
from ulidkit.generator import generate
from ulidkit.ulid import Ulid

console = Console(highlight=False)
err_console = Console(stderr=True)
logger = structlog.get_logger()


def render(ulid: Ulid, output_format: OutputFormat) -> str:
    """Render a Ulid in the requested output format."""
    if output_format == "hex":
        return ulid.hex
    if output_format == "int":
        return str(int(ulid))
    return str(ulid)


def run_generate(
    *,
    count: int,
    timestamp: int | None,
    output_format: OutputFormat | None,
) -> None:
    """Execute generate command.

    Args:
        count: Number of identifiers to print.
        timestamp: Fixed millisecond timestamp instead of the system clock.
        output_format: Render format; falls back to the configured default.
    """
    config = get_config()
    fmt = output_format or config.output_format

    if count < 1 or count > config.max_count:
        err_console.print(
            f"[red]✗[/red] --count must be between 1 and {config.max_count}, got {count}"
        )
        raise SystemExit(1)

    clock = None if timestamp is None else (lambda: timestamp)
    logger.debug("generating ulids", count=count, timestamp=timestamp, output_format=fmt)

    try:
        ulids = [generate(clock=clock) for _ in range(count)]
    except UlidError as err:
        err_console.print(f"[red]✗[/red] Generation failed: {err}")
        raise SystemExit(1) from None

    for ulid in ulids:
        console.print(render(ulid, fmt))
