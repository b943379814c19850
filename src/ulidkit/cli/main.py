"""Main CLI entry point using Typer.

This module defines the top-level CLI commands:
- ulidkit generate: Generate new ULIDs
- ulidkit inspect: Show the components of a ULID
- ulidkit normalize: Normalize hand-typed ULID text
- ulidkit validate: Check whether values parse as ULIDs
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from ulidkit import __version__
from ulidkit.cli.config import OutputFormat, get_config
from ulidkit.cli.logging_setup import configure_logging

app = typer.Typer(
    name="ulidkit",
    help="ulidkit - Generate, inspect and validate ULIDs",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ulidkit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output."),
    ] = False,
) -> None:
    """ulidkit - Universally Unique Lexicographically Sortable Identifiers.

    Use 'ulidkit COMMAND --help' for information on specific commands.
    """
    config = get_config()
    configure_logging("DEBUG" if verbose else config.effective_log_level)


@app.command()
def generate(
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of ULIDs to generate."),
    ] = 1,
    timestamp: Annotated[
        int | None,
        typer.Option("--timestamp", "-t", help="Fixed timestamp in epoch milliseconds."),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: text, hex or int."),
    ] = None,
) -> None:
    """Generate new ULIDs, one per line.

    Examples:
        ulidkit generate

        ulidkit generate -n 5 --format hex

        ulidkit generate --timestamp 1682300000000
    """
    from ulidkit.cli.commands.generate import run_generate  # noqa: PLC0415

    fmt: OutputFormat | None = None
    if output_format is not None:
        if output_format not in ("text", "hex", "int"):
            raise typer.BadParameter(
                f"Unknown format {output_format!r} (use text, hex or int)",
                param_hint="--format",
            )
        fmt = output_format  # type: ignore[assignment]

    run_generate(count=count, timestamp=timestamp, output_format=fmt)


@app.command()
def inspect(
    value: Annotated[str, typer.Argument(help="ULID text (or hex with --hex).")],
    from_hex: Annotated[
        bool,
        typer.Option("--hex", help="Treat VALUE as 32 hex characters."),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output raw JSON."),
    ] = False,
) -> None:
    """Show the timestamp, randomness and binary form of a ULID.

    Examples:
        ulidkit inspect 01GYD6YF6YYNSDENPANV5BK5T2

        ulidkit inspect 0187bc6f3cde... --hex --json
    """
    from ulidkit.cli.commands.inspect import show_ulid  # noqa: PLC0415

    show_ulid(value=value, from_hex=from_hex, json_output=json_output)


@app.command()
def normalize(
    text: Annotated[str, typer.Argument(help="Text to normalize.")],
) -> None:
    """Normalize ULID text (trim, upper-case, fix O/I/L/U).

    Examples:
        ulidkit normalize olgyd6yf6yynsdenpanu5bk5t2
    """
    from ulidkit.cli.commands.validate import run_normalize  # noqa: PLC0415

    run_normalize(text)


@app.command()
def validate(
    values: Annotated[list[str], typer.Argument(help="Values to check.")],
) -> None:
    """Check whether values parse as ULIDs.

    Exits with status 1 if any value is invalid.

    Examples:
        ulidkit validate 01GYD6YF6YYNSDENPANV5BK5T2 not-a-ulid
    """
    from ulidkit.cli.commands.validate import run_validate  # noqa: PLC0415

    run_validate(values)


if __name__ == "__main__":
    app()
