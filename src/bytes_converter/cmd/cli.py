"""Command-line interface for the byte converter.

This module provides the command-line interface, handling:
- Formatting byte counts with the full set of format options
- Parsing human-readable sizes back into bytes
- Listing the supported units
- Logging setup and error reporting

The CLI is built using Typer and prints through Rich.

Example:
    # Run from command line:
    $ bytes-converter format 1536 --decimal-places 1
    1.5KB
    $ bytes-converter parse "1.5GB"
    1610612736
    $ bytes-converter format -- -1024
    -1KB
"""

import math

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bytes_converter import __version__
from bytes_converter.core.formatter import format_bytes
from bytes_converter.core.options import DEFAULT_DECIMAL_PLACES, MAX_DECIMAL_PLACES, FormatOptions
from bytes_converter.core.parser import parse_bytes
from bytes_converter.core.units import BYTE_MULTIPLIERS, Unit
from bytes_converter.core.utils.log_config import configure_logging

console = Console()
app = typer.Typer(help="Convert byte counts to human-readable sizes and back")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        default=False,
        help="Enable debug logging",
    ),
):
    """Show version information when no command is given."""
    configure_logging(debug)
    if ctx.invoked_subcommand is None:
        console.print(f"[cyan]Bytes Converter v{__version__}[/cyan]")


@app.command(name="format")
def format_command(
    value: float = typer.Argument(..., help="Number of bytes"),
    decimal_places: int = typer.Option(
        DEFAULT_DECIMAL_PLACES,
        "--decimal-places",
        "-d",
        min=0,
        max=MAX_DECIMAL_PLACES,
        help="Digits after the decimal point",
    ),
    fixed_decimals: bool = typer.Option(
        default=False,
        help="Keep trailing zero decimals",
    ),
    thousands_separator: str = typer.Option("", "--thousands-separator", "-t", help="Thousands separator"),
    unit_separator: str = typer.Option("", "--unit-separator", "-s", help="Separator before the unit"),
    unit: str = typer.Option("", "--unit", "-u", help="Force a unit (B, KB, MB, GB, TB, PB)"),
):
    """Format a number of bytes into a human-readable string."""
    options = FormatOptions(
        decimal_places=decimal_places,
        fixed_decimals=fixed_decimals,
        thousands_separator=thousands_separator,
        unit_separator=unit_separator,
        unit=unit,
    )
    # Whole numbers from the command line are byte counts, keep them exact
    number = int(value) if value.is_integer() else value
    result = format_bytes(number, options)
    if result is None:
        logger.error(f"Cannot format non-finite value {value}")
        console.print(f"[red]Cannot format {value}: not a finite number")
        raise typer.Exit(code=1)

    logger.debug(f"Formatted {value} as {result!r}")
    console.print(result, markup=False, highlight=False)


@app.command(name="parse")
def parse_command(
    text: str = typer.Argument(..., help="Size such as 1KB, 1.5 GB or 512"),
):
    """Parse a human-readable size into a number of bytes."""
    result = parse_bytes(text)
    if result is None or math.isnan(result):
        logger.error(f"Cannot parse {text!r}")
        console.print(f"[red]Cannot parse {escape(repr(text))}: no byte count found", highlight=False)
        raise typer.Exit(code=1)

    logger.debug(f"Parsed {text!r} as {result}")
    console.print(str(result), markup=False, highlight=False)


@app.command(name="units")
def units_command():
    """List the supported units and their multipliers."""
    table = Table(title="Byte Units")
    table.add_column("Unit", style="cyan")
    table.add_column("Bytes", style="green", justify="right")

    for unit in Unit:
        table.add_row(unit.value, f"{BYTE_MULTIPLIERS[unit.lower()]:,}")

    console.print(table)


if __name__ == "__main__":
    app()
