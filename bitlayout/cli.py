"""Command-line interface for inspecting and editing struct-laid-out binaries."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from bitlayout.access import read, write
from bitlayout.errors import BitLayoutError
from bitlayout.parser import PRIMITIVE_TYPES, LayoutOptions, RecordInfo, TailPadding, parse

err_console = Console(stderr=True)


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


def _options(ctx: click.Context, tail_padding: str | None = None) -> LayoutOptions:
    obj = ctx.obj or {}
    return LayoutOptions(
        tail_padding=TailPadding(tail_padding or TailPadding.UNIT),
        byteorder=obj.get("byteorder", "little"),
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show layout debug logging")
@click.option(
    "--byteorder",
    type=click.Choice(["little", "big"]),
    default="little",
    help="Byte order of storage units in binary files",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, byteorder: str) -> None:
    """Struct declaration layout and field access."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    ctx.obj = {"byteorder": byteorder}


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Struct declaration file",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option(
    "--tail-padding",
    type=click.Choice([p.value for p in TailPadding]),
    default=TailPadding.UNIT.value,
    help="Size added for a partially filled last unit: one byte or the whole unit",
)
@click.pass_context
def info(ctx: click.Context, input_file: str, output_json: bool, tail_padding: str) -> None:
    """Display struct layout: field offsets, bit positions and total size."""
    try:
        record = parse(_read_text(input_file), _options(ctx, tail_padding))
    except BitLayoutError as e:
        _fail(str(e))

    if output_json:
        print(json.dumps(record.to_dict(), indent=2))
    else:
        _output_plain(record)


def _output_plain(record: RecordInfo) -> None:
    """Output struct layout using rich text formatting."""
    console = Console()

    title = record.name or "(anonymous)"
    console.print(f"[bold cyan]Struct {title}[/bold cyan] ({record.total_size} bytes)")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Name", style="white")
    table.add_column("Type", style="dim")
    table.add_column("Offset", style="yellow", justify="right")
    table.add_column("Bits", style="green", justify="right")
    table.add_column("Size", style="yellow", justify="right")

    for f in record.fields:
        bits = f"{f.bit_offset}+{f.bit_width}" if f.is_bit_field else ""
        table.add_row(f.name, f.type, str(f.byte_offset), bits, f"{f.size} bytes")

    console.print(table)

    for warning in record.warnings:
        statement = escape(repr(warning.statement))
        err_console.print(f"[yellow]Warning:[/yellow] skipped {statement}: {warning.message}")


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Struct declaration file",
)
@click.option(
    "--tail-padding",
    type=click.Choice([p.value for p in TailPadding]),
    default=TailPadding.UNIT.value,
    help="Size added for a partially filled last unit: one byte or the whole unit",
)
@click.pass_context
def size(ctx: click.Context, input_file: str, tail_padding: str) -> None:
    """Print the total size of a struct in bytes."""
    try:
        record = parse(_read_text(input_file), _options(ctx, tail_padding))
    except BitLayoutError as e:
        _fail(str(e))

    print(record.total_size)


@cli.command("read")
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Struct declaration file",
)
@click.option(
    "--binary",
    "-b",
    "binary_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Binary file to read from",
)
@click.option("--field", "-f", "field_name", required=True, help="Field name")
@click.option(
    "--as",
    "as_type",
    type=click.Choice(sorted(PRIMITIVE_TYPES)),
    default=None,
    help="Type to interpret the value as",
)
@click.pass_context
def read_cmd(
    ctx: click.Context, input_file: str, binary_file: str, field_name: str, as_type: str | None
) -> None:
    """Read one field from a binary file."""
    data = Path(binary_file).read_bytes()
    try:
        value = read(_read_text(input_file), field_name, data, as_type, _options(ctx))
    except BitLayoutError as e:
        _fail(str(e))

    print(value)


@cli.command("write")
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Struct declaration file",
)
@click.option(
    "--binary",
    "-b",
    "binary_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Binary file to modify",
)
@click.option("--field", "-f", "field_name", required=True, help="Field name")
@click.option("--value", "-V", "value", required=True, help="Value to store")
@click.option("--float", "as_float", is_flag=True, help="Store the value as a floating point")
@click.pass_context
def write_cmd(
    ctx: click.Context,
    input_file: str,
    binary_file: str,
    field_name: str,
    value: str,
    as_float: bool,
) -> None:
    """Write one field of a binary file in place."""
    path = Path(binary_file)
    data = bytearray(path.read_bytes())

    try:
        parsed: int | float = float(value) if as_float else int(value, 0)
    except ValueError:
        _fail(f"Invalid value: {value}")

    try:
        write(_read_text(input_file), field_name, parsed, data, _options(ctx))
    except BitLayoutError as e:
        _fail(str(e))

    path.write_bytes(data)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
