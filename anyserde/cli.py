# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Command line interface.

    anyserde transcode house.toml house.json   # convert between formats
    anyserde detect settings.conf              # print the format a file decodes as
    anyserde formats                           # list enabled formats

Requires the ``cli`` extra (typer).
"""

import logging
from pathlib import Path

import typer

from anyserde.de import detect_file_format, from_file
from anyserde.errors import AnySerdeError
from anyserde.format.registry import enabled_formats
from anyserde.ser import to_file, to_file_pretty

app = typer.Typer(
    help="Convert and inspect JSON, YAML, TOML, RON and XML files.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each format attempt"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _fail(error: AnySerdeError) -> None:
    typer.echo(f"error: {error}", err=True)
    raise typer.Exit(1) from error


@app.command()
def transcode(
    input: Path = typer.Argument(..., help="File to read; format from extension, else probed"),
    output: Path = typer.Argument(..., help="File to write; format from extension"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-oriented layout"),
) -> None:
    """Read INPUT and write its content to OUTPUT in the output's format."""
    try:
        value = from_file(input)
        if pretty:
            to_file_pretty(output, value)
        else:
            to_file(output, value)
    except AnySerdeError as e:
        _fail(e)


@app.command()
def detect(path: Path = typer.Argument(..., help="File to inspect")) -> None:
    """Print the format PATH is decoded with."""
    try:
        fmt = detect_file_format(path)
    except AnySerdeError as e:
        _fail(e)
    else:
        typer.echo(fmt.value)


@app.command()
def formats() -> None:
    """List enabled formats and their extensions, in probing order."""
    try:
        enabled = enabled_formats()
    except AnySerdeError as e:
        _fail(e)
    else:
        for fmt in enabled:
            typer.echo(f"{fmt.value}\t{', '.join(fmt.extensions)}")


def main() -> None:
    app()
