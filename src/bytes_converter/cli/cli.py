#!/usr/bin/env python3
"""
bytes_converter.cli.cli

Typer-based CLI for inspecting text, URI, hex and Base64 input as bytes.

Examples
--------
Decode hex and show every derived view:

    convert-bytes convert hex "48 65 6C 6C 6F"

Read the input from stdin and print JSON:

    printf 'SGVsbG8=' | convert-bytes convert base64 --json

Render text in one representation only:

    convert-bytes encode uri "a b/€"
"""

from __future__ import annotations

import logging
import sys
import traceback
from enum import StrEnum

import typer

from bytes_converter.types import SourceFormat

app = typer.Typer(
    name="convert-bytes",
    help="Convert between text, URI, hex and Base64 representations of bytes.",
    no_args_is_help=True,
)

INPUT_HELP = "Raw input. Omit or pass '-' to read from stdin."


class Rendering(StrEnum):
    """Output representations available to the ``encode`` command."""

    HEX = "hex"
    BASE64 = "base64"
    URI = "uri"
    UNICODE = "unicode"


# -----------------------------
# Utilities
# -----------------------------
def _read_input(value: str | None) -> str:
    """Return the positional input, or stdin without its final newline."""
    if value is not None and value != "-":
        return value
    data = sys.stdin.read()
    return data.removesuffix("\n").removesuffix("\r")


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
) -> None:
    """Initialize shared CLI state and logging.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_format: SourceFormat = typer.Argument(
        ...,
        case_sensitive=False,
        help="Representation the input is written in.",
    ),
    value: str | None = typer.Argument(None, help=INPUT_HELP),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    base64_block_size: int = typer.Option(
        1,
        "--base64-block-size",
        min=1,
        help="Zero-pad decoded Base64 output to a multiple of this many bytes.",
    ),
) -> None:
    """Decode input into bytes and show every derived view.

    Exits with status 1 when the input cannot be decoded into bytes. Bytes
    that are not valid UTF-8 are reported but are not an error.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    text = _read_input(value)

    try:
        from bytes_converter.application.use_cases import (
            build_conversion_options,
            convert,
        )
        from bytes_converter.views import to_response

        options = build_conversion_options(base64_block_size=base64_block_size)
        result = convert(source_format, text, options=options)
        response = to_response(result)
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if as_json:
        typer.echo(response.model_dump_json(indent=2))
    elif response.bytes_valid:
        typer.echo(f"hex: {response.hex}")
        typer.echo(f"base64: {response.base64}")
        if response.text_valid:
            typer.echo(f"text: {response.text}")
            typer.echo(f"uri: {response.uri}")
            typer.echo(f"unicode: {response.unicode}")
        else:
            typer.echo("text: <bytes are not valid UTF-8>")

    if not response.bytes_valid:
        typer.echo(f"✗ {response.error_message}", err=True)
        raise typer.Exit(code=1)


@app.command("encode")
def encode_cmd(
    ctx: typer.Context,
    rendering: Rendering = typer.Argument(
        ...,
        case_sensitive=False,
        help="Representation to render the text in.",
    ),
    value: str | None = typer.Argument(None, help=INPUT_HELP),
) -> None:
    """Render UTF-8 text in a single representation."""
    debug: bool = bool(ctx.obj.get("debug", False))
    text = _read_input(value)

    try:
        from bytes_converter import views
        from bytes_converter.application.use_cases import convert

        result = convert(SourceFormat.TEXT, text)
        rendered = {
            Rendering.HEX: views.format_hex,
            Rendering.BASE64: views.format_base64,
            Rendering.URI: views.format_uri,
            Rendering.UNICODE: views.format_unicode,
        }[rendering](result)
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    typer.echo(rendered)


@app.command("formats")
def formats_cmd() -> None:
    """List supported input formats."""
    for member in SourceFormat:
        typer.echo(member.value)


if __name__ == "__main__":
    app()
